import http.client
import os
import tempfile
import unittest

from lessweb.config import make_server_config
from lessweb.http_server import start_http_server, stop_http_server

STYLE = """@color: #4d926f;

h1 {
  color: @color;
}
"""

BROKEN = """h1 {
  color: red;
}
}}}
"""

UNCLOSED = """h1 {
  color: red;
"""

EXPECTED_CSS = b'h1 {\n  color: #4d926f;\n}'


class HTTPServerTests(unittest.TestCase):
  def setUp(self):
    self.temp_dir = tempfile.TemporaryDirectory()
    self.root = self.temp_dir.name
    with open(os.path.join(self.root, 'style.less'), 'w') as f:
      f.write(STYLE)
    with open(os.path.join(self.root, 'broken.less'), 'w') as f:
      f.write(BROKEN)
    with open(os.path.join(self.root, 'unclosed.less'), 'w') as f:
      f.write(UNCLOSED)
    os.mkdir(os.path.join(self.root, 'subdir'))

    self.httpd = start_http_server(make_server_config(self.root, port=0))
    self.port = self.httpd.server_address[1]

  def tearDown(self):
    stop_http_server(self.httpd)
    self.temp_dir.cleanup()

  def request(self, path, method='GET'):
    conn = http.client.HTTPConnection('127.0.0.1', self.port, timeout=10)
    try:
      conn.request(method, path)
      response = conn.getresponse()
      return response.status, response.getheader('Content-Type'), \
          response.read()
    finally:
      conn.close()

  def test_compiles_stylesheet(self):
    status, content_type, body = self.request('/style.less')
    self.assertEqual(200, status)
    self.assertEqual('text/css', content_type)
    self.assertEqual(EXPECTED_CSS, body.rstrip(b'\n'))

  def test_missing_file(self):
    self.assertEqual((404, 'text/css', b''), self.request('/missing.less'))

  def test_directory(self):
    self.assertEqual((404, 'text/css', b''), self.request('/subdir'))

  def test_traversal(self):
    self.assertEqual((404, 'text/css', b''),
                     self.request('/../etc/passwd.less'))

  def test_broken_stylesheet(self):
    for path in ['/broken.less', '/unclosed.less']:
      with self.subTest(path=path):
        with self.assertLogs('lessweb', level='ERROR') as logs:
          self.assertEqual((404, 'text/css', b''), self.request(path))
        self.assertEqual(1, len(logs.records))

  def test_server_survives_failures(self):
    self.request('/broken.less')
    self.request('/missing.less')
    status, _, _ = self.request('/style.less')
    self.assertEqual(200, status)

  def test_method_not_distinguished(self):
    status, content_type, body = self.request('/style.less', method='POST')
    self.assertEqual(200, status)
    self.assertIn(b'#4d926f', body)

  def test_head_has_no_body(self):
    status, content_type, body = self.request('/style.less', method='HEAD')
    self.assertEqual(200, status)
    self.assertEqual('text/css', content_type)
    self.assertEqual(b'', body)


if __name__ == '__main__':
  unittest.main()
