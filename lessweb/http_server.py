#!/usr/bin/env python3
""" HTTP front end for lessweb.

Copyright (C) 2019 Matthew Lai <m@matthewlai.ca>

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

This program is distributed in the hope that it will be useful, but WITHOUT
ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
FOR A PARTICULAR PURPOSE. See the GNU General Public License for more details.
You should have received a copy of the GNU General Public License along with
this program. If not, see <http://www.gnu.org/licenses/>.
"""

import functools
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
import logging
import socket
import threading

from lessweb import config
from lessweb.compiler import compile_less
from lessweb.errors import RequestError
from lessweb.less_server import LessServer

logger = logging.getLogger('lessweb.http')


class HTTPHandler(BaseHTTPRequestHandler):
  def __init__(self, *args, less_server=None, **kwargs):
    # Must be set before the base class handles the request.
    self.less_server = less_server
    super().__init__(*args, **kwargs)

  def handle_request(self):
    try:
      content = self.less_server.handle_http_get(self.path).encode('utf-8')
      status = 200
    except RequestError:
      content = b''
      status = 404

    self.send_response(status)
    self.send_header('Content-Type', config.CONTENT_TYPE)
    self.send_header('Content-Length', str(len(content)))
    self.end_headers()

    if self.command != 'HEAD':
      self.log_message('Transferring %d bytes', len(content))
      try:
        self.wfile.write(content)
      except (BrokenPipeError, ConnectionResetError):
        self.log_message('Connection closed')

  def do_GET(self):
    self.handle_request()

  def do_HEAD(self):
    self.handle_request()

  def do_POST(self):
    self.handle_request()

  def do_PUT(self):
    self.handle_request()

  def do_DELETE(self):
    self.handle_request()

  def do_OPTIONS(self):
    self.handle_request()

  def do_PATCH(self):
    self.handle_request()

  def log_message(self, format, *args):
    logger.info('%s %s', self.address_string(), format % args)


class LessHTTPServer(ThreadingHTTPServer):
  allow_reuse_address = True
  daemon_threads = True

  def __init__(self, server_config, compile_source=compile_less):
    if ':' in server_config.listen:
      self.address_family = socket.AF_INET6
    handler = functools.partial(
        HTTPHandler,
        less_server=LessServer(server_config, compile_source=compile_source))
    super().__init__((server_config.listen, server_config.port), handler)


class HTTPThread(threading.Thread):
  def __init__(self, httpd):
    threading.Thread.__init__(self)
    self.httpd = httpd
    self.daemon = True
    self.start()

  def run(self):
    self.httpd.serve_forever()


def start_http_server(server_config, compile_source=compile_less):
  """Binds the listening socket and starts serving in the background.

  Returns the server; its server_address holds the actual bound port.
  """
  httpd = LessHTTPServer(server_config, compile_source=compile_source)
  httpd.thread = HTTPThread(httpd)
  return httpd


def stop_http_server(httpd):
  httpd.shutdown()
  httpd.server_close()
  httpd.thread.join()
