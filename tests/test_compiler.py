import os
import tempfile
import unittest
from unittest import mock

from lessweb.compiler import CompileResult, compile_less

SOURCE = """@color: #4d926f;

h1 {
  color: @color;
}
"""

BROKEN_SOURCE = """h1 {
  color: red;
}
}}}
"""


class CompileLessTests(unittest.TestCase):
  def test_compiles_variables(self):
    result = compile_less(SOURCE, ['/tmp'], 'style.less')
    self.assertTrue(result.ok)
    self.assertIsNone(result.error)
    self.assertIn('h1', result.css)
    self.assertIn('#4d926f', result.css)
    self.assertNotIn('@color', result.css)

  def test_minify(self):
    plain = compile_less(SOURCE, ['/tmp'], 'style.less')
    minified = compile_less(SOURCE, ['/tmp'], 'style.less', minify=True)
    self.assertTrue(minified.ok)
    self.assertIn('#4d926f', minified.css)
    self.assertLess(len(minified.css.strip()), len(plain.css.strip()))

  def test_syntax_error(self):
    result = compile_less(BROKEN_SOURCE, ['/tmp'], 'broken.less')
    self.assertFalse(result.ok)
    self.assertIsNone(result.css)
    self.assertTrue(result.error)

  def test_unclosed_block(self):
    for source in ['a {', 'a { color: red;', 'a { b { color: red; }\n']:
      with self.subTest(source=source):
        result = compile_less(source, ['/tmp'], 'unclosed.less')
        self.assertFalse(result.ok)
        self.assertFalse(result.unexpected)
        self.assertIn('unexpected end of input', result.error)

  def test_empty_source(self):
    result = compile_less('', ['/tmp'], 'empty.less')
    self.assertTrue(result.ok, result.error)
    self.assertEqual('', result.css.strip())

  def test_imports_resolve_against_search_path(self):
    with tempfile.TemporaryDirectory() as temp_dir:
      with open(os.path.join(temp_dir, 'vars.less'), 'w') as f:
        f.write('@accent: #ff8800;\n')

      result = compile_less('@import "vars.less";\na { color: @accent; }\n',
                            [temp_dir], 'main.less')
    self.assertTrue(result.ok, result.error)
    self.assertIn('#ff8800', result.css)

  def test_unexpected_fault_is_normalized(self):
    with mock.patch('lessweb.compiler.StrictLessParser',
                    side_effect=RecursionError('too deep')):
      result = compile_less(SOURCE, ['/tmp'], 'style.less')
    self.assertFalse(result.ok)
    self.assertTrue(result.unexpected)
    self.assertIn('too deep', result.error)


class CompileResultTests(unittest.TestCase):
  def test_ok(self):
    self.assertTrue(CompileResult(css='').ok)
    self.assertFalse(CompileResult(error='bad').ok)


if __name__ == '__main__':
  unittest.main()
