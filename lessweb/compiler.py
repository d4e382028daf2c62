#!/usr/bin/env python3
""" Wrapper around the lesscpy compiler.

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

from dataclasses import dataclass
import io
import logging
import os
from typing import Optional

from lesscpy.exceptions import CompilationError
from lesscpy.lessc import formatter, parser

logger = logging.getLogger('lessweb.compiler')


@dataclass(frozen=True)
class CompileResult:
  css: Optional[str] = None
  error: Optional[str] = None
  # True if the compiler blew up rather than rejecting the source.
  unexpected: bool = False

  @property
  def ok(self):
    return self.error is None


class NamedSource(io.StringIO):
  """In-memory source that lesscpy treats like an open file called name.

  lesscpy resolves @import relative to the directory of the file it is
  parsing, and uses the name in its diagnostics.
  """
  def __init__(self, text, name):
    super().__init__(text)
    self.name = name


class StrictLessParser(parser.LessParser):
  """LessParser that also rejects source ending inside an open block.

  lesscpy's own error handler ignores an unexpected end of input, which
  turns 'a { color: red;' into empty output.
  """
  def p_error(self, t):
    # Only the start symbol on the stack means the input was empty.
    symstack = getattr(self.parser, 'symstack', None)
    if t is None and (symstack is None or len(symstack) > 1):
      raise CompilationError('E: {}: unexpected end of input'.format(
          self.target))
    return super().p_error(t)


class FormatOptions():
  def __init__(self, minify):
    self.minify = minify
    self.xminify = False
    self.tabs = False
    self.spaces = 2


def compile_less(source, search_paths, filename, minify=False):
  """Compiles less source text into CSS.

  Imports are resolved relative to the first entry of search_paths. Never
  raises; failures come back as a CompileResult with error set.
  """
  base_dir = search_paths[0] if search_paths else os.getcwd()
  logger.debug('Compiling %s (search paths: %s)', filename, search_paths)
  try:
    less_parser = StrictLessParser(fail_with_exc=True)
    less_parser.parse(
        file=NamedSource(source, os.path.join(base_dir, filename)))
    css = formatter.Formatter(FormatOptions(minify)).format(less_parser)
  except CompilationError as e:
    return CompileResult(error=str(e))
  except Exception as e:
    return CompileResult(error=repr(e), unexpected=True)
  return CompileResult(css=str(css))
