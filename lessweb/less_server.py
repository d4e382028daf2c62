#!/usr/bin/env python3
""" Compiles .less files on request.

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

import logging
import os

from lessweb.compiler import CompileResult, compile_less
from lessweb.errors import (CompileFailure, InvalidPath, NotFound,
                            ReadFailure, WrongType)
from lessweb.paths import FileType, file_stat, get_path


class LessServer():
  def __init__(self, server_config, compile_source=compile_less):
    self.logger = logging.getLogger('lessweb')
    self.server_config = server_config
    self.compile_source = compile_source

  def handle_http_get(self, url):
    """Returns the compiled CSS for url.

    Raises a RequestError subclass if the request can't be served.
    """
    path_without_query = url.split('?')[0]
    file_path = get_path(self.server_config.root, path_without_query)
    self.logger.info('Request %s %s', url, file_path)

    if file_path is None:
      raise InvalidPath(url)

    file_type = file_stat(file_path)
    if file_type == FileType.ABSENT:
      raise NotFound(file_path)
    elif file_type != FileType.FILE:
      raise WrongType(file_path)

    try:
      with open(file_path, 'r', encoding='utf-8') as f:
        source = f.read()
    except (OSError, UnicodeDecodeError) as e:
      raise ReadFailure(str(e))

    try:
      result = self.compile_source(source, [os.path.dirname(file_path)],
                                   os.path.basename(file_path),
                                   minify=self.server_config.minify)
    except Exception as e:
      result = CompileResult(error=repr(e), unexpected=True)

    if not result.ok:
      if result.unexpected:
        self.logger.error('Parser encountered an unknown error: %s',
                          result.error)
      else:
        self.logger.error('Compile error in %s: %s', file_path, result.error)
      raise CompileFailure(result.error)

    return result.css
