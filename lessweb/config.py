#!/usr/bin/env python3
""" Server configuration.

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

from collections import namedtuple
import os

from lessweb.errors import ConfigError
from lessweb.paths import FileType, file_stat

DEFAULT_PORT = 61775
DEFAULT_LISTEN = '127.0.0.1'

# Sent with every response, including 404s.
CONTENT_TYPE = 'text/css'

MAX_PORT = 65535

ServerConfig = namedtuple('ServerConfig',
                          ['root', 'listen', 'port', 'minify'])


def strip_root(root):
  stripped = root.rstrip('/')
  if not stripped and root.startswith('/'):
    return '/'
  return stripped


def make_server_config(root, listen=DEFAULT_LISTEN, port=DEFAULT_PORT,
                       minify=False):
  """Builds the process-wide config, validating it along the way.

  Raises ConfigError if root is not an existing directory or if port is out
  of range.
  """
  root = strip_root(root)
  root_type = file_stat(root)
  if root_type == FileType.ABSENT:
    raise ConfigError('{} does not exist'.format(root))
  elif root_type != FileType.DIRECTORY:
    raise ConfigError('{} is not a directory'.format(root))

  if port < 0 or port > MAX_PORT:
    raise ConfigError('Port must be between 0 and {}, got {}'.format(
        MAX_PORT, port))

  return ServerConfig(root=os.path.abspath(root), listen=listen, port=port,
                      minify=minify)
