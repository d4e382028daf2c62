#!/usr/bin/env python3
""" Request path resolution and file probing.

Maps request URLs onto files under the served root. The traversal defence is
purely syntactic: every URL segment must be non-empty and must not start with
a dot, so '..' and hidden files can never be reached, while names such as
'a..b.less' are fine.

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

from enum import Enum
import os
import stat

# Only files with this extension are ever served.
SOURCE_EXTENSION = 'less'


class FileType(Enum):
  ABSENT = 0
  FILE = 1
  DIRECTORY = 2
  # Sockets, FIFOs, devices.
  OTHER = 3


def get_path(root, url, extension=SOURCE_EXTENSION):
  """Returns the filesystem path for url under root, or None if url is
  rejected.

  url is the raw request path including its leading slash.
  """
  if len(url) <= 1:
    return None

  path = url[1:]
  path_elements = path.split('/')

  name_parts = path_elements[-1].split('.')
  if len(name_parts) < 2 or name_parts[-1] != extension:
    return None

  for element in path_elements:
    if not element or element.startswith('.'):
      return None

  if root.endswith('/'):
    return root + path
  return root + '/' + path


def file_stat(path):
  # Anything we can't stat is treated as missing.
  try:
    mode = os.stat(path).st_mode
  except (OSError, ValueError):
    return FileType.ABSENT

  if stat.S_ISDIR(mode):
    return FileType.DIRECTORY
  elif stat.S_ISREG(mode):
    return FileType.FILE
  return FileType.OTHER
