#!/usr/bin/env python3
""" Exceptions raised by lessweb.

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


class LessWebError(Exception):
  pass


class ConfigError(LessWebError):
  """The server cannot start with the given options."""


class RequestError(LessWebError):
  """A single request cannot be answered. Always surfaces as a 404."""


class InvalidPath(RequestError):
  pass


class NotFound(RequestError):
  pass


class WrongType(RequestError):
  pass


class ReadFailure(RequestError):
  pass


class CompileFailure(RequestError):
  pass
