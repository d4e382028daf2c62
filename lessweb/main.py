#!/usr/bin/env python3
""" Entry point for lessweb.

Serves .less files from ROOT, compiled to CSS on every request.

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

import argparse
import logging
import sys

from lessweb import config
from lessweb.errors import ConfigError
from lessweb.http_server import start_http_server, stop_http_server

logger = logging.getLogger('lessweb')


def make_parser():
  parser = argparse.ArgumentParser(
      prog='lessweb',
      usage='%(prog)s ROOT [OPTIONS]',
      epilog='ROOT is the root directory from which .less files are '
             'retrieved.')
  parser.add_argument('root', nargs='?', metavar='ROOT')
  parser.add_argument('-p', '--port', metavar='NUMBER',
                      default=str(config.DEFAULT_PORT),
                      help='Port to listen on. Default is {}.'.format(
                          config.DEFAULT_PORT))
  parser.add_argument('-s', '--listen', metavar='ADDRESS',
                      default=config.DEFAULT_LISTEN,
                      help='Interface to listen on. Default is "{}".'.format(
                          config.DEFAULT_LISTEN))
  parser.add_argument('-x', '--minify', action='store_true',
                      help='Minify the generated CSS.')
  return parser


def parse_options(argv):
  """Parses the command line into a ServerConfig.

  Exits the process with status 1 on bad options. --help exits with 0.
  """
  parser = make_parser()
  args = parser.parse_args(argv)

  if args.root is None:
    parser.exit(1, 'ROOT is required\n')

  try:
    port = int(args.port, 10)
  except ValueError:
    parser.exit(1, 'Invalid port: {}\n'.format(args.port))

  try:
    return config.make_server_config(args.root, listen=args.listen, port=port,
                                     minify=args.minify)
  except ConfigError as e:
    parser.exit(1, '{}\n'.format(e))


def main(argv=None):
  logging.basicConfig(
    level=logging.INFO,
    format=('[%(asctime)s.%(msecs)03d][%(levelname)s] %(name)s' +
            ' %(message)s (%(filename)s:%(lineno)d)'),
    datefmt='%m/%d/%Y %H:%M:%S')

  server_config = parse_options(sys.argv[1:] if argv is None else argv)

  try:
    httpd = start_http_server(server_config)
  except OSError as e:
    logger.error('Cannot listen on %s:%d: %s', server_config.listen,
                 server_config.port, e)
    return 1

  logger.info('Serving %s on %s:%d', server_config.root,
              server_config.listen, httpd.server_address[1])

  try:
    while httpd.thread.is_alive():
      httpd.thread.join(1)
  except KeyboardInterrupt:
    logger.info('Shutting down')
  finally:
    stop_http_server(httpd)

  return 0


if __name__ == '__main__':
  sys.exit(main())
