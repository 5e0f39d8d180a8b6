import sys
import logging
import argparse

from geocell import codec, geohash, navigation
from geocell.exceptions import InvalidArgument
from geocell.logger import setup_logger


def describe(code):
    south, west, north, east = geohash.bounding_box(code)
    return '%s\t%s\t%s\t%.9f\t%.9f\t%.9f\t%.9f' % (
        codec.to_string(code), code, geohash.get_precision(code), south, west, north, east)


def cmd_encode(args, logger):
    code = geohash.value_of(args.lat, args.lng, args.precision)
    logger.debug(geohash.to_debug_string(code))
    print(describe(code))


def cmd_decode(args, logger):
    for code in codec.parse_geohashes(args.geohash):
        logger.debug(geohash.to_debug_string(code))
        print(describe(code))


def cmd_neighbors(args, logger):
    for code in navigation.neighbors(codec.parse_geohash(args.geohash)):
        print(describe(code))


def cmd_parent(args, logger):
    code = navigation.zoom_out(codec.parse_geohash(args.geohash))
    if code == 0:
        logger.info('%s has no parent', args.geohash)
        return
    print(describe(code))


def cmd_children(args, logger):
    for code in navigation.children(codec.parse_geohash(args.geohash)):
        print(describe(code))


def build_parser():
    parser = argparse.ArgumentParser(prog='geocell', description='Aspect ratio preserving geohashes')
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    subparsers = parser.add_subparsers(dest='command')
    subparsers.required = True

    encode = subparsers.add_parser('encode', help='geohash of a coordinate')
    encode.add_argument('lat', type=float)
    encode.add_argument('lng', type=float)
    encode.add_argument('precision', type=int)
    encode.set_defaults(func=cmd_encode)

    decode = subparsers.add_parser('decode', help='bounding box of geohashes')
    decode.add_argument('geohash', nargs='+')
    decode.set_defaults(func=cmd_decode)

    for name, func, help_text in [('neighbors', cmd_neighbors, 'cells sharing an edge'),
                                  ('parent', cmd_parent, 'enclosing cell'),
                                  ('children', cmd_children, 'cells one precision level down')]:
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument('geohash')
        sub.set_defaults(func=func)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logger = setup_logger('geocell', logging.DEBUG if args.verbose else logging.INFO)
    try:
        args.func(args, logger)
    except InvalidArgument as e:
        print('error: %s' % e, file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
