"""
    Base 32 text form of geohash codes.
"""
import logging

from geocell.bits import MASK_64
from geocell.exceptions import InvalidArgument
from geocell.geohash import is_valid


logger = logging.getLogger(__name__)

# standard geohash alphabet, without a, i, l, o
BASE32 = '0123456789bcdefghjkmnpqrstuvwxyz'
BASE32_MAP = {c: i for i, c in enumerate(BASE32)}

MAX_LENGTH = 13
# the leading digit of a 13 digits string only has 4 bits left in 64
MAX_LEADING_DIGIT = 15


def to_string(code):
    """
    Base 32 representation of code, most significant digit first, without
    leading zeros.

    Raises
    ------
    InvalidArgument
        if code is not in [0, 2**64)
    """
    if code < 0 or code > MASK_64:
        raise InvalidArgument('geohash out of range: %s' % code)
    digits = list()
    while True:
        digits.append(BASE32[code & 31])
        code >>= 5
        if code == 0:
            break
    return ''.join(reversed(digits))


def _value_for_digit(digit, text):
    value = BASE32_MAP.get(digit)
    if value is None:
        logger.debug('illegal digit %r in geohash %r', digit, text)
        raise InvalidArgument('illegal digit: %s' % digit)
    return value


def parse_geohash(text):
    """
    Inverse of to_string.

    Raises
    ------
    InvalidArgument
        if the string is empty, too long, has a character outside the
        alphabet or does not decode to a valid geohash
    """
    length = len(text)
    if length < 1 or length > MAX_LENGTH:
        logger.debug('rejecting geohash %r of length %s', text, length)
        raise InvalidArgument('geohash too big: length=%s' % length)

    result = _value_for_digit(text[0], text)
    if length == MAX_LENGTH and result > MAX_LEADING_DIGIT:
        logger.debug('rejecting geohash %r overflowing 64 bits', text)
        raise InvalidArgument('geohash too big: %s' % text)

    for digit in text[1:]:
        result = (result << 5) | _value_for_digit(digit, text)

    if not is_valid(result):
        logger.debug('geohash %r decodes to the invalid code %s', text, result)
        raise InvalidArgument('invalid geohash: %s' % text)
    return result


def parse_geohashes(texts):
    return [parse_geohash(text) for text in texts]
