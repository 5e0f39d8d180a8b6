"""
    Bit primitives shared by the codec: Morton style spreading/compacting of
    32 bit values and the leading bit helpers used to read the precision
    carried by a sub-hash.
"""

MASK_32 = 0xFFFFFFFF
MASK_64 = 0xFFFFFFFFFFFFFFFF

EVEN_BITS = 0x5555555555555555
ODD_BITS = 0xAAAAAAAAAAAAAAAA

B = [0x5555555555555555, 0x3333333333333333, 0x0F0F0F0F0F0F0F0F, 0x00FF00FF00FF00FF,
     0x0000FFFF0000FFFF, 0x00000000FFFFFFFF]
S = [1, 2, 4, 8, 16, 32]


def spread(x):
    """
        Puts a zero to the left of each bit of the lower 32 bits of x,
        so the result only has bits on even positions.
        Also works element-wise on int64 numpy arrays.
    """
    x = x & B[5]
    x = (x | (x << S[4])) & B[4]
    x = (x | (x << S[3])) & B[3]
    x = (x | (x << S[2])) & B[2]
    x = (x | (x << S[1])) & B[1]
    x = (x | (x << S[0])) & B[0]
    return x


def compact(x):
    """
        Inverse of spread: gathers the even bits of x into a 32 bit value.
    """
    x = x & B[0]
    x = (x ^ (x >> S[0])) & B[1]
    x = (x ^ (x >> S[1])) & B[2]
    x = (x ^ (x >> S[2])) & B[3]
    x = (x ^ (x >> S[3])) & B[4]
    x = (x ^ (x >> S[4])) & B[5]
    return x


def interleave(lat_sub_hash, lng_sub_hash):
    return (spread(lat_sub_hash) << 1) | spread(lng_sub_hash)


def deinterleave(code):
    """
    Returns
    -------
    (lat_sub_hash, lng_sub_hash)
    """
    return compact(code >> 1), compact(code)


def fill_below_highest_set_bit(x):
    """
        Mask with every bit at or below the highest set bit of x turned on.
        Works for any non negative x (widened 64 bit values included), 0 stays 0.
    """
    return (1 << x.bit_length()) - 1


def highest_bit_position(x):
    """
        Number of leading zeros of x seen as a 32 bit value, 32 when x is 0.
        For a sub-hash the precision is 31 minus this value and the cell count
        along the axis is (1 << 31) >> highest_bit_position(x).
    """
    return 32 - (x & MASK_32).bit_length()
