#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

"""
This module implements encoding of IEEE-754 floats, binary32 (length=4) and binary64 (length=8).

The bytes are the big-endian representation of the float's bit pattern, decoding is done by reading that bit pattern
as an unsigned integer of the same width and reinterpreting it as a float, without any normalization.

>>> encode_float(1.0, length=4).hex()
'3f800000'
>>> encode_float(-0.0, length=8).hex()
'8000000000000000'

>>> decode_float(bytes.fromhex('3f800000'))
1.0
>>> decode_float(bytes.fromhex('c000000000000000'))
-2.0
>>> decode_float(bytes.fromhex('7ff0000000000000'))
inf
>>> bits_from_float(decode_float(bytes.fromhex('7ff8000000000001')), length=8) == 0x7ff8000000000001
True

NaN payloads survive for both widths, signaling NaNs included:

>>> encode_float(decode_float(bytes.fromhex('7f800001')), length=4).hex()
'7f800001'
"""

import math
import struct

from utensils.serialization.encoding.int import decode_int
from utensils.serialization.types import Buffer

_BITS_FORMAT = {4: '>I', 8: '>Q'}
_FLOAT_FORMAT = {4: '>f', 8: '>d'}

# binary32 and binary64 mantissas differ by this many bits
_MANTISSA_SHIFT = 52 - 23


def _check_length(length: int) -> None:
    if length not in _FLOAT_FORMAT:
        raise ValueError(f'unsupported float length: {length}')


def _is_nan32(bits: int) -> bool:
    return (bits >> 23) & 0xff == 0xff and bits & 0x7fffff != 0


def _widen_nan32(bits: int) -> int:
    """Convert a binary32 NaN bit pattern to binary64 keeping its sign, quiet bit and payload."""
    sign = bits >> 31
    mantissa = bits & 0x7fffff
    return (sign << 63) | (0x7ff << 52) | (mantissa << _MANTISSA_SHIFT)


def _narrow_nan64(bits: int) -> int:
    """Convert a binary64 NaN bit pattern to binary32, the inverse of `_widen_nan32()`.

    Payload bits that don't fit binary32 are dropped, a NaN left with an empty mantissa becomes a quiet NaN.
    """
    sign = bits >> 63
    mantissa = (bits >> _MANTISSA_SHIFT) & 0x7fffff
    if mantissa == 0:
        mantissa = 0x400000
    return (sign << 31) | (0xff << 23) | mantissa


def float_from_bits(bits: int, *, length: int) -> float:
    """Reinterpret an unsigned bit pattern of `length` bytes as a float.

    A binary32 NaN is widened by hand, the C float to double conversion used by `struct` would set the quiet bit of
    a signaling NaN.
    """
    _check_length(length)
    if length == 4 and _is_nan32(bits):
        return float_from_bits(_widen_nan32(bits), length=8)
    value, = struct.unpack(_FLOAT_FORMAT[length], struct.pack(_BITS_FORMAT[length], bits))
    return value


def bits_from_float(value: float, *, length: int) -> int:
    """Get the unsigned bit pattern of a float encoded with `length` bytes."""
    _check_length(length)
    if length == 4 and math.isnan(value):
        return _narrow_nan64(bits_from_float(value, length=8))
    bits, = struct.unpack(_BITS_FORMAT[length], struct.pack(_FLOAT_FORMAT[length], value))
    return bits


def encode_float(value: float, *, length: int) -> bytes:
    """ Encode a float as a big-endian binary32 or binary64.

    This modules's docstring has more details and examples.
    """
    _check_length(length)
    if math.isnan(value):
        return bits_from_float(value, length=length).to_bytes(length, 'big')
    try:
        return struct.pack(_FLOAT_FORMAT[length], value)
    except OverflowError:
        raise ValueError('too big to encode')


def decode_float(data: Buffer) -> float:
    """ Decode a float, the byte-length (4 or 8) is the length of `data`.

    This modules's docstring has more details and examples.
    """
    length = len(data)
    return float_from_bits(decode_int(data, signed=False), length=length)
