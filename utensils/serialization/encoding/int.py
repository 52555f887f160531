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
This module implements encoding of integers with a fixed size, the size and signedness are parametrized.

The encoding format itself is a standard big-endian two's-complement format.

>>> encode_int(0, length=2, signed=True).hex()
'0000'
>>> encode_int(0x1234, length=2, signed=False).hex()
'1234'
>>> encode_int(-1, length=4, signed=True).hex()
'ffffffff'
>>> encode_int(-1234, length=2, signed=True).hex()
'fb2e'

>>> decode_int(bytes.fromhex('1234'), signed=False)
4660
>>> decode_int(bytes.fromhex('ffffffff'), signed=True)
-1
>>> decode_int(bytes.fromhex('ffffffff'), signed=False)
4294967295
>>> decode_int(bytes.fromhex('fb2e'), signed=True)
-1234
"""

from utensils.serialization.types import Buffer


def encode_int(number: int, *, length: int, signed: bool) -> bytes:
    """ Encode an int using the given byte-length and signedness.

    This modules's docstring has more details and examples.
    """
    try:
        return int.to_bytes(number, length, byteorder='big', signed=signed)
    except OverflowError:
        raise ValueError('too big to encode')


def decode_int(data: Buffer, *, signed: bool) -> int:
    """ Decode an int, the byte-length is the length of `data`.

    This modules's docstring has more details and examples.
    """
    return int.from_bytes(data, byteorder='big', signed=signed)
