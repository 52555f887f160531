# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from enum import Enum


class Primitive(Enum):
    """Fixed-width numeric types that can be read with a BigEndianReader.

    Each member value is `(width, signed, is_float)`.
    """

    I16 = (2, True, False)
    U16 = (2, False, False)
    I32 = (4, True, False)
    U32 = (4, False, False)
    I64 = (8, True, False)
    U64 = (8, False, False)
    F32 = (4, False, True)
    F64 = (8, False, True)

    def __init__(self, width: int, signed: bool, is_float: bool) -> None:
        self.width = width
        self.signed = signed
        self.is_float = is_float

    @classmethod
    def from_name(cls, name: str) -> 'Primitive':
        """Look up a primitive by its case-insensitive name, like `'i32'` or `'F64'`."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f'unknown primitive: {name!r}') from None

    def lower_bound(self) -> int:
        assert not self.is_float
        if self.signed:
            return -(1 << (self.width * 8 - 1))
        return 0

    def upper_bound(self) -> int:
        assert not self.is_float
        if self.signed:
            return (1 << (self.width * 8 - 1)) - 1
        return (1 << (self.width * 8)) - 1


MAX_PRIMITIVE_WIDTH = max(primitive.width for primitive in Primitive)
