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

"""
This module holds the byte-level encodings of the fixed-width primitives.

Every submodule `x` deals with a single kind of value and looks like this:

    def encode_x(value: ValueType, ...config params...) -> bytes:
        ...

    def decode_x(data: Buffer, ...config params...) -> ValueType:
        ...

Decoders receive exactly the bytes of one value, they never deal with sources or partial data, that is the job of
`BigEndianReader`.
"""
