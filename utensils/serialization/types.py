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

from typing import Optional, Protocol, TypeAlias, runtime_checkable

Buffer: TypeAlias = bytes | bytearray | memoryview


@runtime_checkable
class ByteSource(Protocol):
    """The minimal capability a BigEndianReader needs from its input.

    `readinto` must block until at least one byte is available and return how many bytes were placed in the given
    buffer, 0 meaning there is no more data. Any `io.RawIOBase`, `io.BufferedIOBase` or `socket.SocketIO` fits.

    A `close()` method is optional, it is only looked up when the reader is closed without `leave_open`.
    """

    def readinto(self, buffer: memoryview, /) -> Optional[int]:
        ...
