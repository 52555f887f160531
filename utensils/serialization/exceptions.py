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

from utensils.exception import UtensilsError


class SerializationError(UtensilsError):
    pass


class DisposedError(SerializationError, ValueError):
    """Raised when reading from a reader that was already closed.

    A closed reader never becomes usable again, handlers should drop it.
    """

    def __init__(self, object_name: str) -> None:
        super().__init__(f'cannot read from a closed {object_name}')
        self.object_name = object_name


class EndOfStreamError(SerializationError, EOFError):
    """Raised when the source runs out of data before a value could be fully read.

    The bytes that were already consumed are not given back to the source, the read cannot be retried.
    """

    def __init__(self, expected: int, received: int) -> None:
        super().__init__(f'end of stream: expected {expected} bytes, got {received}')
        self.expected = expected
        self.received = received
