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

from typing import Iterable, MutableSequence, Optional, Sequence, TypeVar

T = TypeVar('T')


def copy_to(source: Iterable[T], destination: MutableSequence[T], index: int = 0) -> None:
    """Copy every item of `source` into `destination`, starting at `index`.

    The destination is assigned item by item, it must already be long enough.

    >>> dest = [0] * 5
    >>> copy_to([1, 2, 3], dest, 1)
    >>> dest
    [0, 1, 2, 3, 0]
    """
    for i, item in enumerate(source, start=index):
        destination[i] = item


def copy_range_to(
    source: Sequence[T],
    source_index: int,
    destination: MutableSequence[T],
    destination_index: int,
    count: Optional[int] = None,
) -> None:
    """Copy `count` items of `source` starting at `source_index` into `destination` at `destination_index`.

    When `count` is not given, everything from `source_index` to the end of `source` is copied.

    >>> dest = [0] * 4
    >>> copy_range_to('abcd', 1, dest, 0, 2)
    >>> dest
    ['b', 'c', 0, 0]
    """
    available = len(source) - source_index
    if count is None:
        count = available
    elif count > available:
        raise ValueError('count is greater than the number of elements from index to the end of the source')

    for i in range(count):
        destination[destination_index + i] = source[source_index + i]
