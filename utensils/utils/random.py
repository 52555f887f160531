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

from random import Random
from typing import MutableSequence, Optional, TypeVar

T = TypeVar('T')

_default_rng: Optional[Random] = None


def get_default_rng() -> Random:
    """Return the module-level generator, created on first use and seeded with the SHUFFLE_SEED setting."""
    global _default_rng
    if _default_rng is None:
        from utensils.conf.get_settings import get_global_settings
        _default_rng = Random(get_global_settings().SHUFFLE_SEED)
    return _default_rng


def shuffle(items: MutableSequence[T], rng: Optional[Random] = None) -> None:
    """Shuffle `items` in place (Fisher-Yates, walking from the end of the sequence).

    >>> items = [1, 2, 3, 4]
    >>> shuffle(items, Random(0))
    >>> sorted(items)
    [1, 2, 3, 4]
    """
    if rng is None:
        rng = get_default_rng()

    n = len(items)
    while n > 1:
        k = rng.randrange(n)
        n -= 1
        items[k], items[n] = items[n], items[k]
