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

from decimal import Decimal
from typing import Union

from typing_extensions import Self

ParamValue = Union[str, int, float, Decimal]


class UrlBuilder:
    """Builds a relative url made of a path and a query string.

    Values are written with `str()` and not escaped, callers must quote them when needed.

    >>> str(UrlBuilder('api').append_path_segment('items').add_parameter('id', 1, 2).add_parameter('q', 'x'))
    'api/items?id=1,2&q=x'
    """

    def __init__(self, base_path: str = '') -> None:
        self._path: list[str] = [base_path] if base_path else []
        self._params: list[str] = []

    def add_parameter(self, key: str, *values: ParamValue) -> Self:
        """Add `key=value` to the query string, multiple values are joined with a comma and no values gives `key=`."""
        self._params.append(f'{key}={",".join(str(value) for value in values)}')
        return self

    def append_path(self, value: str) -> Self:
        """Append `value` to the path as is."""
        self._path.append(value)
        return self

    def append_path_segment(self, value: str) -> Self:
        """Append `value` to the path preceded by a `/`."""
        self._path.append('/')
        self._path.append(value)
        return self

    def __str__(self) -> str:
        path = ''.join(self._path)
        if not self._params:
            return path
        return f'{path}?{"&".join(self._params)}'

    def __repr__(self) -> str:
        return f'UrlBuilder({str(self)!r})'
