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

import inspect
from typing import Any, Optional, get_origin


def _unparametrized(type_: Any) -> Any:
    origin = get_origin(type_)
    return type_ if origin is None else origin


def is_subclass_of_raw_generic(derived: Optional[Any], base: Any) -> bool:
    """Check whether `derived` is (or inherits from) the generic class `base`, ignoring type parameters.

    Both arguments can be parametrized (`Foo[int]`) or not (`Foo`), `object` never counts as a match.

    >>> from typing import Generic, TypeVar
    >>> T = TypeVar('T')
    >>> class Foo(Generic[T]): pass
    >>> class Bar(Foo[int]): pass
    >>> is_subclass_of_raw_generic(Bar, Foo)
    True
    >>> is_subclass_of_raw_generic(Foo[str], Foo[int])
    True
    >>> is_subclass_of_raw_generic(list[int], Foo)
    False
    """
    if derived is None:
        return False

    derived_class = _unparametrized(derived)
    base_class = _unparametrized(base)
    if not inspect.isclass(derived_class):
        return False

    for current in inspect.getmro(derived_class):
        if current is object:
            break
        if current is base_class:
            return True
    return False
