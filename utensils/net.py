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

"""Classification helpers for IP addresses.

All functions accept either an `ipaddress` address object or its string representation. IPv4-mapped IPv6 addresses
(`::ffff:a.b.c.d`) are IPv6 addresses here, they are never unwrapped.
"""

from ipaddress import IPv4Address, IPv6Address, ip_address
from typing import Union

IPV4_ADDRESS_BYTES = 4
IPV6_ADDRESS_BYTES = 16

AddressLike = Union[str, IPv4Address, IPv6Address]


def _to_address(address: AddressLike) -> Union[IPv4Address, IPv6Address]:
    if isinstance(address, (IPv4Address, IPv6Address)):
        return address
    return ip_address(address)


def is_ipv4(address: AddressLike) -> bool:
    return _to_address(address).version == 4


def is_ipv6(address: AddressLike) -> bool:
    return _to_address(address).version == 6


def is_ipv4_multicast(address: AddressLike) -> bool:
    """Check for an IPv4 address in 224.0.0.0/4, the first four bits being `1110`.

    >>> is_ipv4_multicast('239.255.255.250')
    True
    >>> is_ipv4_multicast('ff02::1')
    False
    """
    addr = _to_address(address)
    if addr.version != 4:
        return False
    packed = addr.packed
    assert len(packed) == IPV4_ADDRESS_BYTES
    return (packed[0] & 0xf0) == 0b11100000


def is_multicast(address: AddressLike) -> bool:
    """Check for either an IPv4 or an IPv6 multicast address.

    >>> is_multicast('224.0.0.251')
    True
    >>> is_multicast('ff05::1:3')
    True
    >>> is_multicast('::1')
    False
    """
    addr = _to_address(address)
    if addr.version == 6:
        assert len(addr.packed) == IPV6_ADDRESS_BYTES
        return addr.packed[0] == 0xff
    return is_ipv4_multicast(addr)
