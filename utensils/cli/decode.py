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

""" Decodes big-endian records from a binary file and prints one JSON array per record.

Example, reading every record made of an int32, an uint16 and a double:

    utensils-cli decode --format i32,u16,f64 data.bin
"""

import json
import math
import sys
from argparse import ArgumentParser, Namespace
from typing import Iterator, Optional, TextIO, Union

from structlog import get_logger

from utensils.serialization import BigEndianReader, ByteSource, EndOfStreamError, Primitive

logger = get_logger()

Value = Union[int, float, str]


def parse_format(fmt: str) -> list[Primitive]:
    """Parse a comma separated list of primitive names, like `'i32,u16,f64'`."""
    primitives = [Primitive.from_name(name) for name in fmt.split(',') if name.strip()]
    if not primitives:
        raise ValueError('format must have at least one primitive')
    return primitives


def _json_value(value: Union[int, float]) -> Value:
    # JSON has no representation for these
    if isinstance(value, float) and not math.isfinite(value):
        return repr(value)
    return value


def iter_records(reader: BigEndianReader, primitives: list[Primitive], count: Optional[int]) -> Iterator[list[Value]]:
    """Yield decoded records, until `count` records are read or, when `count` is None, until a clean end of data.

    An end of data in the middle of a record is always an error.
    """
    n = 0
    while count is None or n < count:
        record: list[Value] = []
        for primitive in primitives:
            try:
                value = reader.read(primitive)
            except EndOfStreamError as e:
                if count is None and not record and e.received == 0:
                    return
                raise
            record.append(_json_value(value))
        yield record
        n += 1


def create_parser() -> ArgumentParser:
    from utensils.cli.util import create_parser
    parser = create_parser()
    parser.add_argument('--format', required=True, help='Comma separated primitives of a record, e.g. i32,u16,f64')
    parser.add_argument('--count', type=int, help='Number of records to read, by default read until the end of data')
    parser.add_argument('--leave-open', action='store_true', help='Do not close the source when the reader is done')
    parser.add_argument('filepath', help='File to decode, "-" for stdin')
    return parser


def execute(args: Namespace, source: ByteSource, out: TextIO) -> int:
    log = logger.new(filepath=args.filepath)
    try:
        primitives = parse_format(args.format)
    except ValueError as e:
        log.error('invalid format', error=str(e))
        return 1

    # stdin is never closed
    leave_open = args.leave_open or args.filepath == '-'
    records = 0
    with BigEndianReader(source, leave_open=leave_open) as reader:
        try:
            for record in iter_records(reader, primitives, args.count):
                out.write(json.dumps(record) + '\n')
                records += 1
        except EndOfStreamError as e:
            log.error('truncated record', record=records, expected=e.expected, received=e.received)
            return 1

    log.info('done', records=records)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.filepath == '-':
        return execute(args, sys.stdin.buffer, sys.stdout)

    with open(args.filepath, 'rb') as fp:
        return execute(args, fp, sys.stdout)
