import io
import json
import struct
from pathlib import Path

import pytest

from utensils.cli import decode
from utensils.serialization import BigEndianReader, EndOfStreamError, Primitive


def _execute(argv: list[str], data: bytes) -> tuple[int, list[list]]:
    args = decode.create_parser().parse_args(argv)
    source = io.BytesIO(data)
    out = io.StringIO()
    status = decode.execute(args, source, out)
    # the command never closes a source it doesn't own
    assert not source.closed
    return status, [json.loads(line) for line in out.getvalue().splitlines()]


def test_parse_format() -> None:
    assert decode.parse_format('i32, u16,f64') == [Primitive.I32, Primitive.U16, Primitive.F64]
    with pytest.raises(ValueError):
        decode.parse_format(',')
    with pytest.raises(ValueError):
        decode.parse_format('i32,int')


def test_decode_until_end_of_data() -> None:
    data = struct.pack('>iH', -1, 0x1234) + struct.pack('>iH', 7, 8)
    status, records = _execute(['--format', 'i32,u16', '-'], data)
    assert status == 0
    assert records == [[-1, 4660], [7, 8]]


def test_decode_count() -> None:
    data = struct.pack('>fff', 1.0, 2.0, 3.0)
    status, records = _execute(['--format', 'f32', '--count', '2', '-'], data)
    assert status == 0
    assert records == [[1.0], [2.0]]


def test_decode_non_finite_floats() -> None:
    data = struct.pack('>dd', float('inf'), float('nan'))
    status, records = _execute(['--format', 'f64,f64', '-'], data)
    assert status == 0
    assert records == [['inf', 'nan']]


def test_decode_truncated_record() -> None:
    data = struct.pack('>iH', 1, 2) + struct.pack('>i', 3)
    status, records = _execute(['--format', 'i32,u16', '-'], data)
    assert status == 1
    assert records == [[1, 2]]


def test_decode_count_larger_than_data() -> None:
    status, records = _execute(['--format', 'u16', '--count', '3', '-'], b'\x00\x01\x00\x02')
    assert status == 1
    assert records == [[1], [2]]


def test_decode_invalid_format() -> None:
    status, records = _execute(['--format', 'i128', '-'], b'')
    assert status == 1
    assert records == []


def test_iter_records_stops_on_partial_first_value() -> None:
    reader = BigEndianReader(io.BytesIO(b'\x00\x01\x02'), leave_open=True)
    records = decode.iter_records(reader, [Primitive.U16], None)
    assert next(records) == [1]
    with pytest.raises(EndOfStreamError):
        next(records)


@pytest.mark.parametrize(['argv', 'closed'], [
    (['--format', 'u16', 'data.bin'], True),
    (['--format', 'u16', '--leave-open', 'data.bin'], False),
    (['--format', 'u16', '--leave-open', '-'], False),
])
def test_decode_leave_open(argv: list[str], closed: bool) -> None:
    args = decode.create_parser().parse_args(argv)
    source = io.BytesIO(b'\x00\x01')
    out = io.StringIO()
    assert decode.execute(args, source, out) == 0
    assert source.closed == closed
    assert out.getvalue() == '[1]\n'


def test_main_with_leave_open(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    filepath = tmp_path / 'data.bin'
    filepath.write_bytes(struct.pack('>i', -7))
    assert decode.main(['--format', 'i32', '--leave-open', str(filepath)]) == 0
    assert json.loads(capsys.readouterr().out) == [-7]


def test_main_reads_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    filepath = tmp_path / 'data.bin'
    filepath.write_bytes(struct.pack('>qQ', -5, 2**64 - 1))
    assert decode.main(['--format', 'i64,u64', str(filepath)]) == 0
    assert json.loads(capsys.readouterr().out) == [-5, 2**64 - 1]
