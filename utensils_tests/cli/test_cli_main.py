import json
from unittest.mock import patch

import pytest

from utensils.cli.main import CliManager
from utensils.cli.util import LoggingOptions, LoggingOutput, process_logging_options, process_logging_output


def test_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert CliManager().execute_from_command_line(['help']) == 0
    out = capsys.readouterr().out
    assert 'decode' in out
    assert 'show_settings' in out


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert CliManager().execute_from_command_line([]) == 0
    assert 'Available subcommands' in capsys.readouterr().out


def test_unknown_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert CliManager().execute_from_command_line(['frobnicate']) == -1
    assert 'Unknown command: "frobnicate"' in capsys.readouterr().out


def test_command_receives_remaining_argv() -> None:
    manager = CliManager()
    with patch.object(manager.command_list['decode'], 'main', return_value=0) as decode_main, \
            patch('utensils.cli.util.setup_logging') as setup_logging:
        status = manager.execute_from_command_line(['decode', '--json-logs', '--debug', '--format', 'u16', 'x.bin'])

    assert status == 0
    decode_main.assert_called_once_with(['--format', 'u16', 'x.bin'])
    setup_logging.assert_called_once_with(
        logging_output=LoggingOutput.JSON,
        logging_options=LoggingOptions(debug=True),
    )


def test_show_settings(capsys: pytest.CaptureFixture[str]) -> None:
    with patch('utensils.cli.util.setup_logging'):
        assert CliManager().execute_from_command_line(['show_settings']) == 0
    data = json.loads(capsys.readouterr().out)
    assert data['settings'] == {'READER_LEAVE_OPEN': False, 'SHUFFLE_SEED': 0}
    assert data['source'].endswith('unittests.yml')


@pytest.mark.parametrize(['argv', 'expected'], [
    ([], LoggingOutput.PRETTY),
    (['--json-logs'], LoggingOutput.JSON),
    (['--disable-logs'], LoggingOutput.NULL),
])
def test_process_logging_output(argv: list[str], expected: LoggingOutput) -> None:
    argv = argv + ['--format', 'i32']
    assert process_logging_output(argv) == expected
    assert argv == ['--format', 'i32']


def test_process_logging_options() -> None:
    argv = ['--debug', 'file.bin']
    assert process_logging_options(argv) == LoggingOptions(debug=True)
    assert argv == ['file.bin']
