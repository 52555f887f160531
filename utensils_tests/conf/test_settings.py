from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from utensils.conf import DEFAULT_SETTINGS_FILEPATH, UNITTESTS_SETTINGS_FILEPATH, get_settings
from utensils.conf.settings import UtensilsSettings
from utensils.exception import SettingsAlreadyLoaded

FIXTURES_DIR = Path(__file__).parent / 'fixtures'


def test_default_settings() -> None:
    settings = UtensilsSettings.from_yaml(filepath=DEFAULT_SETTINGS_FILEPATH)
    assert settings == UtensilsSettings()
    assert settings.READER_LEAVE_OPEN is False
    assert settings.SHUFFLE_SEED is None


def test_unittests_settings_extend_default() -> None:
    settings = UtensilsSettings.from_yaml(filepath=UNITTESTS_SETTINGS_FILEPATH)
    assert settings == UtensilsSettings(READER_LEAVE_OPEN=False, SHUFFLE_SEED=0)


@pytest.mark.parametrize(['filename', 'expected'], [
    ('valid_settings_fixture.yml', UtensilsSettings(READER_LEAVE_OPEN=True, SHUFFLE_SEED=42)),
    ('extended_settings_fixture.yml', UtensilsSettings(READER_LEAVE_OPEN=True, SHUFFLE_SEED=7)),
])
def test_valid_settings_from_yaml(filename: str, expected: UtensilsSettings) -> None:
    assert UtensilsSettings.from_yaml(filepath=FIXTURES_DIR / filename) == expected


@pytest.mark.parametrize('filename', [
    'invalid_leave_open_settings_fixture.yml',
    'unknown_key_settings_fixture.yml',
])
def test_invalid_settings_from_yaml(filename: str) -> None:
    with pytest.raises(ValidationError):
        UtensilsSettings.from_yaml(filepath=FIXTURES_DIR / filename)


def test_settings_must_be_a_mapping() -> None:
    with pytest.raises(ValueError, match='cannot be parsed as a dictionary'):
        UtensilsSettings.from_yaml(filepath=FIXTURES_DIR / 'list_settings_fixture.yml')


def test_missing_settings_file() -> None:
    with pytest.raises(ValueError, match='is not a file'):
        UtensilsSettings.from_yaml(filepath=FIXTURES_DIR / 'missing.yml')


def test_settings_are_frozen() -> None:
    settings = UtensilsSettings()
    with pytest.raises(ValidationError):
        settings.READER_LEAVE_OPEN = True  # type: ignore[misc]


def test_global_settings_singleton(monkeypatch: pytest.MonkeyPatch) -> None:
    filepath = str(FIXTURES_DIR / 'valid_settings_fixture.yml')
    monkeypatch.setenv(get_settings.CONFIG_YAML_ENV_VAR, filepath)

    with patch.object(get_settings, '_settings_singleton', None):
        settings = get_settings.get_global_settings()
        assert settings.SHUFFLE_SEED == 42
        assert get_settings.get_global_settings() is settings
        assert get_settings.get_settings_source() == filepath

        monkeypatch.setenv(get_settings.CONFIG_YAML_ENV_VAR, DEFAULT_SETTINGS_FILEPATH)
        with pytest.raises(SettingsAlreadyLoaded):
            get_settings.get_global_settings()
