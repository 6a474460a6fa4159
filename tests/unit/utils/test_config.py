"""Unit tests for configuration utilities in config.py

Test coverage includes:

1. Config file location
   - Ensures config_path() defaults to ~/.config/shurl_config.toml.
   - Ensures SHURL_CONFIG overrides the location.

2. First run
   - Ensures a missing or empty config file gets the defaults written to it
     and ConfigNotSetUpError is raised.

3. Parsing
   - Ensures values are read, defaults fill missing keys and `~` is expanded.
   - Ensures invalid TOML, wrongly typed values and unknown publishers fail.

4. I/O errors
   - Ensures an unreadable config location raises ConfigReadError.
"""

import tomllib
from pathlib import Path

import pytest

from shurl.constants import ENV
from shurl.models import ShurlConfig
from shurl.utils import config
from shurl.utils.config import DEFAULT_CONFIG_DOCUMENT
from shurl.exceptions import (
    BadConfigurationError,
    ConfigNotSetUpError,
    ConfigParseError,
    ConfigReadError,
)


# -------------------------------
# Fixtures
# -------------------------------

@pytest.fixture(autouse=True)
def _home(monkeypatch, tmp_path):
    """Point HOME at a temporary directory and clear SHURL_CONFIG."""
    home = tmp_path / 'home'
    home.mkdir()
    monkeypatch.setenv('HOME', str(home))
    monkeypatch.delenv(ENV.App.CONFIG_PATH, raising=False)
    return home


@pytest.fixture
def config_file(tmp_path) -> Path:
    return tmp_path / 'config' / 'shurl_config.toml'


# -------------------------------
# 1. Config file location
# -------------------------------

def test_config_path_defaults_to_user_config_dir(_home):
    assert config.config_path() == _home / '.config' / 'shurl_config.toml'


def test_config_path_can_be_overridden(monkeypatch, config_file):
    monkeypatch.setenv(ENV.App.CONFIG_PATH, str(config_file))
    assert config.config_path() == config_file


# -------------------------------
# 2. First run
# -------------------------------

def test_missing_config_file_is_created_with_defaults(config_file):
    with pytest.raises(ConfigNotSetUpError):
        config.load_config(config_file)

    document = tomllib.loads(config_file.read_text(encoding='utf-8'))
    assert document == {
        'repo_path': '/path_to_valid_and_empty_git_repo',
        'name': 'shurl',
        'email': 'example@example.com',
        'remote': 'origin',
        'publisher': 'git',
    }


@pytest.mark.parametrize('content', ['', '\n', '   \n\t'])
def test_empty_config_file_gets_defaults(config_file, content):
    config_file.parent.mkdir(parents=True)
    config_file.write_text(content, encoding='utf-8')

    with pytest.raises(ConfigNotSetUpError):
        config.load_config(config_file)
    assert config_file.read_text(encoding='utf-8') == DEFAULT_CONFIG_DOCUMENT


def test_default_location_is_used_without_argument(_home):
    with pytest.raises(ConfigNotSetUpError):
        config.load_config()
    assert (_home / '.config' / 'shurl_config.toml').exists()


def test_second_run_after_defaults_loads_config(config_file):
    with pytest.raises(ConfigNotSetUpError):
        config.load_config(config_file)

    loaded = config.load_config(config_file)
    assert loaded == ShurlConfig(repo_path=Path('/path_to_valid_and_empty_git_repo'))


# -------------------------------
# 3. Parsing
# -------------------------------

def test_load_config_reads_values(config_file):
    config_file.parent.mkdir(parents=True)
    config_file.write_text(
        'repo_path = "/srv/links"\n'
        'name = "Jane Doe"\n'
        'email = "jane@example.com"\n'
        'remote = "upstream"\n'
        'publisher = "dulwich"\n',
        encoding='utf-8',
    )

    loaded = config.load_config(config_file)

    assert loaded.repo_path == Path('/srv/links')
    assert loaded.name == 'Jane Doe'
    assert loaded.email == 'jane@example.com'
    assert loaded.remote == 'upstream'
    assert loaded.publisher == 'dulwich'
    assert loaded.identity == 'Jane Doe <jane@example.com>'


def test_missing_keys_take_defaults():
    loaded = config.parse_config('repo_path = "/srv/links"\n')
    assert loaded == ShurlConfig(repo_path=Path('/srv/links'))


def test_unknown_keys_are_ignored():
    loaded = config.parse_config('repo_path = "/srv/links"\ncolour = "blue"\n')
    assert loaded.repo_path == Path('/srv/links')


def test_repo_path_tilde_is_expanded(_home):
    loaded = config.parse_config('repo_path = "~/links"\n')
    assert loaded.repo_path == _home / 'links'


@pytest.mark.parametrize('content', ['repo_path = ', 'repo_path = "unterminated', '[[[', 'name = "a"\nname = "b"\n'])
def test_invalid_toml_raises_parse_error(content):
    with pytest.raises(ConfigParseError):
        config.parse_config(content)


@pytest.mark.parametrize('content', ['repo_path = 42\n', 'name = true\n', 'email = ["a", "b"]\n'])
def test_wrongly_typed_values_raise_parse_error(content):
    with pytest.raises(ConfigParseError):
        config.parse_config(content)


def test_unknown_publisher_is_rejected():
    with pytest.raises(BadConfigurationError):
        config.parse_config('repo_path = "/srv/links"\npublisher = "carrier-pigeon"\n')


# -------------------------------
# 4. I/O errors
# -------------------------------

def test_config_path_that_is_a_directory_raises_read_error(config_file):
    config_file.mkdir(parents=True)
    with pytest.raises(ConfigReadError):
        config.load_config(config_file)


def test_config_parent_that_is_a_file_raises_read_error(tmp_path):
    blocker = tmp_path / 'blocker'
    blocker.write_text('not a directory', encoding='utf-8')
    with pytest.raises(ConfigReadError):
        config.load_config(blocker / 'shurl_config.toml')
