"""Utility functions for application configuration management.

Configuration lives in a single TOML file in the user's config directory,
`~/.config/shurl_config.toml` (override the location with the `SHURL_CONFIG`
environment variable):

    repo_path = "~/projects/links"        # site repository, `~` is expanded
    name = "shurl"                        # commit author and committer name
    email = "example@example.com"         # commit author and committer email
    remote = "origin"                     # remote to publish to
    publisher = "git"                     # "git" (git push) or "dulwich"

Every key is optional and falls back to the defaults in
`shurl.constants.Defaults`; unknown keys are ignored. When the file is
missing or empty the defaults are written to it and the operator is asked to
set `repo_path` and run again.

The loaded configuration is returned as an immutable `ShurlConfig` which the
caller passes on to every component. Nothing here keeps module-level state.

Functions:
    config_path() -> Path
        Return the configuration file location.

    parse_config(content: str) -> ShurlConfig
        Parse TOML text into a ShurlConfig.

    load_config(path: Path | None = None) -> ShurlConfig
        Load (and on first run, create) the configuration file.

Example:
    >>> from shurl.utils.config import load_config
    >>> config = load_config()
    >>> config.repo_path
    PosixPath('/home/me/projects/links')
    >>> config.identity
    'shurl <example@example.com>'
"""

import os
import logging
import tomllib
from pathlib import Path

from shurl.models import ShurlConfig
from shurl.constants import DEFAULT_CONFIG_PATH, ENV, Defaults, Publishers
from shurl.exceptions import (
    BadConfigurationError,
    ConfigNotSetUpError,
    ConfigParseError,
    ConfigReadError,
)
from shurl.utils.helpers import expand_path


logger = logging.getLogger(__name__)

CONFIG_DEFAULTS = {
    'repo_path': Defaults.REPO_PATH,
    'name': Defaults.NAME,
    'email': Defaults.EMAIL,
    'remote': Defaults.REMOTE,
    'publisher': Defaults.PUBLISHER,
}

DEFAULT_CONFIG_DOCUMENT = ''.join(f'{key} = "{value}"\n' for key, value in CONFIG_DEFAULTS.items())


def config_path() -> Path:
    """Return the configuration file location

    Returns:
        Path:
            Value of `SHURL_CONFIG` if set, `~/.config/shurl_config.toml` otherwise
            (with `~` expanded).
    """
    return expand_path(os.environ.get(ENV.App.CONFIG_PATH) or DEFAULT_CONFIG_PATH)


def parse_config(content: str) -> ShurlConfig:
    """Parse the TOML configuration document

    Args:
        content (str): TOML text

    Returns:
        ShurlConfig: configuration with defaults filled in

    Raises:
        ConfigParseError: if the text is not valid TOML or a value is not a string
        BadConfigurationError: if `publisher` names an unknown publisher
    """
    try:
        document = tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f'Failed to parse config file: {e}') from e

    values = {}
    for key, default in CONFIG_DEFAULTS.items():
        value = document.get(key, default)
        if not isinstance(value, str):
            raise ConfigParseError(f"Failed to parse config file: '{key}' must be a string (given: {value!r}).")
        values[key] = value

    if values['publisher'] not in set(Publishers):
        choices = ', '.join(f"'{p}'" for p in Publishers)
        raise BadConfigurationError(f"Unknown publisher '{values['publisher']}' (expected one of {choices}).")

    return ShurlConfig(
        repo_path=expand_path(values['repo_path']),
        name=values['name'],
        email=values['email'],
        remote=values['remote'],
        publisher=values['publisher'],
    )


def load_config(path: Path | None = None) -> ShurlConfig:
    """Load the configuration file, creating it with defaults on first run

    Args:
        path (Path | None):
            Configuration file. Defaults to `config_path()`.

    Returns:
        ShurlConfig: the loaded configuration

    Raises:
        ConfigNotSetUpError: if the file was missing or empty and defaults were just written
        ConfigReadError: if the file can't be created, read or written
        ConfigParseError: if the file content is invalid
    """
    path = path or config_path()
    created = False

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        # 'a+' creates the file if it's missing without truncating an existing one
        with open(path, 'a+', encoding='utf-8') as config_file:
            config_file.seek(0)
            content = config_file.read()
            if not content.strip():
                config_file.truncate(0)
                config_file.write(DEFAULT_CONFIG_DOCUMENT)
                created = True
    except OSError as e:
        raise ConfigReadError(f'Failed to create or read config file {path}: {e}') from e

    if created:
        logger.info('Wrote default config file.', extra={'configPath': str(path)})
        raise ConfigNotSetUpError(
            f'Created config file {path}. Set the default repository path and run the command again.'
        )

    logger.debug('Loaded config file.', extra={'configPath': str(path)})
    return parse_config(content)
