from enum import StrEnum


class Defaults:
    """Default configuration values written on first run."""

    REPO_PATH = '/path_to_valid_and_empty_git_repo'
    NAME = 'shurl'
    EMAIL = 'example@example.com'
    REMOTE = 'origin'
    PUBLISHER = 'git'


class Shortener:
    """Short name generation parameters."""

    NAME_LENGTH = 5  # 26 ** 5 ~= 11.9M possible names


class Site:
    """File names inside the site repository."""

    INDEX_FILENAME = 'index.html'
    ARTIFACT_SUFFIX = '.html'


class Publishers(StrEnum):
    GIT = 'git'
    DULWICH = 'dulwich'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        CONFIG_PATH = 'SHURL_CONFIG'
        LOG_LEVEL = 'SHURL_LOG_LEVEL'


# Config file location, relative to the user's home directory
DEFAULT_CONFIG_PATH = '~/.config/shurl_config.toml'

# Commit message template
COMMIT_MESSAGE = 'Add redirect to {target}'
