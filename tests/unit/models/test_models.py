"""Unit tests for the dataclasses in shurl.models.

Test coverage includes:

1. ShortLinkModel creation
   - Ensures valid names are accepted and artifact file names are derived.

2. Short name validation
   - Ensures names which are not a single legal path segment are rejected.

3. Immutability
   - Verifies that model fields can't be reassigned.

4. ShurlConfig and result models
   - Ensures defaults, the git identity and the `published` shortcut.
"""

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from shurl.models import ShortLinkModel, ShurlConfig, PublishResult, ShortenResult
from shurl.exceptions import InvalidShortNameError


# -------------------------------------------------
# 1. ShortLinkModel creation
# -------------------------------------------------

def test_valid_short_link_model_creation():
    """Ensure ShortLinkModel can be created and derives its artifact names."""
    short_link = ShortLinkModel(name='abcde', target='https://example.com/')

    assert short_link.name == 'abcde'
    assert short_link.target == 'https://example.com/'
    assert short_link.artifact_filename == 'abcde.html'
    assert short_link.artifact_href == './abcde.html'


@pytest.mark.parametrize('name', ['blog', 'my-talk.2026', 'CamelCase', 'ünïcode'])
def test_user_supplied_names_are_accepted(name):
    """Any single path segment is a valid name, not just generated tokens."""
    assert ShortLinkModel(name=name, target='https://example.com/').name == name


# -------------------------------------------------
# 2. Short name validation
# -------------------------------------------------

@pytest.mark.parametrize('name', ['', '.', '..', 'a/b', '../evil', 'a\\b', 'nul\0byte'])
def test_illegal_names_are_rejected(name):
    """Names which are not a single legal path segment raise InvalidShortNameError."""
    with pytest.raises(InvalidShortNameError):
        ShortLinkModel(name=name, target='https://example.com/')


@pytest.mark.parametrize('name', ['a"b', '<script>', 'x>y'])
def test_names_breaking_index_markup_are_rejected(name):
    """Names are written into an href attribute of index.html."""
    with pytest.raises(InvalidShortNameError):
        ShortLinkModel(name=name, target='https://example.com/')


# -------------------------------------------------
# 3. Immutability
# -------------------------------------------------

def test_short_link_model_is_frozen():
    short_link = ShortLinkModel(name='abcde', target='https://example.com/')
    with pytest.raises(FrozenInstanceError):
        short_link.name = 'other'


def test_short_link_models_compare_by_value():
    assert ShortLinkModel('abcde', 'https://example.com/') == ShortLinkModel('abcde', 'https://example.com/')
    assert ShortLinkModel('abcde', 'https://example.com/') != ShortLinkModel('abcdf', 'https://example.com/')


# -------------------------------------------------
# 4. ShurlConfig and result models
# -------------------------------------------------

def test_config_defaults_and_identity():
    config = ShurlConfig(repo_path=Path('/srv/links'))

    assert config.name == 'shurl'
    assert config.email == 'example@example.com'
    assert config.remote == 'origin'
    assert config.publisher == 'git'
    assert config.identity == 'shurl <example@example.com>'


def test_config_is_frozen():
    config = ShurlConfig(repo_path=Path('/srv/links'))
    with pytest.raises(FrozenInstanceError):
        config.repo_path = Path('/elsewhere')


@pytest.mark.parametrize(
    'publish, expected',
    [
        (None, False),
        (PublishResult(ok=False, branch='master', remote='origin', message='rejected'), False),
        (PublishResult(ok=True, branch='master', remote='origin'), True),
    ],
)
def test_shorten_result_published(publish, expected):
    result = ShortenResult(
        short_link=ShortLinkModel('abcde', 'https://example.com/'),
        commit_id='0' * 40,
        publish=publish,
    )
    assert result.published is expected
