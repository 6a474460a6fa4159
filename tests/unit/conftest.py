from pathlib import Path
from unittest.mock import MagicMock

import pytest
from dulwich.repo import Repo

from shurl.models import PublishResult, ShurlConfig
from shurl.vcs import Publisher


@pytest.fixture
def repo_path(tmp_path: Path) -> Path:
    """Empty git repository with a working tree (no commits yet)."""
    path = tmp_path / 'site'
    path.mkdir()
    Repo.init(str(path)).close()
    return path


@pytest.fixture
def config(repo_path: Path) -> ShurlConfig:
    return ShurlConfig(repo_path=repo_path, name='Test User', email='test@example.com')


@pytest.fixture
def publisher() -> Publisher:
    """Mock publisher which accepts every push."""
    _publisher = MagicMock(spec=Publisher)
    _publisher.publish.side_effect = lambda branch, remote: PublishResult(ok=True, branch=branch, remote=remote)
    return _publisher


@pytest.fixture
def failing_publisher() -> Publisher:
    """Mock publisher which rejects every push."""
    _publisher = MagicMock(spec=Publisher)
    _publisher.publish.side_effect = lambda branch, remote: PublishResult(
        ok=False, branch=branch, remote=remote, message='remote rejected'
    )
    return _publisher
