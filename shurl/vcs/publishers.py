"""Publisher implementations

Classes:
    GitCommandPublisher:
        Push by running `git push <remote> <branch>` in the repository. Uses
        the operator's own git setup (credentials, SSH agent, hooks).

    DulwichPublisher:
        Push with dulwich's porcelain, without needing a git executable.

Functions:
    make_publisher(config, repo) -> Publisher:
        Pick the publisher configured by `config.publisher`.

Both implementations block until the push completes; there is no timeout.
"""

import logging
import subprocess
from pathlib import Path

from beartype import beartype
from dulwich import porcelain
from dulwich.repo import Repo
from dulwich.errors import GitProtocolError, NotGitRepository

from shurl.constants import Publishers
from shurl.models import PublishResult, ShurlConfig
from shurl.exceptions import BadConfigurationError
from shurl.vcs.base import Publisher


logger = logging.getLogger(__name__)


class GitCommandPublisher(Publisher):
    """Publish by shelling out to the `git` executable

    Attributes:
        repo_path (Path):
            Working directory for `git push`.
    """

    def __init__(self, repo_path: Path):
        self.repo_path = repo_path

    @beartype
    def publish(self, branch: str, remote: str) -> PublishResult:
        command = ['git', 'push', remote, branch]
        logger.debug('Running git push.', extra={'command': command, 'repoPath': str(self.repo_path)})

        try:
            completed = subprocess.run(command, cwd=self.repo_path, check=False)  # noqa: S603, S607
        except OSError as e:
            return PublishResult(ok=False, branch=branch, remote=remote, message=f"Failed to run 'git push': {e}")

        if completed.returncode != 0:
            message = f"'git push {remote} {branch}' exited with status {completed.returncode}"
            return PublishResult(ok=False, branch=branch, remote=remote, message=message)

        return PublishResult(ok=True, branch=branch, remote=remote)


class DulwichPublisher(Publisher):
    """Publish with dulwich's git protocol client

    Attributes:
        repo (Repo):
            Repository whose branch is pushed.
    """

    def __init__(self, repo: Repo):
        self.repo = repo

    @beartype
    def publish(self, branch: str, remote: str) -> PublishResult:
        refspec = f'refs/heads/{branch}'.encode('utf-8')
        logger.debug('Pushing with dulwich.', extra={'branch': branch, 'remote': remote})

        try:
            porcelain.push(self.repo, remote_location=remote, refspecs=[refspec])
        except (porcelain.Error, GitProtocolError, NotGitRepository, OSError, KeyError, ValueError) as e:
            return PublishResult(ok=False, branch=branch, remote=remote, message=f'Push to {remote} failed: {e}')

        return PublishResult(ok=True, branch=branch, remote=remote)


def make_publisher(config: ShurlConfig, repo: Repo) -> Publisher:
    """Return the publisher selected by `config.publisher`

    Raises:
        BadConfigurationError: if the publisher name is unknown.
    """
    if config.publisher == Publishers.GIT:
        return GitCommandPublisher(config.repo_path)
    if config.publisher == Publishers.DULWICH:
        return DulwichPublisher(repo)
    raise BadConfigurationError(f"Unknown publisher '{config.publisher}'.")
