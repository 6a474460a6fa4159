"""Snapshot the site repository into a commit and publish it

This module records one shortening run as a git commit using dulwich:

    - stage every file of the working tree (git-ignored files excluded);
    - write the staged index as a tree object;
    - create a commit on top of the current HEAD commit, or a root commit
      when the repository has no history yet;
    - advance HEAD (i.e. the checked-out branch) to the new commit;
    - ask a Publisher to push the checked-out branch.

Classes:
    CommitBuilder:
        Build commits for the site repository and request their publication.

Example:
    >>> from shurl.vcs import CommitBuilder, GitCommandPublisher, open_repository

    >>> repo = open_repository(config.repo_path)
    >>> builder = CommitBuilder(repo, config, GitCommandPublisher(config.repo_path))
    >>> builder.commit('https://example.com/')
    '3b18e512dba79e4c8300dd08aeb37f8e728b8dad'
    >>> builder.publish()
    PublishResult(ok=True, branch='master', remote='origin', message=None)

NOTE:
    HEAD is advanced with a compare-and-swap against the parent read at the
    start of the commit, but there is no lock around the whole operation.
    Two processes committing into the same repository at once is unsupported.
"""

import os
import time
import logging
from pathlib import Path

from beartype import beartype
from dulwich import porcelain
from dulwich.repo import Repo
from dulwich.ignore import IgnoreFilterManager
from dulwich.objects import Commit

from shurl.types import ObjectId
from shurl.constants import COMMIT_MESSAGE
from shurl.models import PublishResult, ShurlConfig
from shurl.exceptions import CommitError
from shurl.vcs.base import Publisher
from shurl.vcs.helpers import handle_vcs_error


logger = logging.getLogger(__name__)

GIT_DIR = '.git'


class CommitBuilder:
    """Create commits in the site repository

    Attributes:
        repo (Repo):
            dulwich handle of the site repository.
        config (ShurlConfig):
            Provides the commit identity and the remote to publish to.
        publisher (Publisher | None):
            Used by `publish()`. Without one, publishing is skipped.

    Methods:
        stage_all() -> list[str]:
            Stage every working tree file.

        write_tree() -> bytes:
            Write the index as a tree object, return its id.

        head() -> bytes | None:
            Current HEAD commit id, None in a repository without history.

        commit(target: str) -> str:
            Stage, write tree and commit 'Add redirect to <target>'.
            Raises CommitError on any staging/tree/commit failure.

        active_branch() -> str:
            Name of the checked-out branch.

        publish() -> PublishResult | None:
            Push the checked-out branch to `config.remote`.
    """

    def __init__(self, repo: Repo, config: ShurlConfig, publisher: Publisher | None = None):
        self.repo = repo
        self.config = config
        self.publisher = publisher

    @property
    def worktree(self) -> Path:
        return Path(self.repo.path).resolve()

    def _worktree_entries(self) -> tuple[list[str], list[str]]:
        """Walk the working tree, returning (regular files, symlinks) as absolute paths"""
        files, links = [], []
        for root, dirs, filenames in os.walk(self.worktree):
            dirs[:] = sorted(d for d in dirs if d != GIT_DIR)
            # os.walk lists symlinked directories but doesn't descend into them
            links.extend(os.path.join(root, d) for d in dirs if os.path.islink(os.path.join(root, d)))
            dirs[:] = [d for d in dirs if not os.path.islink(os.path.join(root, d))]

            for name in sorted(filenames):
                path = os.path.join(root, name)
                if os.path.islink(path):
                    links.append(path)
                elif name != GIT_DIR:
                    files.append(path)
        return files, links

    def _stage_links(self, links: list[str]) -> list[str]:
        ignore = IgnoreFilterManager.from_repo(self.repo)
        staged = [p for p in links if not ignore.is_ignored(Path(p).relative_to(self.worktree).as_posix())]
        if staged:
            # Staged as links (the target path is the blob), never followed
            self.repo.stage([os.path.relpath(p, self.worktree) for p in staged])
        return staged

    @handle_vcs_error('stage working tree')
    def stage_all(self) -> list[str]:
        """Stage all working tree files, like `git add --all`

        Symbolic links (to files or directories) are staged as links.

        Returns:
            list[str]: sorted absolute paths handed to the index (ignored
            regular files are filtered out by dulwich).
        """
        files, links = self._worktree_entries()
        if files:
            porcelain.add(self.repo, paths=files)
        staged = sorted(files + self._stage_links(links))
        logger.debug('Staged working tree.', extra={'fileCount': len(staged)})
        return staged

    @handle_vcs_error('write tree')
    def write_tree(self) -> ObjectId:
        return self.repo.open_index().commit(self.repo.object_store)

    def head(self) -> ObjectId | None:
        try:
            return self.repo.head()
        except KeyError:
            # Unborn branch: the repository has no commits yet
            return None

    @handle_vcs_error('create commit')
    @beartype
    def commit(self, target: str) -> str:
        """Commit the current working tree

        The commit has the configured identity as both author and committer.
        Its only parent is the current HEAD commit; in an empty repository it
        is a root commit without parents.

        Args:
            target (str):
                Target URL of the new short link, used in the commit message.

        Returns:
            str: hex id of the new commit

        Raises:
            CommitError:
                If staging, writing the tree, creating the commit or advancing
                HEAD fails. Files already written stay on disk uncommitted.
        """
        self.stage_all()
        tree_id = self.write_tree()
        parent = self.head()

        identity = self.config.identity.encode('utf-8')
        now = int(time.time())
        tz_offset = time.localtime(now).tm_gmtoff

        commit = Commit()
        commit.tree = tree_id
        commit.parents = [parent] if parent is not None else []
        commit.author = commit.committer = identity
        commit.author_time = commit.commit_time = now
        commit.author_timezone = commit.commit_timezone = tz_offset
        commit.encoding = b'UTF-8'
        commit.message = COMMIT_MESSAGE.format(target=target).encode('utf-8')
        self.repo.object_store.add_object(commit)

        # fmt: off
        advanced = self.repo.refs.set_if_equals(b'HEAD', parent, commit.id,
                                                committer=identity,
                                                timestamp=now,
                                                timezone=tz_offset,
                                                message=b'commit: ' + commit.message)
        # fmt: on
        if not advanced:
            raise CommitError(f'HEAD of {self.repo.path} moved while committing; commit {commit.id.decode()} is dangling.')

        commit_id = commit.id.decode('ascii')
        # fmt: off
        logger.info('Created commit.', extra={'commitId': commit_id,
                                              'parents': [p.decode('ascii') for p in commit.parents]})
        # fmt: on
        return commit_id

    def active_branch(self) -> str:
        return porcelain.active_branch(self.repo).decode('utf-8')

    def publish(self) -> PublishResult | None:
        """Request a push of the checked-out branch to the configured remote

        A failed push is logged and returned, never raised: the local commit
        stays authoritative whether or not it reached the remote.

        Returns:
            PublishResult | None:
                Result of the push, None if no publisher is configured.
        """
        if self.publisher is None:
            logger.debug('No publisher configured, skipping publish.')
            return None

        remote = self.config.remote
        try:
            branch = self.active_branch()
        except (KeyError, IndexError, ValueError) as e:
            return PublishResult(ok=False, branch='', remote=remote, message=f'No checked-out branch to publish ({e}).')

        result = self.publisher.publish(branch, remote)
        if result.ok:
            logger.info('Published branch.', extra={'branch': branch, 'remote': remote})
        else:
            logger.warning('Publish failed.', extra={'branch': branch, 'remote': remote, 'reason': result.message})
        return result
