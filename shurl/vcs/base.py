"""Abstract base class for publishers.

A publisher transmits the local commit history of the site repository to a
remote counterpart. It is the only part of the pipeline that talks to the
network, so it sits behind this small interface and can be replaced by a
test double.

Example:
    >>> from shurl.vcs import GitCommandPublisher

    >>> publisher = GitCommandPublisher(Path('/home/me/links'))
    >>> publisher.publish('master', 'origin')
    PublishResult(ok=True, branch='master', remote='origin', message=None)
"""

from abc import ABC, abstractmethod

from shurl.models import PublishResult


class Publisher(ABC):
    """Interface for publishing a branch to a remote.

    Methods:
        publish(branch: str, remote: str) -> PublishResult:
            Push `branch` to `remote`.
            Never raises for push failures; they are reported in the result.

    Subclassing:
        Transport-specific implementations (e.g. GitCommandPublisher or
        DulwichPublisher) must extend this class and implement `publish`.
    """

    @abstractmethod
    def publish(self, branch: str, remote: str) -> PublishResult:
        """Publish a local branch to a remote.

        Args:
            branch (str):
                Local branch name, e.g. 'master'.

            remote (str):
                Remote name, e.g. 'origin'.

        Returns:
            PublishResult: `ok=False` and a message if the push failed.
        """
        pass
