from shurl.vcs.base import Publisher
from shurl.vcs.helpers import open_repository
from shurl.vcs.publishers import GitCommandPublisher, DulwichPublisher, make_publisher
from shurl.vcs.commit_builder import CommitBuilder


__all__ = [
    'Publisher',
    'open_repository',
    'GitCommandPublisher',
    'DulwichPublisher',
    'make_publisher',
    'CommitBuilder',
]
