from dataclasses import dataclass
from pathlib import Path

from shurl.constants import Defaults


@dataclass(frozen=True)
class ShurlConfig:
    # fmt: off
    repo_path: Path                       # Site repository (tilde already expanded)
    name: str = Defaults.NAME             # Commit author/committer name
    email: str = Defaults.EMAIL           # Commit author/committer email
    remote: str = Defaults.REMOTE         # Remote to publish to
    publisher: str = Defaults.PUBLISHER   # 'git' (git push) or 'dulwich'
    # fmt: on

    @property
    def identity(self) -> str:
        """Git identity string, e.g. 'shurl <example@example.com>'"""
        return f'{self.name} <{self.email}>'
