from dataclasses import dataclass

from shurl.models.short_link_model import ShortLinkModel


@dataclass(frozen=True)
class PublishResult:
    """Outcome of a publish (push) request.

    Attributes:
        ok (bool):
            True if the remote accepted the push.
        branch (str):
            Branch that was pushed.
        remote (str):
            Remote name (or location) pushed to.
        message (str | None):
            Failure reason, None on success.
    """

    ok: bool
    branch: str
    remote: str
    message: str | None = None


@dataclass(frozen=True)
class ShortenResult:
    """Everything a single shortening run produced.

    Attributes:
        short_link (ShortLinkModel):
            The allocated short link.
        commit_id (str):
            Hex id of the commit recording the change.
        publish (PublishResult | None):
            Result of the publish request, None if publishing was not attempted.
    """

    short_link: ShortLinkModel
    commit_id: str
    publish: PublishResult | None = None

    @property
    def published(self) -> bool:
        return self.publish is not None and self.publish.ok
