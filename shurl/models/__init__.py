from shurl.models.short_link_model import ShortLinkModel
from shurl.models.config_model import ShurlConfig
from shurl.models.result_models import PublishResult, ShortenResult


__all__ = [
    'ShortLinkModel',
    'ShurlConfig',
    'PublishResult',
    'ShortenResult',
]
