from shurl.utils.config import config_path, parse_config, load_config
from shurl.utils.helpers import parse_url, expand_path
from shurl.utils.shortener import generate_name, allocate_name, artifact_exists
from shurl.utils.logging import initialize_logging


__all__ = [
    'generate_name',
    'allocate_name',
    'artifact_exists',
    'config_path',
    'parse_config',
    'load_config',
    'parse_url',
    'expand_path',
    'initialize_logging',
]
