from shurl.cli.app import main, shorten_url


__all__ = [
    'main',
    'shorten_url',
]
