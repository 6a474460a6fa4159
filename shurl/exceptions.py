class ShurlError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:shurl_error'


class InvalidURLError(ShurlError):
    """Raised when the target URL can't be parsed as an absolute URL."""

    error_code = 'app:invalid_url_error'


class InvalidShortNameError(ShurlError):
    """Raised when a short name is not a legal file name."""

    error_code = 'app:invalid_short_name_error'


class NamespaceExhaustedError(ShurlError):
    """Raised when no free short name was found within the attempt limit."""

    error_code = 'app:namespace_exhausted_error'


class ConfigurationError(ShurlError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class ConfigReadError(ConfigurationError):
    """Raised when the configuration file can't be created, read or written."""

    error_code = 'config:config_read_error'


class ConfigParseError(ConfigurationError):
    """Raised when the configuration file is not valid TOML or has wrongly typed values."""

    error_code = 'config:config_parse_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'


class ConfigNotSetUpError(ConfigurationError):
    """Raised after default configuration was written on first run.

    Not a failure as such: the operator has to edit the file and run again.
    """

    error_code = 'config:config_not_set_up_error'


class SiteError(ShurlError):
    """Base exception for errors writing site files (artifacts, index)."""

    error_code = 'site:site_error'


class ArtifactWriteError(SiteError):
    """Raised when a redirect artifact can't be written."""

    error_code = 'site:artifact_write_error'


class LedgerWriteError(SiteError):
    """Raised when the index ledger can't be opened or appended to."""

    error_code = 'site:ledger_write_error'


class RepositoryError(ShurlError):
    """Base exception for all version control errors."""

    error_code = 'vcs:repository_error'


class RepositoryOpenError(RepositoryError):
    """Raised when the configured repository doesn't exist or can't be opened."""

    error_code = 'vcs:repository_open_error'


class CommitError(RepositoryError):
    """Raised when staging, writing the tree or creating the commit fails."""

    error_code = 'vcs:commit_error'
