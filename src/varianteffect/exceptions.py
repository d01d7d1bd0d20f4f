"""Run-fatal errors.

Record-level problems (malformed EFF entries, unknown vocabulary tokens) are never
raised; they travel as values and are logged. Only problems that make the whole run
meaningless surface as exceptions.
"""


class ConfigurationError(Exception):
    """Exception raised when a run cannot start with the given inputs or settings."""

    pass
