from pathlib import Path


class PyinitError(Exception):
    """Base exception for everything pyinit reports to the user."""
    pass


class FetchError(PyinitError):
    """Raised if the gitignore API cannot be reached or rejects the request."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class WriteError(PyinitError):
    """Raised if a generated file cannot be written to disk."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to write {path}: {reason}")
        self.path = path
        self.reason = reason


class TemplateNotFoundError(PyinitError):
    """Raised if no bundled template exists for the requested filename."""

    def __init__(self, filename: str) -> None:
        super().__init__(f"Unable to load embedded file {filename!r}.")
        self.filename = filename


class ConfigError(PyinitError):
    """Raised if the config file is malformed."""
    pass


class UsageError(PyinitError):
    """Raised by the argument parser on unknown flags or malformed arguments."""
    pass
