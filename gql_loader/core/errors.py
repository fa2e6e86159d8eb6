"""Exceptions raised while loading GraphQL documents."""

import errno


class LoaderError(Exception):
    """Base class for errors raised by the loader."""


class ImportNotFoundError(LoaderError, FileNotFoundError):
    """Raised when a GraphQL file or one of its imports does not exist.

    Aborts the whole import resolution for the entry file.
    """

    def __init__(self, path: str, imported_from: str | None = None):
        self.path = path
        self.imported_from = imported_from
        message = f"GraphQL file not found: {path}"
        if imported_from:
            message += f" (imported from {imported_from})"
        super().__init__(errno.ENOENT, message, path)
        self.message = message

    def __str__(self) -> str:
        return self.message


class MissingFragmentError(LoaderError):
    """Raised when an operation spreads a fragment that is never defined."""

    def __init__(self, fragment_name: str):
        self.fragment_name = fragment_name
        self.message = f"Expected to find fragment definition for {fragment_name}"
        super().__init__(self.message)


class InvalidEncodingError(LoaderError):
    """Raised when a GraphQL file is not valid UTF-8."""

    def __init__(self, path: str, imported_from: str | None = None):
        self.path = path
        self.imported_from = imported_from
        self.message = f"GraphQL file is not valid UTF-8: {path}"
        if imported_from:
            self.message += f" (imported from {imported_from})"
        super().__init__(self.message)
