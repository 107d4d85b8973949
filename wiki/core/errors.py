from __future__ import annotations


class WikiError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class StorageError(WikiError):
    """Connection, query or DDL failure in the page store."""


class ConstraintViolation(StorageError):
    """A page with the same name already exists."""


class NotFound(StorageError):
    """An update targeted an id with no row."""


class RenderError(WikiError):
    """Markdown conversion or template rendering failed."""
