"""Exceptions raised while fetching and projecting CMS entries."""

from typing import Optional


class CmsLocaleError(Exception):
    """Base class for cms_locale errors."""


class FetchError(CmsLocaleError):
    """The content source rejected or failed an entries request."""

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DataShapeError(CmsLocaleError):
    """An entry payload does not have the expected sys/fields structure."""
