"""Fetch headless CMS entries and flatten them into per-locale records."""

from cms_locale.parsing.locales import MISSING, LocaleSpec, resolve_field
from cms_locale.retrieval.errors import CmsLocaleError, DataShapeError, FetchError
from cms_locale.retrieval.projector import LocaleProjector

__version__ = "0.1.0"

__all__ = [
    "CmsLocaleError",
    "DataShapeError",
    "FetchError",
    "LocaleProjector",
    "LocaleSpec",
    "MISSING",
    "resolve_field",
]
