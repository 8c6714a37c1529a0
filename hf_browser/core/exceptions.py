from __future__ import annotations

from typing import Optional


class HfBrowserError(Exception):
    """Base exception for all hf_browser errors"""
    pass


class ConfigError(HfBrowserError):
    """Invalid or inconsistent global.json"""
    pass


class LoadError(HfBrowserError):
    """
    Ingestion failed: the dataset could not be found, read or parsed.

    reason is one of the REASON_* constants so callers can branch on it
    without parsing the message.
    """

    REASON_NOT_FOUND = "not_found"
    REASON_MALFORMED = "malformed"
    REASON_UNREADABLE = "unreadable"

    def __init__(self, reason: str, message: str, source: Optional[str] = None):
        self.reason = reason
        self.source = source
        super().__init__(message)


class NoDataError(HfBrowserError):
    """Filters + axis selection left zero plottable points"""
    pass


class SchemaError(HfBrowserError):
    """
    A requested field is not part of the schema, or is the wrong kind
    (e.g. a categorical column chosen as a scatter axis)
    """
    pass
