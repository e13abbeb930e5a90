"""Exceptions raised while loading or fetching hours descriptions."""


class HoursParserError(Exception):
    """Base exception for hours ingestion errors."""


class HoursFetchError(HoursParserError):
    """Network or HTTP error while fetching a page."""


class HoursDataError(HoursParserError):
    """Invalid or malformed venue data."""
