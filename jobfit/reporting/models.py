"""Exceptions for the reporting package."""


class ReportError(Exception):
    """Base exception for report generation errors."""

    pass


class ReportRenderError(ReportError):
    """Raised when template rendering fails due to a missing template or variable."""

    pass
