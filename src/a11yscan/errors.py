"""Typed errors raised by the scan and report pipeline."""


class A11yScanError(Exception):
    """Base class for all a11yscan failures."""


class ValidationError(A11yScanError):
    """A tool parameter is missing or malformed; the scan never starts."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"Invalid parameter '{field}': {message}")


class BrowserError(A11yScanError):
    """Browser launch, context creation or page loading failed."""


class NavigationTimeoutError(BrowserError):
    """Page load did not settle within the navigation timeout."""


class EngineError(A11yScanError):
    """The accessibility rule engine could not analyze the page."""


class ExportError(A11yScanError):
    """A report could not be persisted to the output directory."""
