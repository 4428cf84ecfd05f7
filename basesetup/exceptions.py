"""Exception hierarchy shared by the framework modules."""


class FrameworkError(Exception):
    """Base class for framework errors."""
    pass


class ConfigurationError(FrameworkError):
    """Raised when configuration loading or access fails."""
    pass


class BrowserInitError(FrameworkError):
    """Raised when the browser engine cannot be launched."""
    pass


class InvalidLocatorError(FrameworkError, ValueError):
    """Raised when a locator descriptor names an unknown strategy or role."""
    pass


class ElementNotFoundError(FrameworkError):
    """Raised when a caller insists on a locator that could not be resolved."""
    pass


__all__ = [
    "FrameworkError",
    "ConfigurationError",
    "BrowserInitError",
    "InvalidLocatorError",
    "ElementNotFoundError",
]
