"""Errors raised by the climate simulation."""


class ConfigurationError(ValueError):
    """Raised when a simulation or classifier is set up with invalid parameters."""
