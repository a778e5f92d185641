"""Base exception classes for shamir-plots."""


class ShamirPlotsError(Exception):
    """Base class for all shamir-plots errors."""

    pass


class ConfigurationError(ShamirPlotsError):
    """Raised when environment or command-line configuration is invalid."""

    pass
