"""
Custom exceptions for the dashboard.
"""


class DashboardError(Exception):
    """Base exception for dashboard errors."""
    pass


class ConfigurationError(DashboardError):
    """Raised when the dashboard is wired with an unknown view or bad settings."""
    pass


class TerminalError(DashboardError):
    """Raised when the host terminal cannot be driven."""
    pass
