# updates/errors.py
"""Errors raised by update negotiation. None of them are transient."""


class UpdateServiceError(Exception):
    """Base class for update service errors."""
    pass


class NotFoundError(UpdateServiceError):
    """No version record is published for the requested application."""

    def __init__(self, app_name: str):
        self.app_name = app_name
        super().__init__(f"Application not found: {app_name}")


class MissingVersionError(UpdateServiceError):
    """The client did not report which version it runs."""

    def __init__(self, app_name: str):
        self.app_name = app_name
        super().__init__(f"Current version is required for {app_name}")
