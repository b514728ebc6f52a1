"""Custom exception classes for the application."""

class ProjectNotFound(Exception):
    """Raised when a project name does not resolve to a project id."""
    pass

class VRAConnectionError(Exception):
    """Raised when a session with the vRA server cannot be established."""
    pass

class InvalidVRAResponse(Exception):
    """Raised when a vRA response does not have the expected shape."""
    pass
