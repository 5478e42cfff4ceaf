"""
Custom exception classes for the application.
"""

class BaseCustomException(Exception):
    """Base class for custom exceptions in this application."""
    pass

class UnknownCoordinateSystemError(BaseCustomException, ValueError):
    """Raised when a coordinate system tag is not one of WGS84, GCJ02 or BD09."""
    pass

class MalformedCoordinateStringError(BaseCustomException, ValueError):
    """Raised when a "lng,lat" string does not hold two parseable numbers."""
    pass

class InvalidRequestError(BaseCustomException):
    """Raised when a request is missing a required field."""
    pass
