"""
Custom exceptions for B2 client operations.

Local precondition failures are raised before any network I/O.
Transport errors (aiohttp) are never wrapped and reach the caller as-is.
"""
from typing import Optional


class B2Exception(Exception):
    """Base exception for all blazepy errors."""
    
    def __init__(self, message: str, error_code: Optional[str] = None) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            error_code: Short machine-readable code (if available)
        """
        self.error_code = error_code
        super().__init__(message)


class UnauthenticatedError(B2Exception):
    """Operation attempted before a successful authorize, or state missing."""
    
    def __init__(self, message: str = "Authentication details are missing") -> None:
        super().__init__(message, 'unauthenticated')


class MalformedRequestError(B2Exception):
    """The request could not be built from the given parameters."""
    
    def __init__(
        self,
        message: str = "The request could not be created with the given parameters"
    ) -> None:
        super().__init__(message, 'malformed_request')


class MalformedResponseError(B2Exception):
    """The server body did not decode into the expected shape."""
    
    def __init__(
        self,
        message: str = "The server responded with unparseable data",
        body: Optional[bytes] = None
    ) -> None:
        self.body = body
        super().__init__(message, 'malformed_response')


class URLConstructionError(B2Exception):
    """A URL could not be built."""
    
    def __init__(self, message: str = "An error occurred constructing the URL") -> None:
        super().__init__(message, 'url_construction_failed')


class URLEncodingError(B2Exception):
    """A value could not be percent-encoded."""
    
    def __init__(
        self,
        message: str = "An error occurred encoding the URL parameters"
    ) -> None:
        super().__init__(message, 'url_encoding_failed')


class UploadFailedError(B2Exception):
    """Upload-specific failure."""
    
    def __init__(self, message: str = "An error occurred uploading the file") -> None:
        super().__init__(message, 'upload_failed')
