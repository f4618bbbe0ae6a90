"""
blazepy - Async Python client for Backblaze B2 cloud storage.

Usage:
    >>> from blazepy import B2Client
    >>> 
    >>> async with B2Client("key_id", "application_key") as b2:
    ...     await b2.authorize()
    ...     bucket = await b2.get_bucket("photos")
    ...     await bucket.upload(b"hello", "hello.txt")
"""
import logging
from .client import B2Client
from .bucket import Bucket

# Configuration
from .core.api import (
    APIConfig,
    ProxyConfig,
    SSLConfig,
    TimeoutConfig,
    AsyncAPIClient,
    AsyncAuthService,
    B2APIError,
)

# Errors
from .core.exceptions import (
    B2Exception,
    UnauthenticatedError,
    MalformedRequestError,
    MalformedResponseError,
    URLConstructionError,
    URLEncodingError,
    UploadFailedError,
)

# Data shapes
from .core.models import (
    BucketType,
    FileInfo,
    ListFileNamesResponse,
    ListFileVersionsResponse,
    UploadFileResponse,
    HideFileResponse,
    DeleteFileVersionResponse,
)
from .core.session import SessionData, KeyCapability, KeyRestrictions

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for blazepy modules.
    
    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'blazepy',
        'blazepy.api',
        'blazepy.client',
        'blazepy.bucket',
        'blazepy.upload.coordinator',
        'blazepy.upload.file',
    ]
    
    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'B2Client',
    'Bucket',
    'BucketType',
    'FileInfo',
    'ListFileNamesResponse',
    'ListFileVersionsResponse',
    'UploadFileResponse',
    'HideFileResponse',
    'DeleteFileVersionResponse',
    'SessionData',
    'KeyCapability',
    'KeyRestrictions',
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'AsyncAPIClient',
    'AsyncAuthService',
    'B2Exception',
    'B2APIError',
    'UnauthenticatedError',
    'MalformedRequestError',
    'MalformedResponseError',
    'URLConstructionError',
    'URLEncodingError',
    'UploadFailedError',
    'setup_logging',
]
