"""Typed request and response shapes for the B2 API."""
from .base import decode
from .bucket import BucketType, BucketData
from .files import (
    FileInfo,
    ListFileNamesRequest,
    ListFileNamesResponse,
    ListFileVersionsRequest,
    ListFileVersionsResponse,
    UploadFileResponse,
    HideFileResponse,
    DeleteFileVersionResponse,
)

__all__ = [
    'decode',
    'BucketType',
    'BucketData',
    'FileInfo',
    'ListFileNamesRequest',
    'ListFileNamesResponse',
    'ListFileVersionsRequest',
    'ListFileVersionsResponse',
    'UploadFileResponse',
    'HideFileResponse',
    'DeleteFileVersionResponse',
]
