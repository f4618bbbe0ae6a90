"""
Upload module for B2 single-file uploads.

Large-file (multi-part) uploads are not supported.
"""
from .coordinator import UploadCoordinator
from .models import UploadInfo
from .services import FileValidator, AsyncFileReader

__all__ = [
    'UploadCoordinator',
    'UploadInfo',
    'FileValidator',
    'AsyncFileReader',
]
