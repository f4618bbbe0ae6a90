"""
File data models.

Read-only records decoded from b2_list_file_names, b2_list_file_versions,
b2_get_file_info, b2_upload_file, b2_hide_file and b2_delete_file_version.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..utils import from_millis


@dataclass(frozen=True)
class FileInfo:
    """
    One stored file version (or virtual folder) in a bucket.
    
    Attributes:
        account_id: Account that owns the file
        action: 'upload', 'start', 'hide', 'folder' or a future value
        bucket_id: Bucket that holds the file
        content_length: Bytes stored; 0 unless action is 'upload'
        content_sha1: 40-char hex SHA-1, 'none' for large files, None for hide/folder
        content_md5: 32-char hex MD5 when known
        content_type: MIME type; None for folders
        file_id: Version id; None for folders
        file_name: Name usable with download-by-name
        file_info: Custom X-Bz-Info-* metadata
        upload_timestamp: UTC upload time (epoch for folders)
    """
    account_id: Optional[str]
    action: str
    bucket_id: Optional[str]
    content_length: int
    content_sha1: Optional[str]
    content_md5: Optional[str]
    content_type: Optional[str]
    file_id: Optional[str]
    file_name: str
    upload_timestamp: datetime
    file_info: Dict[str, str] = field(default_factory=dict)
    
    @property
    def is_folder(self) -> bool:
        return self.action == 'folder'
    
    @property
    def is_hidden(self) -> bool:
        return self.action == 'hide'
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FileInfo':
        return cls(
            account_id=data.get('accountId'),
            action=data['action'],
            bucket_id=data.get('bucketId'),
            content_length=int(data.get('contentLength') or 0),
            content_sha1=data.get('contentSha1'),
            content_md5=data.get('contentMd5'),
            content_type=data.get('contentType'),
            file_id=data.get('fileId'),
            file_name=data['fileName'],
            upload_timestamp=from_millis(data.get('uploadTimestamp') or 0),
            file_info=dict(data.get('fileInfo') or {}),
        )


@dataclass
class ListFileNamesRequest:
    """
    Body of b2_list_file_names.
    
    Optional fields that are None are left out of the wire payload so the
    server-side defaults apply.
    """
    bucket_id: str
    start_file_name: Optional[str] = None
    max_file_count: Optional[int] = None
    prefix: Optional[str] = None
    delimiter: Optional[str] = None
    
    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {'bucketId': self.bucket_id}
        if self.start_file_name is not None:
            result['startFileName'] = self.start_file_name
        if self.max_file_count is not None:
            result['maxFileCount'] = self.max_file_count
        if self.prefix is not None:
            result['prefix'] = self.prefix
        if self.delimiter is not None:
            result['delimiter'] = self.delimiter
        return result


@dataclass
class ListFileVersionsRequest(ListFileNamesRequest):
    """Body of b2_list_file_versions."""
    start_file_id: Optional[str] = None
    
    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        if self.start_file_id is not None:
            result['startFileId'] = self.start_file_id
        return result


@dataclass(frozen=True)
class ListFileNamesResponse:
    """
    One page of b2_list_file_names.
    
    ``next_file_name`` is what to pass as ``start_file_name`` to continue,
    or None when there are no more files. It may not name a real file.
    """
    files: List[FileInfo]
    next_file_name: Optional[str] = None
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ListFileNamesResponse':
        return cls(
            files=[FileInfo.from_dict(item) for item in data['files']],
            next_file_name=data.get('nextFileName'),
        )


@dataclass(frozen=True)
class ListFileVersionsResponse:
    """One page of b2_list_file_versions."""
    files: List[FileInfo]
    next_file_name: Optional[str] = None
    next_file_id: Optional[str] = None
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ListFileVersionsResponse':
        return cls(
            files=[FileInfo.from_dict(item) for item in data['files']],
            next_file_name=data.get('nextFileName'),
            next_file_id=data.get('nextFileId'),
        )


@dataclass(frozen=True)
class UploadFileResponse:
    """Confirmation returned by b2_upload_file."""
    file_id: str
    file_name: str
    account_id: str
    bucket_id: str
    content_sha1: str
    content_type: str
    action: str
    upload_timestamp: datetime
    content_length: int = 0
    file_info: Dict[str, str] = field(default_factory=dict)
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UploadFileResponse':
        return cls(
            file_id=data['fileId'],
            file_name=data['fileName'],
            account_id=data['accountId'],
            bucket_id=data['bucketId'],
            content_sha1=data['contentSha1'],
            content_type=data['contentType'],
            action=data['action'],
            upload_timestamp=from_millis(data['uploadTimestamp']),
            content_length=int(data.get('contentLength') or 0),
            file_info=dict(data.get('fileInfo') or {}),
        )


@dataclass(frozen=True)
class HideFileResponse:
    """Confirmation returned by b2_hide_file."""
    file_id: str
    file_name: str
    action: str
    upload_timestamp: datetime
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HideFileResponse':
        return cls(
            file_id=data['fileId'],
            file_name=data['fileName'],
            action=data['action'],
            upload_timestamp=from_millis(data['uploadTimestamp']),
        )


@dataclass(frozen=True)
class DeleteFileVersionResponse:
    """Confirmation returned by b2_delete_file_version."""
    file_id: str
    file_name: str
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DeleteFileVersionResponse':
        return cls(file_id=data['fileId'], file_name=data['fileName'])
