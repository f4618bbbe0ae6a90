"""Data models for the upload module."""
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class UploadInfo:
    """
    Single-use upload target from b2_get_upload_url.
    
    Fetched fresh for every upload and never handed to callers.
    """
    upload_url: str
    authorization_token: str
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UploadInfo':
        upload_url = data['uploadUrl']
        token = data['authorizationToken']
        if not isinstance(upload_url, str) or not isinstance(token, str):
            raise TypeError("uploadUrl and authorizationToken must be strings")
        return cls(upload_url=upload_url, authorization_token=token)
    
    def __repr__(self) -> str:
        return f"UploadInfo(upload_url={self.upload_url!r}, authorization_token='***')"
