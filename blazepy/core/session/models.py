"""
Session data models.

Contains the authorization state produced by b2_authorize_account.
"""
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Union


# B2 account tokens are valid for at most 24 hours; nothing refreshes them
# automatically, see B2Client.authorize(force=True).
TOKEN_LIFETIME = timedelta(hours=24)


class KeyCapability(str, Enum):
    """Capabilities an application key may carry."""
    LIST_KEYS = 'listKeys'
    WRITE_KEYS = 'writeKeys'
    DELETE_KEYS = 'deleteKeys'
    LIST_BUCKETS = 'listBuckets'
    WRITE_BUCKETS = 'writeBuckets'
    DELETE_BUCKETS = 'deleteBuckets'
    LIST_FILES = 'listFiles'
    READ_FILES = 'readFiles'
    SHARE_FILES = 'shareFiles'
    WRITE_FILES = 'writeFiles'
    DELETE_FILES = 'deleteFiles'


@dataclass(frozen=True)
class KeyRestrictions:
    """
    The ``allowed`` block of an authorization result.
    
    Capabilities B2 adds later are kept as plain strings.
    """
    capabilities: List[Union[KeyCapability, str]] = field(default_factory=list)
    bucket_id: Optional[str] = None
    bucket_name: Optional[str] = None
    name_prefix: Optional[str] = None
    
    def allows(self, capability: Union[KeyCapability, str]) -> bool:
        return capability in self.capabilities
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'KeyRestrictions':
        capabilities: List[Union[KeyCapability, str]] = []
        for raw in data.get('capabilities') or []:
            try:
                capabilities.append(KeyCapability(raw))
            except ValueError:
                capabilities.append(raw)
        return cls(
            capabilities=capabilities,
            bucket_id=data.get('bucketId'),
            bucket_name=data.get('bucketName'),
            name_prefix=data.get('namePrefix'),
        )


@dataclass(frozen=True)
class SessionData:
    """
    Authorization state of a B2 account.
    
    Written once by a successful authorize and read-only afterwards.
    
    Attributes:
        account_id: Account the token belongs to
        authorization_token: Account-level token for every other call
        api_url: Base URL for all API calls except upload/download
        download_url: Base URL for downloads
        recommended_part_size: Optimal large-file part size in bytes
        absolute_minimum_part_size: Smallest allowed part size in bytes
        allowed: Key restrictions, when the server reports them
        authorized_at: When the token was obtained
    """
    account_id: str
    authorization_token: str
    api_url: str
    download_url: str
    recommended_part_size: int
    absolute_minimum_part_size: int
    allowed: Optional[KeyRestrictions] = None
    authorized_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SessionData':
        """
        Create from a b2_authorize_account response body.
        
        Args:
            data: Decoded JSON object
            
        Returns:
            SessionData instance
        """
        for key in ('accountId', 'authorizationToken', 'apiUrl', 'downloadUrl'):
            if not isinstance(data[key], str) or not data[key]:
                raise TypeError(f"{key} must be a non-empty string")
        
        allowed = data.get('allowed')
        return cls(
            account_id=data['accountId'],
            authorization_token=data['authorizationToken'],
            api_url=data['apiUrl'],
            download_url=data['downloadUrl'],
            recommended_part_size=int(data['recommendedPartSize']),
            absolute_minimum_part_size=int(data['absoluteMinimumPartSize']),
            allowed=KeyRestrictions.from_dict(allowed) if isinstance(allowed, dict) else None,
        )
    
    @property
    def expires_at(self) -> datetime:
        return self.authorized_at + TOKEN_LIFETIME
    
    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """True once the nominal 24 hour token lifetime has passed."""
        return (now or datetime.now(timezone.utc)) >= self.expires_at
    
    def is_valid(self) -> bool:
        """
        Check if session data is usable.
        
        Returns:
            True if token and both base URLs are present
        """
        return bool(self.authorization_token and self.api_url and self.download_url)
