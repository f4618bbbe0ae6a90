"""Bucket data models."""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union

from ..exceptions import MalformedRequestError


class BucketType(str, Enum):
    """Bucket visibility as B2 names it on the wire."""
    ALL_PUBLIC = 'allPublic'
    ALL_PRIVATE = 'allPrivate'
    SHARE = 'share'
    SNAPSHOT = 'snapshot'
    
    @classmethod
    def interpret(cls, value: str) -> 'BucketType':
        """Maps a wire string onto the enum; unknown values become ALL_PUBLIC."""
        try:
            return cls(value)
        except ValueError:
            return cls.ALL_PUBLIC
    
    @classmethod
    def require(cls, value: Union['BucketType', str]) -> 'BucketType':
        """Validates a caller-supplied type before it is sent."""
        try:
            return cls(value)
        except ValueError:
            raise MalformedRequestError(f"Unknown bucket type: {value!r}") from None


@dataclass(frozen=True)
class BucketData:
    """Bucket record as returned by create/list/update bucket calls."""
    bucket_id: str
    bucket_name: str
    bucket_type: BucketType
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BucketData':
        bucket_id = data['bucketId']
        bucket_name = data['bucketName']
        if not isinstance(bucket_id, str) or not isinstance(bucket_name, str):
            raise TypeError("bucketId and bucketName must be strings")
        return cls(
            bucket_id=bucket_id,
            bucket_name=bucket_name,
            bucket_type=BucketType.interpret(str(data['bucketType']))
        )
