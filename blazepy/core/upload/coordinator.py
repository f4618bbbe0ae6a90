"""
Upload coordinator.

Runs the single-file upload pipeline:
prepare (b2_get_upload_url) -> hash -> encode file name -> POST -> decode.
"""
from pathlib import Path
from typing import Optional, Tuple, Union
from urllib.parse import urlsplit

from .models import UploadInfo
from .services import FileValidator, AsyncFileReader
from ..api.async_client import AsyncAPIClient
from ..constants import ContentTypes, Endpoints, Headers
from ..exceptions import URLConstructionError
from ..logging import get_logger
from ..models import UploadFileResponse, decode
from ..utils import sha1_hex, url_encode

logger = get_logger('blazepy.upload.coordinator')


class UploadCoordinator:
    """
    Coordinates one upload to a bucket.
    
    Upload URLs and tokens are single-use: a fresh pair is requested for
    every call and is never cached or retried.
    """
    
    def __init__(
        self,
        api_client: AsyncAPIClient,
        file_reader: Optional[AsyncFileReader] = None,
        validator: Optional[FileValidator] = None
    ):
        """
        Initialize upload coordinator.
        
        Args:
            api_client: HTTP helper used for both calls
            file_reader: File reader implementation
            validator: Local path validator
        """
        self._api = api_client
        self._file_reader = file_reader or AsyncFileReader()
        self._validator = validator or FileValidator()
    
    async def prepare(self, api_url: str, auth_token: str, bucket_id: str) -> UploadInfo:
        """
        Fetch an upload URL and upload token for ``bucket_id``.
        
        Raises:
            MalformedResponseError: If the reply lacks uploadUrl/authorizationToken
        """
        url = self._api.config.endpoint(api_url, Endpoints.GET_UPLOAD_URL)
        payload = await self._api.post_json(url, auth_token, {'bucketId': bucket_id})
        return decode(UploadInfo.from_dict, payload)
    
    async def upload(
        self,
        api_url: str,
        auth_token: str,
        bucket_id: str,
        data: bytes,
        file_name: str,
        content_type: Optional[str] = None,
        sha1: Optional[str] = None
    ) -> UploadFileResponse:
        """
        Upload an in-memory payload.
        
        Args:
            api_url: Account API base URL
            auth_token: Account authorization token
            bucket_id: Destination bucket id
            data: Complete payload
            file_name: Destination name inside the bucket
            content_type: MIME type, ``b2/x-auto`` when omitted
            sha1: Hex SHA-1 of ``data``; computed when omitted, used verbatim otherwise
            
        Returns:
            The decoded b2_upload_file confirmation
        """
        upload_info = await self.prepare(api_url, auth_token, bucket_id)
        
        resolved_sha1 = sha1 if sha1 is not None else sha1_hex(data)
        encoded_name = url_encode(file_name)
        self._check_upload_url(upload_info.upload_url)
        
        headers = {
            Headers.AUTHORIZATION: upload_info.authorization_token,
            Headers.FILE_NAME: encoded_name,
            Headers.CONTENT_TYPE: content_type or ContentTypes.AUTO,
            Headers.CONTENT_SHA1: resolved_sha1,
        }
        
        logger.debug(f"Uploading {file_name} ({len(data)} bytes, sha1={resolved_sha1})")
        body = await self._api.execute(
            'POST',
            upload_info.upload_url,
            headers=headers,
            data=data
        )
        
        result = decode(UploadFileResponse.from_dict, self._api.parse_json(body))
        logger.info(f"Uploaded {result.file_name} as {result.file_id}")
        return result
    
    async def read_local(
        self,
        file_path: Union[str, Path]
    ) -> Tuple[Path, bytes]:
        """
        Validate and read a local file for upload.
        
        Raises:
            FileNotFoundError: If the file doesn't exist
            UploadFailedError: If the path is a directory
        """
        path, size = self._validator.validate(file_path)
        logger.debug(f"Reading {path} ({size} bytes) for upload")
        return path, await self._file_reader.read_file(path)
    
    @staticmethod
    def _check_upload_url(upload_url: str) -> None:
        parts = urlsplit(upload_url)
        if parts.scheme not in ('http', 'https') or not parts.netloc:
            raise URLConstructionError(f"Invalid upload URL: {upload_url!r}")
