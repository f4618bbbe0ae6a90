"""
Bucket - per-bucket operations.

A Bucket is created by B2Client (create_bucket, list_buckets, get_bucket)
and shares that client's authorization state and HTTP session.
"""
from pathlib import Path
from typing import TYPE_CHECKING, AsyncIterator, Optional, Union
from urllib.parse import unquote, urlsplit
from urllib.request import url2pathname

from .core.constants import Endpoints, Headers
from .core.exceptions import URLConstructionError
from .core.logging import get_logger
from .core.models import (
    BucketData,
    BucketType,
    FileInfo,
    HideFileResponse,
    ListFileNamesRequest,
    ListFileNamesResponse,
    ListFileVersionsRequest,
    ListFileVersionsResponse,
    UploadFileResponse,
    decode,
)
from .core.utils import url_encode

if TYPE_CHECKING:
    from .client import B2Client


class Bucket:
    """
    A named B2 storage container.

    ``id`` and ``name`` never change; ``type`` follows the server's answer to
    ``set_type``. The owning B2Client must stay open for as long as the
    bucket is used.
    """

    def __init__(
        self,
        bucket_id: str,
        name: str,
        bucket_type: Union[BucketType, str],
        client: 'B2Client'
    ):
        self._id = bucket_id
        self._name = name
        self._type = (
            bucket_type if isinstance(bucket_type, BucketType)
            else BucketType.interpret(bucket_type)
        )
        self._client = client
        self._logger = get_logger('blazepy.bucket')

    @classmethod
    def from_data(cls, data: BucketData, client: 'B2Client') -> 'Bucket':
        return cls(data.bucket_id, data.bucket_name, data.bucket_type, client)

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def type(self) -> BucketType:
        return self._type

    @property
    def client(self) -> 'B2Client':
        return self._client

    def __str__(self) -> str:
        return f"{self._name}(id: {self._id}, type: {self._type.value})"

    def __repr__(self) -> str:
        return f"<Bucket {self}>"

    # Uploading files

    async def upload(
        self,
        data: bytes,
        path: str,
        content_type: Optional[str] = None,
        sha1: Optional[str] = None
    ) -> UploadFileResponse:
        """
        Upload raw data.

        Args:
            data: The data to upload
            path: The file name to upload to
            content_type: MIME type; B2 guesses from the name when omitted
            sha1: Hex SHA-1 of ``data``; calculated when omitted

        Returns:
            The response from B2
        """
        api_url, token = self._client._require_api()
        return await self._client.uploader.upload(
            api_url,
            token,
            self._id,
            data,
            path,
            content_type=content_type,
            sha1=sha1
        )

    async def upload_file(
        self,
        file_path: Union[str, Path],
        remote_name: Optional[str] = None,
        content_type: Optional[str] = None
    ) -> UploadFileResponse:
        """
        Upload a local file.

        Args:
            file_path: Local file path
            remote_name: Destination name, defaults to the local file name
            content_type: MIME type

        Raises:
            FileNotFoundError: If the file doesn't exist
            UploadFailedError: If ``file_path`` is a directory
        """
        self._client._require_api()
        path, data = await self._client.uploader.read_local(file_path)
        return await self.upload(data, remote_name or path.name, content_type=content_type)

    async def upload_url(
        self,
        url: str,
        remote_name: Optional[str] = None,
        content_type: Optional[str] = None
    ) -> UploadFileResponse:
        """
        Upload the resource behind a URL.

        ``file://`` URLs and plain paths are read from disk; any other URL is
        fetched with one GET and stored under its last path component.
        """
        self._client._require_api()
        parts = urlsplit(url)

        if parts.scheme in ('', 'file'):
            local = url2pathname(parts.path) if parts.scheme == 'file' else url
            return await self.upload_file(local, remote_name, content_type)

        name = remote_name or unquote(parts.path.rstrip('/').rsplit('/', 1)[-1])
        if not name:
            raise URLConstructionError(f"Cannot derive a file name from {url!r}")

        self._logger.debug(f"Fetching {url} for upload as {name}")
        data = await self._client.api.execute('GET', url)
        return await self.upload(data, name, content_type=content_type)

    # Bucket settings

    async def set_type(self, bucket_type: Union[BucketType, str]) -> BucketType:
        """
        Change the bucket type (b2_update_bucket).

        The stored type is taken from the server's reply, not from the
        requested value.

        Returns:
            The type the server reports
        """
        self._client._require_api()
        payload = await self._client._call(Endpoints.UPDATE_BUCKET, {
            'accountId': self._client.session.account_id,
            'bucketId': self._id,
            'bucketType': BucketType.require(bucket_type).value,
        })
        data = decode(BucketData.from_dict, payload)
        self._type = data.bucket_type
        self._logger.info(f"Bucket {self._name} is now {self._type.value}")
        return self._type

    # Files

    async def list_file_names(
        self,
        start_file_name: Optional[str] = None,
        max_file_count: Optional[int] = None,
        prefix: Optional[str] = None,
        delimiter: Optional[str] = None
    ) -> ListFileNamesResponse:
        """
        List one page of file names (b2_list_file_names).

        b2_list_file_names is a Class C transaction. Asking for more than
        1,000 files is billed as if the call were made once per 1,000.

        Args:
            start_file_name: First file name to return (inclusive)
            max_file_count: Page size; the server default is 100, maximum 10,000
            prefix: Only return names starting with this prefix
            delimiter: Break names into folders at this character

        Returns:
            A page of files; continue with ``next_file_name`` until it is None
        """
        request = ListFileNamesRequest(
            bucket_id=self._id,
            start_file_name=start_file_name,
            max_file_count=max_file_count,
            prefix=prefix,
            delimiter=delimiter,
        )
        payload = await self._client._call(Endpoints.LIST_FILE_NAMES, request.to_dict())
        return decode(ListFileNamesResponse.from_dict, payload)

    async def iter_file_names(
        self,
        prefix: Optional[str] = None,
        delimiter: Optional[str] = None,
        page_size: Optional[int] = None
    ) -> AsyncIterator[FileInfo]:
        """Yield every file by following ``next_file_name`` page by page."""
        start: Optional[str] = None
        while True:
            page = await self.list_file_names(
                start_file_name=start,
                max_file_count=page_size,
                prefix=prefix,
                delimiter=delimiter,
            )
            for item in page.files:
                yield item
            if page.next_file_name is None:
                return
            start = page.next_file_name

    async def list_file_versions(
        self,
        start_file_name: Optional[str] = None,
        start_file_id: Optional[str] = None,
        max_file_count: Optional[int] = None,
        prefix: Optional[str] = None,
        delimiter: Optional[str] = None
    ) -> ListFileVersionsResponse:
        """List one page of file versions (b2_list_file_versions)."""
        request = ListFileVersionsRequest(
            bucket_id=self._id,
            start_file_name=start_file_name,
            max_file_count=max_file_count,
            prefix=prefix,
            delimiter=delimiter,
            start_file_id=start_file_id,
        )
        payload = await self._client._call(Endpoints.LIST_FILE_VERSIONS, request.to_dict())
        return decode(ListFileVersionsResponse.from_dict, payload)

    async def hide_file(self, file_name: str) -> HideFileResponse:
        """Hide ``file_name`` in this bucket."""
        return await self._client.hide_file(file_name, self)

    async def download_file_by_name(self, file_name: str) -> bytes:
        """Download the latest version of ``file_name`` from this bucket."""
        download_url, token = self._client._require_download()
        url = f"{download_url.rstrip('/')}/file/{url_encode(self._name)}/{url_encode(file_name)}"
        return await self._client.api.execute(
            'GET',
            url,
            headers={Headers.AUTHORIZATION: token}
        )
