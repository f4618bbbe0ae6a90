"""
B2Client - High-level async client for Backblaze B2.

Example:
    >>> async with B2Client(key_id, key) as b2:
    ...     await b2.authorize()
    ...     for bucket in await b2.list_buckets():
    ...         print(bucket)
"""
import asyncio
from typing import Optional, List, Dict, Any, Tuple, Union

from .bucket import Bucket
from .core.api import AsyncAPIClient, AsyncAuthService, APIConfig
from .core.constants import Endpoints, Headers
from .core.exceptions import UnauthenticatedError
from .core.logging import get_logger
from .core.models import (
    BucketData,
    BucketType,
    DeleteFileVersionResponse,
    FileInfo,
    HideFileResponse,
    decode,
)
from .core.session import SessionData
from .core.upload import UploadCoordinator


class B2Client:
    """
    High-level async client for one B2 account.

    Holds the credentials and, after ``authorize()``, the account token and
    base URLs. Every other operation raises UnauthenticatedError without
    touching the network until authorization has succeeded.

    Buckets returned by this client keep a reference to it and can only be
    used while the client is open.

    Example:
        >>> async with B2Client("key_id", "key") as b2:
        ...     await b2.authorize()
        ...     bucket = await b2.get_bucket("photos")
        ...     await bucket.upload(b"hello", "hello.txt")
    """

    def __init__(
        self,
        account_id: str,
        application_key: str,
        *,
        config: Optional[APIConfig] = None,
        api_client: Optional[AsyncAPIClient] = None
    ):
        """
        Initialize B2 client.

        Args:
            account_id: Account id or application key id
            application_key: Application key secret
            config: Optional API configuration
            api_client: Optional preconfigured HTTP helper
        """
        self._account_id = account_id
        self._application_key = application_key
        self._api = api_client or AsyncAPIClient(config)
        self._owns_api = api_client is None
        self._auth = AsyncAuthService(self._api)
        self._uploader = UploadCoordinator(self._api)
        self._session: Optional[SessionData] = None
        self._auth_lock = asyncio.Lock()
        self._logger = get_logger('blazepy.client')

    def __repr__(self) -> str:
        state = "authorized" if self.is_authorized else "unauthorized"
        return f"<B2Client account_id={self._account_id!r} {state}>"

    @property
    def account_id(self) -> str:
        return self._account_id

    @property
    def application_key(self) -> str:
        return self._application_key

    @property
    def config(self) -> APIConfig:
        return self._api.config

    @property
    def api(self) -> AsyncAPIClient:
        """HTTP helper shared by this client and its buckets."""
        return self._api

    @property
    def uploader(self) -> UploadCoordinator:
        return self._uploader

    @property
    def session(self) -> Optional[SessionData]:
        """Authorization state, None until authorize() succeeds."""
        return self._session

    @property
    def is_authorized(self) -> bool:
        return self._session is not None and self._session.is_valid()

    @property
    def authorization_token(self) -> Optional[str]:
        return self._session.authorization_token if self._session else None

    @property
    def api_url(self) -> Optional[str]:
        return self._session.api_url if self._session else None

    @property
    def download_url(self) -> Optional[str]:
        return self._session.download_url if self._session else None

    @property
    def recommended_part_size(self) -> Optional[int]:
        return self._session.recommended_part_size if self._session else None

    @property
    def absolute_minimum_part_size(self) -> Optional[int]:
        return self._session.absolute_minimum_part_size if self._session else None

    async def __aenter__(self) -> 'B2Client':
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """
        Close the HTTP session. Buckets from this client become unusable.
        
        An ``api_client`` passed in by the caller is left open.
        """
        if self._owns_api:
            await self._api.close()

    # Authorization

    async def authorize(self, force: bool = False) -> SessionData:
        """
        Log in to B2 (b2_authorize_account).

        When a token is already held the cached state is returned without a
        network call. Tokens are valid for at most 24 hours and are never
        refreshed automatically; pass ``force=True`` (for example after a
        B2APIError with ``is_auth_expired``) to obtain a new one.

        Concurrent calls are serialized, so only one login request is made.

        Args:
            force: Re-authorize even if a token is cached

        Returns:
            The current SessionData
        """
        async with self._auth_lock:
            if self._session is not None and not force:
                self._logger.debug("Already authorized, reusing cached token")
                return self._session

            self._logger.info(f"Authorizing account {self._account_id}")
            session = await self._auth.authorize(self._account_id, self._application_key)
            self._session = session
            self._logger.info(f"Authorized, api_url={session.api_url}")
            return session

    def _require_api(self) -> Tuple[str, str]:
        """Returns (api_url, token) or raises UnauthenticatedError."""
        session = self._session
        if session is None or not session.api_url or not session.authorization_token:
            raise UnauthenticatedError()
        return session.api_url, session.authorization_token

    def _require_download(self) -> Tuple[str, str]:
        """Returns (download_url, token) or raises UnauthenticatedError."""
        session = self._session
        if session is None or not session.download_url or not session.authorization_token:
            raise UnauthenticatedError()
        return session.download_url, session.authorization_token

    async def _call(self, endpoint: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """POST ``payload`` to an account-level API endpoint."""
        api_url, token = self._require_api()
        url = self.config.endpoint(api_url, endpoint)
        return await self._api.post_json(url, token, payload)

    # Buckets

    async def create_bucket(
        self,
        name: str,
        bucket_type: BucketType = BucketType.ALL_PRIVATE
    ) -> Bucket:
        """
        Create a bucket (b2_create_bucket).

        Args:
            name: Globally unique bucket name
            bucket_type: Initial visibility

        Returns:
            The new Bucket
        """
        self._require_api()
        payload = await self._call(Endpoints.CREATE_BUCKET, {
            'accountId': self._session.account_id,
            'bucketName': name,
            'bucketType': BucketType.require(bucket_type).value,
        })
        data = decode(BucketData.from_dict, payload)
        self._logger.info(f"Created bucket {data.bucket_name} ({data.bucket_id})")
        return Bucket.from_data(data, self)

    async def list_buckets(
        self,
        bucket_id: Optional[str] = None,
        bucket_name: Optional[str] = None
    ) -> List[Bucket]:
        """
        List buckets on the account (b2_list_buckets).

        Args:
            bucket_id: Restrict the result to this bucket id
            bucket_name: Restrict the result to this bucket name

        Returns:
            Buckets in the order the server listed them
        """
        self._require_api()
        body: Dict[str, Any] = {'accountId': self._session.account_id}
        if bucket_id is not None:
            body['bucketId'] = bucket_id
        if bucket_name is not None:
            body['bucketName'] = bucket_name

        payload = await self._call(Endpoints.LIST_BUCKETS, body)
        buckets = decode(
            lambda data: [BucketData.from_dict(item) for item in data['buckets']],
            payload
        )
        return [Bucket.from_data(data, self) for data in buckets]

    async def get_bucket(self, name: str) -> Optional[Bucket]:
        """
        Find a bucket by exact name.

        Lists every bucket and scans client-side; the first case-exact match
        in listing order wins.

        Returns:
            The Bucket, or None if no bucket has that name
        """
        for bucket in await self.list_buckets():
            if bucket.name == name:
                return bucket
        return None

    # Files

    async def download_file(self, file_id: str) -> bytes:
        """
        Download one file version by id (b2_download_file_by_id).

        Returns:
            The raw file contents
        """
        download_url, token = self._require_download()
        url = self.config.endpoint(download_url, Endpoints.DOWNLOAD_FILE_BY_ID)
        return await self._api.execute(
            'GET',
            url,
            headers={Headers.AUTHORIZATION: token},
            params={'fileId': file_id}
        )

    async def hide_file(
        self,
        file_name: str,
        bucket: Union[Bucket, str]
    ) -> HideFileResponse:
        """
        Hide a file (b2_hide_file).

        Downloading or listing by name no longer finds the file; previous
        versions stay stored.

        Args:
            file_name: Name of the file to hide
            bucket: Bucket or bucket id holding the file
        """
        bucket_id = bucket.id if isinstance(bucket, Bucket) else bucket
        payload = await self._call(Endpoints.HIDE_FILE, {
            'bucketId': bucket_id,
            'fileName': file_name,
        })
        return decode(HideFileResponse.from_dict, payload)

    async def get_file_info(self, file_id: str) -> FileInfo:
        """Fetch metadata of one file version (b2_get_file_info)."""
        payload = await self._call(Endpoints.GET_FILE_INFO, {'fileId': file_id})
        return decode(FileInfo.from_dict, payload)

    async def delete_file_version(
        self,
        file_name: str,
        file_id: str
    ) -> DeleteFileVersionResponse:
        """Permanently delete one file version (b2_delete_file_version)."""
        payload = await self._call(Endpoints.DELETE_FILE_VERSION, {
            'fileName': file_name,
            'fileId': file_id,
        })
        result = decode(DeleteFileVersionResponse.from_dict, payload)
        self._logger.info(f"Deleted {result.file_name} ({result.file_id})")
        return result
