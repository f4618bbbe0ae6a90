"""
Async B2 HTTP client.

Performs exactly one network round trip per call. There is no retry and no
batching; transport errors reach the caller unchanged.
"""
import json
import logging
from typing import Dict, Optional, Any
import aiohttp

from .config import APIConfig
from .errors import B2APIError
from ..constants import Headers
from ..exceptions import MalformedResponseError
from ..logging import get_logger


class AsyncAPIClient:
    """
    Asynchronous B2 HTTP helper.
    
    Features:
    - Full async/await support
    - Configurable proxy, SSL, timeouts
    - Optional externally owned aiohttp session
    
    Example:
        >>> async with AsyncAPIClient() as client:
        ...     body = await client.execute('GET', 'https://example.com')
    """
    
    def __init__(
        self,
        config: Optional[APIConfig] = None,
        session: Optional[aiohttp.ClientSession] = None
    ):
        """
        Initialize async API client.
        
        Args:
            config: API configuration (uses defaults if not provided)
            session: Shared aiohttp session; it is not closed by this client
        """
        self._config = config or APIConfig.default()
        self._session = session
        self._owns_session = session is None
        self._connector: Optional[aiohttp.TCPConnector] = None
        
        self._logger = get_logger('blazepy.api')
        # Leave the level alone once the application has configured logging
        if not logging.getLogger().handlers:
            self._logger.setLevel(self._config.log_level)
    
    @property
    def config(self) -> APIConfig:
        """Get current configuration."""
        return self._config
    
    async def __aenter__(self) -> 'AsyncAPIClient':
        await self._ensure_session()
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
    
    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created and open."""
        if self._session is None or (self._owns_session and self._session.closed):
            self._connector = aiohttp.TCPConnector(
                **self._config.get_connector_kwargs()
            )
            self._session = aiohttp.ClientSession(
                connector=self._connector,
                **self._config.get_session_kwargs()
            )
            self._owns_session = True
        return self._session
    
    async def close(self):
        """Close the HTTP session if this client created it."""
        if not self._owns_session:
            return
        
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None
        
        if self._connector and not self._connector.closed:
            await self._connector.close()
        self._connector = None
    
    async def execute(
        self,
        method: str,
        url: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        data: Optional[bytes] = None,
        params: Optional[Dict[str, str]] = None
    ) -> bytes:
        """
        Perform one HTTP round trip and return the raw response body.
        
        Args:
            method: HTTP method
            url: Absolute URL
            headers: Request headers
            data: Raw request body
            params: Query string parameters
            
        Returns:
            Response body bytes
            
        Raises:
            B2APIError: If the server answers with a non-2xx status
            aiohttp.ClientError: On transport failure, unchanged
        """
        session = await self._ensure_session()
        proxy = self._config.proxy.to_aiohttp_proxy() if self._config.proxy else None
        
        self._logger.debug(f"{method} {url}")
        
        try:
            async with session.request(
                method,
                url,
                headers=headers or {},
                data=data,
                params=params,
                proxy=proxy
            ) as response:
                body = await response.read()
                status = response.status
        except aiohttp.ClientError as e:
            self._logger.error(f"Network error on {method} {url}: {e}")
            raise
        
        self._logger.debug(f"{method} {url} -> {status} ({len(body)} bytes)")
        
        if status >= 400:
            error = B2APIError.from_body(status, body)
            self._logger.warning(f"B2 error on {method} {url}: {error}")
            raise error
        
        return body
    
    async def request_json(
        self,
        method: str,
        url: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        payload: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, str]] = None
    ) -> Dict[str, Any]:
        """
        Perform one round trip with an optional JSON body and parse the reply.
        
        Raises:
            MalformedResponseError: If the body is empty or not a JSON object
        """
        data = json.dumps(payload).encode('utf-8') if payload is not None else None
        if data is not None:
            headers = {'Content-Type': 'application/json', **(headers or {})}
        
        body = await self.execute(method, url, headers=headers, data=data, params=params)
        return self.parse_json(body)
    
    async def post_json(
        self,
        url: str,
        auth_token: str,
        payload: Dict[str, Any]
    ) -> Dict[str, Any]:
        """POST a JSON body with an account token and return the JSON reply."""
        return await self.request_json(
            'POST',
            url,
            headers={Headers.AUTHORIZATION: auth_token},
            payload=payload
        )
    
    def parse_json(self, body: bytes) -> Dict[str, Any]:
        """Parse a response body into a JSON object."""
        if not body:
            raise MalformedResponseError("The server responded with an empty body", body)
        
        try:
            data = json.loads(body.decode('utf-8'))
        except (UnicodeDecodeError, ValueError) as e:
            raise MalformedResponseError(f"Response is not valid JSON: {e}", body) from e
        
        if not isinstance(data, dict):
            raise MalformedResponseError(
                f"Expected a JSON object, got {type(data).__name__}", body
            )
        
        return data
