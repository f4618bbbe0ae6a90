"""
Async authentication service.

Exchanges an application key for an account authorization token.
"""
from .async_client import AsyncAPIClient
from ..constants import Endpoints, Headers
from ..models import decode
from ..session import SessionData
from ..utils import basic_auth_header


class AsyncAuthService:
    """Performs b2_authorize_account."""
    
    def __init__(self, client: AsyncAPIClient):
        """
        Initialize auth service.
        
        Args:
            client: Async API client
        """
        self._client = client
    
    async def authorize(self, account_id: str, application_key: str) -> SessionData:
        """
        Log in to B2.
        
        Args:
            account_id: Account id or application key id
            application_key: Application key secret
            
        Returns:
            SessionData with token, base URLs and part sizes
            
        Raises:
            MalformedRequestError: If the credentials cannot be encoded
            MalformedResponseError: If the reply has an unexpected shape
            B2APIError: If B2 rejects the credentials
        """
        config = self._client.config
        url = config.endpoint(config.auth_url, Endpoints.AUTHORIZE_ACCOUNT)
        headers = {Headers.AUTHORIZATION: basic_auth_header(account_id, application_key)}
        
        payload = await self._client.request_json('GET', url, headers=headers)
        return decode(SessionData.from_dict, payload)
