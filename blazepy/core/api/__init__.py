"""B2 API module: HTTP helper, authorization, configuration and errors."""
from .errors import B2APIError, APIErrorCodes
from .config import APIConfig, ProxyConfig, SSLConfig, TimeoutConfig
from .async_client import AsyncAPIClient
from .async_auth import AsyncAuthService

__all__ = [
    'AsyncAPIClient',
    'AsyncAuthService',
    
    # Configuration
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    
    # Errors
    'B2APIError',
    'APIErrorCodes',
]
