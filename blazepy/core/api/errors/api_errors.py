"""B2 API error codes and exceptions."""
import json
from typing import Dict, Optional

from ...exceptions import B2Exception


class APIErrorCodes:
    """Error codes B2 returns in the JSON body of failed calls."""
    
    ERROR_CODES: Dict[str, str] = {
        'bad_request': 'The request had the wrong fields or illegal values.',
        'bad_auth_token': 'The auth token used is not valid.',
        'expired_auth_token': 'The auth token used has expired. Call b2_authorize_account again.',
        'unauthorized': 'The application key is not valid or lacks the needed capability.',
        'unsupported': 'The account or key does not support this operation.',
        'bad_bucket_id': 'The requested bucket ID does not match an existing bucket.',
        'duplicate_bucket_name': 'A bucket with this name already exists.',
        'too_many_buckets': 'The account has reached its bucket limit.',
        'file_not_present': 'The file does not exist.',
        'not_found': 'The requested resource was not found.',
        'cap_exceeded': 'Usage cap exceeded.',
        'transaction_cap_exceeded': 'Transaction cap exceeded.',
        'download_cap_exceeded': 'Download cap exceeded.',
        'storage_cap_exceeded': 'Storage cap exceeded.',
        'access_denied': 'Access to the resource is denied.',
        'too_many_requests': 'Too many requests; slow down.',
        'request_timeout': 'The service timed out reading the uploaded file.',
        'service_unavailable': 'The service is temporarily unavailable.',
        'internal_error': 'An internal error occurred on the B2 side.',
    }
    
    @classmethod
    def get_message(cls, code: str) -> str:
        """Gets error message for error code."""
        return cls.ERROR_CODES.get(code, f"Unknown error: {code}")


class B2APIError(B2Exception):
    """Exception raised when B2 answers with a non-2xx status."""
    
    def __init__(self, status: int, code: str, message: Optional[str] = None):
        self.status = status
        self.code = code
        self.message = message or APIErrorCodes.get_message(code)
        super().__init__(f"{status} {code}: {self.message}", code)
    
    @classmethod
    def from_body(cls, status: int, body: bytes) -> 'B2APIError':
        """
        Build the error from a failed response body.
        
        B2 error bodies look like ``{"status": 401, "code": "...",
        "message": "..."}``. Anything else is reported with the raw text.
        """
        try:
            data = json.loads(body.decode('utf-8'))
        except (UnicodeDecodeError, ValueError):
            data = None
        
        if isinstance(data, dict) and 'code' in data:
            body_status = data.get('status')
            if isinstance(body_status, bool) or not isinstance(body_status, int):
                body_status = status
            return cls(
                status=body_status,
                code=str(data['code']),
                message=data.get('message') or None
            )
        
        text = body.decode('utf-8', errors='replace').strip()
        return cls(status=status, code='http_error', message=text or f"HTTP {status}")
    
    @property
    def is_auth_expired(self) -> bool:
        """True when the account token needs a forced re-authorize."""
        return self.code in ('expired_auth_token', 'bad_auth_token')
