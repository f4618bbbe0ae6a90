import base64
from datetime import datetime, timezone
from urllib.parse import quote

from Crypto.Hash import SHA1

from .exceptions import MalformedRequestError, URLEncodingError


def basic_auth_header(account_id: str, application_key: str) -> str:
    """Returns ``Basic base64(account_id:application_key)``."""
    try:
        raw = f"{account_id}:{application_key}".encode('utf-8')
    except UnicodeEncodeError as e:
        raise MalformedRequestError(f"Credentials are not UTF-8 encodable: {e}") from e
    return f"Basic {base64.b64encode(raw).decode('ascii')}"


def sha1_hex(data: bytes) -> str:
    """Lowercase 40-char hex SHA-1 of the whole buffer."""
    return SHA1.new(data).hexdigest()


def url_encode(value: str) -> str:
    """Percent-encodes a file name for B2 headers and URLs, keeping '/'."""
    try:
        return quote(value.encode('utf-8'), safe='/')
    except UnicodeEncodeError as e:
        raise URLEncodingError(f"Cannot encode {value!r}: {e}") from e


def from_millis(value: int) -> datetime:
    """Converts B2 epoch milliseconds to an aware UTC datetime."""
    return datetime.fromtimestamp(int(value) / 1000, tz=timezone.utc)
