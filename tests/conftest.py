"""Pytest fixtures for blazepy tests."""
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

import pytest
from Crypto.Random import get_random_bytes

from blazepy import B2Client
from blazepy.core.api import AsyncAPIClient
from blazepy.core.session import SessionData


AUTH_PAYLOAD = {
    'accountId': 'a',
    'authorizationToken': 'tok',
    'apiUrl': 'https://api.example',
    'downloadUrl': 'https://dl.example',
    'recommendedPartSize': 100000000,
    'absoluteMinimumPartSize': 5000000,
}


@dataclass
class RecordedRequest:
    """One request seen by FakeSession."""
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    data: Optional[bytes] = None
    params: Optional[Dict[str, str]] = None
    
    def json(self) -> Any:
        return json.loads(self.data.decode('utf-8'))


class FakeResponse:
    """Stands in for aiohttp.ClientResponse inside ``async with``."""
    
    def __init__(self, status: int, body: bytes):
        self.status = status
        self._body = body
    
    async def read(self) -> bytes:
        return self._body
    
    async def __aenter__(self) -> 'FakeResponse':
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return False


class FakeSession:
    """
    Minimal aiohttp.ClientSession replacement.
    
    Responses are queued with ``reply``/``fail`` and served in order.
    """
    
    def __init__(self):
        self.requests: List[RecordedRequest] = []
        self._queue: List[Union[FakeResponse, Exception]] = []
        self.closed = False
    
    def reply(self, body: Union[Dict, List, bytes, str] = b'', status: int = 200) -> 'FakeSession':
        if isinstance(body, (dict, list)):
            body = json.dumps(body).encode('utf-8')
        elif isinstance(body, str):
            body = body.encode('utf-8')
        self._queue.append(FakeResponse(status, body))
        return self
    
    def fail(self, error: Exception) -> 'FakeSession':
        self._queue.append(error)
        return self
    
    def request(self, method, url, *, headers=None, data=None, params=None, proxy=None):
        self.requests.append(RecordedRequest(method, url, dict(headers or {}), data, params))
        if not self._queue:
            raise AssertionError(f"Unexpected request: {method} {url}")
        item = self._queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item
    
    async def close(self):
        self.closed = True


@pytest.fixture
def fake_session():
    """Returns an empty FakeSession."""
    return FakeSession()


@pytest.fixture
def api_client(fake_session):
    """Returns an AsyncAPIClient bound to the fake session."""
    return AsyncAPIClient(session=fake_session)


@pytest.fixture
def client(api_client):
    """Returns an unauthorized B2Client with credentials a/k."""
    return B2Client('a', 'k', api_client=api_client)


@pytest.fixture
def authorized_client(client):
    """Returns a B2Client already holding the AUTH_PAYLOAD session."""
    client._session = SessionData.from_dict(AUTH_PAYLOAD)
    return client


@pytest.fixture
def auth_payload():
    """Returns a b2_authorize_account response body."""
    return dict(AUTH_PAYLOAD)


@pytest.fixture
def payload():
    """Returns 1 KiB of random bytes."""
    return get_random_bytes(1024)


@pytest.fixture
def sample_file_data():
    """Returns one file entry as B2 lists it."""
    return {
        'accountId': 'a',
        'action': 'upload',
        'bucketId': 'b1',
        'contentLength': 11,
        'contentSha1': '2aae6c35c94fcfb415dbe95f408b9ce91ee846ed',
        'contentMd5': '5eb63bbbe01eeed093cb22bb8f5acdc3',
        'contentType': 'text/plain',
        'fileId': '4_z1_f1',
        'fileInfo': {'src_last_modified_millis': '1700000000000'},
        'fileName': 'docs/hello.txt',
        'uploadTimestamp': 1700000000000,
    }


@pytest.fixture
def sample_upload_response():
    """Returns a b2_upload_file response body."""
    return {
        'accountId': 'a',
        'action': 'upload',
        'bucketId': 'b1',
        'contentLength': 11,
        'contentSha1': '2aae6c35c94fcfb415dbe95f408b9ce91ee846ed',
        'contentType': 'text/plain',
        'fileId': '4_z1_f1',
        'fileInfo': {},
        'fileName': 'docs/hello.txt',
        'uploadTimestamp': 1700000000000,
    }
