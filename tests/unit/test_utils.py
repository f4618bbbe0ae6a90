"""Tests for wire helpers: auth header, SHA-1, percent-encoding, timestamps."""
import base64
import hashlib
from datetime import datetime, timezone

import pytest

from blazepy.core.exceptions import URLEncodingError
from blazepy.core.utils import basic_auth_header, from_millis, sha1_hex, url_encode


class TestBasicAuthHeader:
    """Test suite for basic_auth_header."""
    
    def test_known_value(self):
        """Test header for the a/k credential pair."""
        assert basic_auth_header('a', 'k') == 'Basic YTpr'
    
    @pytest.mark.parametrize('account_id,key', [
        ('000abc123', 'K000secretsecret'),
        ('id', ''),
        ('ü-account', 'kéy:with:colons'),
    ])
    def test_matches_base64_of_joined_credentials(self, account_id, key):
        """Test header equals 'Basic ' + base64(id:key)."""
        expected = base64.b64encode(f"{account_id}:{key}".encode('utf-8')).decode()
        
        assert basic_auth_header(account_id, key) == f"Basic {expected}"


class TestSha1Hex:
    """Test suite for sha1_hex."""
    
    def test_empty(self):
        assert sha1_hex(b'') == 'da39a3ee5e6b4b0d3255bfef95601890afd80709'
    
    def test_hello_world(self):
        assert sha1_hex(b'hello world') == '2aae6c35c94fcfb415dbe95f408b9ce91ee846ed'
    
    def test_matches_hashlib(self, payload):
        """Test digest is 40 lowercase hex chars equal to hashlib's."""
        digest = sha1_hex(payload)
        
        assert digest == hashlib.sha1(payload).hexdigest()
        assert len(digest) == 40
        assert digest == digest.lower()


class TestUrlEncode:
    """Test suite for url_encode."""
    
    def test_keeps_slashes(self):
        assert url_encode('photos/2024/a b.jpg') == 'photos/2024/a%20b.jpg'
    
    def test_encodes_utf8(self):
        assert url_encode('café.txt') == 'caf%C3%A9.txt'
    
    def test_plain_name_unchanged(self):
        assert url_encode('report-1.pdf') == 'report-1.pdf'
    
    def test_unencodable_raises(self):
        """Test a lone surrogate cannot be encoded."""
        with pytest.raises(URLEncodingError):
            url_encode('bad\udc80name')


class TestFromMillis:
    """Test suite for from_millis."""
    
    def test_converts_to_utc(self):
        result = from_millis(1700000000000)
        
        assert result == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)
    
    def test_zero_is_epoch(self):
        assert from_millis(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)
