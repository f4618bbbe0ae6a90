"""Tests for request/response models and session data."""
import json
from datetime import datetime, timedelta, timezone

import pytest

from blazepy.core.exceptions import MalformedResponseError
from blazepy.core.models import (
    BucketData,
    BucketType,
    DeleteFileVersionResponse,
    FileInfo,
    HideFileResponse,
    ListFileNamesRequest,
    ListFileNamesResponse,
    ListFileVersionsRequest,
    ListFileVersionsResponse,
    UploadFileResponse,
    decode,
)
from blazepy.core.session import KeyCapability, SessionData
from blazepy.core.upload import UploadInfo


class TestBucketType:
    """Tests for BucketType."""
    
    @pytest.mark.parametrize('raw,expected', [
        ('allPublic', BucketType.ALL_PUBLIC),
        ('allPrivate', BucketType.ALL_PRIVATE),
        ('share', BucketType.SHARE),
        ('snapshot', BucketType.SNAPSHOT),
    ])
    def test_known_values(self, raw, expected):
        assert BucketType.interpret(raw) is expected
    
    def test_unknown_defaults_to_public(self):
        """Test unrecognized strings map to allPublic."""
        assert BucketType.interpret('restricted') is BucketType.ALL_PUBLIC
    
    def test_bucket_data_from_dict(self):
        data = BucketData.from_dict({
            'bucketId': 'b1',
            'bucketName': 'photos',
            'bucketType': 'allPrivate',
            'accountId': 'a',
        })
        
        assert data.bucket_id == 'b1'
        assert data.bucket_name == 'photos'
        assert data.bucket_type is BucketType.ALL_PRIVATE


class TestListFileNamesRequest:
    """Tests for ListFileNamesRequest wire encoding."""
    
    def test_absent_fields_omitted(self):
        """Test only bucketId is sent when all optional fields are None."""
        request = ListFileNamesRequest(bucket_id='b1')
        
        assert request.to_dict() == {'bucketId': 'b1'}
    
    def test_all_fields(self):
        request = ListFileNamesRequest(
            bucket_id='b1',
            start_file_name='a.txt',
            max_file_count=1000,
            prefix='docs/',
            delimiter='/',
        )
        
        assert request.to_dict() == {
            'bucketId': 'b1',
            'startFileName': 'a.txt',
            'maxFileCount': 1000,
            'prefix': 'docs/',
            'delimiter': '/',
        }
    
    def test_versions_request_adds_start_file_id(self):
        request = ListFileVersionsRequest(bucket_id='b1', start_file_id='f1')
        
        assert request.to_dict() == {'bucketId': 'b1', 'startFileId': 'f1'}


class TestListFileNamesResponse:
    """Tests for ListFileNamesResponse decoding."""
    
    def test_fixture_without_next_file_name(self, sample_file_data):
        """Test request with no options and a fixture page round trip."""
        body = json.dumps(ListFileNamesRequest(bucket_id='b1').to_dict())
        assert json.loads(body) == {'bucketId': 'b1'}
        
        fixture = {'files': [sample_file_data, dict(sample_file_data, fileName='b.txt')]}
        response = decode(ListFileNamesResponse.from_dict, fixture)
        
        assert len(response.files) == len(fixture['files'])
        assert response.next_file_name is None
    
    def test_next_file_name(self, sample_file_data):
        response = ListFileNamesResponse.from_dict({
            'files': [sample_file_data],
            'nextFileName': 'docs/hello.txt\x00',
        })
        
        assert response.next_file_name == 'docs/hello.txt\x00'
    
    def test_missing_files_is_malformed(self):
        with pytest.raises(MalformedResponseError):
            decode(ListFileNamesResponse.from_dict, {'nextFileName': None})
    
    def test_versions_response(self, sample_file_data):
        response = ListFileVersionsResponse.from_dict({
            'files': [sample_file_data],
            'nextFileName': 'z',
            'nextFileId': 'f9',
        })
        
        assert response.next_file_id == 'f9'
        assert response.files[0].file_id == '4_z1_f1'


class TestFileInfo:
    """Tests for FileInfo."""
    
    def test_from_dict(self, sample_file_data):
        info = FileInfo.from_dict(sample_file_data)
        
        assert info.file_name == 'docs/hello.txt'
        assert info.content_length == 11
        assert info.content_sha1 == '2aae6c35c94fcfb415dbe95f408b9ce91ee846ed'
        assert info.upload_timestamp == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)
        assert info.file_info == {'src_last_modified_millis': '1700000000000'}
        assert not info.is_folder
    
    def test_folder_entry(self):
        """Test folder entries carry nulls and a zero timestamp."""
        info = FileInfo.from_dict({
            'accountId': 'a',
            'action': 'folder',
            'bucketId': 'b1',
            'contentLength': 0,
            'contentSha1': None,
            'contentType': None,
            'fileId': None,
            'fileInfo': {},
            'fileName': 'docs/',
            'uploadTimestamp': 0,
        })
        
        assert info.is_folder
        assert info.file_id is None
        assert info.upload_timestamp.year == 1970
    
    def test_hide_marker(self, sample_file_data):
        info = FileInfo.from_dict(dict(sample_file_data, action='hide', contentLength=0))
        
        assert info.is_hidden


class TestConfirmations:
    """Tests for upload/hide/delete confirmations."""
    
    def test_upload_response(self, sample_upload_response):
        result = UploadFileResponse.from_dict(sample_upload_response)
        
        assert result.file_id == '4_z1_f1'
        assert result.bucket_id == 'b1'
        assert result.content_length == 11
        assert result.upload_timestamp.tzinfo is timezone.utc
    
    def test_upload_response_missing_sha1(self, sample_upload_response):
        del sample_upload_response['contentSha1']
        
        with pytest.raises(MalformedResponseError):
            decode(UploadFileResponse.from_dict, sample_upload_response)
    
    def test_hide_response(self):
        result = HideFileResponse.from_dict({
            'fileId': 'f2',
            'fileName': 'a.txt',
            'action': 'hide',
            'uploadTimestamp': 1700000000000,
        })
        
        assert result.action == 'hide'
        assert result.upload_timestamp.year == 2023
    
    def test_delete_response(self):
        result = DeleteFileVersionResponse.from_dict({'fileId': 'f2', 'fileName': 'a.txt'})
        
        assert result.file_id == 'f2'


class TestDecode:
    """Tests for decode()."""
    
    def test_non_object_is_malformed(self):
        with pytest.raises(MalformedResponseError):
            decode(HideFileResponse.from_dict, ['not', 'an', 'object'])
    
    def test_bad_timestamp_is_malformed(self):
        with pytest.raises(MalformedResponseError):
            decode(HideFileResponse.from_dict, {
                'fileId': 'f2',
                'fileName': 'a.txt',
                'action': 'hide',
                'uploadTimestamp': 'yesterday',
            })
    
    @pytest.mark.parametrize('timestamp', [10 ** 20, -(10 ** 20)])
    def test_out_of_range_timestamp_is_malformed(self, timestamp):
        with pytest.raises(MalformedResponseError):
            decode(HideFileResponse.from_dict, {
                'fileId': 'f2',
                'fileName': 'a.txt',
                'action': 'hide',
                'uploadTimestamp': timestamp,
            })
    
    def test_upload_info(self):
        info = decode(UploadInfo.from_dict, {
            'bucketId': 'b1',
            'uploadUrl': 'https://pod.example/upload',
            'authorizationToken': 'up-tok',
        })
        
        assert info.upload_url == 'https://pod.example/upload'
        assert 'up-tok' not in repr(info)
    
    def test_upload_info_missing_token(self):
        with pytest.raises(MalformedResponseError):
            decode(UploadInfo.from_dict, {'uploadUrl': 'https://pod.example/upload'})


class TestSessionData:
    """Tests for SessionData."""
    
    def test_from_dict(self, auth_payload):
        data = SessionData.from_dict(auth_payload)
        
        assert data.account_id == 'a'
        assert data.authorization_token == 'tok'
        assert data.api_url == 'https://api.example'
        assert data.download_url == 'https://dl.example'
        assert data.recommended_part_size == 100000000
        assert data.absolute_minimum_part_size == 5000000
        assert data.allowed is None
        assert data.is_valid() is True
    
    def test_allowed_capabilities(self, auth_payload):
        auth_payload['allowed'] = {
            'capabilities': ['listBuckets', 'writeFiles', 'readBucketLogging'],
            'bucketId': None,
            'namePrefix': None,
        }
        
        data = SessionData.from_dict(auth_payload)
        
        assert data.allowed.allows(KeyCapability.LIST_BUCKETS)
        assert data.allowed.allows(KeyCapability.WRITE_FILES)
        assert not data.allowed.allows(KeyCapability.DELETE_FILES)
        assert 'readBucketLogging' in data.allowed.capabilities
    
    def test_expiry(self, auth_payload):
        data = SessionData.from_dict(auth_payload)
        
        assert data.is_expired() is False
        assert data.is_expired(data.authorized_at + timedelta(hours=24)) is True
    
    def test_missing_token_is_malformed(self, auth_payload):
        del auth_payload['authorizationToken']
        
        with pytest.raises(MalformedResponseError):
            decode(SessionData.from_dict, auth_payload)
    
    @pytest.mark.parametrize('key', ['authorizationToken', 'apiUrl', 'downloadUrl', 'accountId'])
    def test_null_field_is_malformed(self, auth_payload, key):
        """Test a JSON null is rejected rather than stored as text."""
        auth_payload[key] = None
        
        with pytest.raises(MalformedResponseError):
            decode(SessionData.from_dict, auth_payload)
    
    def test_empty_token_is_malformed(self, auth_payload):
        auth_payload['authorizationToken'] = ''
        
        with pytest.raises(MalformedResponseError):
            decode(SessionData.from_dict, auth_payload)
