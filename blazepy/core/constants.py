"""B2 wire constants: header names, content types and endpoint names."""


class Headers:
    """HTTP header names used by the B2 API."""
    AUTHORIZATION = 'Authorization'
    CONTENT_TYPE = 'Content-Type'
    CONTENT_SHA1 = 'X-Bz-Content-Sha1'
    FILE_NAME = 'X-Bz-File-Name'


class ContentTypes:
    """Content types with special meaning to B2."""
    # B2 picks the type from the file name extension
    AUTO = 'b2/x-auto'
    HIDE_MARKER = 'application/x-bz-hide-marker'


class Endpoints:
    """Endpoint names under ``/b2api/<version>/``."""
    AUTHORIZE_ACCOUNT = 'b2_authorize_account'
    CREATE_BUCKET = 'b2_create_bucket'
    LIST_BUCKETS = 'b2_list_buckets'
    UPDATE_BUCKET = 'b2_update_bucket'
    GET_UPLOAD_URL = 'b2_get_upload_url'
    LIST_FILE_NAMES = 'b2_list_file_names'
    LIST_FILE_VERSIONS = 'b2_list_file_versions'
    GET_FILE_INFO = 'b2_get_file_info'
    HIDE_FILE = 'b2_hide_file'
    DELETE_FILE_VERSION = 'b2_delete_file_version'
    DOWNLOAD_FILE_BY_ID = 'b2_download_file_by_id'
