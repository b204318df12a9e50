"""
Unit tests for S3Repository.
Uses moto to mock AWS S3 service.
"""
from unittest.mock import Mock
import pytest
from botocore.exceptions import ClientError, EndpointConnectionError, ReadTimeoutError
from src.repositories.s3_repository import S3Repository
from src.core.exceptions import S3Exception
from src.models.head_result import HeadStatus
from tests.conftest import TEST_BUCKET, read_object


def _client_error(code: str, operation: str) -> ClientError:
    return ClientError({'Error': {'Code': code, 'Message': 'boom'}}, operation)


class TestS3Repository:
    """Test suite for S3Repository."""
    
    def test_head_object_not_found(self, s3_client):
        """Test a missing key is reported as NOT_FOUND."""
        repo = S3Repository()
        
        result = repo.head_object(TEST_BUCKET, "missing-key")
        
        assert result.status == HeadStatus.NOT_FOUND
        assert result.detail is None
    
    def test_head_object_found(self, s3_client):
        """Test an existing key is reported as FOUND."""
        s3_client.put_object(Bucket=TEST_BUCKET, Key="existing", Body="value")
        repo = S3Repository()
        
        result = repo.head_object(TEST_BUCKET, "existing")
        
        assert result.status == HeadStatus.FOUND
    
    def test_head_object_access_denied_is_error(self):
        """Test non-404 client errors are reported as ERROR with detail."""
        client = Mock()
        client.head_object.side_effect = _client_error('403', 'HeadObject')
        repo = S3Repository(s3_client=client)
        
        result = repo.head_object(TEST_BUCKET, "key")
        
        assert result.status == HeadStatus.ERROR
        assert "403" in result.detail
    
    def test_head_object_no_such_key_code_is_not_found(self):
        """Test the NotFound error code spelling is also recognised."""
        client = Mock()
        client.head_object.side_effect = _client_error('NotFound', 'HeadObject')
        repo = S3Repository(s3_client=client)
        
        assert repo.head_object(TEST_BUCKET, "key").status == HeadStatus.NOT_FOUND
    
    def test_head_object_timeout_is_error(self):
        """Test network failures are reported as ERROR."""
        client = Mock()
        client.head_object.side_effect = ReadTimeoutError(endpoint_url="http://s3")
        repo = S3Repository(s3_client=client)
        
        result = repo.head_object(TEST_BUCKET, "key")
        
        assert result.status == HeadStatus.ERROR
    
    def test_put_object_success(self, s3_client):
        """Test successful write returns the S3 payload without metadata."""
        repo = S3Repository()
        
        result = repo.put_object(TEST_BUCKET, "k1", "v1")
        
        assert 'ETag' in result
        assert 'ResponseMetadata' not in result
        assert read_object(s3_client, "k1") == "v1"
    
    def test_put_object_missing_bucket(self, s3_client):
        """Test put_object raises S3Exception when the bucket does not exist."""
        repo = S3Repository()
        
        with pytest.raises(S3Exception) as exc_info:
            repo.put_object("no-such-bucket", "k1", "v1")
        assert "Failed to upload object to S3" in str(exc_info.value)
    
    def test_put_object_connection_error(self):
        """Test transport failures are wrapped in S3Exception."""
        client = Mock()
        client.put_object.side_effect = EndpointConnectionError(endpoint_url="http://s3")
        repo = S3Repository(s3_client=client)
        
        with pytest.raises(S3Exception) as exc_info:
            repo.put_object(TEST_BUCKET, "k1", "v1")
        assert "Unexpected error during S3 upload" in exc_info.value.message
    
    def test_client_uses_configured_timeout(self, aws_env):
        """Test the boto3 client is built with a single attempt and the configured timeout."""
        repo = S3Repository()
        
        client_config = repo.s3_client.meta.config
        assert client_config.read_timeout == aws_env.s3_timeout_seconds
        assert client_config.connect_timeout == aws_env.s3_timeout_seconds
