"""
S3 Repository for object storage operations.
Handles existence checks and writes of string objects in Amazon S3.
"""
from typing import Any, Dict
import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from src.core import config
from src.core.exceptions import S3Exception
from src.models.head_result import HeadResult
from src.repositories.object_storage import ObjectStorage


# HEAD responses carry no body, so S3 reports a missing key as a bare 404
NOT_FOUND_CODES = {"404", "NotFound", "NoSuchKey"}


class S3Repository(ObjectStorage):
    """Repository for S3 object operations."""
    
    def __init__(self, s3_client=None):
        self.s3_client = s3_client or self._create_client()
    
    def _create_client(self):
        """
        Build a boto3 S3 client from settings.
        
        Every call is a single attempt bounded by the configured timeout.
        """
        settings = config.settings
        client_config = Config(
            connect_timeout=settings.s3_timeout_seconds,
            read_timeout=settings.s3_timeout_seconds,
            retries={"total_max_attempts": 1},
        )
        return boto3.client(
            's3',
            region_name=settings.aws_region,
            aws_access_key_id=settings.aws_access_key_id or None,
            aws_secret_access_key=settings.aws_secret_access_key or None,
            endpoint_url=settings.s3_endpoint_url or None,
            use_ssl=settings.s3_use_ssl,
            config=client_config
        )
    
    def head_object(self, bucket_name: str, key: str) -> HeadResult:
        """
        Check whether an object exists in S3.
        
        Args:
            bucket_name: Target bucket
            key: S3 object key
            
        Returns:
            HeadResult: FOUND, NOT_FOUND, or ERROR with the failure detail
        """
        try:
            self.s3_client.head_object(Bucket=bucket_name, Key=key)
            return HeadResult.found()
        except ClientError as e:
            code = str(e.response.get('Error', {}).get('Code', ''))
            if code in NOT_FOUND_CODES:
                return HeadResult.not_found()
            return HeadResult.error(str(e))
        except BotoCoreError as e:
            return HeadResult.error(str(e))
    
    def put_object(self, bucket_name: str, key: str, body: str) -> Dict[str, Any]:
        """
        Write a string object to S3.
        
        Args:
            bucket_name: Target bucket
            key: S3 object key
            body: Object content
            
        Returns:
            dict: S3 response fields such as ETag, without transport metadata
            
        Raises:
            S3Exception: If the write fails
        """
        try:
            response = self.s3_client.put_object(Bucket=bucket_name, Key=key, Body=body)
        except ClientError as e:
            raise S3Exception(f"Failed to upload object to S3: {str(e)}") from e
        except BotoCoreError as e:
            raise S3Exception(f"Unexpected error during S3 upload: {str(e)}") from e
        
        return {k: v for k, v in response.items() if k != 'ResponseMetadata'}
    