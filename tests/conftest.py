"""
Shared test fixtures and utilities.
"""
import os
import pytest
import boto3
from moto import mock_aws

TEST_BUCKET = "test-bucket"


@pytest.fixture
def aws_env():
    """Set mock AWS credentials and a default bucket, then reload settings."""
    os.environ['AWS_ACCESS_KEY_ID'] = 'testing'
    os.environ['AWS_SECRET_ACCESS_KEY'] = 'testing'
    os.environ['AWS_SECURITY_TOKEN'] = 'testing'
    os.environ['AWS_SESSION_TOKEN'] = 'testing'
    os.environ['AWS_REGION'] = 'us-east-1'
    os.environ['AWS_DEFAULT_BUCKET_NAME'] = TEST_BUCKET
    
    from src.core import config, dependencies
    config.settings = config.Settings()
    dependencies.clear_caches()
    
    yield config.settings
    
    if 'AWS_DEFAULT_BUCKET_NAME' in os.environ:
        del os.environ['AWS_DEFAULT_BUCKET_NAME']
    dependencies.clear_caches()


@pytest.fixture
def s3_client(aws_env):
    """Mocked S3 client with an empty test bucket."""
    with mock_aws():
        s3 = boto3.client('s3', region_name='us-east-1')
        s3.create_bucket(Bucket=TEST_BUCKET)
        yield s3


def read_object(s3_client, key: str, bucket: str = TEST_BUCKET) -> str:
    """Read an object body back as text."""
    return s3_client.get_object(Bucket=bucket, Key=key)['Body'].read().decode('utf-8')
