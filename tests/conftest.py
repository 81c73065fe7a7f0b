"""Test configuration and fixtures for kv-browse."""

import boto3
import pytest
from moto import mock_aws

from kv_browse.index import InMemoryStore
from kv_browse.objectstorage import S3ClientConfig


@pytest.fixture
def memory_store():
    """Store holding a small tree of files."""
    store = InMemoryStore()
    store.put("a/b.txt", {"length": 10, "type": "text/plain"})
    store.put("a/c/d.txt", {"length": 20, "type": "text/plain"})
    return store


@pytest.fixture
def aws_credentials(monkeypatch):
    """Keep boto3 away from real credentials."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "test_key")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "test_secret")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


@pytest.fixture
def s3_client(aws_credentials):
    """Mocked S3 client with an empty test bucket."""
    with mock_aws():
        client = boto3.client("s3", region_name="us-east-1")
        client.create_bucket(Bucket="test-bucket")
        yield client


@pytest.fixture
def s3_config():
    """Client configuration matching the mocked credentials."""
    return S3ClientConfig(
        access_key_id="test_key",
        secret_access_key="test_secret",
        region_name="us-east-1",
    )
