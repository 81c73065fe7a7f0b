"""Storage configuration schemas for kv-browse."""

from typing import Literal, Optional, Union

from pydantic import BaseModel, Field

from kv_browse.index import InMemoryStore
from kv_browse.objectstorage import S3ClientConfig, S3Store
from kv_browse.transport import InflightTracker


class MemoryStorageConfig(BaseModel):
    """Configuration for an in-process store."""
    type: Literal["memory"] = "memory"


class S3StorageConfig(BaseModel):
    """Configuration for S3 object storage."""
    type: Literal["s3"] = "s3"
    bucket: str = Field(..., description="Bucket holding the objects")
    access_key_id: str | None = Field(default=None, description="AWS access key ID")
    secret_access_key: str | None = Field(
        default=None, description="AWS secret access key"
    )
    session_token: str | None = Field(default=None, description="AWS session token")
    region_name: str | None = Field(default=None, description="AWS region")
    endpoint_url: str | None = Field(default=None, description="Custom S3 endpoint URL")
    aws_profile: str | None = Field(default=None, description="AWS profile name")

    def to_client_config(self) -> S3ClientConfig:
        return S3ClientConfig(
            access_key_id=self.access_key_id,
            secret_access_key=self.secret_access_key,
            session_token=self.session_token,
            region_name=self.region_name or "us-east-1",
            endpoint_url=self.endpoint_url,
            aws_profile=self.aws_profile,
        )


# Discriminated union for storage configurations
StorageConfig = Union[MemoryStorageConfig, S3StorageConfig]


def open_store(
    config: StorageConfig, tracker: Optional[InflightTracker] = None
) -> Union[InMemoryStore, S3Store]:
    """Create the store described by ``config``."""
    if isinstance(config, S3StorageConfig):
        return S3Store(config.bucket, config.to_client_config(), tracker=tracker)
    return InMemoryStore()
