"""Object storage backends for listings."""

from .clients import S3ClientConfig, S3ClientManager
from .s3_store import S3Store

__all__ = ["S3ClientConfig", "S3ClientManager", "S3Store"]
