"""
Dependency injection container for FastAPI.
Provides singleton-like behavior for services and repositories.
"""
from functools import lru_cache
from src.repositories.object_storage import ObjectStorage
from src.repositories.s3_repository import S3Repository
from src.services.validation_service import ValidationService
from src.services.upload_service import UploadService
from src.services.batch_upload_service import BatchUploadService


@lru_cache()
def get_s3_repository() -> ObjectStorage:
    """Get S3Repository singleton instance."""
    return S3Repository()


@lru_cache()
def get_validation_service() -> ValidationService:
    """Get ValidationService singleton instance."""
    return ValidationService(storage=get_s3_repository())


@lru_cache()
def get_upload_service() -> UploadService:
    """Get UploadService singleton instance."""
    return UploadService(storage=get_s3_repository())


@lru_cache()
def get_batch_upload_service() -> BatchUploadService:
    """Get BatchUploadService singleton instance with injected dependencies."""
    return BatchUploadService(
        validation_service=get_validation_service(),
        upload_service=get_upload_service()
    )


def clear_caches() -> None:
    """Drop cached instances so the next request rebuilds them from current settings."""
    get_s3_repository.cache_clear()
    get_validation_service.cache_clear()
    get_upload_service.cache_clear()
    get_batch_upload_service.cache_clear()
