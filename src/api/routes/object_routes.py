"""
Object API routes.
Handles HTTP endpoints for batch key/value uploads to S3.
"""
from fastapi import APIRouter, Depends, status
from src.core.dependencies import get_batch_upload_service
from src.models.dto.object_dto import ObjectUploadRequest, ObjectUploadResponse
from src.services.batch_upload_service import BatchUploadService

router = APIRouter(prefix="/s3Bucket")


@router.post(
    "/object",
    tags=["Objects"],
    response_model=ObjectUploadResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK
)
def upload_objects(
    request: ObjectUploadRequest,
    batch_upload_service: BatchUploadService = Depends(get_batch_upload_service)
):
    """
    Upload a batch of key/value pairs as S3 objects.
    
    - **uploads**: list of `{key, value}` objects, both strings
    - **bucketName**: target bucket, defaults to the configured bucket
    - **overwrite**: replace keys that already exist (default false)
    
    Individual failures are reported per object and do not change the status code.
    The bucket's existence and access permissions are not checked up front.
    """
    return batch_upload_service.upload_batch(request)
