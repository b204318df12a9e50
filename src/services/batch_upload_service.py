"""
Batch Upload Service for business logic.
Orchestrates validation and upload of one request's batch.
"""
import logging
from src.core import config
from src.core.exceptions import ValidationException
from src.models.dto.object_dto import (
    ObjectUploadRequest,
    ObjectUploadResponse,
    UploadSummary,
    UPLOADS_REQUIRED_MESSAGE
)
from src.models.upload_candidate import UploadCandidate
from src.services.upload_service import UploadService
from src.services.validation_service import ValidationService

logger = logging.getLogger(__name__)


class BatchUploadService:
    """Service running the validate-then-upload workflow."""
    
    def __init__(self, validation_service: ValidationService, upload_service: UploadService):
        self.validation_service = validation_service
        self.upload_service = upload_service
    
    def upload_batch(self, request: ObjectUploadRequest) -> ObjectUploadResponse:
        """
        Validate and upload every object of the request.
        
        Args:
            request: Parsed request body
            
        Returns:
            ObjectUploadResponse with the success count and annotated objects
            
        Raises:
            ValidationException: If uploads is missing or empty
        """
        if not request.uploads:
            raise ValidationException(UPLOADS_REQUIRED_MESSAGE)
        
        bucket_name = request.bucket_name or config.settings.aws_default_bucket_name
        overwrite = bool(request.overwrite)
        candidates = [UploadCandidate.from_upload(upload) for upload in request.uploads]
        
        validated = self.validation_service.validate_objects_to_upload(candidates, overwrite, bucket_name)
        objects, count = self.upload_service.upload_objects(validated, bucket_name)
        
        logger.info("Uploaded %d of %d objects to bucket %s", count, len(objects), bucket_name)
        
        return ObjectUploadResponse(data=UploadSummary(uploads=count, objects=objects))
