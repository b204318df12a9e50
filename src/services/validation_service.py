"""
Validation Service for upload candidates.
Decides which objects of a batch may be written based on required
key/value properties, existence in the bucket and the overwrite flag.
"""
import logging
from typing import List
from src.models.head_result import HeadStatus
from src.models.upload_candidate import UploadCandidate
from src.repositories.object_storage import ObjectStorage

logger = logging.getLogger(__name__)

MALFORMED_MESSAGE = "Key and value are required properties for every upload and must be strings."
ALREADY_EXISTS_MESSAGE = (
    "Failed to upload: this key already exists. "
    "Add {overwrite: true} to request body if you want to overwrite."
)


class ValidationService:
    """Service for validating candidates before upload."""
    
    def __init__(self, storage: ObjectStorage):
        self.storage = storage
    
    def validate_objects_to_upload(
        self,
        candidates: List[UploadCandidate],
        overwrite: bool,
        bucket_name: str
    ) -> List[UploadCandidate]:
        """
        Annotate every candidate with its validation result.
        
        Args:
            candidates: Objects from the request, in request order
            overwrite: Whether keys already in the bucket may be replaced
            bucket_name: Target bucket
            
        Returns:
            New list of annotated candidates in the same order
        """
        return [self._validate(candidate, overwrite, bucket_name) for candidate in candidates]
    
    def _validate(self, candidate: UploadCandidate, overwrite: bool, bucket_name: str) -> UploadCandidate:
        if not candidate.is_well_formed:
            return candidate.model_copy(update={
                'error': True,
                'success': False,
                'message': MALFORMED_MESSAGE
            })
        
        result = self.storage.head_object(bucket_name, candidate.key)
        
        if result.status == HeadStatus.FOUND:
            if overwrite:
                return candidate.model_copy(update={'already_exists_in_s3': True})
            return candidate.model_copy(update={
                'already_exists_in_s3': True,
                'error': True,
                'success': False,
                'message': ALREADY_EXISTS_MESSAGE
            })
        
        if result.status == HeadStatus.ERROR:
            # Not treated as a failure: the candidate still goes to upload as if absent
            logger.error("Non NotFound error checking s3://%s/%s: %s", bucket_name, candidate.key, result.detail)
        
        return candidate.model_copy(update={'already_exists_in_s3': False})
