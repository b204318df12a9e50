"""
Upload Service for validated candidates.
Writes every candidate that passed validation and counts the successes.
"""
import logging
from typing import List, Tuple
from src.core.exceptions import S3Exception
from src.models.upload_candidate import UploadCandidate
from src.repositories.object_storage import ObjectStorage

logger = logging.getLogger(__name__)


class UploadService:
    """Service for writing candidates to object storage."""
    
    def __init__(self, storage: ObjectStorage):
        self.storage = storage
    
    def upload_objects(self, candidates: List[UploadCandidate], bucket_name: str) -> Tuple[List[UploadCandidate], int]:
        """
        Upload candidates that have no validation error.
        
        Args:
            candidates: Annotated candidates from validation
            bucket_name: Target bucket
            
        Returns:
            Tuple of (new list of candidates with write outcomes, successful write count)
        """
        results = []
        count = 0
        
        for candidate in candidates:
            if candidate.error or not candidate.is_well_formed:
                results.append(candidate)
                continue
            
            try:
                data = self.storage.put_object(bucket_name, candidate.key, candidate.value)
            except S3Exception as e:
                logger.warning("Upload of s3://%s/%s failed: %s", bucket_name, candidate.key, e.message)
                results.append(candidate.model_copy(update={
                    'success': False,
                    'error': True,
                    'message': e.message
                }))
                continue
            
            results.append(candidate.model_copy(update={
                'success': True,
                'error': False,
                'data': data
            }))
            count += 1
        
        return results, count
