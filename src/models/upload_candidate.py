"""
Upload candidate domain model.
Represents one key/value pair of a batch and its validation/upload state.
"""
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field


class UploadCandidate(BaseModel):
    """Domain model for a single object submitted for upload."""
    
    model_config = ConfigDict(populate_by_name=True)
    
    key: Any = None
    value: Any = None
    already_exists_in_s3: bool = Field(default=False, alias="alreadyExistsInS3")
    error: bool = False
    success: bool = False
    message: Optional[str] = None
    data: Optional[Dict[str, Any]] = None
    
    @classmethod
    def from_upload(cls, upload: Any) -> "UploadCandidate":
        """
        Build a candidate from one raw entry of the request's uploads list.
        
        Only key and value are taken from the request; entries that are not
        JSON objects produce a candidate with neither, which fails validation.
        """
        if not isinstance(upload, dict):
            return cls()
        return cls(key=upload.get("key"), value=upload.get("value"))
    
    @property
    def is_well_formed(self) -> bool:
        """True when key and value are both non-empty strings."""
        return (
            isinstance(self.key, str) and bool(self.key)
            and isinstance(self.value, str) and bool(self.value)
        )
