"""
Abstract base class for object storage repositories.
Defines the contract the upload workflow needs from a blob store.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict
from src.models.head_result import HeadResult


class ObjectStorage(ABC):
    """Abstract repository interface for bucket object operations."""
    
    @abstractmethod
    def head_object(self, bucket_name: str, key: str) -> HeadResult:
        """Check whether an object exists under key in the bucket."""
        pass
    
    @abstractmethod
    def put_object(self, bucket_name: str, key: str, body: str) -> Dict[str, Any]:
        """Write body under key and return the store's result payload."""
        pass
