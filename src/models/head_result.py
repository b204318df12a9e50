"""
Result of an object existence check.
"""
from enum import Enum
from typing import Optional


class HeadStatus(str, Enum):
    """Outcome of a HEAD request against a bucket key."""
    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"


class HeadResult:
    """Tri-state existence result with failure detail for ERROR."""
    
    def __init__(self, status: HeadStatus, detail: Optional[str] = None):
        self.status = status
        self.detail = detail
    
    @classmethod
    def found(cls) -> "HeadResult":
        return cls(HeadStatus.FOUND)
    
    @classmethod
    def not_found(cls) -> "HeadResult":
        return cls(HeadStatus.NOT_FOUND)
    
    @classmethod
    def error(cls, detail: str) -> "HeadResult":
        return cls(HeadStatus.ERROR, detail)
    
    def __repr__(self):
        return f"HeadResult(status={self.status.value}, detail={self.detail})"
