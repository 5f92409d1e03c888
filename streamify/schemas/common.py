# ============================================================================
# FILE: streamify/schemas/common.py
# ============================================================================
from pydantic import BaseModel
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

class Envelope(BaseModel, Generic[T]):
    """Uniform success body: {"success": true, "data": ...}"""
    success: bool = True
    data: Optional[T] = None

class ErrorEnvelope(BaseModel):
    """Uniform failure body: {"success": false, "error": "..."}"""
    success: bool = False
    error: str

def ok(data=None) -> dict:
    return {"success": True, "data": data}
