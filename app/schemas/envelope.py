"""Request envelope schema"""

from typing import Any, Dict, Optional
from pydantic import BaseModel


class DataEnvelope(BaseModel):
    """Every request body wraps its fields in a ``data`` object"""
    data: Optional[Dict[str, Any]] = None
