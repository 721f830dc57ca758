"""Table schemas"""

from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel


class TableResponse(BaseModel):
    """Table response"""
    table_id: int
    table_name: str
    capacity: int
    reservation_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class TableEnvelope(BaseModel):
    data: TableResponse


class TableListEnvelope(BaseModel):
    data: List[TableResponse]
