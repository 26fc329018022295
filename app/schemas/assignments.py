from pydantic import BaseModel
from typing import List, Optional

from app.db.models import Assignment


class AssignmentCreate(BaseModel):
    title: Optional[str] = None
    prompt: Optional[str] = None
    gradeBand: Optional[str] = None
    classPin: Optional[str] = None
    createdAt: Optional[str] = None         # kept as sent when non-empty


class AssignmentResponse(BaseModel):
    ok: bool = True
    id: str
    item: Assignment


class AssignmentListResponse(BaseModel):
    ok: bool = True
    items: List[Assignment]
