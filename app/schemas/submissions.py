from pydantic import BaseModel
from typing import List, Optional

from app.db.models import Submission


class SubmissionCreate(BaseModel):
    assignmentId: Optional[str] = None
    studentName: Optional[str] = None
    response: Optional[str] = None
    classPin: Optional[str] = None
    steps: Optional[str] = None
    reflection: Optional[str] = None
    submittedAt: Optional[str] = None


class SubmissionResponse(BaseModel):
    ok: bool = True
    id: str
    item: Submission


class SubmissionListResponse(BaseModel):
    ok: bool = True
    items: List[Submission]
