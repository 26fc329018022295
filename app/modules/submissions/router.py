from fastapi import APIRouter, Depends, HTTPException, Query, status
from app.db.index import SUBMISSIONS, OrderedIndex
from app.db.models import Assignment, Submission
from app.db.store import RecordStore
from app.schemas.submissions import SubmissionCreate, SubmissionResponse, SubmissionListResponse
from app.core.dependencies import get_records, get_index, read_json_body
from app.core.ids import new_id, utc_timestamp
from app.core.validation import parse_payload, required_text, optional_text
from app.schemas.errors import ErrorResponse
from typing import Optional
import logging

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Submissions"])


@router.get("", response_model=SubmissionListResponse)
async def list_submissions(
    assignmentId: Optional[str] = Query(None, description="Only return submissions for this assignment"),
    records: RecordStore = Depends(get_records),
    index: OrderedIndex = Depends(get_index)
):
    """
    List submissions, newest first, optionally filtered by exact assignmentId.
    """
    try:
        ids = await index.list(SUBMISSIONS)
        items = await records.get_many(Submission, ids)

        if assignmentId:
            items = [item for item in items if item.assignmentId == assignmentId]

        items.reverse()
        return SubmissionListResponse(items=items)
    except HTTPException:
        raise
    except Exception:
        logger.exception("List submissions error")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post(
    "",
    response_model=SubmissionResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}
)
async def create_submission(
    records: RecordStore = Depends(get_records),
    index: OrderedIndex = Depends(get_index),
    body: dict = Depends(read_json_body)
):
    """
    Submit a response to an existing assignment.

    The assignment is looked up once here; 404 if it does not exist.
    """
    payload = parse_payload(SubmissionCreate, body)
    if not payload.assignmentId:
        raise HTTPException(status_code=400, detail="assignmentId is required")
    student_name = required_text(payload.studentName, "studentName")
    response = required_text(payload.response, "response")

    try:
        # Check if assignment exists
        assignment = await records.get(Assignment, payload.assignmentId)
        if assignment is None:
            raise HTTPException(status_code=404, detail="assignment not found")

        submission = Submission(
            id=new_id(),
            assignmentId=payload.assignmentId,
            studentName=student_name,
            classPin=optional_text(payload.classPin),
            response=response,
            steps=optional_text(payload.steps),
            reflection=optional_text(payload.reflection),
            submittedAt=payload.submittedAt or utc_timestamp()
        )

        await records.put(submission)
        await index.append(SUBMISSIONS, submission.id)

        logger.info("Created submission %s for assignment %s", submission.id, submission.assignmentId)
        return SubmissionResponse(id=submission.id, item=submission)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Create submission error")
        raise HTTPException(status_code=500, detail="Internal server error")
