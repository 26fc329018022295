from fastapi import APIRouter, Depends, HTTPException, status
from app.db.index import ASSIGNMENTS, OrderedIndex
from app.db.models import Assignment
from app.db.store import RecordStore
from app.schemas.assignments import AssignmentCreate, AssignmentResponse, AssignmentListResponse
from app.core.dependencies import get_records, get_index, read_json_body
from app.core.ids import new_id, utc_timestamp
from app.core.validation import parse_payload, required_text, optional_text
from app.schemas.errors import ErrorResponse
import logging

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Assignments"])


@router.get("", response_model=AssignmentListResponse)
async def list_assignments(
    records: RecordStore = Depends(get_records),
    index: OrderedIndex = Depends(get_index)
):
    """
    List all assignments, newest first.
    """
    try:
        ids = await index.list(ASSIGNMENTS)
        items = await records.get_many(Assignment, ids)
        items.reverse()
        return AssignmentListResponse(items=items)
    except HTTPException:
        raise
    except Exception:
        logger.exception("List assignments error")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post(
    "",
    response_model=AssignmentResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}}
)
async def create_assignment(
    records: RecordStore = Depends(get_records),
    index: OrderedIndex = Depends(get_index),
    body: dict = Depends(read_json_body)
):
    """
    Create a new assignment.

    Requires non-blank title and prompt. gradeBand and classPin default to "",
    createdAt defaults to the current server time.
    """
    payload = parse_payload(AssignmentCreate, body)
    title = required_text(payload.title, "title")
    prompt = required_text(payload.prompt, "prompt")

    try:
        assignment = Assignment(
            id=new_id(),
            title=title,
            prompt=prompt,
            gradeBand=optional_text(payload.gradeBand),
            classPin=optional_text(payload.classPin),
            createdAt=payload.createdAt or utc_timestamp()
        )

        await records.put(assignment)
        await index.append(ASSIGNMENTS, assignment.id)

        logger.info("Created assignment %s", assignment.id)
        return AssignmentResponse(id=assignment.id, item=assignment)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Create assignment error")
        raise HTTPException(status_code=500, detail="Internal server error")
