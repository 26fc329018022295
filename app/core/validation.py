from typing import Optional, Type, TypeVar

from fastapi import HTTPException, status
from pydantic import BaseModel, ValidationError

P = TypeVar("P", bound=BaseModel)


def parse_payload(schema: Type[P], body: dict) -> P:
    """
    Validate a decoded JSON object against a request schema.

    Every schema field is an optional string, so the only failure is a field
    holding some other JSON type. The first offending field is named.
    """
    try:
        return schema.model_validate(body)
    except ValidationError as e:
        field = ".".join(str(part) for part in e.errors()[0]["loc"])
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{field} must be a string"
        )


def required_text(value: Optional[str], field: str) -> str:
    """Trimmed value, or 400 if missing or blank."""
    text = (value or "").strip()
    if not text:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{field} is required"
        )
    return text


def optional_text(value: Optional[str]) -> str:
    return (value or "").strip()
