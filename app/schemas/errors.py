from pydantic import BaseModel


class ErrorResponse(BaseModel):
    ok: bool = False
    error: str
