from pydantic import BaseModel


class HealthResponse(BaseModel):
    ok: bool = True
    service: str
    ts: str


class StatusResponse(BaseModel):
    status: str = "online"
    message: str
