from pydantic import BaseModel


class GenerateResponse(BaseModel):
    ok: bool = True
    output: str


class ErrorResponse(BaseModel):
    ok: bool = False
    error: str


class HealthResponse(BaseModel):
    status: str
    provider: str
    model: str
    template_loaded: bool
