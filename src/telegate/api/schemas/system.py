from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str


class ServiceInfo(BaseModel):
    """Basic service metadata served at the root path."""

    name: str
    status: str
    webhook_path: str
    environment: str | None = None
