from pydantic import BaseModel, ConfigDict

HELLO_BODY = "Hello, World!"


class HealthStatus(BaseModel):
    """Response model for the healthcheck endpoint."""

    model_config = ConfigDict(frozen=True)

    status: str = "ok"
    message: str = "Service is running"
