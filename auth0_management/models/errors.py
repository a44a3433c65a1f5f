from pydantic import BaseModel, ConfigDict, Field


class ApiErrorBody(BaseModel):
    """Structured error payload the management API attaches to 4xx/5xx responses."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    status_code: int | None = Field(None, alias="statusCode")
    error: str | None = None
    message: str | None = None
    error_code: str | None = Field(None, alias="errorCode")
