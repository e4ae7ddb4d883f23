"""Package with data models for the API."""

from pydantic import BaseModel, Field

from gibberish.configuration import config


class HealthcheckResponse(BaseModel):
    """Response from the healthcheck endpoint indicating the status of the system."""

    is_healthy: bool


class ModelsResponse(BaseModel):
    """Names of models available for detection."""

    models: list[str]


class GibberishDetectionRequest(BaseModel):
    """API request for a gibberish check of a text."""

    text: str = Field(..., max_length=config.api_max_text_length)
    model: str = config.default_model


class GibberishDetectionResponse(BaseModel):
    """Response sent when a client requests detection in a text."""

    is_gibberish: bool
    score: float | None
    threshold: float
    remarks: str | None = None
