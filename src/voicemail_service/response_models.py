"""Response models for the voicemail API."""

from pydantic import BaseModel, ConfigDict, Field


class VoicemailResponse(BaseModel):
    """Response returned after the recording was stored."""

    model_config = ConfigDict(populate_by_name=True)

    ok: bool = True
    url: str
    filename: str
    email_ok: bool = Field(alias="emailOk")
    email_error: str = Field(default="", alias="emailError")


class ErrorResponse(BaseModel):
    """Response returned when a processing stage fails.

    Stage-specific diagnostics (``hasResend``, ``fields``, ...) are carried
    as extra keys.
    """

    model_config = ConfigDict(extra="allow")

    ok: bool = False
    where: str
    error: str


class HealthResponse(BaseModel):
    status: str = "ok"
