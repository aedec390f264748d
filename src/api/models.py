"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from pydantic import BaseModel, ConfigDict, Field

from src.domain.ports import Activity

# Any string with at least one non-whitespace character
NON_BLANK_PATTERN = r"^\s*\S"


class SignupRequest(BaseModel):
    """Request model for activity signup."""

    email: str = Field(
        ...,
        min_length=1,
        pattern=NON_BLANK_PATTERN,
        description="Student email address (format is not validated)",
    )


class ActivityResponse(BaseModel):
    """Response model for a single activity."""

    model_config = ConfigDict(populate_by_name=True)

    description: str
    schedule: str
    max_participants: int = Field(..., alias="maxParticipants", gt=0)
    participants: list[str]

    @classmethod
    def from_domain(cls, activity: Activity) -> "ActivityResponse":
        return cls(
            description=activity.description,
            schedule=activity.schedule,
            max_participants=activity.max_participants,
            participants=list(activity.participants),
        )


class MessageResponse(BaseModel):
    """Response model for successful signup or unregister."""

    message: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
