"""
Activities API routes.

Defines REST endpoints for listing activities and managing signups.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from src.api.dependencies import get_activity_service
from src.api.models import (
    NON_BLANK_PATTERN,
    ActivityResponse,
    ErrorResponse,
    MessageResponse,
    SignupRequest,
)
from src.domain.activities import ActivityService
from src.domain.exceptions import ActivityFull, ActivityNotFound, AlreadySignedUp, NotSignedUp

router = APIRouter(prefix="/activities", tags=["activities"])


@router.get(
    "",
    response_model=dict[str, ActivityResponse],
    summary="List all activities",
    description="Return every activity keyed by name, including current participants.",
)
async def list_activities(
    service: ActivityService = Depends(get_activity_service),
) -> dict[str, ActivityResponse]:
    activities = service.list_activities()
    return {name: ActivityResponse.from_domain(activity) for name, activity in activities.items()}


@router.get(
    "/{activity_name}",
    response_model=ActivityResponse,
    responses={404: {"model": ErrorResponse, "description": "Activity not found"}},
    summary="Get one activity",
)
async def get_activity(
    activity_name: str,
    service: ActivityService = Depends(get_activity_service),
) -> ActivityResponse:
    try:
        activity = service.get_activity(activity_name)
    except ActivityNotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Activity not found",
        ) from None
    return ActivityResponse.from_domain(activity)


@router.post(
    "/{activity_name}/signup",
    response_model=MessageResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Already signed up or activity full"},
        404: {"model": ErrorResponse, "description": "Activity not found"},
        422: {"description": "Validation error"},
    },
    summary="Sign up for an activity",
    description="Add the given email to the activity's participants.",
)
async def signup_for_activity(
    activity_name: str,
    request_data: SignupRequest,
    service: ActivityService = Depends(get_activity_service),
) -> MessageResponse:
    """
    Sign a student up for an activity.

    - **activity_name**: Exact activity name (URL-encoded)
    - **email**: Student email address
    """
    try:
        message = service.signup(activity_name, request_data.email)
    except ActivityNotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Activity not found",
        ) from None
    except AlreadySignedUp:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Student is already signed up",
        ) from None
    except ActivityFull:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Activity is full",
        ) from None
    return MessageResponse(message=message)


@router.delete(
    "/{activity_name}/unregister",
    response_model=MessageResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Activity not found or student not signed up"},
        422: {"description": "Validation error"},
    },
    summary="Unregister from an activity",
    description="Remove the given email from the activity's participants.",
)
async def unregister_from_activity(
    activity_name: str,
    email: str = Query(
        ...,
        min_length=1,
        pattern=NON_BLANK_PATTERN,
        description="Student email address (format is not validated)",
    ),
    service: ActivityService = Depends(get_activity_service),
) -> MessageResponse:
    try:
        message = service.unregister(activity_name, email)
    except ActivityNotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Activity not found",
        ) from None
    except NotSignedUp:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Student is not signed up for this activity",
        ) from None
    return MessageResponse(message=message)
