"""
Enrollment API endpoints.
"""

from fastapi import APIRouter, Request, status
from backend.schemas.request.enrollment import CreateEnrollmentRequest
from backend.schemas.response.common import ErrorResponse
from backend.schemas.response.enrollment import CreateEnrollmentResponse, EnrollmentListResponse
from backend.services.enrollment_service import enrollment_service
from backend.core.logging import get_logger
from backend.middleware.logging import bind_user_context

router = APIRouter()
logger = get_logger(__name__)


@router.get("/enrollments/{user_id}", response_model=EnrollmentListResponse)
async def list_enrollments(user_id: str, request: Request):
    """Hackathon IDs the user is enrolled in."""
    bind_user_context(request, user_id)
    hackathon_ids = await enrollment_service.get_enrollments(user_id)
    return EnrollmentListResponse(
        success=True, user_id=user_id, hackathon_ids=hackathon_ids, total=len(hackathon_ids)
    )


@router.post(
    "/enrollments",
    response_model=CreateEnrollmentResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse, "description": "Already enrolled or write in progress"},
        503: {"model": ErrorResponse, "description": "Enrollment failed; retry"},
    },
)
async def create_enrollment(request: CreateEnrollmentRequest, http_request: Request):
    """
    Enroll a user in a hackathon.

    Returns 201 on success, 409 when already enrolled, 400 for a completed
    hackathon and 503 when the write fails.
    """
    bind_user_context(http_request, request.user_id)
    result = await enrollment_service.enroll(request.user_id, request.hackathon_id)
    logger.info("Enrollment created", user_id=request.user_id, hackathon_id=request.hackathon_id)
    return CreateEnrollmentResponse(success=True, **result)
