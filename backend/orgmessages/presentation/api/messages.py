"""
Messages API Router - FastAPI endpoints for organization messages.

- Receives MessageService via Dependency Injection (Dishka)
- Thin layer: only handles HTTP concerns (request/response)
- Maps result variants to status codes:
    Created → 201, Updated/Deleted → 204, ValidationError → 400,
    NotFound → 404, Conflict → 409

Flow:
  HTTP Request → Router → MessageService → Repository → Store
                                 ↓
  HTTP Response ← Router ← Result variant ←
"""

from logging import getLogger
from uuid import UUID

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, HTTPException, Response, status
from fastapi.responses import JSONResponse

from orgmessages.application.common.results import (
    Conflict,
    Created,
    Deleted,
    NotFound,
    Updated,
    ValidationError,
)
from orgmessages.application.dto.message import (
    CreateMessageRequest,
    MessageDTO,
    UpdateMessageRequest,
)
from orgmessages.application.services import MessageService
from orgmessages.domain.value_objects.message_id import MessageId
from orgmessages.domain.value_objects.organization_id import OrganizationId

logger = getLogger(__name__)

UNEXPECTED_ERROR = "An unexpected error occurred"


def _validation_response(errors: dict[str, list[str]]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Validation error", "details": errors},
    )


# ==================== ROUTER ====================

router = APIRouter(
    prefix="/api/v1/organizations/{organization_id}/messages", tags=["messages"]
)


# ==================== ENDPOINTS ====================


@router.get(
    "",
    response_model=list[MessageDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def list_messages(
    organization_id: UUID,
    service: FromDishka[MessageService],
):
    """List all messages (active and inactive) of an organization."""
    logger.info(f"Getting all messages for organization {organization_id}")
    messages = await service.list_messages(OrganizationId(str(organization_id)))
    return [MessageDTO.from_entity(message) for message in messages]


@router.get(
    "/{message_id}",
    response_model=MessageDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def get_message(
    organization_id: UUID,
    message_id: UUID,
    service: FromDishka[MessageService],
):
    """Get one message by ID."""
    logger.info(f"Getting message {message_id} for organization {organization_id}")
    message = await service.get_message(
        OrganizationId(str(organization_id)), MessageId(str(message_id))
    )
    if not message:
        logger.warning(
            f"Message {message_id} not found for organization {organization_id}"
        )
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Message with id '{message_id}' not found",
        )

    return MessageDTO.from_entity(message)


@router.post(
    "",
    response_model=MessageDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_message(
    organization_id: UUID,
    request: CreateMessageRequest,
    service: FromDishka[MessageService],
):
    """
    Create a message.

    Request: {"title": "...", "content": "..."}
    Response: the created message, including its generated id
    """
    logger.info(f"Creating message for organization {organization_id}")
    result = await service.create_message(
        OrganizationId(str(organization_id)), request.title, request.content
    )

    match result:
        case Created(value=message):
            return MessageDTO.from_entity(message)
        case ValidationError(errors=errors):
            return _validation_response(errors)
        case Conflict(message=detail):
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=detail)
        case _:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=UNEXPECTED_ERROR,
            )


@router.put(
    "/{message_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
@inject
async def update_message(
    organization_id: UUID,
    message_id: UUID,
    request: UpdateMessageRequest,
    service: FromDishka[MessageService],
):
    """
    Replace title, content and is_active of a message.

    Request: {"title": "...", "content": "...", "is_active": true}
    """
    logger.info(f"Updating message {message_id} for organization {organization_id}")
    result = await service.update_message(
        OrganizationId(str(organization_id)),
        MessageId(str(message_id)),
        title=request.title,
        content=request.content,
        is_active=request.is_active,
    )

    match result:
        case Updated():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case NotFound(message=detail):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
        case ValidationError(errors=errors):
            return _validation_response(errors)
        case Conflict(message=detail):
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=detail)
        case _:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=UNEXPECTED_ERROR,
            )


@router.delete(
    "/{message_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
@inject
async def delete_message(
    organization_id: UUID,
    message_id: UUID,
    service: FromDishka[MessageService],
):
    """Delete an active message."""
    logger.info(f"Deleting message {message_id} for organization {organization_id}")
    result = await service.delete_message(
        OrganizationId(str(organization_id)), MessageId(str(message_id))
    )

    match result:
        case Deleted():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case NotFound(message=detail):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
        case ValidationError(errors=errors):
            return _validation_response(errors)
        case _:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=UNEXPECTED_ERROR,
            )
