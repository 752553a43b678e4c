"""User Routes: HTTP surface of the User CRUD operations.

Invariants:
    - get-by-id on a missing user → 404 with empty body
    - insert → 201 + created user + Location header pointing at get-by-id
    - update checks path id == body id BEFORE validation or persistence
    - delete → 204 whether or not the user existed
    - Field-rule failures → 400 with the error list as the whole body

Design Decisions:
    - Routes branch on WriteResult.ok; no try/except around service calls
    - Repository errors fall through to the global UserApiError handler
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse

from user_api.api.dependencies import get_user_service
from user_api.core.domain_types import FieldError
from user_api.schemas.user import FieldErrorResponse, UserPayload, UserResponse
from user_api.services.user_service import UserService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/usuario", tags=["usuario"])

USER_ID_MISMATCH = "User ID does not match."

_VALIDATION_RESPONSE = {
    status.HTTP_400_BAD_REQUEST: {"model": list[FieldErrorResponse]},
}


def _validation_failed(errors: list[FieldError]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=[FieldErrorResponse.from_error(e).model_dump() for e in errors],
    )


@router.get("/get", response_model=list[UserResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    """List every stored user."""
    users = await service.get_all()
    return [UserResponse.from_record(u) for u in users]


@router.get(
    "/get-by/{user_id}", response_model=UserResponse,
    responses={status.HTTP_404_NOT_FOUND: {"description": "User not found"}},
)
async def get_user_by_id(
    user_id: UUID, service: UserService = Depends(get_user_service),
):
    user = await service.get_by_id(user_id)
    if user is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return UserResponse.from_record(user)


@router.post(
    "/insert", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED, responses=_VALIDATION_RESPONSE,
)
async def insert_user(
    body: UserPayload,
    request: Request,
    service: UserService = Depends(get_user_service),
):
    """Create a user. Any id in the body is replaced by a generated one."""
    result = await service.insert(body.to_record())
    if not result.ok:
        return _validation_failed(result.errors)
    created = UserResponse.from_record(result.user)
    location = request.url_for("get_user_by_id", user_id=str(created.id))
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=created.model_dump(mode="json"),
        headers={"Location": str(location)},
    )


@router.put(
    "/update/{user_id}", status_code=status.HTTP_204_NO_CONTENT,
    responses=_VALIDATION_RESPONSE,
)
async def update_user(
    user_id: UUID,
    body: UserPayload,
    service: UserService = Depends(get_user_service),
):
    """Replace name, email and password of the user at user_id."""
    if body.id != user_id:
        return PlainTextResponse(
            USER_ID_MISMATCH, status_code=status.HTTP_400_BAD_REQUEST,
        )
    result = await service.update(body.to_record())
    if not result.ok:
        return _validation_failed(result.errors)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/delete/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: UUID, service: UserService = Depends(get_user_service),
):
    await service.delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
