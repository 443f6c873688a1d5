"""Endpoints for the pending shoots bucket."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from shoot_tracker.api.models import (
    EditedShootResponse,
    MessageResponse,
    ShootPayload,
    ShootResponse,
)

if TYPE_CHECKING:
    from shoot_tracker.containers import AppContainer

router = APIRouter(prefix="/api/shoots", tags=["shoots"])

_NOT_FOUND = "Shoot not found"


@router.get("")
async def list_shoots(request: Request) -> list[ShootResponse]:
    """Return all pending shoots."""
    container: AppContainer = request.app.state.container
    return [
        ShootResponse.from_domain(item) for item in container.shoot_store.list_pending()
    ]


@router.get("/{shoot_id}")
async def get_shoot(shoot_id: str, request: Request) -> ShootResponse:
    """Return a single pending shoot."""
    container: AppContainer = request.app.state.container
    shoot = container.shoot_store.get_pending(shoot_id)
    if shoot is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return ShootResponse.from_domain(shoot)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_shoot(payload: ShootPayload, request: Request) -> ShootResponse:
    """Create a pending shoot."""
    container: AppContainer = request.app.state.container
    shoot = container.shoot_store.create_pending(payload.to_details())
    return ShootResponse.from_domain(shoot)


@router.put("/{shoot_id}")
async def update_shoot(
    shoot_id: str, payload: ShootPayload, request: Request
) -> ShootResponse:
    """Replace the fields of a pending shoot."""
    container: AppContainer = request.app.state.container
    shoot = container.shoot_store.update_pending(shoot_id, payload.to_details())
    if shoot is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return ShootResponse.from_domain(shoot)


@router.delete("/{shoot_id}")
async def delete_shoot(shoot_id: str, request: Request) -> MessageResponse:
    """Delete a pending shoot."""
    container: AppContainer = request.app.state.container
    if not container.shoot_store.delete_pending(shoot_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return MessageResponse(message="Shoot deleted")


@router.post("/{shoot_id}/move-to-edited", status_code=status.HTTP_201_CREATED)
async def move_to_edited(shoot_id: str, request: Request) -> EditedShootResponse:
    """Move a pending shoot into the edited bucket under a new id."""
    container: AppContainer = request.app.state.container
    edited = container.shoot_store.move_to_edited(shoot_id)
    if edited is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return EditedShootResponse.from_domain(edited)
