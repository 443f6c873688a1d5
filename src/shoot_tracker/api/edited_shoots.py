"""Endpoints for the edited shoots bucket."""

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

router = APIRouter(prefix="/api/edited-shoots", tags=["edited-shoots"])

_NOT_FOUND = "Edited shoot not found"


@router.get("")
async def list_edited_shoots(request: Request) -> list[EditedShootResponse]:
    """Return all edited shoots."""
    container: AppContainer = request.app.state.container
    return [
        EditedShootResponse.from_domain(item)
        for item in container.shoot_store.list_edited()
    ]


@router.get("/{edited_id}")
async def get_edited_shoot(edited_id: str, request: Request) -> EditedShootResponse:
    """Return a single edited shoot."""
    container: AppContainer = request.app.state.container
    edited = container.shoot_store.get_edited(edited_id)
    if edited is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return EditedShootResponse.from_domain(edited)


@router.put("/{edited_id}")
async def update_edited_shoot(
    edited_id: str, payload: ShootPayload, request: Request
) -> EditedShootResponse:
    """Replace the fields of an edited shoot."""
    container: AppContainer = request.app.state.container
    edited = container.shoot_store.update_edited(edited_id, payload.to_details())
    if edited is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return EditedShootResponse.from_domain(edited)


@router.post("/{edited_id}/move-back", status_code=status.HTTP_201_CREATED)
async def move_back(edited_id: str, request: Request) -> ShootResponse:
    """Move an edited shoot back to pending under a new id."""
    container: AppContainer = request.app.state.container
    shoot = container.shoot_store.move_back_to_pending(edited_id)
    if shoot is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return ShootResponse.from_domain(shoot)


@router.delete("/{edited_id}")
async def delete_edited_shoot(edited_id: str, request: Request) -> MessageResponse:
    """Delete an edited shoot."""
    container: AppContainer = request.app.state.container
    if not container.shoot_store.delete_edited(edited_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return MessageResponse(message="Edited shoot deleted")
