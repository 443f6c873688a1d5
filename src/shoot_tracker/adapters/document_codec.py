"""Conversion between the shoot document and its JSON payload."""

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TypeVar

from shoot_tracker.domain.shoots import EditedShoot, Shoot, ShootDocument

_logger = logging.getLogger(__name__)

_RecordT = TypeVar("_RecordT", Shoot, EditedShoot)


def document_to_payload(document: ShootDocument) -> dict[str, object]:
    """Return the JSON-ready payload for a document."""
    return {
        "shoots": [_shoot_to_row(shoot) for shoot in document.shoots],
        "editedShoots": [_edited_to_row(edited) for edited in document.edited_shoots],
    }


def document_from_payload(payload: object) -> ShootDocument:
    """Build a document from a decoded JSON payload.

    Raises ValueError when the payload itself is not a two-bucket object.
    Individual records that cannot be read are skipped with a warning so the
    rest of the document survives.
    """
    if not isinstance(payload, dict):
        raise ValueError("Shoot document must be a JSON object")
    shoots = payload.get("shoots") or []
    edited_shoots = payload.get("editedShoots") or []
    if not isinstance(shoots, list) or not isinstance(edited_shoots, list):
        raise ValueError("Shoot document buckets must be arrays")
    return ShootDocument(
        shoots=_parse_rows(shoots, _parse_shoot, "shoots"),
        edited_shoots=_parse_rows(edited_shoots, _parse_edited, "editedShoots"),
    )


def _parse_rows(
    rows: list[object],
    parse: Callable[[dict[str, object]], _RecordT],
    bucket: str,
) -> list[_RecordT]:
    parsed: list[_RecordT] = []
    for index, row in enumerate(rows):
        try:
            if not isinstance(row, dict):
                raise TypeError("record is not a JSON object")
            parsed.append(parse(row))
        except (KeyError, TypeError, ValueError):
            _logger.warning(
                "Skipping malformed record: bucket=%s index=%s",
                bucket,
                index,
                exc_info=True,
            )
    return parsed


def _shoot_to_row(shoot: Shoot) -> dict[str, object]:
    return {
        "id": shoot.id,
        "modelName": shoot.model_name,
        "salonName": shoot.salon_name,
        "date": shoot.date,
        "price": shoot.price,
        "createdAt": _format_timestamp(shoot.created_at),
        "updatedAt": _format_timestamp(shoot.updated_at),
    }


def _edited_to_row(edited: EditedShoot) -> dict[str, object]:
    return {
        "id": edited.id,
        "originalShootId": edited.original_shoot_id,
        "modelName": edited.model_name,
        "salonName": edited.salon_name,
        "date": edited.date,
        "price": edited.price,
        "createdAt": _format_timestamp(edited.created_at),
        "editedAt": _format_timestamp(edited.edited_at),
    }


def _parse_shoot(row: dict[str, object]) -> Shoot:
    created_at = _parse_timestamp(row["createdAt"])
    return Shoot(
        id=_parse_id(row),
        model_name=str(row["modelName"]),
        salon_name=str(row["salonName"]),
        date=str(row["date"]),
        price=float(row["price"]),  # type: ignore[arg-type]
        created_at=created_at,
        updated_at=_parse_optional_timestamp(row.get("updatedAt"), created_at),
    )


def _parse_edited(row: dict[str, object]) -> EditedShoot:
    created_at = _parse_timestamp(row["createdAt"])
    return EditedShoot(
        id=_parse_id(row),
        original_shoot_id=str(row.get("originalShootId") or ""),
        model_name=str(row["modelName"]),
        salon_name=str(row["salonName"]),
        date=str(row["date"]),
        price=float(row["price"]),  # type: ignore[arg-type]
        created_at=created_at,
        edited_at=_parse_optional_timestamp(row.get("editedAt"), created_at),
    )


def _parse_id(row: dict[str, object]) -> str:
    raw = row.get("id")
    if not isinstance(raw, str) or not raw:
        raise TypeError(f"invalid id {raw!r}")
    return raw


def _format_timestamp(value: datetime) -> str:
    return value.astimezone(UTC).isoformat().replace("+00:00", "Z")


def _parse_optional_timestamp(raw: object, default: datetime) -> datetime:
    if raw is None or raw == "":
        return default
    return _parse_timestamp(raw)


def _parse_timestamp(raw: object) -> datetime:
    if not isinstance(raw, str) or not raw:
        raise TypeError(f"invalid timestamp {raw!r}")
    parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed
