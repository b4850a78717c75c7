"""Ship submission and attack result payload conversion."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from seabattle.game.core.models import (
    MAX_SHIP_LENGTH,
    AttackResult,
    Orientation,
    Position,
    ShipSpec,
    ShipType,
)


def position_to_payload(position: Position) -> dict[str, int]:
    return {"x": position.x, "y": position.y}


def position_from_payload(payload: object) -> Position:
    if not isinstance(payload, Mapping):
        raise ValueError("Position must be an object with x and y.")
    try:
        x, y = payload["x"], payload["y"]
    except KeyError as exc:
        raise ValueError("Position must be an object with x and y.") from exc
    if not _is_int(x) or not _is_int(y):
        raise ValueError("Position coordinates must be integers.")
    return Position(x=x, y=y)


def ship_spec_to_payload(spec: ShipSpec) -> dict[str, object]:
    """Convert a ship spec into the wire ship format."""
    return {
        "position": position_to_payload(spec.position),
        "direction": spec.orientation is Orientation.VERTICAL,
        "length": spec.length,
        "type": spec.ship_type.value,
    }


def ship_spec_from_payload(payload: object) -> ShipSpec:
    """Parse one wire ship entry; malformed entries raise ValueError."""
    if not isinstance(payload, Mapping):
        raise ValueError("Each ship must be an object.")
    try:
        position = position_from_payload(payload["position"])
        direction = payload["direction"]
        length = payload["length"]
        ship_type = ShipType(str(payload["type"]))
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError("Malformed ship entry in payload.") from exc
    if not isinstance(direction, bool):
        raise ValueError("Ship direction must be a boolean.")
    if not _is_int(length) or not 1 <= length <= MAX_SHIP_LENGTH:
        raise ValueError(f"Ship length must be an integer in 1..{MAX_SHIP_LENGTH}.")
    if ship_type.size != length:
        raise ValueError(f"Ship type {ship_type.value} does not have length {length}.")
    return ShipSpec(
        position=position,
        orientation=Orientation.from_direction(direction),
        length=length,
        ship_type=ship_type,
    )


def ship_specs_from_payload(payload: object) -> list[ShipSpec]:
    if not isinstance(payload, Sequence) or isinstance(payload, (str, bytes)):
        raise ValueError("Ships must be a list.")
    return [ship_spec_from_payload(item) for item in payload]


def attack_result_to_payload(result: AttackResult) -> dict[str, object]:
    """Convert one attack result into the wire attack format."""
    return {
        "position": position_to_payload(result.position),
        "currentPlayer": result.current_player,
        "status": result.status.value,
    }


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
