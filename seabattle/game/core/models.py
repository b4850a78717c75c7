"""Core domain models used by game logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum

BOARD_SIZE = 10
MAX_SHIP_LENGTH = 4
MAX_GAME_ID = 2**48 - 1
BOT_ID = -1


class Orientation(StrEnum):
    """Ship orientation."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"

    @property
    def flipped(self) -> Orientation:
        if self is Orientation.HORIZONTAL:
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL

    @classmethod
    def from_direction(cls, direction: bool) -> Orientation:
        """Map the wire `direction` flag (true = vertical) to an orientation."""
        return cls.VERTICAL if direction else cls.HORIZONTAL


class ShipType(StrEnum):
    """Ship classification keyed by deck length."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    HUGE = "huge"

    @property
    def size(self) -> int:
        return SHIP_LENGTHS[self]

    @classmethod
    def for_length(cls, length: int) -> ShipType:
        for ship_type, size in SHIP_LENGTHS.items():
            if size == length:
                return ship_type
        raise ValueError(f"No ship type has length {length}.")


SHIP_LENGTHS: dict[ShipType, int] = {
    ShipType.SMALL: 1,
    ShipType.MEDIUM: 2,
    ShipType.LARGE: 3,
    ShipType.HUGE: 4,
}

DEFAULT_FLEET: tuple[ShipType, ...] = (
    ShipType.HUGE,
    ShipType.LARGE,
    ShipType.LARGE,
    ShipType.MEDIUM,
    ShipType.MEDIUM,
    ShipType.MEDIUM,
    ShipType.SMALL,
    ShipType.SMALL,
    ShipType.SMALL,
    ShipType.SMALL,
)


class CellMark(IntEnum):
    """Mark stored in a board cell."""

    UNKNOWN = 0
    MISS = 1
    SHOT = 2
    KILLED = 3


class AttackStatus(StrEnum):
    """Outcome reported for a single attacked cell."""

    MISS = "miss"
    SHOT = "shot"
    KILLED = "killed"

    @property
    def mark(self) -> CellMark:
        return CellMark[self.name]


@dataclass(frozen=True, slots=True)
class Position:
    """Board coordinate; validity is board-relative."""

    x: int
    y: int


@dataclass(frozen=True, slots=True)
class ShipSpec:
    """Submitted placement of a single ship."""

    position: Position
    orientation: Orientation
    length: int
    ship_type: ShipType


@dataclass(frozen=True, slots=True)
class AttackResult:
    """One affected cell of an attack."""

    position: Position
    current_player: int
    status: AttackStatus


def spec_for(ship_type: ShipType, position: Position, orientation: Orientation) -> ShipSpec:
    """Build a ship spec whose length follows its classification."""
    return ShipSpec(
        position=position,
        orientation=orientation,
        length=ship_type.size,
        ship_type=ship_type,
    )
