"""Ship geometry and damage tracking."""

from __future__ import annotations

from seabattle.game.core.models import (
    MAX_SHIP_LENGTH,
    Orientation,
    Position,
    ShipSpec,
    ShipType,
)


class Ship:
    """A single vessel: deck cells, surrounding buffer cells and per-deck health.

    The ship knows nothing about board bounds. Deck and around cells may fall
    outside the board and are clipped by whoever consumes them.
    """

    __slots__ = ("_position", "_orientation", "_length", "_ship_type", "_health", "_deck", "_around")

    def __init__(
        self,
        position: Position,
        orientation: Orientation,
        length: int,
        ship_type: ShipType | None = None,
    ) -> None:
        if not 1 <= length <= MAX_SHIP_LENGTH:
            raise ValueError(f"Ship length must be in 1..{MAX_SHIP_LENGTH}, got {length}.")
        self._position = position
        self._orientation = orientation
        self._length = length
        self._ship_type = ship_type if ship_type is not None else ShipType.for_length(length)
        self._health = [True] * length
        self._deck: tuple[Position, ...] = ()
        self._around: tuple[Position, ...] = ()
        self._recompute()

    @classmethod
    def from_spec(cls, spec: ShipSpec) -> Ship:
        return cls(spec.position, spec.orientation, spec.length, spec.ship_type)

    def to_spec(self) -> ShipSpec:
        return ShipSpec(
            position=self._position,
            orientation=self._orientation,
            length=self._length,
            ship_type=self._ship_type,
        )

    @property
    def position(self) -> Position:
        return self._position

    @position.setter
    def position(self, position: Position) -> None:
        self._position = position
        self._recompute()

    @property
    def orientation(self) -> Orientation:
        return self._orientation

    @orientation.setter
    def orientation(self, orientation: Orientation) -> None:
        self._orientation = orientation
        self._recompute()

    @property
    def is_vertical(self) -> bool:
        return self._orientation is Orientation.VERTICAL

    @property
    def length(self) -> int:
        return self._length

    @property
    def ship_type(self) -> ShipType:
        return self._ship_type

    @property
    def health(self) -> tuple[bool, ...]:
        return tuple(self._health)

    @property
    def killed(self) -> bool:
        return not any(self._health)

    @property
    def deck_positions(self) -> tuple[Position, ...]:
        return self._deck

    @property
    def around_positions(self) -> tuple[Position, ...]:
        return self._around

    @property
    def footprint(self) -> tuple[Position, ...]:
        """Deck cells followed by around cells."""
        return self._deck + self._around

    def occupies(self, position: Position) -> bool:
        """Return whether the position is one of this ship's deck cells."""
        offset_x = position.x - self._position.x
        offset_y = position.y - self._position.y
        if self.is_vertical:
            return offset_x == 0 and 0 <= offset_y < self._length
        return offset_y == 0 and 0 <= offset_x < self._length

    def get_shot(self, position: Position) -> bool:
        """Damage the deck at position; return False when the ship is missed."""
        if not self.occupies(position):
            return False
        if self.is_vertical:
            deck_index = position.y - self._position.y
        else:
            deck_index = position.x - self._position.x
        self._health[deck_index] = False
        return True

    def _recompute(self) -> None:
        x, y = self._position.x, self._position.y
        if self.is_vertical:
            self._deck = tuple(Position(x, y + i) for i in range(self._length))
            right, bottom = x + 1, y + self._length
        else:
            self._deck = tuple(Position(x + i, y) for i in range(self._length))
            right, bottom = x + self._length, y + 1
        self._around = tuple(
            Position(cx, cy)
            for cy in range(y - 1, bottom + 1)
            for cx in range(x - 1, right + 1)
            if not self.occupies(Position(cx, cy))
        )

    def __repr__(self) -> str:
        return (
            f"Ship({self._ship_type.value}, position=({self._position.x}, {self._position.y}), "
            f"orientation={self._orientation.value}, health={self._health})"
        )
