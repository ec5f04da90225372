from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Pos:
    """An x/z position within a Minecraft world, in block or chunk units."""

    x: int
    z: int

    def to_block_pos(self) -> Pos:
        """Translate chunk coordinates to block coordinates."""
        return Pos(self.x << 4, self.z << 4)

    def to_chunk_pos(self) -> Pos:
        """Translate block coordinates to the containing chunk."""
        return Pos(self.x >> 4, self.z >> 4)

    def translate(self, dx: int, dz: int | None = None) -> Pos:
        if dz is None:
            dz = dx
        return Pos(self.x + dx, self.z + dz)

    def plus(self, other: Pos) -> Pos:
        return self.translate(other.x, other.z)

    def square_dist(self, other: Pos) -> int:
        dx = self.x - other.x
        dz = self.z - other.z
        return dx * dx + dz * dz

    def __str__(self) -> str:
        return f"({self.x}, {self.z})"


@dataclass(slots=True)
class WitherRoom:
    center: Pos
    height: int
    square_dist: int


@dataclass(slots=True)
class WitherRoomSearch:
    target: Pos
    center_chunk: Pos
    chunk_radius: int
    block_offset: Pos
    heights: list[list[int]] = field(repr=False)
    rooms: list[WitherRoom] = field(default_factory=list)
    closest: WitherRoom | None = None
