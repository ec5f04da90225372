"""Nether ceiling bedrock simulation.

Reproduces the game's per-chunk bedrock rule so that the lowest ceiling bedrock
level of every column can be computed offline from chunk coordinates alone.
"""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from wither_room_finder.java_random import JavaRandom, int64
from wither_room_finder.models import Pos

CHUNK_SIZE = 16
CEILING_Y = 127
BEDROCK_DEPTH = 5

_logger = logging.getLogger("wither_room_finder.bedrock")


class BedrockRandom(Protocol):
    """The slice of ``java.util.Random`` the bedrock rule consumes."""

    def next_double(self) -> float: ...

    def next_int(self, bound: int | None = None) -> int: ...


RandomFactory = Callable[[int], BedrockRandom]


def chunk_seed(chunk_pos: Pos) -> int:
    """Seed the game derives for a chunk, wrapped to a signed 64-bit long."""
    return int64(chunk_pos.x * 341873128712 + chunk_pos.z * 132897987541)


def new_height_grid(side: int) -> list[list[int]]:
    return [[0] * side for _ in range(side)]


def calculate_lowest_bedrock_in_chunk(
    heights: list[list[int]],
    block_offset: Pos,
    chunk_pos: Pos,
    random_factory: RandomFactory = JavaRandom,
) -> None:
    """Generate the bedrock for a chunk and store the lowest y of each column.

    Args:
        heights: grid receiving the results, indexed ``[z][x]``
        block_offset: grid position of the chunk's first column
        chunk_pos: position of the chunk, in chunk coordinates
        random_factory: builds the generator from the chunk seed
    """
    rand = random_factory(chunk_seed(chunk_pos))
    for z in range(CHUNK_SIZE):
        row = heights[block_offset.z + z]
        for x in range(CHUNK_SIZE):
            # Unused by the ceiling, but the game draws them for the floor noise.
            rand.next_double()
            rand.next_double()
            rand.next_double()

            lowest = 0
            # Every y is visited so the sequence stays aligned with the game.
            for y in range(CEILING_Y, -1, -1):
                if y >= CEILING_Y - rand.next_int(BEDROCK_DEPTH):
                    lowest = y
                else:
                    rand.next_int(BEDROCK_DEPTH)
            row[block_offset.x + x] = lowest


def generate_bedrock_area(
    center_chunk: Pos,
    chunk_radius: int,
    random_factory: RandomFactory = JavaRandom,
) -> list[list[int]]:
    """Simulate a ``2r x 2r`` chunk square around ``center_chunk``.

    Cell ``[0][0]`` of the returned grid is the north-west corner block of
    chunk ``center_chunk.translate(-chunk_radius)``.
    """
    if chunk_radius < 1:
        raise ValueError(f"chunk_radius must be at least 1, got {chunk_radius}")

    chunk_diameter = chunk_radius * 2
    heights = new_height_grid(chunk_diameter * CHUNK_SIZE)
    for offset_x in range(chunk_diameter):
        for offset_z in range(chunk_diameter):
            chunk_offset = Pos(offset_x, offset_z)
            chunk_pos = center_chunk.plus(chunk_offset).translate(-chunk_radius)
            _logger.debug("chunk_generating chunk=%s", chunk_pos, extra={"chunk": str(chunk_pos)})
            calculate_lowest_bedrock_in_chunk(heights, chunk_offset.to_block_pos(), chunk_pos, random_factory)
    return heights
