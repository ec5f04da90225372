"""Search orchestration: simulate an area, scan it and pick the closest room."""

from __future__ import annotations

import logging

from wither_room_finder.bedrock import RandomFactory, generate_bedrock_area
from wither_room_finder.config import settings
from wither_room_finder.java_random import JavaRandom
from wither_room_finder.models import Pos, WitherRoom, WitherRoomSearch
from wither_room_finder.scanner import find_wither_rooms


class InvalidSearchRadiusError(ValueError):
    """Raised when a chunk radius falls outside the supported range."""


def closest_room(rooms: list[WitherRoom]) -> WitherRoom | None:
    """Return the nearest room, keeping the earlier one on equal distances."""
    closest: WitherRoom | None = None
    for room in rooms:
        if closest is None or room.square_dist < closest.square_dist:
            closest = room
    return closest


class WitherRoomFinder:
    """Finds wither rooms in the chunks surrounding a target block."""

    def __init__(
        self,
        *,
        max_chunk_radius: int | None = None,
        random_factory: RandomFactory = JavaRandom,
        logger: logging.Logger | None = None,
    ) -> None:
        self._max_chunk_radius = settings.max_chunk_radius if max_chunk_radius is None else max_chunk_radius
        self._random_factory = random_factory
        self._logger = logger or logging.getLogger("wither_room_finder.finder")

    def search(self, target: Pos, chunk_radius: int) -> WitherRoomSearch:
        if not 1 <= chunk_radius <= self._max_chunk_radius:
            raise InvalidSearchRadiusError(
                f"Chunk radius must be between 1 and {self._max_chunk_radius}, got {chunk_radius}"
            )

        center_chunk = target.to_chunk_pos()
        self._logger.info(
            "search_started target=%s center_chunk=%s chunk_radius=%d",
            target,
            center_chunk,
            chunk_radius,
            extra={"target": str(target), "center_chunk": str(center_chunk), "chunk_radius": chunk_radius},
        )

        heights = generate_bedrock_area(center_chunk, chunk_radius, self._random_factory)
        self._logger.info("area_generated side_length=%d", len(heights), extra={"side_length": len(heights)})

        block_offset = center_chunk.translate(-chunk_radius).to_block_pos()
        rooms: list[WitherRoom] = []
        for local in find_wither_rooms(heights):
            center = local.plus(block_offset)
            room = WitherRoom(center=center, height=heights[local.z][local.x], square_dist=center.square_dist(target))
            self._logger.debug(
                "wither_room_found center=%s height=%d",
                center,
                room.height,
                extra={"center": str(center), "height": room.height},
            )
            rooms.append(room)

        closest = closest_room(rooms)
        closest_center = str(closest.center) if closest else None
        self._logger.info(
            "search_finished rooms=%d closest=%s",
            len(rooms),
            closest_center,
            extra={"rooms": len(rooms), "closest": closest_center},
        )
        return WitherRoomSearch(
            target=target,
            center_chunk=center_chunk,
            chunk_radius=chunk_radius,
            block_offset=block_offset,
            heights=heights,
            rooms=rooms,
            closest=closest,
        )
