"""Wither room detection over a grid of bedrock heights.

A wither room is a 3x3 formation of ceiling bedrock that shares one
y-coordinate, which leaves a flat pocket the wither cannot break out of.
"""

from __future__ import annotations

from wither_room_finder.models import Pos


def find_wither_rooms(heights: list[list[int]]) -> list[Pos]:
    """Return the centers of every 3x3 uniform block, relative to the grid.

    Windows are identified by their bottom-right corner and walked from the end
    of the grid backwards. Candidate corners stop above row and column 3.
    """
    side = len(heights)
    rooms: list[Pos] = []
    for row3 in range(side - 1, 3, -1):
        row2 = row3 - 1
        row1 = row2 - 1
        bottom = heights[row3]
        col3 = side - 1
        while col3 > 3:
            col2 = col3 - 1
            col1 = col2 - 1
            if bottom[col1] != bottom[col2]:
                # The window one column to the left holds the same pair.
                col3 -= 2
                continue
            level = bottom[col3]
            if bottom[col2] == level and _row_matches(heights[row2], col1, level) and _row_matches(
                heights[row1], col1, level
            ):
                rooms.append(Pos(col2, row2))
            col3 -= 1
    return rooms


def _row_matches(row: list[int], start: int, level: int) -> bool:
    return row[start] == level and row[start + 1] == level and row[start + 2] == level
