"""CLI entrypoint for the wither room finder."""

from __future__ import annotations

import typer
from rich import print
from rich.table import Table

from wither_room_finder.bedrock import CHUNK_SIZE, calculate_lowest_bedrock_in_chunk, new_height_grid
from wither_room_finder.config import settings
from wither_room_finder.finder import InvalidSearchRadiusError, WitherRoomFinder
from wither_room_finder.models import Pos
from wither_room_finder.telemetry import configure_logging

app = typer.Typer(help="Find wither rooms, flat 3x3 pockets in the nether bedrock ceiling.")

# Negative coordinates would otherwise be parsed as unknown short options.
_COORDINATE_ARGS = {"ignore_unknown_options": True}


def _heights_table(heights: list[list[int]], origin: Pos) -> Table:
    table = Table(title=f"Lowest ceiling bedrock from {origin}", show_lines=False)
    table.add_column("z \\ x", justify="right", style="bold")
    for col in range(len(heights[0]) if heights else 0):
        table.add_column(str(origin.x + col), justify="right")
    for row_index, row in enumerate(heights):
        table.add_row(str(origin.z + row_index), *(str(value) for value in row))
    return table


@app.command(context_settings=_COORDINATE_ARGS)
def find(
    block_x: int = typer.Argument(..., help="The x axis coordinate for the block to start the scan from"),
    block_z: int = typer.Argument(..., help="The z axis coordinate for the block to start the scan from"),
    chunk_radius: int = typer.Argument(
        ..., min=1, help="The radius of chunks around the block coordinate to scan for a room"
    ),
    show_heights: bool = typer.Option(False, help="Render the simulated bedrock heights"),
    verbose: bool = typer.Option(False, "--verbose", help="Log each generated chunk"),
) -> None:
    """Find the wither room closest to a block."""
    configure_logging("DEBUG" if verbose else settings.log_level)
    target = Pos(block_x, block_z)

    print(
        f"Finding wither room near block {target} in chunk {target.to_chunk_pos()} "
        f"within chunk radius ({chunk_radius})"
    )
    try:
        search = WitherRoomFinder().search(target, chunk_radius)
    except InvalidSearchRadiusError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)

    side = len(search.heights)
    print(f"Generated {side} x {side} area of bedrock")
    if show_heights:
        print(_heights_table(search.heights, search.block_offset))

    for room in search.rooms:
        print(f"\tFound wither room centered on {room.center} at y={room.height}")

    if search.closest is not None:
        print(f"Closest room is centered on {search.closest.center}")
    else:
        print("Failed to find room, try increasing the radius.")


@app.command(context_settings=_COORDINATE_ARGS)
def heights(
    chunk_x: int = typer.Argument(..., help="Chunk x coordinate"),
    chunk_z: int = typer.Argument(..., help="Chunk z coordinate"),
) -> None:
    """Show the lowest ceiling bedrock level of every column in one chunk."""
    configure_logging(settings.log_level)
    chunk = Pos(chunk_x, chunk_z)
    grid = new_height_grid(CHUNK_SIZE)
    calculate_lowest_bedrock_in_chunk(grid, Pos(0, 0), chunk)
    print(_heights_table(grid, chunk.to_block_pos()))


@app.command("settings")
def show_settings() -> None:
    """Show the effective configuration."""
    print(settings.model_dump())


if __name__ == "__main__":
    app()
