"""Locate wither rooms in the nether bedrock ceiling."""

from .finder import InvalidSearchRadiusError, WitherRoomFinder
from .models import Pos, WitherRoom, WitherRoomSearch

__all__ = ["InvalidSearchRadiusError", "Pos", "WitherRoom", "WitherRoomFinder", "WitherRoomSearch"]
