"""
Type definitions used across layers
"""

from enum import StrEnum


class EntityKind(StrEnum):
    GAME = "game"
    TEAM = "team"
    PLAYER = "player"
