"""World module.

This module contains the catalog of game objects the parser can refer to.
"""

from src.world.objects import (
    ANY_KIND,
    GAME_OBJECTS,
    GameObject,
    WorldCatalog,
    WorldCatalogError,
    get_default_world,
)

__all__ = [
    "ANY_KIND",
    "GAME_OBJECTS",
    "GameObject",
    "WorldCatalog",
    "WorldCatalogError",
    "get_default_world",
]
