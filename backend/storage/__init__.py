"""
In-memory Pokemon storage (one party + append-only boxes).

Modules:
- pokemon (immutable Pokemon value)
- container (fixed-capacity Pokemon collection)
- storage (party, boxes and the id -> location index; move protocol)
- lock (asyncio reader/writer lock and the SharedStorage wrapper)
"""

from .errors import BoxDoesNotExist, ContainerIsFull, PokemonNotFound, StorageError
from .lock import ReadWriteLock, SharedStorage
from .pokemon import Pokemon
from .storage import (
    DEFAULT_MAX_BOX_SIZE,
    DEFAULT_MAX_PARTY_SIZE,
    PARTY,
    Container,
    Location,
    Storage,
)

__all__ = [
    "BoxDoesNotExist",
    "Container",
    "ContainerIsFull",
    "DEFAULT_MAX_BOX_SIZE",
    "DEFAULT_MAX_PARTY_SIZE",
    "Location",
    "PARTY",
    "Pokemon",
    "PokemonNotFound",
    "ReadWriteLock",
    "SharedStorage",
    "Storage",
    "StorageError",
]
