from typing import Optional


class StorageError(Exception):
    """Base class for storage failures surfaced to callers."""


class ContainerIsFull(StorageError):
    def __init__(self, box_id: Optional[int] = None):
        self.box_id = box_id
        where = "party" if box_id is None else f"box {box_id}"
        super().__init__(f"Destination {where} is full")


class BoxDoesNotExist(StorageError):
    def __init__(self, box_id: int):
        self.box_id = box_id
        super().__init__(f"Box {box_id} does not exist")


class PokemonNotFound(StorageError):
    """The id is not currently stored anywhere; callers fetch it and place it instead."""

    def __init__(self, pokeapi_id: int):
        self.pokeapi_id = pokeapi_id
        super().__init__(f"Pokemon {pokeapi_id} is not in storage")
