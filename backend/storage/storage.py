"""
Party/box storage.

Storage owns:
- party: one Container (max_party_size)
- boxes: append-only list of Containers (max_box_size); a box's index is its id
- locations: pokeapi_id -> Location, the single source of truth for where a Pokemon is

Every Pokemon in a container has exactly one entry in `locations`, and that
entry names the only container holding it.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from .errors import BoxDoesNotExist, ContainerIsFull, PokemonNotFound
from .pokemon import Pokemon

logger = logging.getLogger(__name__)

DEFAULT_MAX_PARTY_SIZE = 6
DEFAULT_MAX_BOX_SIZE = 30


@dataclass(frozen=True)
class Location:
    """Party when box_id is None, otherwise the box at that index."""

    box_id: Optional[int] = None

    @classmethod
    def box(cls, box_id: int) -> "Location":
        return cls(box_id=box_id)

    @property
    def is_party(self) -> bool:
        return self.box_id is None

    def __str__(self) -> str:
        return "party" if self.is_party else f"box {self.box_id}"


PARTY = Location()


class Container:
    def __init__(self, max_size: int):
        if max_size < 0:
            raise ValueError("max_size must be >= 0")
        self.max_size = max_size
        self._pokemon: Dict[int, Pokemon] = {}

    def push(self, pokemon: Pokemon) -> None:
        # Overwrites an entry with the same id; Storage never pushes an id it already indexes.
        if not self.has_space():
            raise ContainerIsFull()
        self._pokemon[pokemon.pokeapi_id] = pokemon

    def remove(self, pokeapi_id: int) -> Pokemon:
        try:
            return self._pokemon.pop(pokeapi_id)
        except KeyError:
            raise PokemonNotFound(pokeapi_id) from None

    def has_space(self) -> bool:
        return len(self._pokemon) < self.max_size

    def get_pokemon(self) -> List[Pokemon]:
        return list(self._pokemon.values())

    def __contains__(self, pokeapi_id: object) -> bool:
        return pokeapi_id in self._pokemon

    def __len__(self) -> int:
        return len(self._pokemon)

    def __repr__(self) -> str:
        names = ", ".join(f"{p.pokeapi_id}:{p.name}" for p in self._pokemon.values())
        return f"Container({len(self)}/{self.max_size} [{names}])"


class Storage:
    def __init__(
        self,
        max_party_size: int = DEFAULT_MAX_PARTY_SIZE,
        max_box_size: int = DEFAULT_MAX_BOX_SIZE,
    ):
        self.max_party_size = max_party_size
        self.max_box_size = max_box_size
        self.party = Container(max_party_size)
        self.boxes: List[Container] = []
        self.locations: Dict[int, Location] = {}

    # -- containers

    def add_box(self) -> int:
        self.boxes.append(Container(self.max_box_size))
        box_id = len(self.boxes) - 1
        logger.debug("created box %d (max_size=%d)", box_id, self.max_box_size)
        return box_id

    @property
    def box_count(self) -> int:
        return len(self.boxes)

    def get_box(self, box_id: int) -> List[Pokemon]:
        return self._container(Location.box(box_id)).get_pokemon()

    def get_party(self) -> List[Pokemon]:
        return self.party.get_pokemon()

    def location_of(self, pokeapi_id: int) -> Optional[Location]:
        return self.locations.get(pokeapi_id)

    def _container(self, location: Location) -> Container:
        if location.is_party:
            return self.party
        # negative ids must not wrap around to the end of the list
        if not 0 <= location.box_id < len(self.boxes):
            raise BoxDoesNotExist(location.box_id)
        return self.boxes[location.box_id]

    # -- placement

    def add_pokemon(self, pokemon: Pokemon, destination: Location) -> Pokemon:
        """
        Place a Pokemon seen for the first time.

        If the id is already stored (someone placed it while the caller was
        fetching it), the stored one is relocated through move_pokemon instead
        of inserting a second copy.
        """
        if pokemon.pokeapi_id in self.locations:
            return self.move_pokemon(pokemon.pokeapi_id, destination)

        container = self._container(destination)
        if not container.has_space():
            raise ContainerIsFull(destination.box_id)
        container.push(pokemon)
        self.locations[pokemon.pokeapi_id] = destination
        logger.debug("placed pokemon %d in %s", pokemon.pokeapi_id, destination)
        return pokemon

    def move_pokemon(self, pokeapi_id: int, destination: Location) -> Pokemon:
        """
        Relocate a stored Pokemon.

        Destination and its capacity are checked before the Pokemon is taken
        out of its current container, so a failed move leaves everything as it was.
        """
        target = self._container(destination)
        if not target.has_space():
            raise ContainerIsFull(destination.box_id)

        source_location = self.locations.get(pokeapi_id)
        if source_location is None:
            raise PokemonNotFound(pokeapi_id)

        pokemon = self._container(source_location).remove(pokeapi_id)
        target.push(pokemon)
        self.locations[pokeapi_id] = destination
        logger.debug("moved pokemon %d from %s to %s", pokeapi_id, source_location, destination)
        return pokemon

    def __repr__(self) -> str:
        boxes = "\n".join(f"  box {i}: {bx!r}" for i, bx in enumerate(self.boxes))
        locations = ", ".join(f"{k}: {v}" for k, v in self.locations.items())
        return (
            f"Storage(max_party_size={self.max_party_size}, max_box_size={self.max_box_size})\n"
            f"  party: {self.party!r}\n"
            f"{boxes or '  (no boxes)'}\n"
            f"  locations: {{{locations}}}"
        )
