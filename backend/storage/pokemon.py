from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Pokemon:
    """A Pokemon as stored. Keyed by its PokeAPI id; never mutated once built."""

    pokeapi_id: int
    name: str
    height: int
    weight: int
    base_happiness: int

    @property
    def to_schema(self) -> dict:
        data = asdict(self)
        # wire name kept from the public API
        data["pokeAPI_id"] = data.pop("pokeapi_id")
        return data
