from pydantic import BaseModel, Field
from typing import List

# PokeAPI ids are unsigned 32-bit
MAX_POKEAPI_ID = 2**32 - 1


class PokemonRead(BaseModel):
    pokeAPI_id: int
    name: str
    height: int
    weight: int
    base_happiness: int


class MovePokemonRequest(BaseModel):
    pokeAPI_id: int = Field(ge=0, le=MAX_POKEAPI_ID)


class MovePokemonResponse(BaseModel):
    pokemon: PokemonRead


class ContainerRead(BaseModel):
    pokemon: List[PokemonRead]


class CreateBoxResponse(BaseModel):
    box_id: int
