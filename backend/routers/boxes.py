from fastapi import APIRouter, Depends, Path, status

from core.errors import not_found_error
from core.pokeapi_client import PokeApiClient, get_pokeapi_client
from core.state import get_storage
from routers.placement import move_or_place
from schemas.pokemon import (
    ContainerRead,
    CreateBoxResponse,
    MovePokemonRequest,
    MovePokemonResponse,
    PokemonRead,
)
from storage import BoxDoesNotExist, Location, SharedStorage

router = APIRouter()


@router.post("", response_model=CreateBoxResponse, status_code=status.HTTP_201_CREATED)
async def create_box(storage: SharedStorage = Depends(get_storage)):
    async with storage.write() as s:
        box_id = s.add_box()
    return CreateBoxResponse(box_id=box_id)


@router.get("/{box_id}", response_model=ContainerRead)
async def get_box(
    box_id: int = Path(ge=0),
    storage: SharedStorage = Depends(get_storage),
):
    async with storage.read() as s:
        try:
            pokemon = s.get_box(box_id)
        except BoxDoesNotExist as e:
            raise not_found_error() from e
    return ContainerRead(pokemon=[PokemonRead(**p.to_schema) for p in pokemon])


@router.post("/{box_id}/pokemon", response_model=MovePokemonResponse)
async def move_pokemon_to_box(
    payload: MovePokemonRequest,
    box_id: int = Path(ge=0),
    storage: SharedStorage = Depends(get_storage),
    client: PokeApiClient = Depends(get_pokeapi_client),
):
    """
    Move a Pokemon into a box.

    - Already stored (party or any box): relocated.
    - Unknown: fetched from PokeAPI, then placed.
    - 404 if the box does not exist, 409 if it is full.
    """
    pokemon = await move_or_place(storage, client, payload.pokeAPI_id, Location.box(box_id))
    return MovePokemonResponse(pokemon=PokemonRead(**pokemon.to_schema))
