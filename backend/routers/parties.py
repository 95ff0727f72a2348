from fastapi import APIRouter, Depends

from core.pokeapi_client import PokeApiClient, get_pokeapi_client
from core.state import get_storage
from routers.placement import move_or_place
from schemas.pokemon import ContainerRead, MovePokemonRequest, MovePokemonResponse, PokemonRead
from storage import PARTY, SharedStorage

router = APIRouter()


@router.get("", response_model=ContainerRead)
async def get_party(storage: SharedStorage = Depends(get_storage)):
    async with storage.read() as s:
        pokemon = s.get_party()
    return ContainerRead(pokemon=[PokemonRead(**p.to_schema) for p in pokemon])


@router.post("/pokemon", response_model=MovePokemonResponse)
async def move_pokemon_to_party(
    payload: MovePokemonRequest,
    storage: SharedStorage = Depends(get_storage),
    client: PokeApiClient = Depends(get_pokeapi_client),
):
    """Move a stored Pokemon into the party, or fetch and place it there. 409 if the party is full."""
    pokemon = await move_or_place(storage, client, payload.pokeAPI_id, PARTY)
    return MovePokemonResponse(pokemon=PokemonRead(**pokemon.to_schema))
