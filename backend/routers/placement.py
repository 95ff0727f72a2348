import logging

from fastapi import HTTPException
from fastapi.concurrency import run_in_threadpool

from core.errors import container_is_full, generic_error, not_found_error, upstream_error
from core.pokeapi_client import PokeApiClient, PokeApiError
from storage import (
    BoxDoesNotExist,
    ContainerIsFull,
    Location,
    Pokemon,
    PokemonNotFound,
    SharedStorage,
    StorageError,
)

logger = logging.getLogger(__name__)


def _storage_http_error(e: StorageError, destination: Location) -> HTTPException:
    if isinstance(e, ContainerIsFull):
        return container_is_full()
    if isinstance(e, BoxDoesNotExist):
        if destination.is_party:
            logger.error("Moving pokemon to the party reported a missing box: %s", e)
            return generic_error()
        return not_found_error()
    return not_found_error()


async def move_or_place(
    storage: SharedStorage,
    client: PokeApiClient,
    pokeapi_id: int,
    destination: Location,
) -> Pokemon:
    """
    Move a stored Pokemon to `destination`, or fetch it from PokeAPI and place it there.

    The write lock is held only around each storage call; the PokeAPI fetch
    runs with the lock released.
    """
    try:
        async with storage.write() as s:
            return s.move_pokemon(pokeapi_id, destination)
    except PokemonNotFound:
        logger.debug("pokemon %d is not stored yet, fetching it", pokeapi_id)
    except StorageError as e:
        raise _storage_http_error(e, destination) from e

    try:
        pokemon = await run_in_threadpool(client.get_pokemon, pokeapi_id)
    except PokeApiError as e:
        if e.status_code == 404:
            raise not_found_error("Pokemon not found") from e
        raise upstream_error(e.status_code) from e

    try:
        async with storage.write() as s:
            return s.add_pokemon(pokemon, destination)
    except PokemonNotFound as e:
        logger.error("Fetched pokemon %d and placed it, but then still couldn't find it", pokeapi_id)
        raise not_found_error() from e
    except StorageError as e:
        raise _storage_http_error(e, destination) from e
