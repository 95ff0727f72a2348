"""
Small PokeAPI client used to fill in Pokemon we have not stored yet.

A Pokemon is built from two resources:
- GET /pokemon/{id}          -> id, name, height, weight
- GET /pokemon-species/{id}  -> base_happiness

Calls are blocking (requests); async callers should run them in the threadpool.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import requests

from core.config import settings
from storage.pokemon import Pokemon

logger = logging.getLogger(__name__)


class PokeApiError(RuntimeError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


@dataclass
class PokeApiClient:
    base_url: str
    timeout: float = 30
    session: requests.Session = field(default_factory=requests.Session)

    def _get(self, path: str) -> Dict[str, Any]:
        url = f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"
        try:
            resp = self.session.get(
                url,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error("pokemon api error: GET %s: %r", url, e)
            raise PokeApiError(f"GET {path} failed: {e}") from e

        if resp.status_code >= 400:
            logger.error("pokemon api error: GET %s -> %s", url, resp.status_code)
            raise PokeApiError(f"GET {path} failed ({resp.status_code})", status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError as e:
            logger.error("pokemon api parsing error: GET %s: %r", url, e)
            raise PokeApiError(f"GET {path} returned invalid JSON") from e
        if not isinstance(data, dict):
            logger.error("pokemon api parsing error: GET %s: expected an object", url)
            raise PokeApiError(f"GET {path} returned an unexpected payload")
        return data

    def get_pokemon(self, pokeapi_id: int) -> Pokemon:
        pokemon = self._get(f"pokemon/{pokeapi_id}")
        species = self._get(f"pokemon-species/{pokeapi_id}")

        try:
            return Pokemon(
                pokeapi_id=int(pokemon["id"]),
                name=str(pokemon["name"]),
                height=int(pokemon["height"]),
                weight=int(pokemon["weight"]),
                base_happiness=int(species.get("base_happiness") or 0),
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.error("pokemon api parsing error for %d: %r", pokeapi_id, e)
            raise PokeApiError(f"Incomplete PokeAPI data for pokemon {pokeapi_id}") from e


pokeapi_client = PokeApiClient(base_url=settings.pokeapi_url, timeout=settings.pokeapi_timeout)


def get_pokeapi_client() -> PokeApiClient:
    return pokeapi_client
