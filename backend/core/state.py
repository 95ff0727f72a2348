from fastapi import Request

from core.config import settings
from storage import SharedStorage, Storage


def create_storage() -> SharedStorage:
    return SharedStorage(
        Storage(max_party_size=settings.max_party_size, max_box_size=settings.max_box_size)
    )


def get_storage(request: Request) -> SharedStorage:
    # Built once per app in the lifespan handler (see main.py)
    return request.app.state.storage
