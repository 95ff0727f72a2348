from typing import Optional

from fastapi import HTTPException, status


def parsing_error(field: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Failed to parse '{field}'")


def generic_error() -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Something didn't work!")


def not_found_error(detail: str = "Not found") -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


def container_is_full() -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Destination was full")


def upstream_error(upstream_status: Optional[int]) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail=f"PokeAPI request failed ({upstream_status or 'no response'})",
    )
