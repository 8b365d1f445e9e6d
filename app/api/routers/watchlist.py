"""
Watchlist API endpoints. Every route acts on the caller's own entries.
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_store, get_principal
from app.api.models.common import InsertResponse, MessageResponse
from app.api.models.movie import MovieResponse
from app.api.models.watchlist import WatchlistAdd, WatchlistStatus
from app.core.exceptions import Forbidden, NotFound, ValidationError
from app.database import crud
from app.database.connection import DocumentStore, parse_object_id

router = APIRouter(prefix="/watchlist", tags=["watchlist"])


@router.get("/check/{movie_id}", response_model=WatchlistStatus)
def check_watchlist(
    movie_id: str,
    principal: str = Depends(get_principal),
    store: DocumentStore = Depends(get_store),
):
    """Tell whether a movie is on the caller's watchlist."""
    oid = parse_object_id(movie_id)
    entry = crud.get_watchlist_entry(store, oid, principal)
    return WatchlistStatus(inWatchlist=entry is not None)


@router.post("", response_model=InsertResponse | MessageResponse)
def add_to_watchlist(
    entry_in: WatchlistAdd,
    principal: str = Depends(get_principal),
    store: DocumentStore = Depends(get_store),
):
    """Add a movie to the caller's watchlist once."""
    if not (entry_in.movieId and entry_in.userEmail):
        raise ValidationError("Movie ID and user email are required")
    oid = parse_object_id(entry_in.movieId)
    if entry_in.userEmail != principal:
        raise Forbidden("Unauthorized: Email mismatch")
    inserted_id = crud.add_watchlist_entry(store, oid, entry_in.userEmail)
    if inserted_id is None:
        return MessageResponse(message="Movie already in watchlist")
    return InsertResponse(insertedId=inserted_id)


@router.get("/my", response_model=list[MovieResponse])
def my_watchlist(
    principal: str = Depends(get_principal),
    store: DocumentStore = Depends(get_store),
):
    """List the movies on the caller's watchlist."""
    return [MovieResponse.model_validate(m) for m in crud.get_watchlist_movies(store, principal)]


@router.delete("/{movie_id}", response_model=MessageResponse)
def remove_from_watchlist(
    movie_id: str,
    principal: str = Depends(get_principal),
    store: DocumentStore = Depends(get_store),
):
    """Remove a movie from the caller's watchlist."""
    oid = parse_object_id(movie_id)
    if not crud.remove_watchlist_entry(store, oid, principal):
        raise NotFound("Movie not found in watchlist")
    return MessageResponse(message="Movie removed from watchlist")
