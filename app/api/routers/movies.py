"""
Movie API endpoints.
"""

from fastapi import APIRouter, Depends, Query, status
from pymongo import ASCENDING, DESCENDING

from app.api.dependencies import get_store, get_principal
from app.api.models.common import MessageResponse
from app.api.models.movie import MovieIn, MovieResponse, MovieCreated
from app.core.exceptions import Forbidden, NotFound, ValidationError
from app.database import crud
from app.database.connection import DocumentStore, parse_object_id

router = APIRouter(tags=["movies"])


def _require_fields(movie_in: MovieIn) -> None:
    missing = movie_in.first_missing_field()
    if missing:
        raise ValidationError(f"{missing} is required")


def _movie_list(movies) -> list[MovieResponse]:
    return [MovieResponse.model_validate(m) for m in movies]


@router.get("/movies/search", response_model=list[MovieResponse])
def search_movies(
    title: str | None = Query(None),
    store: DocumentStore = Depends(get_store),
):
    """Search movies by case-insensitive title substring."""
    if not title:
        raise ValidationError("Title is required")
    return _movie_list(crud.search_movies_by_title(store, title))


@router.get("/movies", response_model=list[MovieResponse])
def list_movies(store: DocumentStore = Depends(get_store)):
    """List all movies."""
    return _movie_list(crud.get_movies(store))


@router.get("/movies/my-collection", response_model=list[MovieResponse])
def my_collection(
    principal: str = Depends(get_principal),
    store: DocumentStore = Depends(get_store),
):
    """List movies added by the caller."""
    return _movie_list(crud.get_movies_by_owner(store, principal))


@router.get("/movies/{movie_id}", response_model=MovieResponse)
def get_movie(movie_id: str, store: DocumentStore = Depends(get_store)):
    """Get movie details by ID."""
    oid = parse_object_id(movie_id)
    movie = crud.get_movie(store, oid)
    if not movie:
        raise NotFound("Movie not found")
    return MovieResponse.model_validate(movie)


@router.post("/movies/add", response_model=MovieCreated, status_code=status.HTTP_201_CREATED)
def add_movie(
    movie_in: MovieIn,
    principal: str = Depends(get_principal),
    store: DocumentStore = Depends(get_store),
):
    """Add a movie owned by the caller; movieId is assigned sequentially."""
    _require_fields(movie_in)
    inserted_id, movie_id = crud.create_movie(store, movie_in.as_document(), added_by=principal)
    return MovieCreated(message="Movie added successfully", movie=inserted_id, movieId=movie_id)


@router.patch("/movies/update/{movie_id}", response_model=MessageResponse)
def update_movie(
    movie_id: str,
    movie_in: MovieIn,
    principal: str = Depends(get_principal),
    store: DocumentStore = Depends(get_store),
):
    """Replace all fields of a movie the caller owns."""
    oid = parse_object_id(movie_id)
    _require_fields(movie_in)
    movie = crud.get_movie(store, oid)
    if not movie:
        raise NotFound("Movie not found")
    if movie.get("addedBy") != principal:
        raise Forbidden("Unauthorized: You can only edit your own movies")
    if not crud.update_movie(store, oid, movie_in.as_document(), added_by=principal):
        raise NotFound("Movie not found")
    return MessageResponse(message="Movie updated successfully")


@router.delete("/movies/{movie_id}", response_model=MessageResponse)
def delete_movie(
    movie_id: str,
    principal: str = Depends(get_principal),
    store: DocumentStore = Depends(get_store),
):
    """Delete a movie the caller owns."""
    oid = parse_object_id(movie_id)
    # Not found and not owned collapse into one answer
    if not crud.delete_movie(store, oid, owner=principal):
        raise Forbidden("Unauthorized or movie not found")
    return MessageResponse(message="Movie deleted successfully")


@router.get("/movie-slider", response_model=list[MovieResponse])
def movie_slider(store: DocumentStore = Depends(get_store)):
    """First six movies by movieId."""
    return _movie_list(crud.get_movies_sorted(store, "movieId", ASCENDING))


@router.get("/movie-toprated", response_model=list[MovieResponse])
def movie_top_rated(store: DocumentStore = Depends(get_store)):
    """Six highest-rated movies."""
    return _movie_list(crud.get_movies_sorted(store, "rating", DESCENDING))


@router.get("/movie-recent", response_model=list[MovieResponse])
def movie_recent(store: DocumentStore = Depends(get_store)):
    """Six most recently added movies by movieId."""
    return _movie_list(crud.get_movies_sorted(store, "movieId", DESCENDING))
