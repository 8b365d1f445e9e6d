"""
Review API endpoints.
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_store, get_principal
from app.api.models.common import InsertResponse
from app.api.models.review import ReviewCreate, ReviewResponse
from app.core.exceptions import Forbidden, ValidationError
from app.database import crud
from app.database.connection import DocumentStore, parse_object_id

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.get("/{movie_id}", response_model=list[ReviewResponse])
def get_reviews(movie_id: str, store: DocumentStore = Depends(get_store)):
    """Get reviews for a movie, newest first."""
    oid = parse_object_id(movie_id)
    return [ReviewResponse.model_validate(r) for r in crud.get_reviews_for_movie(store, oid)]


@router.post("", response_model=InsertResponse)
def submit_review(
    review_in: ReviewCreate,
    principal: str = Depends(get_principal),
    store: DocumentStore = Depends(get_store),
):
    """Submit a review as the caller."""
    if not (review_in.movieId and review_in.userEmail and review_in.comment and review_in.rating):
        raise ValidationError("All fields are required")
    oid = parse_object_id(review_in.movieId)
    if review_in.userEmail != principal:
        raise Forbidden("Unauthorized: Email mismatch")
    inserted_id = crud.create_review(
        store,
        movie_id=oid,
        user_email=review_in.userEmail,
        comment=review_in.comment,
        rating=review_in.rating,
    )
    return InsertResponse(insertedId=inserted_id)
