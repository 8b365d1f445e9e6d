"""
System API endpoints (liveness, health).
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app.api.dependencies import get_store
from app.core.exceptions import StoreUnavailable
from app.database import crud
from app.database.connection import DocumentStore

router = APIRouter(tags=["system"])


@router.get("/", response_class=PlainTextResponse)
def root():
    """Liveness string."""
    return "Movie Master Pro Server is running"


@router.get("/health")
def health_check(store: DocumentStore = Depends(get_store)):
    """Health check: store reachable and collection sizes."""
    try:
        store.ping()
        user_count = crud.get_user_count(store)
        movie_count = crud.get_movie_count(store)
    except StoreUnavailable as e:
        return {"status": "unhealthy", "database": str(e.__cause__ or e)}
    return {
        "status": "healthy",
        "database": "connected",
        "users": user_count,
        "movies": movie_count,
    }
