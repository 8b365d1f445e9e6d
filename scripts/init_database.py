#!/usr/bin/env python
"""
Database initialization script.

This script prepares a MongoDB database for the service:
1. Creates the service indexes (unique emails, movieIds, watchlist pairs)
2. Optionally seeds movies from a JSON file, assigning sequential movieIds

Usage:
    # Indexes only
    python scripts/init_database.py

    # Indexes plus a seed catalog owned by an admin account
    python scripts/init_database.py --seed-file data/movies.json --owner admin@example.com

The connection defaults come from MONGODB_URI / MONGODB_DB.
"""

import sys
import json
import argparse
import logging
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.api import config
from app.database import DocumentStore, ensure_indexes, crud
from app.utils.logging_config import configure_script_logging

logger = logging.getLogger("init_database")


def print_section(title):
    """Print a formatted section header."""
    print(f"\n{'='*60}")
    print(f"{title}")
    print('='*60)


def load_seed_movies(path):
    """
    Load a JSON array of movie objects.

    Args:
        path: Path to the JSON file

    Returns:
        List of movie dicts
    """
    with open(path, encoding="utf-8") as f:
        movies = json.load(f)
    if not isinstance(movies, list):
        raise ValueError(f"{path} must contain a JSON array of movies")
    return movies


def seed_movies(store, movies, owner, verbose=True):
    """
    Insert seed movies that are complete and not already present by title.

    Args:
        store: DocumentStore instance
        movies: List of movie dicts
        owner: Email stamped as addedBy
        verbose: Print progress information

    Returns:
        Number of movies inserted
    """
    inserted = 0
    skipped = 0
    for movie in movies:
        missing = [f for f in crud.MOVIE_FIELDS if not movie.get(f)]
        if missing:
            skipped += 1
            if verbose:
                print(f"  [SKIP] {movie.get('title', '<untitled>')}: missing {', '.join(missing)}")
            continue
        if store.movies.find_one({"title": movie["title"]}):
            skipped += 1
            continue
        fields = {f: movie[f] for f in crud.MOVIE_FIELDS}
        _, movie_id = crud.create_movie(store, fields, added_by=owner)
        inserted += 1
        if verbose:
            print(f"  [OK] {movie_id}: {movie['title']}")

    if verbose:
        print(f"\nInserted: {inserted}, skipped: {skipped}")
    return inserted


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Create indexes and optionally seed the movie catalog"
    )
    parser.add_argument('--uri', default=config.get_mongodb_uri(), help='MongoDB connection string')
    parser.add_argument('--db', default=config.get_database_name(), help='Database name')
    parser.add_argument('--seed-file', type=Path, help='JSON array of movies to insert')
    parser.add_argument('--owner', help='Email recorded as addedBy for seeded movies')
    parser.add_argument('--quiet', action='store_true', help='Reduce output')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')

    args = parser.parse_args()
    verbose = not args.quiet
    configure_script_logging(debug=args.debug)

    if args.seed_file and not args.owner:
        parser.error("--owner is required with --seed-file")

    store = DocumentStore(uri=args.uri, db_name=args.db)
    try:
        store.ping()

        if verbose:
            print_section("1. Indexes")
        results = ensure_indexes(store)
        if verbose:
            for name, ok in results.items():
                print(f"  {'[PASS]' if ok else '[FAIL]'} {name}")

        if args.seed_file:
            if verbose:
                print_section("2. Seed movies")
            seed_movies(store, load_seed_movies(args.seed_file), args.owner, verbose=verbose)

        success = all(results.values())
        if verbose:
            print_section("Summary")
            print("[SUCCESS] Database ready" if success else "[ERROR] Some indexes could not be created")
            print("\nNext: python scripts/verify_database.py")
        sys.exit(0 if success else 1)

    except Exception as e:
        logger.error("Initialization failed: %s", e, exc_info=True)
        sys.exit(1)
    finally:
        store.close()


if __name__ == "__main__":
    main()
