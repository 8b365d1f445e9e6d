#!/usr/bin/env python
"""
Database verification script.

Checks performed:
1. Collection counts
2. Index presence
3. Movie id sequence (missing or duplicate movieIds)
4. Dangling references from reviews and watchlist entries
5. Duplicate watchlist pairs

Usage:
    python scripts/verify_database.py
    python scripts/verify_database.py --quick
"""

import sys
import argparse
import logging
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.api import config
from app.database import DocumentStore, COLLECTIONS, verify_indexes
from app.utils.logging_config import configure_script_logging

logger = logging.getLogger("verify_database")


def print_section(title):
    """Print a formatted section header."""
    print(f"\n{'='*60}")
    print(f"{title}")
    print('='*60)


def check_counts(store):
    """Print document counts per collection."""
    print_section("1. Collection Counts")
    for name in COLLECTIONS:
        print(f"  {name:<12} {store.collection(name).count_documents({}):>8,}")
    return True


def check_indexes(store):
    """Check that all service indexes exist."""
    print_section("2. Indexes")
    ok = verify_indexes(store)
    print("[SUCCESS] All indexes present" if ok else "[ERROR] Missing indexes (run init_database.py)")
    return ok


def check_movie_ids(store):
    """Check that every movie has a unique movieId."""
    print_section("3. Movie ID Sequence")
    missing = store.movies.count_documents({"movieId": {"$exists": False}})
    duplicates = list(store.movies.aggregate([
        {"$group": {"_id": "$movieId", "count": {"$sum": 1}}},
        {"$match": {"count": {"$gt": 1}}},
    ]))
    print(f"  Movies without movieId: {missing}")
    print(f"  Duplicated movieIds:    {len(duplicates)}")
    for dup in duplicates[:10]:
        print(f"    movieId {dup['_id']}: {dup['count']} times")
    return missing == 0 and not duplicates


def check_references(store):
    """Check that reviews and watchlist entries point at existing movies."""
    print_section("4. Dangling References")
    movie_ids = set(store.movies.distinct("_id"))
    passed = True
    for name in ("reviews", "watchlists"):
        referenced = set(store.collection(name).distinct("movieId"))
        dangling = referenced - movie_ids
        print(f"  {name}: {len(dangling)} unknown movie ids")
        passed = passed and not dangling
    return passed


def check_watchlist_duplicates(store):
    """Check for duplicate (movieId, userEmail) watchlist pairs."""
    print_section("5. Watchlist Duplicates")
    duplicates = list(store.watchlists.aggregate([
        {"$group": {"_id": {"movieId": "$movieId", "userEmail": "$userEmail"}, "count": {"$sum": 1}}},
        {"$match": {"count": {"$gt": 1}}},
    ]))
    print(f"  Duplicate pairs: {len(duplicates)}")
    return not duplicates


def run_verification(store, quick=False):
    """
    Run all checks and print a summary.

    Returns:
        True if all checks passed
    """
    results = {
        'counts': check_counts(store),
        'indexes': check_indexes(store),
    }
    if not quick:
        results['movie_ids'] = check_movie_ids(store)
        results['references'] = check_references(store)
        results['watchlist_duplicates'] = check_watchlist_duplicates(store)

    print_section("Verification Summary")
    for check_name, result in results.items():
        status = "[PASS]" if result else "[FAIL]"
        print(f"  {status} {check_name.replace('_', ' ').title()}")
    print("="*60)
    return all(results.values())


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Verify movie database integrity")
    parser.add_argument('--uri', default=config.get_mongodb_uri(), help='MongoDB connection string')
    parser.add_argument('--db', default=config.get_database_name(), help='Database name')
    parser.add_argument('--quick', action='store_true', help='Run only counts and index checks')
    args = parser.parse_args()
    configure_script_logging()

    store = DocumentStore(uri=args.uri, db_name=args.db)
    try:
        store.ping()
        success = run_verification(store, quick=args.quick)
        sys.exit(0 if success else 1)
    except Exception as e:
        logger.error("Verification failed: %s", e, exc_info=True)
        sys.exit(1)
    finally:
        store.close()


if __name__ == "__main__":
    main()
