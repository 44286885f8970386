#!/usr/bin/env python3
"""
Load movie catalog entries into the Movie Chat SQLite database.

The API never creates movies; the catalog is provisioned out-of-band
with this script.  The input file is a JSON array of objects in the
TMDB "discover" format (``id``, ``title``, ``genre_ids``, ``poster_path``
and so on).  List-valued fields such as ``genre_ids`` and
``origin_country`` are stored as JSON text.

Usage:
    python seed_movies.py --db ./movie_chat_api/movies.db --file movies.json

Existing movies are left untouched unless ``--replace`` is given.
"""

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict, Iterable

from movie_chat_api.app.core.db import Database, open_database

COLUMNS = (
    "id", "adult", "backdrop_path", "genre_ids", "origin_country",
    "original_language", "original_name", "original_title", "overview",
    "popularity", "poster_path", "first_air_date", "release_date",
    "name", "title", "video", "vote_average", "vote_count",
)


def movie_row(movie: Dict[str, Any]) -> tuple:
    """Map a TMDB-style movie object to a ``movies`` row."""
    if not isinstance(movie, dict):
        raise ValueError(f"Movie entry is not an object: {movie!r}")
    if not isinstance(movie.get("id"), int):
        raise ValueError(f"Movie entry without integer id: {movie!r}")
    values = []
    for column in COLUMNS:
        value = movie.get(column)
        if column in ("genre_ids", "origin_country"):
            value = json.dumps(value if value is not None else [])
        elif column in ("adult", "video"):
            value = int(bool(value))
        elif column in ("popularity", "vote_average"):
            value = float(value or 0)
        elif column == "vote_count":
            value = int(value or 0)
        values.append(value)
    return tuple(values)


def seed_movies(db: Database, movies: Iterable[Dict[str, Any]], replace: bool = False) -> int:
    """Insert ``movies`` in one transaction and return how many rows changed."""
    placeholders = ", ".join("?" for _ in COLUMNS)
    sql = f"INSERT INTO movies ({', '.join(COLUMNS)}) VALUES ({placeholders})"
    if replace:
        # Update in place; deleting the row would orphan its messages.
        updates = ", ".join(f"{column} = excluded.{column}" for column in COLUMNS[1:])
        sql += f" ON CONFLICT(id) DO UPDATE SET {updates}"
    else:
        sql += " ON CONFLICT(id) DO NOTHING"
    rows = [movie_row(movie) for movie in movies]
    changed = 0
    with db.transaction() as cursor:
        for row in rows:
            cursor.execute(sql, row)
            changed += cursor.rowcount
    return changed


def main():
    ap = argparse.ArgumentParser(description="Seed the Movie Chat catalog (SQLite).")
    ap.add_argument("--db", required=True, help="Path to SQLite DB file (created if missing)")
    ap.add_argument("--file", required=True, help="JSON file with an array of movie objects")
    ap.add_argument("--replace", action="store_true", help="Overwrite movies that already exist")
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    if not os.path.exists(args.file):
        print(f"[!] Movie file not found: {args.file}", file=sys.stderr)
        sys.exit(1)

    with open(args.file, "r", encoding="utf-8") as f:
        data = json.load(f)
    # TMDB list responses wrap the array in ``results``.
    if isinstance(data, dict):
        data = data.get("results", [])
    if not isinstance(data, list):
        print("[!] Expected a JSON array of movies", file=sys.stderr)
        sys.exit(1)

    db = open_database(os.path.abspath(args.db))
    try:
        changed = seed_movies(db, data, replace=args.replace)
    except ValueError as exc:
        print(f"[!] {exc}", file=sys.stderr)
        sys.exit(2)
    finally:
        db.close()
    print(f"[+] Seeded {changed} of {len(data)} movies into {args.db}")


if __name__ == "__main__":
    main()
