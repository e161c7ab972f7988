"""Seed the poem catalog. Safe to run repeatedly."""

import logging

from sqlalchemy.orm import Session

from ..infrastructure.orm.poem_model import PoemModel
from .database import SessionLocal, init_db

logger = logging.getLogger(__name__)


INITIAL_POEMS = [
    {
        "title": "Having a Coke With You",
        "slug": "having-a-coke-with-you",
        "year": 1960,
        "external_link": "https://www.poetryfoundation.org/poems/42665/having-a-coke-with-you",
        "context": "A love poem written for Vincent Warren, collected in Love Poems (Tentative Title).",
    },
    {
        "title": "Ave Maria",
        "slug": "ave-maria",
        "year": 1964,
        "external_link": "https://www.poetryfoundation.org/poems/42666/ave-maria",
        "context": "An address to the mothers of America on the virtues of the movies, from Lunch Poems.",
    },
]


def seed_poems(db: Session) -> int:
    """Insert missing catalog poems by slug; returns how many were added"""
    existing = {slug for (slug,) in db.query(PoemModel.slug).all()}
    added = 0
    for poem in INITIAL_POEMS:
        if poem["slug"] in existing:
            continue
        db.add(PoemModel(**poem))
        added += 1
    db.commit()
    return added


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    init_db()
    db = SessionLocal()
    try:
        added = seed_poems(db)
        logger.info(f"Seeded {added} poems")
    finally:
        db.close()


if __name__ == "__main__":
    main()
