"""Typed lookups over the county/city tables.

Lookups return ``None`` for a missing row; deciding what "missing" means for
the caller (404, skip, ...) is left to ``zip_api.core.lookup`` and the routers.
"""
from __future__ import annotations

from sqlalchemy import or_
from sqlalchemy.orm import Session

from zip_api.db.models.county import County
from zip_api.db.models.city import City


def find_county_by_id(db: Session, county_id: int) -> County | None:
    return db.get(County, county_id)


def find_city_by_id_and_county(db: Session, county_id: int, city_id: int) -> City | None:
    return (
        db.query(City)
        .filter(City.id == city_id, City.county_id == county_id)
        .first()
    )


def list_counties(db: Session) -> list[County]:
    return db.query(County).order_by(County.id.asc()).all()


def list_cities_in_county(db: Session, county_id: int) -> list[City]:
    return db.query(City).filter(City.county_id == county_id).order_by(City.id.asc()).all()


def list_city_names_in_county(db: Session, county_id: int) -> list[str]:
    rows = db.query(City.name).filter(City.county_id == county_id).order_by(City.id.asc()).all()
    return [name for (name,) in rows]


def find_city_candidates_by_prefix(db: Session, county_id: int, letter: str) -> list[City]:
    """Store-side prefilter for the first-letter browse.

    LIKE behaves differently per backend (SQLite only folds ASCII case, MySQL
    collations may also fold accents), so every case variant of the letter is
    queried and the result is a superset. Callers verify each row afterwards.
    """
    variants = {letter, letter.lower(), letter.upper()}
    return (
        db.query(City)
        .filter(
            City.county_id == county_id,
            or_(*[City.name.startswith(v, autoescape=True) for v in sorted(variants)]),
        )
        .order_by(City.id.asc())
        .all()
    )
