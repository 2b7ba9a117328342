from __future__ import annotations

from sqlalchemy.orm import Session

from zip_api.db.models.county import County
from zip_api.db.models.city import City


SAMPLE_DATA: dict[str, list[tuple[str, int]]] = {
    "Baranya": [
        ("Pécs", 7600),
        ("Mohács", 7700),
        ("Siklós", 7800),
        ("Abaliget", 7678),
        ("Ócsárd", 7814),
    ],
    "Heves": [
        ("Eger", 3300),
        ("Gyöngyös", 3200),
        ("Hatvan", 3000),
        ("Átány", 3371),
        ("Egerszalók", 3394),
    ],
    "Pest": [
        ("Abony", 2740),
        ("Érd", 2030),
        ("Örkény", 2377),
        ("Üllő", 2225),
        ("Vác", 2600),
    ],
}


def _get_or_create_county(db: Session, name: str) -> County:
    c = db.query(County).filter(County.name == name).first()
    if not c:
        c = County(name=name)
        db.add(c)
        db.flush()  # populate c.id
    return c


def _get_or_create_city(db: Session, county_id: int, name: str, zip_code: int) -> City:
    city = (
        db.query(City)
        .filter(City.county_id == county_id, City.name == name)
        .first()
    )
    if not city:
        city = City(name=name, zip_code=zip_code, county_id=county_id)
        db.add(city)
        db.flush()
    return city


def seed_sample(db: Session) -> None:
    """Idempotent sample dataset. Caller commits."""
    for county_name, cities in SAMPLE_DATA.items():
        county = _get_or_create_county(db, county_name)
        for name, zip_code in cities:
            _get_or_create_city(db, county.id, name, zip_code)
