from __future__ import annotations

from sqlalchemy.orm import Session

from zip_api.core.exceptions import NotFoundException, COUNTY_NOT_FOUND, CITY_NOT_FOUND
from zip_api.db.models.county import County
from zip_api.db.models.city import City
from zip_api.db import repository


def resolve_county(db: Session, county_id: int) -> County:
    """Return the county or raise 404 "County not found".

    Every county-scoped endpoint calls this before touching city rows.
    """
    county = repository.find_county_by_id(db, county_id)
    if county is None:
        raise NotFoundException(COUNTY_NOT_FOUND)
    return county


def resolve_city(db: Session, county_id: int, city_id: int) -> City:
    # the city must belong to this county, existing elsewhere is not enough
    city = repository.find_city_by_id_and_county(db, county_id, city_id)
    if city is None:
        raise NotFoundException(CITY_NOT_FOUND)
    return city
