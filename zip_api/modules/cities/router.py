from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from zip_api.db.session import get_db
from zip_api.db import repository
from zip_api.auth.deps import get_current_user
from zip_api.db.models.city import City
from zip_api.core.exceptions import AppException
from zip_api.core.lookup import resolve_county, resolve_city
from zip_api.utils.collation import build_letter_index, matches_letter, normalize_letter
from zip_api.modules.counties.schemas import MessageResponse
from zip_api.modules.cities.schemas import (
    CityCreate,
    CityPatch,
    CityOut,
    CityListResponse,
    CityResponse,
    LetterIndexResponse,
)

router = APIRouter(prefix="/counties/{county_id}", tags=["cities"])

@router.get("/cities", response_model=CityListResponse)
def index(county_id: int, db: Session = Depends(get_db)):
    county = resolve_county(db, county_id)
    cities = repository.list_cities_in_county(db, county.id)
    return CityListResponse(cities=[CityOut.project(c, county) for c in cities])

@router.post("/cities", response_model=CityResponse, status_code=status.HTTP_201_CREATED)
def create(county_id: int, body: CityCreate, db: Session = Depends(get_db), user=Depends(get_current_user)):
    county = resolve_county(db, county_id)
    city = City(name=body.name, zip_code=body.zip_code, county_id=county.id)
    db.add(city)
    db.commit()
    db.refresh(city)
    return CityResponse(message="City created successfully", city=CityOut.project(city, county))

@router.patch("/cities/{city_id}", response_model=CityResponse)
def modify(county_id: int, city_id: int, body: CityPatch, db: Session = Depends(get_db), user=Depends(get_current_user)):
    county = resolve_county(db, county_id)
    city = resolve_city(db, county.id, city_id)
    fields = body.model_fields_set
    if "name" in fields and body.name is not None:
        city.name = body.name
    if "zip_code" in fields and body.zip_code is not None:
        city.zip_code = body.zip_code
    db.commit()
    db.refresh(city)
    return CityResponse(message="City updated successfully", city=CityOut.project(city, county))

@router.delete("/cities/{city_id}", response_model=MessageResponse)
def delete(county_id: int, city_id: int, db: Session = Depends(get_db), user=Depends(get_current_user)):
    county = resolve_county(db, county_id)
    city = resolve_city(db, county.id, city_id)
    db.delete(city)
    db.commit()
    return MessageResponse(message="City deleted successfully")

@router.get("/abc", response_model=LetterIndexResponse)
def letters(county_id: int, db: Session = Depends(get_db)):
    county = resolve_county(db, county_id)
    names = repository.list_city_names_in_county(db, county.id)
    return LetterIndexResponse(letters=build_letter_index(names))

@router.get("/abc/{letter}", response_model=CityListResponse)
def by_letter(county_id: int, letter: str, db: Session = Depends(get_db)):
    county = resolve_county(db, county_id)
    letter = normalize_letter(letter)
    if len(letter) != 1:
        raise AppException("The letter must be a single character.", status_code=422)
    candidates = repository.find_city_candidates_by_prefix(db, county.id, letter)
    # LIKE may over-match (case/accent folding collations); keep exact first-letter hits only
    cities = [c for c in candidates if matches_letter(c.name, letter)]
    return CityListResponse(cities=[CityOut.project(c, county) for c in cities])
