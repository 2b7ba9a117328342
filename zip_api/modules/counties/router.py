from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from zip_api.db.session import get_db
from zip_api.db import repository
from zip_api.auth.deps import get_current_user
from zip_api.db.models.county import County
from zip_api.core.lookup import resolve_county
from zip_api.modules.counties.schemas import (
    CountyCreate,
    CountyPatch,
    CountyOut,
    CountyListResponse,
    CountyResponse,
    MessageResponse,
)

router = APIRouter(prefix="/counties", tags=["counties"])

@router.get("", response_model=CountyListResponse)
def index(db: Session = Depends(get_db)):
    counties = repository.list_counties(db)
    return CountyListResponse(counties=[CountyOut.model_validate(c) for c in counties])

@router.post("", response_model=CountyResponse, status_code=status.HTTP_201_CREATED)
def create(body: CountyCreate, db: Session = Depends(get_db), user=Depends(get_current_user)):
    c = County(name=body.name)
    db.add(c)
    db.commit()
    db.refresh(c)
    return CountyResponse(message="County created successfully", county=CountyOut.model_validate(c))

@router.patch("/{county_id}", response_model=CountyResponse)
def modify(county_id: int, body: CountyPatch, db: Session = Depends(get_db), user=Depends(get_current_user)):
    county = resolve_county(db, county_id)
    if "name" in body.model_fields_set and body.name is not None:
        county.name = body.name
    db.commit()
    db.refresh(county)
    return CountyResponse(message="County updated successfully", county=CountyOut.model_validate(county))

@router.delete("/{county_id}", response_model=MessageResponse)
def delete(county_id: int, db: Session = Depends(get_db), user=Depends(get_current_user)):
    county = resolve_county(db, county_id)
    db.delete(county)
    try:
        db.commit()
    except IntegrityError:
        # cities still reference it; the app-level handler answers 409
        db.rollback()
        raise
    return MessageResponse(message="County deleted successfully")
