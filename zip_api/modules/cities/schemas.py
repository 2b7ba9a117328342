"""Request and response bodies for cities.

Responses never expose ``zip_code``/``county_id`` directly: a city is always
projected to ``{id, name, zip, county}`` with the county's name.
"""

from typing import Optional, List

from pydantic import BaseModel, Field, field_validator

from zip_api.db.models.city import City
from zip_api.db.models.county import County
from zip_api.modules.counties.schemas import clean_name


class CityOut(BaseModel):
    id: int
    name: str
    zip: int
    county: str

    @classmethod
    def project(cls, city: City, county: County) -> "CityOut":
        return cls(id=city.id, name=city.name, zip=city.zip_code, county=county.name)


class CityCreate(BaseModel):
    name: str = Field(max_length=255)
    zip_code: int = Field(ge=0, le=65535)

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        return clean_name(value)


class CityPatch(BaseModel):
    """Only fields present in the body are applied; county_id cannot move."""
    name: Optional[str] = Field(default=None, max_length=255)
    zip_code: Optional[int] = Field(default=None, ge=0, le=65535)

    @field_validator("name")
    @classmethod
    def check_name(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else clean_name(value)


class CityListResponse(BaseModel):
    cities: List[CityOut]


class CityResponse(BaseModel):
    message: str
    city: CityOut


class LetterIndexResponse(BaseModel):
    letters: List[str]
