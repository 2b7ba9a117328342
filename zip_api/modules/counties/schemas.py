"""Request and response bodies for counties."""

from typing import Optional, List
import unicodedata

from pydantic import BaseModel, ConfigDict, Field, field_validator


def clean_name(value: str) -> str:
    value = unicodedata.normalize("NFC", value).strip()
    if not value:
        raise ValueError("The name field must not be empty.")
    return value


class CountyOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class CountyCreate(BaseModel):
    name: str = Field(max_length=150)

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        return clean_name(value)


class CountyPatch(BaseModel):
    """Only fields present in the body are applied."""
    name: Optional[str] = Field(default=None, max_length=150)

    @field_validator("name")
    @classmethod
    def check_name(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else clean_name(value)


class CountyListResponse(BaseModel):
    counties: List[CountyOut]


class CountyResponse(BaseModel):
    message: str
    county: CountyOut


class MessageResponse(BaseModel):
    message: str
