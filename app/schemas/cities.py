"""Request bodies accepted by the /cities endpoints."""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, StrictInt, StrictStr, field_validator


class CityIn(BaseModel):
    """Body of city create and update; on update only the keys sent are applied."""
    hex: StrictStr = ""
    deleted_at: Optional[datetime] = None


class TranslationIn(BaseModel):
    city_id: StrictInt = Field(gt=0)
    language: StrictStr = Field(min_length=1)
    name: StrictStr = Field(min_length=1)


class TranslationPatch(BaseModel):
    city_id: Optional[StrictInt] = Field(default=None, gt=0)
    language: Optional[StrictStr] = Field(default=None, min_length=1)
    name: Optional[StrictStr] = Field(default=None, min_length=1)

    @field_validator("*")
    @classmethod
    def not_null(cls, value):
        # columns are NOT NULL, an explicit null cannot be applied
        if value is None:
            raise ValueError("may not be null")
        return value
