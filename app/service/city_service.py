from typing import Dict, Optional, Type
from pydantic import BaseModel, ValidationError
from toolz import pipe, curry
from app.exceptions import InvalidInputError
from app.schemas.cities import CityIn, TranslationIn, TranslationPatch


def _describe(error: ValidationError) -> str:
    details = error.errors()
    fields = [str(detail["loc"][0]) for detail in details if detail["loc"]]
    if not fields:
        return "Invalid request data"
    if "city_id" in fields:
        return "City ID is required"
    missing = [str(detail["loc"][0]) for detail in details if detail["type"] == "missing"]
    if missing:
        return f"Missing required fields: {', '.join(missing)}"
    return "Invalid value for " + ", ".join(f"'{field}'" for field in dict.fromkeys(fields))


@curry
def validate(schema: Type[BaseModel], payload) -> BaseModel:
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        raise InvalidInputError(_describe(e)) from e


def fields_sent(model: BaseModel) -> Dict:
    """Only the keys present in the body, so "not sent" and "set to empty" stay distinct."""
    return model.model_dump(exclude_unset=True)


def parse_city(payload) -> Dict:
    return pipe(payload, validate(CityIn), fields_sent)


def parse_new_translation(payload) -> Dict:
    return pipe(payload, validate(TranslationIn), fields_sent)


def parse_translation_patch(payload) -> Dict:
    return pipe(payload, validate(TranslationPatch), fields_sent)


def parse_id(value, label: str) -> int:
    if value is None or value == "":
        raise InvalidInputError(f"{label} is required")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidInputError(f"{label} must be an integer")


def success(data=None, message: Optional[str] = None, meta: Optional[Dict] = None) -> Dict:
    envelope = {"status": "success", "data": data}
    if message is not None:
        envelope["message"] = message
    if meta is not None:
        envelope["meta"] = meta
    return envelope
