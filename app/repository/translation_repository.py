from typing import Dict
from app.db.psql.database import session_maker, store_stage
from app.db.psql.models import City, CityTranslation
from app.exceptions import NotFoundError
from app.repository.city_query import MAX_INT
from app.repository.city_repository import get_live_city
from app.utils.logger import get_logger

logger = get_logger(__name__)


def _get_translation(session, translation_id) -> CityTranslation:
    if not 0 < translation_id <= MAX_INT:
        raise NotFoundError("Translation not found")
    with store_stage("Failed to fetch the translation from the database"):
        translation = session.get(CityTranslation, translation_id)
    if translation is None:
        raise NotFoundError("Translation not found")
    return translation


def translate_name(name: str, lang: str) -> str:
    """
    Resolve a city name given in any language to its name in `lang`.

    The first translation (lowest id) of a live city whose name contains
    `name` decides the city; that city's `lang` translation is returned.
    """
    with session_maker() as session:
        with store_stage("Failed to fetch city translation from the database"):
            source = session.query(CityTranslation).join(
                City, City.id == CityTranslation.city_id
            ).filter(
                CityTranslation.name.icontains(name, autoescape=True),
                City.deleted_at.is_(None)
            ).order_by(
                CityTranslation.id
            ).first()
        if source is None:
            raise NotFoundError(f"No city name matches '{name}'")

        with store_stage("Failed to fetch translated city name from the database"):
            target = session.query(CityTranslation).filter(
                CityTranslation.city_id == source.city_id,
                CityTranslation.language == lang
            ).order_by(
                CityTranslation.id
            ).first()
        if target is None:
            raise NotFoundError(f"City {source.city_id} has no '{lang}' translation")
        return target.name


def get_translation(translation_id: int) -> Dict:
    with session_maker() as session:
        return _get_translation(session, translation_id).to_dict()


def create_translation(fields: Dict) -> Dict:
    with store_stage("Failed to add the new translation"):
        with session_maker.begin() as session:
            city = get_live_city(session, fields["city_id"])
            translation = CityTranslation(**{**fields, "city_id": city.id})
            session.add(translation)
            session.flush()
            logger.info(f"Created {translation.language} translation {translation.id} for city {city.id}")
            return translation.to_dict()


def update_translation(translation_id: int, patch: Dict) -> Dict:
    with store_stage("Failed to update the translation"):
        with session_maker.begin() as session:
            translation = _get_translation(session, translation_id)
            if "city_id" in patch:
                get_live_city(session, patch["city_id"])
            for column, value in patch.items():
                setattr(translation, column, value)
            session.flush()
            logger.info(f"Updated translation {translation.id}: {sorted(patch)}")
            return translation.to_dict()


def delete_translation(translation_id: int) -> None:
    with store_stage("Failed to delete the translation"):
        with session_maker.begin() as session:
            translation = _get_translation(session, translation_id)
            session.delete(translation)
    logger.info(f"Deleted translation {translation_id}")
