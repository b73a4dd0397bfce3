from datetime import datetime
from typing import List, Tuple, Dict
from toolz import pipe
from app.db.psql.database import session_maker, store_stage
from app.db.psql.models import City, CityTranslation
from app.exceptions import NotFoundError
from app.repository.city_query import CityFilter, Page, MAX_INT
from app.utils.logger import get_logger

logger = get_logger(__name__)


def get_live_city(session, city_id) -> City:
    if not 0 < city_id <= MAX_INT:
        raise NotFoundError("City not found")
    with store_stage("Failed to fetch the city from the database"):
        city = session.get(City, city_id)
    if city is None or city.deleted_at is not None:
        raise NotFoundError("City not found")
    return city


def _find_page(city_filter: CityFilter, page: Page) -> Tuple[List[Dict], int]:
    with session_maker() as session:
        with store_stage("Failed to fetch cities count from the database"):
            total = city_filter.count_query(session).scalar()
        with store_stage("Failed to fetch paginated cities from the database"):
            return pipe(
                city_filter.page_query(session, page).all(),
                lambda cities: [city.to_dict() for city in cities],
            ), total


def list_cities(page: Page) -> Tuple[List[Dict], int]:
    """Cities that have translations, by id, with every translation attached.

    The total counts every live city, whether or not it has translations.
    """
    return _find_page(CityFilter(), page)


def search_cities(name: str, lang: str, page: Page) -> Tuple[List[Dict], int]:
    """Cities with a `lang` translation containing `name`, with only their `lang` translations."""
    return _find_page(CityFilter(name=name, lang=lang), page)


def create_city(fields: Dict) -> Dict:
    with store_stage("Failed to add the new city"):
        with session_maker.begin() as session:
            city = City(translations=[], **fields)
            city.updated_at = datetime.now()
            session.add(city)
            session.flush()
            logger.info(f"Created city {city.id}")
            return city.to_dict()


def update_city(city_id: int, patch: Dict) -> Dict:
    with store_stage("Failed to update the city"):
        with session_maker.begin() as session:
            city = get_live_city(session, city_id)
            for column, value in patch.items():
                setattr(city, column, value)
            city.updated_at = datetime.now()
            session.flush()
            logger.info(f"Updated city {city.id}: {sorted(patch)}")
            return city.to_dict()


def delete_city(city_id: int) -> None:
    """Delete a city and all of its translations in a single transaction."""
    with store_stage("Failed to delete the city"):
        with session_maker.begin() as session:
            city = get_live_city(session, city_id)
            with store_stage("Failed to delete city translations"):
                removed = session.query(CityTranslation).filter(
                    CityTranslation.city_id == city.id
                ).delete(synchronize_session=False)
            session.query(City).filter(City.id == city.id).delete(synchronize_session=False)
    logger.info(f"Deleted city {city_id} and {removed} translations")
