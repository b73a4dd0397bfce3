from sqlalchemy.orm import declarative_base

Base = declarative_base()

from .city import City
from .city_translation import CityTranslation
