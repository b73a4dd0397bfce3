from dataclasses import dataclass
from typing import Optional
from sqlalchemy import func, distinct
from sqlalchemy.orm import selectinload
from app.db.psql.models import City, CityTranslation

DEFAULT_LIMIT = 10
DEFAULT_SKIP = 0
# largest value a BIGINT column or LIMIT/OFFSET accepts
MAX_INT = 2 ** 63 - 1


def _to_int(value, default: int, minimum: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if minimum <= number <= MAX_INT else default


@dataclass(frozen=True)
class Page:
    """Offset/limit window over an ordered city query."""
    limit: int = DEFAULT_LIMIT
    skip: int = DEFAULT_SKIP

    @classmethod
    def parse(cls, limit=None, skip=None) -> "Page":
        """Bad or out of range values fall back to the defaults, never an error."""
        return cls(
            limit=_to_int(limit, DEFAULT_LIMIT, 1),
            skip=_to_int(skip, DEFAULT_SKIP, 0),
        )

    def apply(self, query):
        return query.offset(self.skip).limit(self.limit)

    def to_meta(self, total: int) -> dict:
        return {"limit": self.limit, "skip": self.skip, "total": total}


@dataclass(frozen=True)
class CityFilter:
    """
    Predicate over cities joined to their translations.

    The page query and the count query are both built from the same instance,
    so the total in the pagination metadata always matches the rows that can
    be paged through.
    """
    name: Optional[str] = None
    lang: Optional[str] = None

    @property
    def by_translation(self) -> bool:
        return self.name is not None or self.lang is not None

    def criteria(self) -> list:
        criteria = [City.deleted_at.is_(None)]
        if self.name is not None:
            criteria.append(CityTranslation.name.icontains(self.name, autoescape=True))
        if self.lang is not None:
            criteria.append(CityTranslation.language == self.lang)
        return criteria

    def apply(self, query):
        return query.join(City.translations).filter(*self.criteria())

    def translations_loader(self):
        if self.lang is None:
            return selectinload(City.translations)
        return selectinload(City.translations.and_(CityTranslation.language == self.lang))

    def page_query(self, session, page: Page):
        # the join repeats a city once per translation, hence distinct
        query = self.apply(session.query(City)).options(self.translations_loader())
        return page.apply(query.distinct().order_by(City.id))

    def count_query(self, session):
        if not self.by_translation:
            return session.query(func.count(City.id)).filter(*self.criteria())
        return self.apply(session.query(func.count(distinct(City.id))).select_from(City))
