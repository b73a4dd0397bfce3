from app.db.psql.models import Base
from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship


class CityTranslation(Base):
    __tablename__ = 'city_translations'
    id = Column(Integer, primary_key=True, autoincrement=True)
    city_id = Column(Integer, ForeignKey('cities.id'), nullable=False, index=True)
    language = Column(String, nullable=False)
    name = Column(String, nullable=False)

    city = relationship("City", back_populates="translations")

    # one name per language per city
    __table_args__ = (
        UniqueConstraint('city_id', 'language', name='uq_city_translation_language'),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "city_id": self.city_id,
            "language": self.language,
            "name": self.name,
        }
