from app.db.psql.models import Base
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship


class City(Base):
    __tablename__ = 'cities'
    id = Column(Integer, primary_key=True, autoincrement=True)
    hex = Column(String, nullable=False, default='')
    updated_at = Column(DateTime, nullable=True)
    # set means logically deleted
    deleted_at = Column(DateTime, nullable=True, index=True)

    translations = relationship(
        "CityTranslation",
        back_populates="city",
        order_by="CityTranslation.id",
    )

    def to_dict(self, with_translations=True):
        data = {
            "id": self.id,
            "hex": self.hex,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
            "deleted_at": self.deleted_at.isoformat() if self.deleted_at else None,
        }
        if with_translations:
            data["translations"] = [t.to_dict() for t in self.translations]
        return data

    def __repr__(self):
        return f"<City(id={self.id}, hex='{self.hex}')>"
