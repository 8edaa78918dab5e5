# movie_catalog/database/models.py
from sqlalchemy import Column, Integer, String, DateTime, Text, Numeric
from datetime import datetime
from movie_catalog.database.database import Base

# ==========================
# ✅ MOVIE MODEL
# ==========================
class Movie(Base):
    __tablename__ = "movies"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    year = Column(Integer, nullable=True)
    genre = Column(String(100), nullable=True, index=True)
    # returned as float so it serializes like the in-memory seed movies
    rating = Column(Numeric(2, 1, asdecimal=False), nullable=True)
    duration = Column(String(50), nullable=True)
    description = Column(Text, nullable=True)
    poster_url = Column(String(500), nullable=True)
    trailer_url = Column(String(500), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "year": self.year,
            "genre": self.genre,
            "rating": self.rating,
            "duration": self.duration,
            "description": self.description,
            "poster_url": self.poster_url,
            "trailer_url": self.trailer_url,
            "created_at": self.created_at.isoformat() if self.created_at is not None else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at is not None else None,
        }
