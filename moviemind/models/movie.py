# moviemind/models/movie.py

from sqlalchemy import Column, Integer, String, Text, CheckConstraint, UniqueConstraint
from sqlalchemy.orm import relationship
from moviemind.database import Base


class MovieModel(Base):
    __tablename__ = "movies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    poster_url = Column(Text, nullable=False)
    genre = Column(String(255), nullable=False, comment="쉼표로 구분된 장르")
    rating = Column(Integer, nullable=False, comment="0-100")
    release_year = Column(Integer, nullable=False)

    favorited_by = relationship(
        "FavoriteModel", back_populates="movie", cascade="all, delete-orphan", passive_deletes=True
    )

    __table_args__ = (
        CheckConstraint("rating >= 0 AND rating <= 100", name="check_movie_rating"),
        UniqueConstraint("title", "release_year", name="unique_movie_title_year"),
    )

    def __repr__(self):
        return f"<MovieModel(id={self.id}, title='{self.title}')>"
