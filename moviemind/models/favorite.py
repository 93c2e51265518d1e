# moviemind/models/favorite.py

from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from moviemind.database import Base


class FavoriteModel(Base):
    __tablename__ = "favorites"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    movie_id = Column(Integer, ForeignKey("movies.id", ondelete="CASCADE"), nullable=False)

    user = relationship("UserModel", back_populates="favorites")
    movie = relationship("MovieModel", back_populates="favorited_by")

    __table_args__ = (
        UniqueConstraint("user_id", "movie_id", name="unique_favorite"),
    )

    def __repr__(self):
        return f"<FavoriteModel(user_id={self.user_id}, movie_id={self.movie_id})>"
