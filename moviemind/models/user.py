# moviemind/models/user.py

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from moviemind.database import Base


class UserModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), unique=True, nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt 해시

    favorites = relationship(
        "FavoriteModel", back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self):
        return f"<UserModel(id={self.id}, username='{self.username}')>"
