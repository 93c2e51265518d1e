# moviemind/schemas/movie.py

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class MovieBase(BaseModel):
    title: str = Field(description="영화 제목")
    description: str = Field(description="줄거리")
    poster_url: str = Field(description="포스터 URL")
    genre: str = Field(description="장르 (쉼표 구분)")
    rating: int = Field(ge=0, le=100, description="평점 (0-100)")
    release_year: int = Field(description="개봉 연도")

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class MovieCreate(MovieBase):
    pass


class Movie(MovieBase):
    id: int = Field(description="영화 ID")
