# moviemind/schemas/favorite.py

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class FavoriteStatus(BaseModel):
    is_favorite: bool = Field(description="토글 후 즐겨찾기 여부")

    class Config:
        alias_generator = to_camel
        populate_by_name = True
