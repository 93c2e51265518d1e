# moviemind/services/recommendation_service.py

import random
from typing import List, Optional, Sequence
from moviemind.schemas.movie import Movie
from moviemind.services.storage import DatabaseStorage

DEFAULT_RECOMMENDATION_COUNT = 3


def recommend(
    catalog: Sequence[Movie],
    count: int = DEFAULT_RECOMMENDATION_COUNT,
    rng: Optional[random.Random] = None,
) -> List[Movie]:
    """카탈로그에서 무작위 추천 (중복 없음, 최대 count편)"""
    rng = rng or random
    return rng.sample(list(catalog), min(max(count, 0), len(catalog)))


class RecommendationService:

    def __init__(self, storage: DatabaseStorage, count: int = DEFAULT_RECOMMENDATION_COUNT):
        self.storage = storage
        self.count = count

    async def get_recommendations(self) -> List[Movie]:
        catalog = await self.storage.list_movies()
        return recommend(catalog, self.count)
