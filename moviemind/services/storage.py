# moviemind/services/storage.py

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Dict, List, Optional, Sequence, Tuple
from sqlalchemy import select, func, and_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker
from moviemind.core.exceptions import ConflictError, NotFoundError, Unauthenticated
from moviemind.models.user import UserModel
from moviemind.models.movie import MovieModel
from moviemind.models.favorite import FavoriteModel
from moviemind.schemas.movie import Movie, MovieCreate
from moviemind.schemas.user import UserInDB
from moviemind.services.seed_data import SEED_MOVIES

logger = logging.getLogger("moviemind.storage")


class KeyedLock:
    """키별 asyncio.Lock (사용 중인 키만 보관)"""

    def __init__(self):
        self._locks: Dict[Tuple, asyncio.Lock] = {}
        self._waiters: Dict[Tuple, int] = {}

    @asynccontextmanager
    async def hold(self, key: Tuple):
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._waiters[key] = self._waiters.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._waiters[key] -= 1
            if self._waiters[key] == 0:
                del self._waiters[key]
                del self._locks[key]

    def __len__(self):
        return len(self._locks)


class DatabaseStorage:
    """도메인 연산 <-> DB 쿼리"""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory
        self._favorite_locks = KeyedLock()

    def _session(self) -> Session:
        return self.session_factory()

    # 사용자
    async def get_user(self, user_id: int) -> Optional[UserInDB]:
        with self._session() as db:
            user_model = db.get(UserModel, user_id)
            return UserInDB.model_validate(user_model) if user_model else None

    async def get_user_by_username(self, username: str) -> Optional[UserInDB]:
        with self._session() as db:
            stmt = select(UserModel).where(UserModel.username == username)
            user_model = db.execute(stmt).scalar_one_or_none()
            return UserInDB.model_validate(user_model) if user_model else None

    async def create_user(self, username: str, password_hash: str) -> UserInDB:
        """사용자 생성, 이름 중복 시 ConflictError"""
        if await self.get_user_by_username(username):
            raise ConflictError("Username already exists")

        with self._session() as db:
            user_model = UserModel(username=username, password=password_hash)
            db.add(user_model)
            try:
                db.commit()
            except IntegrityError:
                # 동시 가입으로 unique 제약 위반
                db.rollback()
                raise ConflictError("Username already exists")
            db.refresh(user_model)
            return UserInDB.model_validate(user_model)

    # 영화
    async def list_movies(self) -> List[Movie]:
        with self._session() as db:
            movie_models = db.execute(select(MovieModel)).scalars().all()
            return [Movie.model_validate(m) for m in movie_models]

    async def get_movie(self, movie_id: int) -> Optional[Movie]:
        with self._session() as db:
            movie_model = db.get(MovieModel, movie_id)
            return Movie.model_validate(movie_model) if movie_model else None

    async def count_movies(self) -> int:
        with self._session() as db:
            return db.execute(select(func.count()).select_from(MovieModel)).scalar_one()

    async def seed_catalog(self, movies: Sequence[MovieCreate] = SEED_MOVIES) -> int:
        """카탈로그가 비어 있을 때만 시드, 추가된 영화 수 반환

        전체를 한 트랜잭션으로 넣는다. 동시에 시작한 다른 프로세스가 먼저
        시드했으면 (title, release_year) unique 제약에 걸려 전부 롤백된다.
        """
        if await self.count_movies() > 0:
            return 0

        with self._session() as db:
            db.add_all([MovieModel(**movie.model_dump()) for movie in movies])
            try:
                db.commit()
            except IntegrityError:
                db.rollback()
                if db.execute(select(func.count()).select_from(MovieModel)).scalar_one() > 0:
                    logger.info("다른 프로세스가 이미 카탈로그를 시드함")
                    return 0
                raise
            except Exception:
                db.rollback()
                raise

        logger.info("영화 카탈로그 시드 완료: %d편", len(movies))
        return len(movies)

    # 즐겨찾기
    async def list_favorites(self, user_id: int) -> List[Movie]:
        """사용자 즐겨찾기 영화 목록"""
        with self._session() as db:
            stmt = (
                select(MovieModel)
                .join(FavoriteModel, FavoriteModel.movie_id == MovieModel.id)
                .where(FavoriteModel.user_id == user_id)
            )
            movie_models = db.execute(stmt).scalars().all()
            return [Movie.model_validate(m) for m in movie_models]

    async def toggle_favorite(self, user_id: int, movie_id: int) -> bool:
        """즐겨찾기 토글: True = 추가됨, False = 해제됨

        같은 (user_id, movie_id) 토글은 직렬화되고, 다른 프로세스와의 경합은
        favorites 테이블의 unique 제약이 막는다.

        잠금 구간 안에는 await가 없다. AsyncSession으로 바꾸면 조회와 쓰기
        사이에서 다른 토글이 끼어들 수 있으니 잠금 범위를 다시 확인할 것.
        사용자나 영화가 사라져 외래키 제약에 걸리면 Unauthenticated /
        NotFoundError로 바꾼다.
        """
        async with self._favorite_locks.hold((user_id, movie_id)):
            with self._session() as db:
                existing = self._find_favorite(db, user_id, movie_id)

                if existing:
                    db.delete(existing)
                    db.commit()
                    return False

                db.add(FavoriteModel(user_id=user_id, movie_id=movie_id))
                try:
                    db.commit()
                except IntegrityError:
                    db.rollback()
                    # 다른 쪽이 먼저 추가했으면 이미 즐겨찾기 상태
                    if self._find_favorite(db, user_id, movie_id):
                        return True
                    if db.get(UserModel, user_id) is None:
                        raise Unauthenticated("User not found")
                    if db.get(MovieModel, movie_id) is None:
                        raise NotFoundError("Movie not found")
                    raise
                return True

    @staticmethod
    def _find_favorite(db: Session, user_id: int, movie_id: int) -> Optional[FavoriteModel]:
        stmt = select(FavoriteModel).where(
            and_(
                FavoriteModel.user_id == user_id,
                FavoriteModel.movie_id == movie_id
            )
        )
        return db.execute(stmt).scalar_one_or_none()
