"""
Unit tests for the database storage adapter and the favorite toggle.
"""

import asyncio
import os
import tempfile
import threading
import unittest
from unittest.mock import patch
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from moviemind.core.exceptions import ConflictError, NotFoundError, Unauthenticated
from moviemind.models import FavoriteModel, MovieModel, UserModel
from moviemind.services.seed_data import SEED_MOVIES
from moviemind.services.storage import DatabaseStorage
from moviemind.database import create_db_engine, create_session_factory, init_db
from tests.base import make_storage


class StorageTestCase(unittest.IsolatedAsyncioTestCase):

    async def asyncSetUp(self):
        self.storage = make_storage()
        await self.storage.seed_catalog()
        self.user = await self.storage.create_user("alice", "hashed-pw")
        self.movies = await self.storage.list_movies()

    def count_favorite_rows(self, user_id, movie_id):
        with self.storage.session_factory() as db:
            stmt = select(func.count()).select_from(FavoriteModel).where(
                FavoriteModel.user_id == user_id, FavoriteModel.movie_id == movie_id
            )
            return db.execute(stmt).scalar_one()


class TestUsers(StorageTestCase):

    async def test_get_user_and_by_username(self):
        by_id = await self.storage.get_user(self.user.id)
        by_name = await self.storage.get_user_by_username("alice")

        self.assertEqual(by_id.username, "alice")
        self.assertEqual(by_name.id, self.user.id)
        self.assertEqual(by_name.password, "hashed-pw")

    async def test_unknown_user_is_none(self):
        self.assertIsNone(await self.storage.get_user(9999))
        self.assertIsNone(await self.storage.get_user_by_username("nobody"))

    async def test_duplicate_username_conflicts(self):
        with self.assertRaises(ConflictError):
            await self.storage.create_user("alice", "other")


class TestCatalog(StorageTestCase):

    async def test_seed_is_idempotent(self):
        for _ in range(3):
            self.assertEqual(await self.storage.seed_catalog(), 0)

        movies = await self.storage.list_movies()
        self.assertEqual(len(movies), len(SEED_MOVIES))
        self.assertEqual(len({m.title for m in movies}), len(SEED_MOVIES))

    async def test_seed_contains_inception(self):
        titles = [m.title for m in self.movies]
        self.assertIn("Inception", titles)

    async def test_get_movie(self):
        movie = await self.storage.get_movie(self.movies[0].id)
        self.assertEqual(movie, self.movies[0])
        self.assertIsNone(await self.storage.get_movie(9999))

    async def test_genre_is_comma_joined(self):
        inception = next(m for m in self.movies if m.title == "Inception")
        self.assertEqual(inception.genre, "Action, Adventure, Sci-Fi")


class TestSeeding(unittest.IsolatedAsyncioTestCase):

    def count_movies(self, storage):
        with storage.session_factory() as db:
            return db.execute(select(func.count()).select_from(MovieModel)).scalar_one()

    async def test_failed_seed_leaves_catalog_empty(self):
        storage = make_storage()
        # third insert collides with the first one
        broken = list(SEED_MOVIES[:2]) + [SEED_MOVIES[0]] + list(SEED_MOVIES[2:])

        with self.assertRaises(IntegrityError):
            await storage.seed_catalog(broken)
        self.assertEqual(self.count_movies(storage), 0)

        self.assertEqual(await storage.seed_catalog(), len(SEED_MOVIES))
        self.assertEqual(self.count_movies(storage), len(SEED_MOVIES))

    def test_concurrent_seeds_on_shared_database(self):
        tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(tmpdir.cleanup)
        url = "sqlite:///" + os.path.join(tmpdir.name, "catalog.db")

        engines = [create_db_engine(url), create_db_engine(url)]
        for engine in engines:
            self.addCleanup(engine.dispose)
        init_db(engines[0])
        storages = [DatabaseStorage(create_session_factory(engine)) for engine in engines]

        barrier = threading.Barrier(len(storages))
        results, errors = [], []

        def start_worker(storage):
            count_movies = storage.count_movies

            async def count_then_wait():
                # both workers see an empty catalog before either inserts
                count = await count_movies()
                barrier.wait(timeout=5)
                return count

            storage.count_movies = count_then_wait
            try:
                results.append(asyncio.run(storage.seed_catalog()))
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=start_worker, args=(s,)) for s in storages]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=10)

        self.assertEqual(errors, [])
        self.assertEqual(sorted(results), [0, len(SEED_MOVIES)])
        self.assertEqual(self.count_movies(storages[1]), len(SEED_MOVIES))


class TestFavoriteToggle(StorageTestCase):

    async def test_toggle_twice(self):
        movie_id = self.movies[0].id

        self.assertTrue(await self.storage.toggle_favorite(self.user.id, movie_id))
        self.assertFalse(await self.storage.toggle_favorite(self.user.id, movie_id))
        self.assertEqual(self.count_favorite_rows(self.user.id, movie_id), 0)

    async def test_list_favorites_follows_toggle(self):
        movie_id = self.movies[1].id

        await self.storage.toggle_favorite(self.user.id, movie_id)
        favorites = await self.storage.list_favorites(self.user.id)
        self.assertEqual([m.id for m in favorites], [movie_id])

        await self.storage.toggle_favorite(self.user.id, movie_id)
        self.assertEqual(await self.storage.list_favorites(self.user.id), [])

    async def test_toggle_matches_user_and_movie(self):
        """Another user's favorite, or another movie, must not be removed."""
        bob = await self.storage.create_user("bob", "hashed")
        first, second = self.movies[0].id, self.movies[1].id

        await self.storage.toggle_favorite(bob.id, first)
        self.assertTrue(await self.storage.toggle_favorite(self.user.id, first))
        self.assertTrue(await self.storage.toggle_favorite(self.user.id, second))

        bob_favorites = await self.storage.list_favorites(bob.id)
        self.assertEqual([m.id for m in bob_favorites], [first])
        alice_ids = {m.id for m in await self.storage.list_favorites(self.user.id)}
        self.assertEqual(alice_ids, {first, second})

    async def test_concurrent_toggles_leave_no_duplicates(self):
        movie_id = self.movies[2].id

        results = await asyncio.gather(
            *[self.storage.toggle_favorite(self.user.id, movie_id) for _ in range(9)]
        )

        rows = self.count_favorite_rows(self.user.id, movie_id)
        self.assertIn(rows, (0, 1))
        self.assertEqual(rows, results.count(True) - results.count(False))
        self.assertEqual(len(self.storage._favorite_locks), 0)

    async def test_insert_race_resolves_to_favorited(self):
        movie_id = self.movies[3].id
        await self.storage.toggle_favorite(self.user.id, movie_id)

        real_find = DatabaseStorage._find_favorite
        calls = []

        def stale_then_real(db, user_id, m_id):
            # first lookup misses the row another writer already inserted
            calls.append(1)
            return None if len(calls) == 1 else real_find(db, user_id, m_id)

        with patch.object(DatabaseStorage, "_find_favorite", side_effect=stale_then_real):
            result = await self.storage.toggle_favorite(self.user.id, movie_id)

        self.assertTrue(result)
        self.assertEqual(self.count_favorite_rows(self.user.id, movie_id), 1)

    async def test_unique_constraint(self):
        movie_id = self.movies[0].id
        await self.storage.toggle_favorite(self.user.id, movie_id)

        with self.storage.session_factory() as db:
            db.add(FavoriteModel(user_id=self.user.id, movie_id=movie_id))
            with self.assertRaises(IntegrityError):
                db.commit()

    async def test_toggle_for_deleted_user(self):
        with self.storage.session_factory() as db:
            db.delete(db.get(UserModel, self.user.id))
            db.commit()

        with self.assertRaises(Unauthenticated):
            await self.storage.toggle_favorite(self.user.id, self.movies[0].id)

    async def test_toggle_for_deleted_movie(self):
        movie_id = self.movies[1].id
        with self.storage.session_factory() as db:
            db.delete(db.get(MovieModel, movie_id))
            db.commit()

        with self.assertRaises(NotFoundError):
            await self.storage.toggle_favorite(self.user.id, movie_id)

    async def test_deleting_user_cascades_to_favorites(self):
        movie_id = self.movies[0].id
        await self.storage.toggle_favorite(self.user.id, movie_id)

        with self.storage.session_factory() as db:
            db.delete(db.get(UserModel, self.user.id))
            db.commit()

        self.assertEqual(self.count_favorite_rows(self.user.id, movie_id), 0)

    async def test_deleting_movie_cascades_to_favorites(self):
        movie_id = self.movies[4].id
        await self.storage.toggle_favorite(self.user.id, movie_id)

        with self.storage.session_factory() as db:
            db.delete(db.get(MovieModel, movie_id))
            db.commit()

        self.assertEqual(await self.storage.list_favorites(self.user.id), [])


if __name__ == "__main__":
    unittest.main()
