# moviemind/services/auth_service.py

from typing import Optional
from moviemind.core.auth import get_password_hash, verify_password
from moviemind.schemas.user import UserCredentials, UserInDB
from moviemind.services.storage import DatabaseStorage


class AuthService:

    def __init__(self, storage: DatabaseStorage):
        self.storage = storage

    async def register(self, credentials: UserCredentials) -> UserInDB:
        """회원가입 (이름 중복 시 ConflictError)"""
        return await self.storage.create_user(
            username=credentials.username,
            password_hash=get_password_hash(credentials.password),
        )

    async def authenticate(self, username: str, password: str) -> Optional[UserInDB]:
        user = await self.storage.get_user_by_username(username)
        if not user or not verify_password(password, user.password):
            return None
        return user
