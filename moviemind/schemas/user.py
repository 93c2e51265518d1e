# moviemind/schemas/user.py

from pydantic import BaseModel, Field


class User(BaseModel):
    id: int = Field(description="사용자 ID")
    username: str = Field(description="사용자 이름")

    class Config:
        from_attributes = True


class UserInDB(User):
    """비밀번호 해시 포함 (응답에 사용 금지)"""

    password: str = Field(description="비밀번호 해시")


class UserCredentials(BaseModel):
    """회원가입 / 로그인 요청"""

    username: str = Field(min_length=1, max_length=255, description="사용자 이름")
    password: str = Field(min_length=1, max_length=72, description="비밀번호")
