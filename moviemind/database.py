# moviemind/database.py

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

# Base 클래스 생성
Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """엔진 생성"""
    url = make_url(database_url)

    if url.get_backend_name() != "sqlite":
        return create_engine(
            database_url,
            echo=echo,  # SQL 로그 출력
            pool_pre_ping=True,  # 연결 상태 확인
            pool_recycle=300  # 5분마다 연결 재사용
        )

    kwargs = {"connect_args": {"check_same_thread": False}}
    if url.database in (None, "", ":memory:"):
        # 메모리 DB는 연결 하나를 공유해야 테이블이 보인다
        kwargs["poolclass"] = StaticPool

    engine = create_engine(database_url, echo=echo, **kwargs)
    event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    """세션 팩토리 생성"""
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=engine
    )


def init_db(engine: Engine) -> None:
    """테이블 생성"""
    # 모델 등록
    import moviemind.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
