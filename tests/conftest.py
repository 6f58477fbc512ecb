import pytest
from typing import AsyncGenerator
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from forum.app import app
from forum.database import enable_sqlite_foreign_keys, get_db_session
from forum.models import Base
from forum.models.comment import Comment
from forum.models.post import Post
from forum.models.user import User


# Test database setup
SQLALCHEMY_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session on a fresh in-memory database."""
    engine = create_async_engine(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    TestingSessionLocal = async_sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False
    )

    async with TestingSessionLocal() as session:
        yield session

    await engine.dispose()


@pytest.fixture
def override_get_db(db_session: AsyncSession):
    """Override the get_db_session dependency."""
    async def _override_get_db():
        yield db_session
    return _override_get_db


@pytest.fixture
async def async_client(override_get_db) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client."""
    app.dependency_overrides[get_db_session] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
async def test_user(db_session: AsyncSession) -> User:
    """Create a test user."""
    user = User(email="a@x.com", username="alice", password="pw1")
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest.fixture
async def test_user_2(db_session: AsyncSession) -> User:
    """Create a second test user."""
    user = User(email="b@x.com", username="bob", password="pw2")
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest.fixture
async def test_post(db_session: AsyncSession, test_user: User) -> Post:
    """Create a test post."""
    post = Post(title="Hello", content="World", user_id=test_user.id)
    db_session.add(post)
    await db_session.commit()
    await db_session.refresh(post)
    return post


@pytest.fixture
async def test_comment(db_session: AsyncSession, test_user_2: User, test_post: Post) -> Comment:
    """Create a comment by the second user on the test post."""
    comment = Comment(content="First!", user_id=test_user_2.id, post_id=test_post.id)
    db_session.add(comment)
    await db_session.commit()
    await db_session.refresh(comment)
    return comment


@pytest.fixture
def user_headers(test_user: User) -> dict:
    """Session cookie header for the test user."""
    return {"Cookie": f"user={test_user.email}"}


@pytest.fixture
def guest_headers() -> dict:
    """Session cookie header for a guest."""
    return {"Cookie": "user=guest"}
