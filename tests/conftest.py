import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

import httpx
import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from workflows.db.models import Project, Task
from workflows.db.session import Base
from workflows.dependencies import get_chat, get_db
from workflows.main import app
from workflows.providers import ChatProvider
from workflows.services.spec import ProjectRepository


class FakeChatProvider(ChatProvider):
    """Returns canned responses in order (the last one repeats) and records every prompt."""

    def __init__(self, *responses, error: Exception | None = None):
        self.responses = list(responses)
        self.error = error
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str | None:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        if not self.responses:
            return None
        if len(self.responses) > 1:
            return self.responses.pop(0)
        return self.responses[0]


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session(engine):
    maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with maker() as session:
        yield session


@pytest.fixture
def repo(session):
    return ProjectRepository(session)


@pytest.fixture
async def project(repo, session):
    """A committed project with two tasks, loaded with its tasks."""
    p = Project(
        name="Shop Platform",
        priority="3",
        backtech="Django",
        fronttech="React",
        cloud_tech="AWS",
        sprints_quantity=5,
        end_date="01/03/2027",
    )
    p.tasks = [
        Task(name="Setup repo", description="Init", assigned_to="DevOps", sprint=1),
        Task(name="Catalog API", description="CRUD", assigned_to="Backend Developer", sprint=2),
    ]
    await repo.save(p)
    await session.commit()
    return await repo.get_with_tasks(p.id)


CREATE_RESPONSE = (
    '{"projectName": "Blog", "priority": 2, "sprintsQuantity": 3,'
    ' "Tasks": [{"name": "Posts", "sprint": 1}, {"name": "Comments", "sprint": 2}]}'
)


@pytest.fixture
def chat():
    return FakeChatProvider(CREATE_RESPONSE)


@pytest.fixture
async def client(session, chat):
    """HTTP client over the app, sharing the test session and the fake provider."""
    async def _get_db():
        yield session
        await session.commit()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_chat] = lambda: chat
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
