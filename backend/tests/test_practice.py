"""
AeroSky - Practice Session API Tests
"""
import asyncio

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from aerosky.core.database import Base
from aerosky.models.user import User
from aerosky.services.stats import StatsService


@pytest.mark.asyncio
async def test_practice_accumulates(client: AsyncClient, auth_headers):
    first = await client.post("/api/practice", headers=auth_headers, json={
        "subject": "math", "questionsAnswered": 5, "correctAnswers": 3, "timeSpent": 120,
    })
    assert first.status_code == 200
    assert first.json() == {"message": "Practice session updated"}
    
    await client.post("/api/practice", headers=auth_headers, json={
        "subject": "math", "questionsAnswered": 3, "correctAnswers": 2, "timeSpent": 60,
    })
    
    response = await client.get("/api/practice", headers=auth_headers)
    assert response.status_code == 200
    sessions = response.json()
    assert len(sessions) == 1
    session = sessions[0]
    assert session["subject"] == "math"
    assert session["questionsAnswered"] == 8
    assert session["correctAnswers"] == 5
    assert session["timeSpent"] == 180
    assert session["lastPracticed"]


@pytest.mark.asyncio
async def test_practice_one_row_per_subject(client: AsyncClient, auth_headers):
    for subject in ("math", "science", "math", "english", "science"):
        await client.post("/api/practice", headers=auth_headers, json={
            "subject": subject, "questionsAnswered": 1, "correctAnswers": 1, "timeSpent": 10,
        })
    
    sessions = (await client.get("/api/practice", headers=auth_headers)).json()
    by_subject = {s["subject"]: s["questionsAnswered"] for s in sessions}
    assert by_subject == {"english": 1, "math": 2, "science": 2}


@pytest.mark.asyncio
async def test_practice_missing_counters_default_to_zero(client: AsyncClient, auth_headers):
    await client.post("/api/practice", headers=auth_headers, json={
        "subject": "science", "questionsAnswered": 4,
    })
    await client.post("/api/practice", headers=auth_headers, json={"subject": "science"})
    
    session = (await client.get("/api/practice", headers=auth_headers)).json()[0]
    assert session["questionsAnswered"] == 4
    assert session["correctAnswers"] == 0
    assert session["timeSpent"] == 0


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {"subject": "math", "questionsAnswered": -1},
        {"subject": "math", "timeSpent": -30},
        {"subject": "math", "correctAnswers": "lots"},
        {"questionsAnswered": 2},
    ],
)
async def test_practice_rejects_invalid_counters(client: AsyncClient, auth_headers, body):
    response = await client.post("/api/practice", headers=auth_headers, json=body)
    assert response.status_code == 422
    
    sessions = (await client.get("/api/practice", headers=auth_headers)).json()
    assert sessions == []


@pytest.mark.asyncio
async def test_practice_is_scoped_per_user(client: AsyncClient, auth_headers):
    await client.post("/api/practice", headers=auth_headers, json={
        "subject": "math", "questionsAnswered": 5,
    })
    
    other = await client.post("/api/register", json={
        "username": "copilot", "email": "copilot@example.com", "password": "secret123",
    })
    other_headers = {"Authorization": f"Bearer {other.json()['token']}"}
    await client.post("/api/practice", headers=other_headers, json={
        "subject": "math", "questionsAnswered": 2,
    })
    
    mine = (await client.get("/api/practice", headers=auth_headers)).json()
    theirs = (await client.get("/api/practice", headers=other_headers)).json()
    assert mine[0]["questionsAnswered"] == 5
    assert theirs[0]["questionsAnswered"] == 2


@pytest.mark.asyncio
async def test_concurrent_practice_updates_keep_every_increment(tmp_path):
    """Simultaneous updates from separate sessions all land in one row."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'practice.db'}",
        connect_args={"timeout": 30},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    
    async with session_maker() as session:
        user = User(username="racer", email="racer@example.com", hashed_password="x")
        session.add(user)
        await session.commit()
        user_id = user.id
    
    async def practice_once():
        async with session_maker() as session:
            await StatsService(session).record_practice(user_id, "math", 1, 1, 10)
            await session.commit()
    
    rounds = 20
    try:
        await asyncio.gather(*(practice_once() for _ in range(rounds)))
        
        async with session_maker() as session:
            sessions = await StatsService(session).get_practice_sessions(user_id)
    finally:
        await engine.dispose()
    
    assert len(sessions) == 1
    assert sessions[0].subject == "math"
    assert sessions[0].questions_answered == rounds
    assert sessions[0].correct_answers == rounds
    assert sessions[0].time_spent == 10 * rounds
