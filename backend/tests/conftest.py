"""
Pytest fixtures for test database, client, authentication and factories.

Each test gets a fresh in-memory SQLite database (aiosqlite, one shared
connection through StaticPool). Set TEST_DATABASE_URL to run against
PostgreSQL instead.
"""

import os

os.environ["REDIS_ENABLED"] = "false"
os.environ.setdefault("ENVIRONMENT", "test")

from datetime import date, datetime, timedelta, timezone
from itertools import count
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.db.base import Base
from app.db.session import get_db
from app.core.security import create_access_token, hash_password
from app.models import (
    Booking, Enrollment, Event, Hotel, Payment, Room, Session, Ticket, TicketType, User,
    TICKET_PAID, TICKET_RESERVED,
)

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite://")

_sequence = count(1)


def _engine_kwargs(url: str) -> dict:
    if url.startswith("sqlite"):
        return {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}
    return {}


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create tables, yield session, then drop tables for isolation."""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, **_engine_kwargs(TEST_DATABASE_URL))
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client that overrides the DB dependency with the test session."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


async def _save(db: AsyncSession, obj):
    db.add(obj)
    await db.commit()
    await db.refresh(obj)
    return obj


# ---------------------------------------------------------------------------
# Factories. Each fixture returns a coroutine function so a test can create
# as many rows as it needs.
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture
async def create_user(db_session: AsyncSession):
    async def _create(email: str = None, password: str = "testpassword123") -> User:
        n = next(_sequence)
        return await _save(db_session, User(
            email=email or f"user{n}@example.com",
            password=hash_password(password),
        ))
    return _create


@pytest_asyncio.fixture
async def generate_token(db_session: AsyncSession):
    """Issue a token for a user and open the session that makes it valid."""
    async def _generate(user: User) -> str:
        token = create_access_token(data={"sub": str(user.id)})
        await _save(db_session, Session(user_id=user.id, token=token))
        return token
    return _generate


@pytest_asyncio.fixture
async def create_enrollment(db_session: AsyncSession):
    async def _create(user: User) -> Enrollment:
        n = next(_sequence)
        return await _save(db_session, Enrollment(
            user_id=user.id,
            name=f"Attendee {n}",
            cpf=f"{n:011d}",
            birthday=date(1990, 1, 1),
            phone="11999999999",
        ))
    return _create


@pytest_asyncio.fixture
async def create_ticket_type(db_session: AsyncSession):
    async def _create(includes_hotel: bool = True, is_remote: bool = False, price: int = 25000) -> TicketType:
        n = next(_sequence)
        return await _save(db_session, TicketType(
            name=f"Ticket type {n}",
            price=price,
            is_remote=is_remote,
            includes_hotel=includes_hotel,
        ))
    return _create


@pytest_asyncio.fixture
async def create_ticket(db_session: AsyncSession):
    async def _create(enrollment: Enrollment, ticket_type: TicketType, status: str = TICKET_RESERVED) -> Ticket:
        return await _save(db_session, Ticket(
            enrollment_id=enrollment.id,
            ticket_type_id=ticket_type.id,
            status=status,
        ))
    return _create


@pytest_asyncio.fixture
async def create_event(db_session: AsyncSession):
    async def _create(title: str = None, days_ahead: int = 30) -> Event:
        n = next(_sequence)
        starts_at = datetime.now(timezone.utc) + timedelta(days=days_ahead)
        return await _save(db_session, Event(
            title=title or f"Event {n}",
            background_image_url="linear-gradient(to right, #FA4098, #FFD77F)",
            logo_image_url=f"https://images.example.com/events/{n}.png",
            starts_at=starts_at,
            ends_at=starts_at + timedelta(days=3),
        ))
    return _create


@pytest_asyncio.fixture
async def create_hotel(db_session: AsyncSession):
    async def _create() -> Hotel:
        n = next(_sequence)
        return await _save(db_session, Hotel(
            name=f"Hotel {n}",
            image=f"https://images.example.com/hotels/{n}.jpg",
        ))
    return _create


@pytest_asyncio.fixture
async def create_room(db_session: AsyncSession):
    async def _create(hotel: Hotel, capacity: int = 2) -> Room:
        n = next(_sequence)
        return await _save(db_session, Room(hotel_id=hotel.id, name=f"Room {n}", capacity=capacity))
    return _create


@pytest_asyncio.fixture
async def create_hotel_with_rooms(create_hotel, create_room):
    """A hotel with two rooms. Returns (hotel, [room1, room2])."""
    async def _create():
        hotel = await create_hotel()
        rooms = [await create_room(hotel, capacity=1), await create_room(hotel, capacity=3)]
        return hotel, rooms
    return _create


@pytest_asyncio.fixture
async def create_booking(db_session: AsyncSession):
    async def _create(user: User, room: Room) -> Booking:
        return await _save(db_session, Booking(user_id=user.id, room_id=room.id))
    return _create


@pytest_asyncio.fixture
async def create_payment(db_session: AsyncSession):
    async def _create(ticket: Ticket, value: int = 25000) -> Payment:
        return await _save(db_session, Payment(
            ticket_id=ticket.id,
            value=value,
            card_issuer="VISA",
            card_last_digits="4242",
        ))
    return _create


# ---------------------------------------------------------------------------
# Ready-made actors
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture
async def test_user(create_user) -> User:
    return await create_user(email="test@example.com")


@pytest_asyncio.fixture
async def auth_headers(test_user: User, generate_token) -> dict:
    """Authorization headers with a Bearer token backed by a session."""
    token = await generate_token(test_user)
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def enrollment(test_user: User, create_enrollment) -> Enrollment:
    return await create_enrollment(test_user)


@pytest_asyncio.fixture
async def hotel_ticket(enrollment: Enrollment, create_ticket_type, create_ticket) -> Ticket:
    """A PAID ticket whose type includes hotel: full access to hotels and booking."""
    ticket_type = await create_ticket_type(includes_hotel=True)
    return await create_ticket(enrollment, ticket_type, status=TICKET_PAID)


@pytest_asyncio.fixture
async def other_attendee(create_user, generate_token, create_enrollment, create_ticket_type, create_ticket):
    """A second user with their own paid hotel ticket. Returns (user, headers)."""
    user = await create_user()
    token = await generate_token(user)
    enrollment = await create_enrollment(user)
    ticket_type = await create_ticket_type(includes_hotel=True)
    await create_ticket(enrollment, ticket_type, status=TICKET_PAID)
    return user, {"Authorization": f"Bearer {token}"}


@pytest.fixture
def card_data() -> dict:
    return {
        "issuer": "VISA",
        "number": 4111111111111111,
        "name": "Test Attendee",
        "expirationDate": "12/30",
        "cvv": 123,
    }
