#!/usr/bin/env python3
"""
Seed the event record and the ticket type and hotel catalogs.

Idempotent: each catalog is only seeded when its table is empty. Cached
catalog lists are dropped afterwards so the API serves the new rows.

Usage (from backend/):
    python seed_catalog.py
"""

import asyncio
from datetime import datetime, timezone

from sqlalchemy import func, select

from app.core.logging import setup_logging, get_logger
from app.db.session import AsyncSessionLocal, close_engine
from app.models import Event, Hotel, Room, TicketType
from app.services.cache_service import close_redis, invalidate_catalog_cache

logger = get_logger(__name__)

EVENT = {
    "title": "Driven.t",
    "background_image_url": "linear-gradient(to right, #FA4098, #FFD77F)",
    "logo_image_url": "https://images.example.com/event/logo.png",
    "starts_at": datetime(2027, 3, 1, 9, 0, tzinfo=timezone.utc),
    "ends_at": datetime(2027, 3, 4, 18, 0, tzinfo=timezone.utc),
}

TICKET_TYPES = [
    # name, price (cents), is_remote, includes_hotel
    ("Online", 10000, True, False),
    ("In person", 25000, False, False),
    ("In person + Hotel", 60000, False, True),
]

HOTELS = [
    # name, image, [(room name, capacity), ...]
    ("Driven Resort", "https://images.example.com/hotels/resort.jpg",
     [("101", 1), ("102", 2), ("103", 3), ("201", 2)]),
    ("Driven Palace", "https://images.example.com/hotels/palace.jpg",
     [("1", 2), ("2", 2), ("3", 3)]),
    ("Driven World", "https://images.example.com/hotels/world.jpg",
     [("A1", 1), ("A2", 1), ("B1", 3)]),
]


async def _is_empty(db, model) -> bool:
    count = (await db.execute(select(func.count()).select_from(model))).scalar()
    return count == 0


async def seed_catalog() -> None:
    async with AsyncSessionLocal() as db:
        if await _is_empty(db, Event):
            db.add(Event(**EVENT))
            logger.info("seeded_event", title=EVENT["title"])

        if await _is_empty(db, TicketType):
            db.add_all(
                TicketType(name=name, price=price, is_remote=remote, includes_hotel=hotel)
                for name, price, remote, hotel in TICKET_TYPES
            )
            logger.info("seeded_ticket_types", count=len(TICKET_TYPES))

        if await _is_empty(db, Hotel):
            for name, image, rooms in HOTELS:
                hotel = Hotel(name=name, image=image)
                hotel.rooms = [Room(name=room, capacity=capacity) for room, capacity in rooms]
                db.add(hotel)
            logger.info("seeded_hotels", count=len(HOTELS))

        await db.commit()

    await invalidate_catalog_cache()


async def main() -> None:
    setup_logging()
    try:
        await seed_catalog()
    finally:
        await close_redis()
        await close_engine()


if __name__ == "__main__":
    asyncio.run(main())
