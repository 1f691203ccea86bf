"""Seed a demo user and sample places for local development.

Idempotent: the demo user is found by email and places by name, so running
it twice does not duplicate rows. Places are inserted with their stored
coordinates; no geocoding calls are made.

Usage:
    python -m scripts.seed_dev_data
Requires DATABASE_URL and SECRET_KEY (environment or .env) and a migrated
database (alembic upgrade head).
"""

from __future__ import annotations

import asyncio

from sqlalchemy import select

from app.application.dtos.search import PlaceScope
from app.infrastructure.persistence import database
from app.infrastructure.persistence.models import Place
from app.infrastructure.persistence.repositories import PlaceRepository, UserRepository

DEMO_EMAIL = "demo@example.com"
DEMO_PASSWORD = "password"

SAMPLE_PLACES: list[dict] = [
    {
        "name": "Moonhouse",
        "description": "Popular restaurant in Melbourne.",
        "address_line": "288 Swan St",
        "city": "Melbourne",
        "state": "VIC",
        "postal_code": "3121",
        "country": "AU",
        "latitude": -37.824,
        "longitude": 144.997,
    },
    {
        "name": "Tokyo Station",
        "description": "Sample spot at Tokyo Station.",
        "address_line": "1-9-1 Marunouchi",
        "city": "Chiyoda",
        "state": "Tokyo",
        "postal_code": "100-0005",
        "country": "JP",
        "latitude": 35.681236,
        "longitude": 139.767125,
    },
    {
        "name": "Shibuya Crossing",
        "address_line": "2-2-1 Dogenzaka",
        "city": "Shibuya",
        "state": "Tokyo",
        "postal_code": "150-0043",
        "country": "JP",
        "latitude": 35.659482,
        "longitude": 139.700555,
    },
]


async def main() -> None:
    database.get_engine()
    async with database.AsyncSessionLocal() as session:
        async with session.begin():
            user_repo = UserRepository(session)
            user = await user_repo.get_by_email(DEMO_EMAIL)
            if user is None:
                user = await user_repo.create_user(
                    email=DEMO_EMAIL, password=DEMO_PASSWORD, display_name="Demo User"
                )
            place_repo = PlaceRepository(session)
            for attrs in SAMPLE_PLACES:
                existing = await session.execute(
                    select(Place.id).where(Place.name == attrs["name"])
                )
                place_id = existing.scalar_one_or_none()
                if place_id is None:
                    await place_repo.create_place(user.id, attrs)
                else:
                    await place_repo.update_place(place_id, attrs)
            total = await place_repo.count_for_scope(PlaceScope.all_active())
    print(f"Seed done: demo user id={user.id}, places={total}")
    await database.dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
