#!/usr/bin/env python3
"""
Seed script to create demo tables and reservations
"""

import asyncio
from datetime import date, time, timedelta

# Dining room layout: name -> capacity
DEMO_TABLES = {
    "Bar #1": 1,
    "Bar #2": 1,
    "#1": 6,
    "#2": 6,
}


def next_open_day(start: date, closed_weekday: int) -> date:
    day = start + timedelta(days=1)
    while day.weekday() == closed_weekday:
        day += timedelta(days=1)
    return day


async def seed_demo_data():
    """Seed demo data for development"""
    from sqlalchemy import select

    from app.config import settings
    from app.database import SessionLocal, engine, Base
    from app.models.reservation import Reservation, ReservationStatus
    from app.models.table import Table

    # Create tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with SessionLocal() as db:
        # Check if demo tables already exist
        result = await db.execute(select(Table).where(Table.table_name == "Bar #1"))
        existing = result.scalar_one_or_none()

        if existing:
            print("Demo data already exists. Skipping...")
            return

        print("Creating demo tables...")

        for table_name, capacity in DEMO_TABLES.items():
            db.add(Table(table_name=table_name, capacity=capacity))

        reservation_date = next_open_day(date.today(), settings.closed_weekday)
        reservations = [
            Reservation(
                first_name="Rick",
                last_name="Sanchez",
                mobile_number="202-555-0164",
                reservation_date=reservation_date,
                reservation_time=time(20, 0),
                people=6,
                status=ReservationStatus.BOOKED.value,
            ),
            Reservation(
                first_name="Frank",
                last_name="Palicky",
                mobile_number="202-555-0153",
                reservation_date=reservation_date,
                reservation_time=time(13, 30),
                people=1,
                status=ReservationStatus.BOOKED.value,
            ),
        ]
        for reservation in reservations:
            db.add(reservation)

        await db.commit()

        print(f"""
Demo data created successfully!

Tables: {len(DEMO_TABLES)} created
Reservations: {len(reservations)} booked for {reservation_date.isoformat()}
""")


if __name__ == "__main__":
    asyncio.run(seed_demo_data())
