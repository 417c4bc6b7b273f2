"""Database seeding script (demo event with 4 participants)"""
import asyncio
import logging
import sys
from datetime import date, time
from decimal import Decimal
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.append(str(Path(__file__).parent.parent))

from sqlalchemy import select
from app.core.logging_config import configure_logging
from app.database import AsyncSessionLocal, Base, engine
from app.models import Event, EventParticipant, Participant

logger = logging.getLogger("seed")


async def seed_event():
    """Seed the database with a demo event and its participants"""

    participants_data = [
        {"name": "Ana", "payout_address": "ana@pay.example", "spent": Decimal("90.00")},
        {"name": "Bruno", "payout_address": "bruno@pay.example", "spent": Decimal("30.00")},
        {"name": "Carla", "payout_address": "", "spent": Decimal("0")},
        {"name": "Diego", "payout_address": "diego@pay.example", "spent": Decimal("0")},
    ]

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with AsyncSessionLocal() as session:
        event = Event(
            name="Weekend barbecue",
            location="Lake house",
            event_date=date.today(),
            event_time=time(18, 0),
            description="Demo event",
        )
        session.add(event)
        await session.flush()

        created_count = 0
        for data in participants_data:
            result = await session.execute(
                select(Participant).where(Participant.name == data["name"])
            )
            participant = result.scalar_one_or_none()

            if participant is None:
                participant = Participant(
                    name=data["name"], payout_address=data["payout_address"]
                )
                session.add(participant)
                await session.flush()
                created_count += 1

            session.add(
                EventParticipant(
                    event_id=event.id,
                    participant_id=participant.id,
                    amount_spent=data["spent"],
                    confirmed=True,
                )
            )

        await session.commit()

        logger.info("Created event %s", event.id)
        logger.info("Created %d participants, reused %d",
                    created_count, len(participants_data) - created_count)


async def main():
    """Main function to run seeding"""
    configure_logging("INFO")
    logger.info("Seeding database with a demo event...")

    try:
        await seed_event()
        logger.info("Database seeding completed successfully")
    except Exception:
        logger.exception("Error seeding database")
        raise
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
