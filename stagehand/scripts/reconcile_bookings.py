"""
Maintenance job to recount performer bookings

Performer.total_bookings is maintained by the booking endpoints. Run this
periodically (e.g. via cron) to repair counts after manual database edits.
"""

import sys
from typing import Dict

from sqlalchemy import func
from sqlmodel import Session, select
import structlog

from stagehand.core.database import engine
from stagehand.models.booking import Booking
from stagehand.models.performer import Performer

logger = structlog.get_logger(__name__)


def reconcile_booking_counts(session: Session) -> Dict[str, int]:
    """Set every performer's total_bookings to its actual number of bookings"""
    counts = dict(
        session.exec(
            select(Booking.performer_id, func.count(Booking.id)).group_by(Booking.performer_id)
        ).all()
    )

    performers = session.exec(select(Performer)).all()
    fixed = 0
    for performer in performers:
        actual = counts.get(performer.id, 0)
        if performer.total_bookings != actual:
            logger.info(f"Performer {performer.id}: total_bookings {performer.total_bookings} -> {actual}")
            performer.total_bookings = actual
            session.add(performer)
            fixed += 1

    session.commit()
    return {"checked": len(performers), "fixed": fixed}


def main():
    """Main entry point for the reconcile job"""
    logger.info("Starting booking count reconciliation")
    try:
        with Session(engine) as session:
            results = reconcile_booking_counts(session)
    except Exception as e:
        logger.error(f"Fatal error in reconcile job: {e}")
        sys.exit(1)
    logger.info(f"Booking count reconciliation complete: {results}")


if __name__ == "__main__":
    main()
