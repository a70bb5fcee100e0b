import logging
import sys

from taxilink.db.models import Booking, BookingMethod, BookingStatus, Driver

logger = logging.getLogger(__name__)


DEFAULT_DRIVERS = [
    Driver(id=1, name="Thabo Mthembu", rating=4.8, phone="082 123 4567", distance="2.1 km", eta="3 min", price="R15"),
    Driver(id=2, name="Sarah Ndlovu", rating=4.9, phone="072 987 6543", distance="3.2 km", eta="5 min", price="R18"),
    Driver(id=3, name="John Sithole", rating=4.7, phone="083 456 7890", distance="1.8 km", eta="2 min", price="R12"),
]

DEFAULT_HISTORY = [
    Booking(id=1, from_="Pretoria CBD", to="Hatfield", status=BookingStatus.completed,
            method=BookingMethod.online, price="R15", driver="Thabo M."),
    Booking(id=2, from_="Sandton", to="Rosebank", status=BookingStatus.active,
            method=BookingMethod.sms, price="R25", driver="Sarah N."),
]


def init_db(store) -> None:
    """Write the seed data set for every key the store does not hold yet."""
    if store.load("drivers", None) is None:
        store.save("drivers", [d.model_dump(mode="json", exclude_none=True) for d in DEFAULT_DRIVERS])
        logger.info("Seeded default drivers")
    if store.load("history", None) is None:
        store.save("history", [b.to_record() for b in DEFAULT_HISTORY])
        logger.info("Seeded default booking history")


if __name__ == "__main__":
    from taxilink.db.store import build_store

    logging.basicConfig(level=logging.INFO)
    try:
        init_db(build_store())
    except Exception as e:
        print(f"❌ Error initializing store: {e}")
        sys.exit(1)
