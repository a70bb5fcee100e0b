from taxilink.db.init_db import DEFAULT_DRIVERS, DEFAULT_HISTORY, init_db
from taxilink.db.models import Booking, BookingMethod, BookingStatus, DriverDraft
from taxilink.db.repositories.booking_repository import BookingRepository
from taxilink.db.repositories.driver_repository import DriverRepository
from taxilink.db.repositories.user_repository import UserRepository
from taxilink.db.store import InMemoryStore


def make_booking(booking_id, origin="A", to="B"):
    return Booking(id=booking_id, from_=origin, to=to, method=BookingMethod.sms,
                   price="R10", driver="Sarah N.")


class TestDriverRepository:

    def test_empty_store_uses_seed_drivers(self, store):
        repo = DriverRepository(store)
        assert [d.name for d in repo.list_all()] == [d.name for d in DEFAULT_DRIVERS]

    def test_corrupt_store_uses_seed_drivers(self):
        store = InMemoryStore({"test_drivers": '{"id": "oops"}'}, prefix="test")
        repo = DriverRepository(store)
        assert len(repo.list_all()) == len(DEFAULT_DRIVERS)

    def test_unparsable_store_uses_seed_drivers(self):
        store = InMemoryStore({"test_drivers": "[[["}, prefix="test")
        assert len(DriverRepository(store).list_all()) == len(DEFAULT_DRIVERS)

    def test_registered_driver_is_available(self, store, jane):
        repo = DriverRepository(store)
        driver = repo.register(jane)

        assert driver.available is True
        assert driver.car == "CA 123"
        assert driver in repo.list_available()
        assert repo.list_all()[-1] == driver

    def test_unavailable_driver_is_not_listed(self, store):
        repo = DriverRepository(store)
        driver = repo.register(DriverDraft(name="Sipho", phone="073", available=False))

        assert driver not in repo.list_available()
        assert driver in repo.list_all()

    def test_ids_are_unique_within_the_same_millisecond(self, store, frozen_ids):
        repo = DriverRepository(store, frozen_ids)
        ids = {repo.register(DriverDraft(name=f"d{i}", phone="0")).id for i in range(5)}
        assert len(ids) == 5

    def test_register_accepts_empty_fields(self, store):
        driver = DriverRepository(store).register(DriverDraft())
        assert driver.name == ""

    def test_registration_is_persisted(self, store, jane):
        DriverRepository(store).register(jane)
        reloaded = DriverRepository(store)
        assert reloaded.list_all()[-1].name == "Jane"

    def test_set_availability(self, store):
        repo = DriverRepository(store)
        updated = repo.set_availability(1, False)

        assert updated.available is False
        assert repo.get_by_id(1).available is False
        assert 1 not in [d.id for d in repo.list_available()]
        assert DriverRepository(store).get_by_id(1).available is False

    def test_set_availability_unknown_driver(self, store):
        assert DriverRepository(store).set_availability(999, False) is None


class TestBookingRepository:

    def test_empty_store_uses_seed_history(self, store):
        repo = BookingRepository(store)
        assert repo.list_all() == DEFAULT_HISTORY

    def test_record_prepends(self, store):
        repo = BookingRepository(store)
        b1, b2 = make_booking(10), make_booking(11)
        repo.record(b1)
        repo.record(b2)

        assert list(repo.recent(2)) == [b2, b1]

    def test_record_is_persisted_with_from_key(self, store):
        BookingRepository(store).record(make_booking(10, origin="Menlyn"))
        raw = store.load("history")

        assert raw[0]["from"] == "Menlyn"
        assert "user" not in raw[0]
        assert BookingRepository(store).get_by_id(10).from_ == "Menlyn"

    def test_recent_handles_large_and_negative_n(self, store):
        repo = BookingRepository(store)
        assert len(repo.recent(50)) == len(DEFAULT_HISTORY)
        assert list(repo.recent(-1)) == []

    def test_update_status(self, store):
        repo = BookingRepository(store)
        updated = repo.update_status(2, BookingStatus.completed)

        assert updated.status is BookingStatus.completed
        assert updated.from_ == "Sandton"
        assert BookingRepository(store).get_by_id(2).status is BookingStatus.completed

    def test_update_status_to_cancelled(self, store):
        repo = BookingRepository(store)
        assert repo.update_status(1, "cancelled").status is BookingStatus.cancelled

    def test_update_status_unknown_booking(self, store):
        assert BookingRepository(store).update_status(404, BookingStatus.completed) is None


class TestUserRepository:

    def test_no_user_by_default(self, store):
        assert UserRepository(store).current() is None

    def test_login_is_persisted(self, store):
        UserRepository(store).login("Lerato", "082 000 1111")
        assert UserRepository(store).current().name == "Lerato"

    def test_guest(self, store):
        user = UserRepository(store).login_as_guest()
        assert (user.name, user.phone) == ("Guest", "")

    def test_logout(self, store):
        repo = UserRepository(store)
        repo.login("Lerato", "082")
        repo.logout()

        assert repo.current() is None
        assert UserRepository(store).current() is None

    def test_corrupt_user_is_ignored(self):
        store = InMemoryStore({"test_user": '{"phone": 1}'}, prefix="test")
        assert UserRepository(store).current() is None


def test_init_db_seeds_only_missing_keys(store):
    store.save("history", [])
    init_db(store)

    assert len(store.load("drivers")) == len(DEFAULT_DRIVERS)
    assert store.load("history") == []
