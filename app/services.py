import logging

from app.errors import NotFoundError, ValidationError
from app.models import BookingDB
from app.repositories import BookingRepository, ClassRepository

logger = logging.getLogger("bookings.service")


class BookingService:
    """Validates bookings against their class schedule and persists them."""

    def __init__(self, bookings: BookingRepository, classes: ClassRepository):
        self.bookings = bookings
        self.classes = classes

    def create_booking(self, candidate: BookingDB) -> BookingDB:
        self.validate(candidate)
        saved = self.bookings.save(candidate)
        logger.info(f"Booking created id={saved.id} class_id={saved.class_id}")
        return saved

    def update_booking(self, booking_id: int, candidate: BookingDB) -> BookingDB:
        # candidate is checked before the target lookup, so a bad candidate
        # reports a validation error even when booking_id is unknown too
        self.validate(candidate)

        existing = self.bookings.find_by_id(booking_id)
        if existing is None:
            raise NotFoundError("booking", booking_id, f"Booking not found with ID: {booking_id}")

        existing.class_id = candidate.class_id
        existing.date = candidate.date
        existing.name = candidate.name

        saved = self.bookings.save(existing)
        logger.info(f"Booking updated id={saved.id} class_id={saved.class_id}")
        return saved

    def list_bookings(self) -> list[BookingDB]:
        return self.bookings.find_all()

    def validate(self, booking: BookingDB) -> None:
        if not booking.name:
            raise self._reject(ValidationError("name empty"))
        if booking.date is None:
            raise self._reject(ValidationError("date null"))

        booked_class = self.classes.find_by_id(booking.class_id)
        if booked_class is None:
            raise self._reject(NotFoundError("class", booking.class_id, "invalid class id"))

        # both bounds inclusive
        if booking.date < booked_class.start_date or booking.date > booked_class.end_date:
            raise self._reject(ValidationError("date out of range"))

    @staticmethod
    def _reject(error):
        logger.warning(f"Booking rejected: {error}")
        return error
