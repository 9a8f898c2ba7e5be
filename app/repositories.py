import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models import BookingDB, ClassDB

logger = logging.getLogger("bookings.repository")


class _Repository:
    model = None

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, obj_id: int | None):
        if obj_id is None:
            return None
        return self.db.get(self.model, obj_id)

    def find_all(self) -> list:
        stmt = select(self.model).order_by(self.model.id)
        return list(self.db.execute(stmt).scalars().all())

    def save(self, obj):
        self.db.add(obj)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.warning(f"{self.model.__tablename__} save rolled back")
            raise
        self.db.refresh(obj)
        return obj


class BookingRepository(_Repository):
    model = BookingDB


class ClassRepository(_Repository):
    model = ClassDB
