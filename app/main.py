from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.config import CORS_ORIGINS, LOG_LEVEL
from app.database import engine
from app.models import Base

from fastapi import Depends, Path
from typing import Annotated
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from app.database import SessionLocal
from app.errors import NotFoundError, ValidationError
from app.models import BookingDB, ClassDB
from app.repositories import BookingRepository, ClassRepository
from app.schemas import ( LONG_MAX, LONG_MIN, BookingCreate, BookingRead, ClassCreate, ClassRead )
from app.services import BookingService
import logging

logger = logging.getLogger("bookings")
logging.basicConfig(level=LOG_LEVEL, force=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    yield

app = FastAPI(title="Class Bookings API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"detail": exc.reason})


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": exc.message})


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning(f"Integrity error on {request.url.path}: {type(exc.orig).__name__}")
    return JSONResponse(status_code=409, content={"detail": "Save failed"})


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def get_booking_service(db: Session = Depends(get_db)) -> BookingService:
    return BookingService(BookingRepository(db), ClassRepository(db))

def to_booking(payload: BookingCreate) -> BookingDB:
    return BookingDB(name=payload.name, date=payload.date, class_id=payload.class_id)

@app.get("/health")
def health():
    return {"status": "ok"}

#Bookings
@app.post("/api/bookings", response_model=BookingRead, status_code=201, summary="Create new booking")
def create_booking(payload: BookingCreate, service: BookingService = Depends(get_booking_service)):
    return service.create_booking(to_booking(payload))

@app.get("/api/bookings", response_model=list[BookingRead], summary="List all bookings")
def list_bookings(service: BookingService = Depends(get_booking_service)):
    return service.list_bookings()

@app.put(
    "/api/bookings/{booking_id}",response_model=BookingRead,summary="Update an existing booking",)
def update_booking(booking_id: Annotated[int, Path(ge=LONG_MIN, le=LONG_MAX)],payload: BookingCreate,service: BookingService = Depends(get_booking_service),):
    return service.update_booking(booking_id, to_booking(payload))

#Classes
@app.post("/api/classes", response_model=ClassRead, status_code=201, summary="Create new class")
def create_class(payload: ClassCreate, db: Session = Depends(get_db)):
    db_class = ClassDB(
        name=payload.name,
        start_date=payload.start_date,
        end_date=payload.end_date,
    )
    return ClassRepository(db).save(db_class)

@app.get("/api/classes", response_model=list[ClassRead], summary="List all classes")
def list_classes(db: Session = Depends(get_db)):
    return ClassRepository(db).find_all()
