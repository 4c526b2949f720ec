"""Create the properties table and seed a few sample listings if it is empty."""
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.config import get_log_format, get_log_level
from app.core.logging import get_logger, setup_logging
from app.db.session import SessionLocal, engine, Base
from app.models import Property
from app.repositories.property import SqlAlchemyPropertyRepository
from app.schemas.property import PropertyRequest
from app.services.property import PropertyService

SAMPLE_PROPERTIES = [
    {
        "address": "Calle 10 #20-30, Bogotá",
        "price": 150000000,
        "size": 80,
        "description": "Apartamento de dos habitaciones cerca al parque.",
        "ownerName": "María Gómez",
        "ownerPhone": "+57 300 123 4567",
        "ownerEmail": "maria.gomez@example.com",
        "ownerDocument": "CC 1020304050",
    },
    {
        "address": "Carrera 7 #45-12, Bogotá",
        "price": 420000000,
        "size": 120,
        "description": "Casa con terraza y parqueadero.",
        "ownerName": "Carlos Pérez",
        "ownerPhone": "(601) 555-0199",
    },
    {
        "address": "Avenida 19 #100-05, Bogotá",
        "price": 98000000,
        "size": 45.5,
        "description": "Apartaestudio amoblado.",
    },
]

setup_logging(get_log_level(), get_log_format())
logger = get_logger("init_db")

Base.metadata.create_all(bind=engine)
db = SessionLocal()

try:
    if not db.query(Property).first():
        service = PropertyService(SqlAlchemyPropertyRepository(db))
        for sample in SAMPLE_PROPERTIES:
            service.create(PropertyRequest(**sample))
        logger.info("Seeded %d sample properties", len(SAMPLE_PROPERTIES))
    else:
        logger.info("Properties table already has data, skipping seed")
finally:
    db.close()

logger.info("Init complete.")
