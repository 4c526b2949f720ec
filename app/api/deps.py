from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.repositories.property import SqlAlchemyPropertyRepository
from app.services.property import PropertyService


def get_property_service(db: Session = Depends(get_db)) -> PropertyService:
    return PropertyService(SqlAlchemyPropertyRepository(db))
