"""Property use cases: request → stored record → response.

No business rules beyond validation and field copying. Timestamps are
stamped here; the store never sets them.
"""
import datetime
from typing import Optional

from app.core.logging import get_logger
from app.models.property import Property
from app.repositories.property import PropertyRepository
from app.schemas.property import PropertyRequest, PropertyResponse
from app.services.validation import validate_property

logger = get_logger(__name__)


def _now() -> datetime.datetime:
    return datetime.datetime.now().replace(microsecond=0)


def _to_response(prop: Property) -> PropertyResponse:
    return PropertyResponse.model_validate(prop)


def _to_responses(props: list[Property]) -> list[PropertyResponse]:
    return [_to_response(p) for p in props]


def _apply(prop: Property, data: PropertyRequest) -> None:
    """Full replace: every mutable field takes the request's value, absent ones become None."""
    prop.address = data.address
    prop.price = data.price
    prop.size = data.size
    prop.description = data.description
    prop.owner_name = data.owner_name
    prop.owner_phone = data.owner_phone
    prop.owner_email = data.owner_email
    prop.owner_document = data.owner_document


class PropertyService:

    def __init__(self, repository: PropertyRepository):
        self.repository = repository

    def get_all(self) -> list[PropertyResponse]:
        return _to_responses(self.repository.find_all())

    def get_by_id(self, property_id: int) -> Optional[PropertyResponse]:
        prop = self.repository.find_by_id(property_id)
        return _to_response(prop) if prop is not None else None

    def create(self, data: PropertyRequest) -> PropertyResponse:
        validate_property(data)
        prop = Property()
        _apply(prop, data)
        prop.created_at = prop.updated_at = _now()
        saved = self.repository.save(prop)
        logger.info("Created property %s at %r", saved.id, saved.address)
        return _to_response(saved)

    def update(self, property_id: int, data: PropertyRequest) -> Optional[PropertyResponse]:
        """Returns None when no property has this id; nothing is written in that case."""
        validate_property(data)
        prop = self.repository.find_by_id(property_id)
        if prop is None:
            return None
        _apply(prop, data)
        prop.updated_at = _now()
        saved = self.repository.save(prop)
        logger.info("Updated property %s", saved.id)
        return _to_response(saved)

    def delete(self, property_id: int) -> bool:
        if not self.repository.exists_by_id(property_id):
            return False
        self.repository.delete_by_id(property_id)
        logger.info("Deleted property %s", property_id)
        return True

    def search_by_address(self, text: str) -> list[PropertyResponse]:
        return _to_responses(self.repository.find_by_address_containing(text))

    def by_price_range(self, min_price: float, max_price: float) -> list[PropertyResponse]:
        return _to_responses(self.repository.find_by_price_between(min_price, max_price))

    def by_size_range(self, min_size: float, max_size: float) -> list[PropertyResponse]:
        return _to_responses(self.repository.find_by_size_between(min_size, max_size))

    def ordered_by_price(self, ascending: bool = True) -> list[PropertyResponse]:
        return _to_responses(self.repository.find_all_ordered_by_price(ascending))

    def ordered_by_size(self, ascending: bool = True) -> list[PropertyResponse]:
        return _to_responses(self.repository.find_all_ordered_by_size(ascending))
