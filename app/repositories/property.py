"""Property store.

PropertyRepository is the set of queries the service relies on. The
SQLAlchemy implementation backs the API; the in-memory one keeps the same
contract over a dict and is what the service tests run against.
"""
import threading
from abc import ABC, abstractmethod
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.logging import get_logger
from app.models.property import Property

logger = get_logger(__name__)

_COLUMNS = [c.name for c in Property.__table__.columns]


class PropertyRepository(ABC):

    @abstractmethod
    def find_all(self) -> list[Property]:
        ...

    @abstractmethod
    def find_by_id(self, property_id: int) -> Optional[Property]:
        ...

    @abstractmethod
    def save(self, prop: Property) -> Property:
        """Insert when prop.id is None, else overwrite the row with that id (created_at kept)."""

    @abstractmethod
    def exists_by_id(self, property_id: int) -> bool:
        ...

    @abstractmethod
    def delete_by_id(self, property_id: int) -> None:
        """Remove the row. Missing ids are a no-op."""

    @abstractmethod
    def find_by_address_containing(self, text: str) -> list[Property]:
        """Case-insensitive substring match on address."""

    @abstractmethod
    def find_by_price_between(self, min_price: float, max_price: float) -> list[Property]:
        ...

    @abstractmethod
    def find_by_size_between(self, min_size: float, max_size: float) -> list[Property]:
        ...

    @abstractmethod
    def find_all_ordered_by_price(self, ascending: bool = True) -> list[Property]:
        ...

    @abstractmethod
    def find_all_ordered_by_size(self, ascending: bool = True) -> list[Property]:
        ...


class SqlAlchemyPropertyRepository(PropertyRepository):

    def __init__(self, db: Session):
        self.db = db

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            logger.warning("Commit failed, rolling back property session")
            self.db.rollback()
            raise

    def find_all(self) -> list[Property]:
        return self.db.query(Property).order_by(Property.id).all()

    def find_by_id(self, property_id: int) -> Optional[Property]:
        return self.db.query(Property).filter(Property.id == property_id).first()

    def save(self, prop: Property) -> Property:
        if prop.id is None:
            self.db.add(prop)
        else:
            existing = self.db.get(Property, prop.id)
            if existing is not None and existing is not prop:
                prop.created_at = existing.created_at
            prop = self.db.merge(prop)
        self._commit()
        self.db.refresh(prop)
        return prop

    def exists_by_id(self, property_id: int) -> bool:
        return self.db.query(Property.id).filter(Property.id == property_id).first() is not None

    def delete_by_id(self, property_id: int) -> None:
        self.db.query(Property).filter(Property.id == property_id).delete(synchronize_session="fetch")
        self._commit()

    def find_by_address_containing(self, text: str) -> list[Property]:
        return (
            self.db.query(Property)
            .filter(Property.address.icontains(text, autoescape=True))
            .order_by(Property.id)
            .all()
        )

    def find_by_price_between(self, min_price: float, max_price: float) -> list[Property]:
        return (
            self.db.query(Property)
            .filter(Property.price.between(min_price, max_price))
            .order_by(Property.id)
            .all()
        )

    def find_by_size_between(self, min_size: float, max_size: float) -> list[Property]:
        return (
            self.db.query(Property)
            .filter(Property.size.between(min_size, max_size))
            .order_by(Property.id)
            .all()
        )

    def _ordered_by(self, column, ascending: bool) -> list[Property]:
        order = column.asc() if ascending else column.desc()
        return self.db.query(Property).order_by(order, Property.id.asc()).all()

    def find_all_ordered_by_price(self, ascending: bool = True) -> list[Property]:
        return self._ordered_by(Property.price, ascending)

    def find_all_ordered_by_size(self, ascending: bool = True) -> list[Property]:
        return self._ordered_by(Property.size, ascending)


def _copy(prop: Property) -> Property:
    return Property(**{name: getattr(prop, name) for name in _COLUMNS})


class InMemoryPropertyRepository(PropertyRepository):
    """Dict-backed store. Callers always get detached copies."""

    def __init__(self):
        self._rows: dict[int, Property] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def _snapshot(self) -> list[Property]:
        with self._lock:
            return [_copy(p) for _, p in sorted(self._rows.items())]

    def find_all(self) -> list[Property]:
        return self._snapshot()

    def find_by_id(self, property_id: int) -> Optional[Property]:
        with self._lock:
            row = self._rows.get(property_id)
            return _copy(row) if row is not None else None

    def save(self, prop: Property) -> Property:
        stored = _copy(prop)
        with self._lock:
            if stored.id is None:
                stored.id = self._next_id
                self._next_id += 1
            else:
                existing = self._rows.get(stored.id)
                if existing is not None:
                    stored.created_at = existing.created_at
                self._next_id = max(self._next_id, stored.id + 1)
            self._rows[stored.id] = stored
        prop.id = stored.id
        prop.created_at = stored.created_at
        return _copy(stored)

    def exists_by_id(self, property_id: int) -> bool:
        with self._lock:
            return property_id in self._rows

    def delete_by_id(self, property_id: int) -> None:
        with self._lock:
            self._rows.pop(property_id, None)

    def find_by_address_containing(self, text: str) -> list[Property]:
        needle = text.casefold()
        return [p for p in self._snapshot() if needle in (p.address or "").casefold()]

    def find_by_price_between(self, min_price: float, max_price: float) -> list[Property]:
        return [p for p in self._snapshot() if min_price <= p.price <= max_price]

    def find_by_size_between(self, min_size: float, max_size: float) -> list[Property]:
        return [p for p in self._snapshot() if min_size <= p.size <= max_size]

    def find_all_ordered_by_price(self, ascending: bool = True) -> list[Property]:
        # sorted() is stable, so equal prices keep id order in both directions
        return sorted(self._snapshot(), key=lambda p: p.price if ascending else -p.price)

    def find_all_ordered_by_size(self, ascending: bool = True) -> list[Property]:
        return sorted(self._snapshot(), key=lambda p: p.size if ascending else -p.size)
