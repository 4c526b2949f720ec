from pydantic import BaseModel, Field, StrictFloat, StrictInt, computed_field, field_serializer
from datetime import datetime
from typing import Optional, Union

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"


class PropertyRequest(BaseModel):
    """Create/update body. Frontend sends camelCase, snake_case names work too.

    Rules are checked by app.services.validation, not here, so every field is
    optional at parse time. id and timestamps are accepted and ignored.
    """
    id: Optional[int] = None
    address: Optional[str] = None
    # strict so JSON booleans are rejected instead of becoming 1.0/0.0
    price: Optional[Union[StrictFloat, StrictInt]] = None
    size: Optional[Union[StrictFloat, StrictInt]] = None
    description: Optional[str] = None
    owner_name: Optional[str] = Field(None, alias="ownerName")
    owner_phone: Optional[str] = Field(None, alias="ownerPhone")
    owner_email: Optional[str] = Field(None, alias="ownerEmail")
    owner_document: Optional[str] = Field(None, alias="ownerDocument")

    model_config = {"populate_by_name": True}


class PropertyResponse(BaseModel):
    id: Optional[int] = None
    address: Optional[str] = None
    price: Optional[float] = None
    size: Optional[float] = None
    description: Optional[str] = None
    owner_name: Optional[str] = Field(None, alias="ownerName")
    owner_phone: Optional[str] = Field(None, alias="ownerPhone")
    owner_email: Optional[str] = Field(None, alias="ownerEmail")
    owner_document: Optional[str] = Field(None, alias="ownerDocument")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    model_config = {"populate_by_name": True, "from_attributes": True}

    @computed_field(alias="pricePerSquareMeter")
    @property
    def price_per_square_meter(self) -> float:
        if self.size is not None and self.size > 0 and self.price is not None:
            return self.price / self.size
        return 0.0

    @computed_field(alias="isNew")
    @property
    def is_new(self) -> bool:
        return self.id is None

    @computed_field
    @property
    def summary(self) -> str:
        address = self.address if self.address is not None else "address not specified"
        size = self.size if self.size is not None else 0.0
        price = self.price if self.price is not None else 0.0
        return f"Property at {address} - {size:,.0f} m² - ${price:,.0f}"

    @field_serializer("created_at", "updated_at")
    def _format_timestamp(self, value: Optional[datetime]) -> Optional[str]:
        return value.strftime(TIMESTAMP_FORMAT) if value else None

    # Identity is the id; unsaved records are only equal to themselves
    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, PropertyResponse):
            return NotImplemented
        return self.id is not None and self.id == other.id

    def __hash__(self):
        return hash(self.id) if self.id is not None else id(self)


class ValidationErrorResponse(BaseModel):
    detail: str = "Invalid property data"
    errors: list[str] = []
