from sqlalchemy import Column, Integer, String, Numeric, DateTime
from app.db.session import Base


class Property(Base):
    __tablename__ = "properties"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    address = Column(String(500), nullable=False)
    price = Column(Numeric(15, 2, asdecimal=False), nullable=False)
    size = Column(Numeric(10, 2, asdecimal=False), nullable=False)  # m²
    description = Column(String(1000), nullable=True)
    owner_name = Column(String(200), nullable=True)
    owner_phone = Column(String(20), nullable=True)
    owner_email = Column(String(100), nullable=True)
    owner_document = Column(String(50), nullable=True)
    # Timestamps are stamped by PropertyService; created_at is written on insert only
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=True)

    def __repr__(self) -> str:
        return f"<Property id={self.id} address={self.address!r} price={self.price} size={self.size}>"
