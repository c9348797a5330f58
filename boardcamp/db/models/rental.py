from sqlalchemy import Column, Integer, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from boardcamp.db.base import Base


class Rental(Base):
    __tablename__ = "rentals"

    id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False)
    game_id = Column(Integer, ForeignKey("games.id"), nullable=False)
    rent_date = Column(DateTime(timezone=True), nullable=False)
    days_rented = Column(Integer, nullable=False)
    original_price = Column(Numeric(18, 2), nullable=False)
    return_date = Column(DateTime(timezone=True), nullable=True)
    delay_fee = Column(Numeric(18, 2), nullable=True)

    # Relationships
    customer = relationship("Customer", backref="rentals")
    game = relationship("Game", backref="rentals")

    @property
    def is_open(self) -> bool:
        return self.return_date is None
