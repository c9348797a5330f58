from sqlalchemy import Column, Integer, Numeric, String, Text, ForeignKey
from sqlalchemy.orm import relationship

from boardcamp.db.base import Base


class Game(Base):
    __tablename__ = "games"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), unique=True, nullable=False)
    image = Column(Text, nullable=False, default="")
    stock_total = Column(Integer, nullable=False)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False)
    price_per_day = Column(Numeric(10, 2), nullable=False)

    # Relationships
    category = relationship("Category", backref="games")

    @property
    def category_name(self) -> str | None:
        return self.category.name if self.category is not None else None
