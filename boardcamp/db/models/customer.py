from sqlalchemy import Column, Integer, String, Date

from boardcamp.db.base import Base


class Customer(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    phone = Column(String(11), nullable=False)
    cpf = Column(String(11), unique=True, nullable=False, index=True)
    birthday = Column(Date, nullable=True)
