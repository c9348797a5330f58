from datetime import date

from sqlalchemy.orm import Session

import boardcamp.repositories.customer as customer_repo
from boardcamp.db.models.customer import Customer as CustomerModel
from boardcamp.errors import DuplicateResourceError, NotFoundError


def create_customer(
    db: Session,
    name: str,
    phone: str,
    cpf: str,
    birthday: date | None = None,
) -> CustomerModel:
    """
    Create a customer.

    Raises:
        DuplicateResourceError: If the CPF is already registered
    """
    if customer_repo.get_customer_by_cpf(db, cpf):
        raise DuplicateResourceError(f"A customer with CPF {cpf} already exists")
    return customer_repo.create_customer(
        db, name=name, phone=phone, cpf=cpf, birthday=birthday
    )


def update_customer(
    db: Session,
    customer_id: int,
    name: str,
    phone: str,
    cpf: str,
    birthday: date | None = None,
) -> CustomerModel:
    """
    Replace a customer's data.

    Raises:
        NotFoundError: If the customer doesn't exist
        DuplicateResourceError: If the CPF belongs to another customer
    """
    if not customer_repo.get_customer_by_id(db, customer_id):
        raise NotFoundError("Customer not found")

    if customer_repo.get_customer_by_cpf(db, cpf, exclude_id=customer_id):
        raise DuplicateResourceError(f"A customer with CPF {cpf} already exists")

    return customer_repo.update_customer(
        db,
        customer_id=customer_id,
        name=name,
        phone=phone,
        cpf=cpf,
        birthday=birthday,
    )
