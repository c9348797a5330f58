from datetime import date

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from boardcamp.db.models.customer import Customer as CustomerModel
from boardcamp.errors import DuplicateResourceError, NotFoundError
from boardcamp.repositories.ordering import apply_ordering, apply_window

ORDER_COLUMNS = {
    "id": CustomerModel.id,
    "name": CustomerModel.name,
    "cpf": CustomerModel.cpf,
    "birthday": CustomerModel.birthday,
}


def get_customer_by_id(db: Session, customer_id: int) -> CustomerModel | None:
    """Get a customer by ID."""
    return db.query(CustomerModel).filter(CustomerModel.id == customer_id).first()


def get_customer_by_cpf(
    db: Session, cpf: str, exclude_id: int | None = None
) -> CustomerModel | None:
    """Get a customer by CPF, optionally ignoring one customer (the one being updated)."""
    query = db.query(CustomerModel).filter(CustomerModel.cpf == cpf)
    if exclude_id is not None:
        query = query.filter(CustomerModel.id != exclude_id)
    return query.first()


def list_customers(
    db: Session,
    cpf: str | None = None,
    offset: int | None = None,
    limit: int | None = None,
    order: str | None = None,
    desc: bool = False,
) -> list[CustomerModel]:
    """List customers, optionally only those whose CPF starts with `cpf`."""
    query = db.query(CustomerModel)

    # CPF is validated as digits only, so no LIKE escaping is needed
    if cpf:
        query = query.filter(CustomerModel.cpf.startswith(cpf))

    query = apply_ordering(query, ORDER_COLUMNS, order, desc, default=CustomerModel.id)
    return apply_window(query, offset, limit).all()


def create_customer(
    db: Session,
    name: str,
    phone: str,
    cpf: str,
    birthday: date | None = None,
) -> CustomerModel:
    """Create a new customer in the database. Pure data access - no business logic."""
    db_customer = CustomerModel(name=name, phone=phone, cpf=cpf, birthday=birthday)
    db.add(db_customer)
    _commit_customer(db, cpf)
    db.refresh(db_customer)
    return db_customer


def update_customer(
    db: Session,
    customer_id: int,
    name: str,
    phone: str,
    cpf: str,
    birthday: date | None = None,
) -> CustomerModel:
    """Replace every editable field of a customer."""
    customer = get_customer_by_id(db, customer_id)
    if not customer:
        raise NotFoundError("Customer not found")

    customer.name = name
    customer.phone = phone
    customer.cpf = cpf
    customer.birthday = birthday

    _commit_customer(db, cpf)
    db.refresh(customer)
    return customer


def _commit_customer(db: Session, cpf: str) -> None:
    # The unique index on cpf catches writes that raced past the service check
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateResourceError(f"A customer with CPF {cpf} already exists")
