from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from boardcamp.api.deps import get_db, get_settings
from boardcamp.api.responses import empty_list_response
from boardcamp.core.config import Settings
import boardcamp.repositories.customer as customer_repo
from boardcamp.services.customer import create_customer, update_customer
from boardcamp.schemas.base import MAX_INT
from boardcamp.schemas.customer import Customer, CustomerCreate, CustomerUpdate
from boardcamp.errors import NotFoundError

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("", response_model=list[Customer])
def get_all_customers(
    cpf: str | None = Query(None, pattern=r"^[0-9]{1,11}$", description="CPF prefix"),
    offset: int | None = Query(None, ge=0, le=MAX_INT),
    limit: int | None = Query(None, ge=1, le=MAX_INT),
    order: str | None = Query(None, description="Sort key: id, name, cpf or birthday"),
    desc: bool = Query(False, description="Sort descending"),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    List customers, optionally only those whose CPF starts with `cpf`.
    """
    customers = customer_repo.list_customers(
        db, cpf=cpf, offset=offset, limit=limit, order=order, desc=desc
    )
    empty = empty_list_response(customers, settings)
    if empty is not None:
        return empty
    return [Customer.model_validate(customer) for customer in customers]


@router.get("/{customer_id}", response_model=Customer)
def get_customer_by_id(
    customer_id: int = Path(..., le=MAX_INT),
    db: Session = Depends(get_db),
):
    """
    Get a customer by ID.
    """
    customer = customer_repo.get_customer_by_id(db, customer_id)
    if not customer:
        raise NotFoundError("Customer not found")
    return Customer.model_validate(customer)


@router.post("", response_model=Customer, status_code=status.HTTP_201_CREATED)
def create_new_customer(
    customer_data: CustomerCreate,
    db: Session = Depends(get_db),
):
    """
    Create a new customer. The CPF must not belong to another customer.
    """
    customer = create_customer(
        db,
        name=customer_data.name,
        phone=customer_data.phone,
        cpf=customer_data.cpf,
        birthday=customer_data.birthday,
    )
    return Customer.model_validate(customer)


@router.put("/{customer_id}", response_model=Customer)
def update_customer_by_id(
    customer_data: CustomerUpdate,
    customer_id: int = Path(..., le=MAX_INT),
    db: Session = Depends(get_db),
):
    """
    Replace a customer's data. Every field is required, as on creation.
    """
    customer = update_customer(
        db,
        customer_id=customer_id,
        name=customer_data.name,
        phone=customer_data.phone,
        cpf=customer_data.cpf,
        birthday=customer_data.birthday,
    )
    return Customer.model_validate(customer)
