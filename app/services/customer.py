import json
import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import InvalidInputError, NotFoundError
from app.core.validation import is_valid_email, format_date
from app.db.models import Customer, CustomerStatus
from app.db.repository import CustomerRepository
from app.schemas.customer import CustomerCreate, CustomerUpdate, CustomerResponse

logger = logging.getLogger(__name__)


PATCHABLE_FIELDS = ("first_name", "last_name", "email", "phone", "address")

STATUS_DESCRIPTIONS = {
    CustomerStatus.ACTIVE: "Customer account is active and in good standing",
    CustomerStatus.INACTIVE: "Customer account is inactive",
    CustomerStatus.SUSPENDED: "Customer account has been suspended",
    CustomerStatus.PENDING_VERIFICATION: "Customer account is pending verification",
}
UNKNOWN_STATUS_DESCRIPTION = "Unknown status"


def get_full_name(first_name: Optional[str], last_name: Optional[str]) -> str:
    if first_name and last_name:
        return f"{first_name} {last_name}"
    return first_name or last_name or "Unknown"


def get_status_description(status) -> str:
    try:
        status = CustomerStatus(status)
    except ValueError:
        return UNKNOWN_STATUS_DESCRIPTION
    return STATUS_DESCRIPTIONS.get(status, UNKNOWN_STATUS_DESCRIPTION)


def to_response(customer: Customer) -> CustomerResponse:
    return CustomerResponse(
        id=customer.id,
        first_name=customer.first_name,
        last_name=customer.last_name,
        full_name=get_full_name(customer.first_name, customer.last_name),
        email=customer.email,
        phone=customer.phone,
        address=customer.address,
        status=customer.status,
        notes=customer.notes,
        created_at=customer.created_at,
        updated_at=customer.updated_at
    )


async def list_customers(db: AsyncSession) -> list[CustomerResponse]:
    customers = await CustomerRepository(db).find_all()
    return [to_response(customer) for customer in customers]


async def get_customer(db: AsyncSession, customer_id: int) -> CustomerResponse:
    customer = await CustomerRepository(db).find_by_id(customer_id)
    if not customer:
        raise NotFoundError("Customer", customer_id)
    return to_response(customer)


async def list_active_customers(db: AsyncSession) -> list[CustomerResponse]:
    customers = await list_customers(db)
    return [customer for customer in customers if customer.status == CustomerStatus.ACTIVE]


async def create_customer(db: AsyncSession, data: Optional[CustomerCreate]) -> CustomerResponse:
    if data is None:
        raise InvalidInputError("Customer cannot be null")
    if not data.first_name:
        logger.warning("Rejected customer without first name")
        raise InvalidInputError("First name is required")
    if not is_valid_email(data.email):
        logger.warning(f"Rejected customer with invalid email: {data.email}")
        raise InvalidInputError("Valid email is required")

    now = datetime.utcnow()
    customer = Customer(
        first_name=data.first_name,
        last_name=data.last_name,
        email=data.email,
        phone=data.phone,
        address=data.address,
        status=data.status,
        notes=data.notes,
        created_at=now,
        updated_at=now
    )
    customer = await CustomerRepository(db).save(customer)
    logger.info(f"Created customer {customer.id} ({customer.email})")

    return to_response(customer)


async def update_customer(db: AsyncSession, customer_id: int, data: CustomerUpdate) -> CustomerResponse:
    repository = CustomerRepository(db)
    customer = await repository.find_by_id(customer_id)
    if not customer:
        raise NotFoundError("Customer", customer_id)

    update_data = {
        field: value
        for field, value in data.model_dump(exclude_unset=True).items()
        if field in PATCHABLE_FIELDS and value is not None
    }

    if "email" in update_data and not is_valid_email(update_data["email"]):
        logger.warning(f"Rejected update of customer {customer_id} with invalid email: {update_data['email']}")
        raise InvalidInputError("Valid email is required")

    for field, value in update_data.items():
        setattr(customer, field, value)

    customer.updated_at = datetime.utcnow()
    customer = await repository.save(customer)
    logger.info(f"Updated customer {customer_id}: {sorted(update_data)}")

    return to_response(customer)


async def delete_customer(db: AsyncSession, customer_id: int) -> None:
    repository = CustomerRepository(db)
    customer = await repository.find_by_id(customer_id)
    if not customer:
        logger.debug(f"Delete skipped, customer {customer_id} does not exist")
        return

    await repository.delete(customer)
    logger.info(f"Deleted customer {customer_id}")


def generate_customer_report(customer: CustomerResponse) -> str:
    report = {
        "customerId": customer.id,
        "name": customer.full_name,
        "email": customer.email,
        "status": customer.status.value,
        "createdAt": format_date(customer.created_at),
    }
    return json.dumps(report, indent=2)
