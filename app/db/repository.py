from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.db.models import Customer


class CustomerRepository:
    """Persistence for Customer rows on top of an async session.

    Each write commits its own transaction.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all(self) -> list[Customer]:
        result = await self.db.execute(select(Customer).order_by(Customer.id))
        return list(result.scalars().all())

    async def find_by_id(self, customer_id: int) -> Optional[Customer]:
        result = await self.db.execute(select(Customer).where(Customer.id == customer_id))
        return result.scalar_one_or_none()

    async def save(self, customer: Customer) -> Customer:
        self.db.add(customer)
        await self.db.commit()
        await self.db.refresh(customer)
        return customer

    async def delete(self, customer: Customer) -> None:
        await self.db.delete(customer)
        await self.db.commit()
