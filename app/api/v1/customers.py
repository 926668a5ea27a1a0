from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import InvalidInputError, NotFoundError
from app.db.session import get_db
from app.schemas.customer import CustomerCreate, CustomerUpdate, CustomerResponse
from app.services.customer import (
    list_customers,
    list_active_customers,
    get_customer,
    create_customer,
    update_customer,
    delete_customer,
    generate_customer_report,
)


router = APIRouter(prefix="/api/customers", tags=["customers"])


@router.get("", response_model=list[CustomerResponse])
async def get_all_customers(db: AsyncSession = Depends(get_db)):
    return await list_customers(db)


@router.get("/active", response_model=list[CustomerResponse])
async def get_active_customers(db: AsyncSession = Depends(get_db)):
    return await list_active_customers(db)


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer_by_id(customer_id: int, db: AsyncSession = Depends(get_db)):
    try:
        return await get_customer(db, customer_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
async def add_customer(data: CustomerCreate, db: AsyncSession = Depends(get_db)):
    try:
        return await create_customer(db, data)
    except InvalidInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put("/{customer_id}", response_model=CustomerResponse)
async def edit_customer(customer_id: int, data: CustomerUpdate, db: AsyncSession = Depends(get_db)):
    try:
        return await update_customer(db, customer_id, data)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_customer(customer_id: int, db: AsyncSession = Depends(get_db)):
    await delete_customer(db, customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{customer_id}/report")
async def get_customer_report(customer_id: int, db: AsyncSession = Depends(get_db)):
    try:
        customer = await get_customer(db, customer_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return Response(content=generate_customer_report(customer), media_type="application/json")
