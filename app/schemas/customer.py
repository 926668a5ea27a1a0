from pydantic import BaseModel
from typing import Optional
from datetime import datetime

from app.db.models import CustomerStatus


class CustomerCreate(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    status: CustomerStatus = CustomerStatus.ACTIVE
    notes: Optional[str] = None


class CustomerUpdate(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None


class CustomerResponse(BaseModel):
    id: int
    first_name: str
    last_name: Optional[str] = None
    full_name: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None
    status: CustomerStatus
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
        frozen = True
