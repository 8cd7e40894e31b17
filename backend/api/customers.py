"""
Service Tracker - Customer API Endpoints
Version: 1.0.1

Changelog:
v1.0.1 (2026-08-03): Single customer lookup
v1.0.0 (2026-07-14): Initial customer CRUD
"""

from fastapi import APIRouter, HTTPException

from models import CustomerIn
from services import customers

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("")
def list_customers():
    """List all customers in creation order"""
    return customers.list_customers()


@router.get("/{customer_id}")
def get_customer(customer_id: int):
    customer = customers.get_customer(customer_id)
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


@router.post("")
def create_customer(data: CustomerIn):
    return customers.add_customer(data)


@router.put("")
def update_customer(data: CustomerIn):
    """Update the customer identified by data.id; changes=0 when it does not exist"""
    return customers.update_customer(data)


@router.delete("/{customer_id}")
def delete_customer(customer_id: int):
    return customers.delete_customer(customer_id)
