"""
Service Tracker - Master Data API Endpoints
Version: 1.1.0

Changelog:
v1.1.0 (2026-09-02): PUT endpoints for every reference list
v1.0.0 (2026-07-14): Areas, products, common issues and resolutions
"""

from fastapi import APIRouter

from models import AreaIn, ProductIn, ReferenceTextIn
from services import reference

areas_router = APIRouter(prefix="/areas", tags=["master-data"])
products_router = APIRouter(prefix="/products", tags=["master-data"])
issues_router = APIRouter(prefix="/common-issues", tags=["master-data"])
resolutions_router = APIRouter(prefix="/common-resolutions", tags=["master-data"])


# -- Areas --

@areas_router.get("")
def list_areas():
    return reference.list_areas()


@areas_router.post("")
def create_area(data: AreaIn):
    return reference.add_area(data.name)


@areas_router.put("")
def update_area(data: AreaIn):
    return reference.update_area(data.id, data.name)


@areas_router.delete("/{area_id}")
def delete_area(area_id: int):
    return reference.delete_area(area_id)


# -- Products --

@products_router.get("")
def list_products():
    return reference.list_products()


@products_router.post("")
def create_product(data: ProductIn):
    return reference.add_product(data.name, data.price)


@products_router.put("")
def update_product(data: ProductIn):
    return reference.update_product(data.id, data.name, data.price)


@products_router.delete("/{product_id}")
def delete_product(product_id: int):
    return reference.delete_product(product_id)


# -- Common issues (client sends {"text": "No power"}) --

@issues_router.get("")
def list_common_issues():
    return reference.list_common_issues()


@issues_router.post("")
def create_common_issue(data: ReferenceTextIn):
    return reference.add_common_issue(data.text)


@issues_router.put("")
def update_common_issue(data: ReferenceTextIn):
    return reference.update_common_issue(data.id, data.text)


@issues_router.delete("/{issue_id}")
def delete_common_issue(issue_id: int):
    return reference.delete_common_issue(issue_id)


# -- Common resolutions --

@resolutions_router.get("")
def list_common_resolutions():
    return reference.list_common_resolutions()


@resolutions_router.post("")
def create_common_resolution(data: ReferenceTextIn):
    return reference.add_common_resolution(data.text)


@resolutions_router.put("")
def update_common_resolution(data: ReferenceTextIn):
    return reference.update_common_resolution(data.id, data.text)


@resolutions_router.delete("/{resolution_id}")
def delete_common_resolution(resolution_id: int):
    return reference.delete_common_resolution(resolution_id)


routers = [areas_router, products_router, issues_router, resolutions_router]
