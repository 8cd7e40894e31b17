"""
Service Tracker - Reference List Data Access
Version: 1.1.0

Changelog:
v1.1.0 (2026-09-02): Update operations for every reference list
v1.0.0 (2026-07-14): Areas, products, common issues and common resolutions

Master data used by the mobile client for pickers and autocomplete. Areas
are not linked to the free-text ``area`` columns of customers and calls.
"""

from database import get_db, execute_all, execute_insert, execute_update

# table -> text column for the autocomplete lists
_TEXT_LISTS = {
    "common_issues": "issue_text",
    "common_resolutions": "resolution_text",
}


def _delete(table: str, row_id: int) -> dict:
    with get_db() as db:
        changes = execute_update(db, f"DELETE FROM {table} WHERE id = :id", {"id": row_id})
    return {"changes": changes}


# -- Areas --

def list_areas() -> list[dict]:
    with get_db() as db:
        return execute_all(db, "SELECT * FROM areas ORDER BY name ASC")


def add_area(name: str) -> dict:
    with get_db() as db:
        new_id = execute_insert(
            db, "INSERT INTO areas (name) VALUES (:name)", {"name": name}
        )
    return {"id": new_id, "name": name}


def update_area(area_id: int, name: str) -> dict:
    with get_db() as db:
        changes = execute_update(
            db, "UPDATE areas SET name = :name WHERE id = :id",
            {"name": name, "id": area_id}
        )
    return {"changes": changes}


def delete_area(area_id: int) -> dict:
    return _delete("areas", area_id)


# -- Products --

def list_products() -> list[dict]:
    with get_db() as db:
        return execute_all(db, "SELECT id, name, price FROM products ORDER BY name ASC")


def add_product(name: str, price: float | None) -> dict:
    with get_db() as db:
        new_id = execute_insert(
            db, "INSERT INTO products (name, price) VALUES (:name, :price)",
            {"name": name, "price": price or 0}
        )
    return {"id": new_id, "name": name, "price": price or 0}


def update_product(product_id: int, name: str, price: float | None) -> dict:
    with get_db() as db:
        changes = execute_update(
            db, "UPDATE products SET name = :name, price = :price WHERE id = :id",
            {"name": name, "price": price or 0, "id": product_id}
        )
    return {"changes": changes}


def delete_product(product_id: int) -> dict:
    return _delete("products", product_id)


# -- Common issues / resolutions --

def _list_texts(table: str) -> list[dict]:
    with get_db() as db:
        return execute_all(db, f"SELECT * FROM {table} ORDER BY id ASC")


def _add_text(table: str, value: str) -> dict:
    column = _TEXT_LISTS[table]
    with get_db() as db:
        new_id = execute_insert(
            db, f"INSERT INTO {table} ({column}) VALUES (:value)", {"value": value}
        )
    return {"id": new_id, column: value}


def _update_text(table: str, row_id: int, value: str) -> dict:
    column = _TEXT_LISTS[table]
    with get_db() as db:
        changes = execute_update(
            db, f"UPDATE {table} SET {column} = :value WHERE id = :id",
            {"value": value, "id": row_id}
        )
    return {"changes": changes}


def list_common_issues() -> list[dict]:
    return _list_texts("common_issues")


def add_common_issue(issue_text: str) -> dict:
    return _add_text("common_issues", issue_text)


def update_common_issue(issue_id: int, issue_text: str) -> dict:
    return _update_text("common_issues", issue_id, issue_text)


def delete_common_issue(issue_id: int) -> dict:
    return _delete("common_issues", issue_id)


def list_common_resolutions() -> list[dict]:
    return _list_texts("common_resolutions")


def add_common_resolution(resolution_text: str) -> dict:
    return _add_text("common_resolutions", resolution_text)


def update_common_resolution(resolution_id: int, resolution_text: str) -> dict:
    return _update_text("common_resolutions", resolution_id, resolution_text)


def delete_common_resolution(resolution_id: int) -> dict:
    return _delete("common_resolutions", resolution_id)
