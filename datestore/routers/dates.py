from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from datestore.repositories import StorageError
from datestore.schemas import AvailableDatesIn, DateRangeIn, OccupiedDatesIn
from datestore.services.date_service import Collection, DateService

router = APIRouter(prefix="/dates", tags=["dates"])


def _get_date_service(request: Request) -> DateService:
    svc = getattr(getattr(request.app, "state", None), "date_service", None)
    if not svc:
        raise RuntimeError("DateService not configured")
    return svc


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def invalid_body_message(method: str, path: str) -> str:
    """Static 400 message for a /dates request whose body failed validation."""
    for collection in Collection:
        if path.rstrip("/") == f"{router.prefix}/{collection.value}":
            if method == "POST":
                return "Invalid fromDate or toDate data"
            return f"Invalid {collection.key} data"
    return "Invalid request body"


def _replace(collection: Collection, dates: list[str], request: Request):
    svc = _get_date_service(request)
    try:
        svc.replace(collection, dates)
    except StorageError:
        return _error(f"Error updating {collection.key}", 500)
    return {"message": f"{collection.label} dates updated successfully"}


def _merge(collection: Collection, dates: list[str], request: Request):
    svc = _get_date_service(request)
    try:
        merged = svc.merge(collection, dates)
    except StorageError:
        return _error(f"Error updating {collection.key}", 500)
    return {"message": f"{collection.label} dates updated successfully", collection.key: merged}


def _clear(collection: Collection, request: Request):
    svc = _get_date_service(request)
    try:
        svc.clear(collection)
    except StorageError:
        return _error(f"Error deleting {collection.key}", 500)
    return {"message": f"{collection.label} dates deleted successfully"}


def _add_range(collection: Collection, body: DateRangeIn, request: Request):
    svc = _get_date_service(request)
    try:
        merged = svc.add_range(collection, body.start, body.end)
    except StorageError:
        return _error(f"Error updating {collection.key}", 500)
    return {"message": f"{collection.label} dates updated successfully", collection.key: merged}


@router.get("")
def get_dates(request: Request):
    svc = _get_date_service(request)
    try:
        return svc.get_all()
    except StorageError:
        return _error("Error reading data", 500)


@router.put("/available")
def replace_available(body: AvailableDatesIn, request: Request):
    return _replace(Collection.AVAILABLE, body.available_dates, request)


@router.put("/occupied")
def replace_occupied(body: OccupiedDatesIn, request: Request):
    return _replace(Collection.OCCUPIED, body.occupied_dates, request)


@router.patch("/available")
def merge_available(body: AvailableDatesIn, request: Request):
    return _merge(Collection.AVAILABLE, body.available_dates, request)


@router.patch("/occupied")
def merge_occupied(body: OccupiedDatesIn, request: Request):
    return _merge(Collection.OCCUPIED, body.occupied_dates, request)


@router.delete("/available")
def clear_available(request: Request):
    return _clear(Collection.AVAILABLE, request)


@router.delete("/occupied")
def clear_occupied(request: Request):
    return _clear(Collection.OCCUPIED, request)


@router.post("/available")
def add_available_range(body: DateRangeIn, request: Request):
    return _add_range(Collection.AVAILABLE, body, request)


@router.post("/occupied")
def add_occupied_range(body: DateRangeIn, request: Request):
    return _add_range(Collection.OCCUPIED, body, request)


@router.api_route("/{name}", methods=["PUT", "PATCH", "DELETE", "POST"], include_in_schema=False)
def unknown_collection(name: str):
    return _error("Unknown date collection", 404)
