from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse, Response

from app.api.deps import get_property_service
from app.core.exceptions import PropertyValidationError
from app.core.logging import get_logger
from app.schemas.property import PropertyRequest, PropertyResponse, ValidationErrorResponse
from app.services.property import PropertyService

router = APIRouter(prefix="/api/properties", tags=["Properties"])

logger = get_logger(__name__)


def _invalid(exc: PropertyValidationError) -> JSONResponse:
    body = ValidationErrorResponse(errors=exc.errors)
    return JSONResponse(status_code=400, content=body.model_dump())


# Static paths first so they are not swallowed by /{property_id}

@router.get("/search", response_model=list[PropertyResponse])
def search_properties(
    address: str = Query(...),
    service: PropertyService = Depends(get_property_service),
):
    try:
        return service.search_by_address(address)
    except Exception:
        logger.exception("Address search failed for %r", address)
        raise HTTPException(status_code=500)


@router.get("/price-range", response_model=list[PropertyResponse])
def properties_by_price_range(
    min_price: float = Query(..., alias="minPrice"),
    max_price: float = Query(..., alias="maxPrice"),
    service: PropertyService = Depends(get_property_service),
):
    try:
        return service.by_price_range(min_price, max_price)
    except Exception:
        logger.exception("Price range query failed (%s..%s)", min_price, max_price)
        raise HTTPException(status_code=400)


@router.get("/size-range", response_model=list[PropertyResponse])
def properties_by_size_range(
    min_size: float = Query(..., alias="minSize"),
    max_size: float = Query(..., alias="maxSize"),
    service: PropertyService = Depends(get_property_service),
):
    try:
        return service.by_size_range(min_size, max_size)
    except Exception:
        logger.exception("Size range query failed (%s..%s)", min_size, max_size)
        raise HTTPException(status_code=400)


@router.get("/order-by-price", response_model=list[PropertyResponse])
def properties_ordered_by_price(
    ascending: bool = Query(True),
    service: PropertyService = Depends(get_property_service),
):
    try:
        return service.ordered_by_price(ascending)
    except Exception:
        logger.exception("Ordering by price failed")
        raise HTTPException(status_code=500)


@router.get("/order-by-size", response_model=list[PropertyResponse])
def properties_ordered_by_size(
    ascending: bool = Query(True),
    service: PropertyService = Depends(get_property_service),
):
    try:
        return service.ordered_by_size(ascending)
    except Exception:
        logger.exception("Ordering by size failed")
        raise HTTPException(status_code=500)


@router.get("", response_model=list[PropertyResponse])
@router.get("/", response_model=list[PropertyResponse], include_in_schema=False)
def list_properties(service: PropertyService = Depends(get_property_service)):
    try:
        return service.get_all()
    except Exception:
        logger.exception("Listing properties failed")
        raise HTTPException(status_code=500)


@router.get("/{property_id}", response_model=PropertyResponse)
def get_property(property_id: int, service: PropertyService = Depends(get_property_service)):
    try:
        prop = service.get_by_id(property_id)
    except Exception:
        logger.exception("Loading property %s failed", property_id)
        raise HTTPException(status_code=500)
    if prop is None:
        raise HTTPException(status_code=404, detail="Property not found")
    return prop


@router.post(
    "",
    status_code=201,
    response_model=PropertyResponse,
    responses={400: {"model": ValidationErrorResponse}},
)
@router.post("/", status_code=201, response_model=PropertyResponse, include_in_schema=False)
def create_property(data: PropertyRequest, service: PropertyService = Depends(get_property_service)):
    try:
        return service.create(data)
    except PropertyValidationError as exc:
        return _invalid(exc)
    except Exception:
        logger.exception("Creating property failed")
        raise HTTPException(status_code=400)


@router.put(
    "/{property_id}",
    response_model=PropertyResponse,
    responses={400: {"model": ValidationErrorResponse}},
)
def update_property(
    property_id: int,
    data: PropertyRequest,
    service: PropertyService = Depends(get_property_service),
):
    try:
        prop = service.update(property_id, data)
    except PropertyValidationError as exc:
        return _invalid(exc)
    except Exception:
        logger.exception("Updating property %s failed", property_id)
        raise HTTPException(status_code=400)
    if prop is None:
        raise HTTPException(status_code=404, detail="Property not found")
    return prop


@router.delete("/{property_id}", status_code=204)
def delete_property(property_id: int, service: PropertyService = Depends(get_property_service)):
    try:
        deleted = service.delete(property_id)
    except Exception:
        logger.exception("Deleting property %s failed", property_id)
        raise HTTPException(status_code=500)
    if not deleted:
        raise HTTPException(status_code=404, detail="Property not found")
    return Response(status_code=204)
