import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.api.deps import get_inventory_client
from app.constants.shopify import SyncErrorMessage
from app.schemas.inventory_sync import ErrorResponse, ProductCountResponse
from app.services.products import count_products
from app.services.shopify.client import RemoteInventoryClient

router = APIRouter(prefix="/products")

_logger = logging.getLogger(__name__)


@router.get(
    "/count",
    response_model=ProductCountResponse,
    responses={500: {"model": ErrorResponse}},
)
def products_count(client: RemoteInventoryClient = Depends(get_inventory_client)):
    try:
        return ProductCountResponse(count=count_products(client))
    except Exception as e:
        _logger.error(f"Failed to count products: {e}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": SyncErrorMessage.INTERNAL},
        )
