import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from app.api.deps import get_inventory_client
from app.constants.shopify import SyncErrorMessage
from app.core.exceptions import BatchValidationError
from app.schemas.inventory_sync import (
    ErrorResponse,
    InventorySyncResponse,
    parse_sync_request,
)
from app.services.inventory_sync import InventorySyncOrchestrator
from app.services.shopify.client import RemoteInventoryClient

router = APIRouter()

_logger = logging.getLogger(__name__)


@router.post(
    "/inventory-sync",
    response_model=InventorySyncResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def inventory_sync(
    request: Request,
    client: RemoteInventoryClient = Depends(get_inventory_client),
):
    """
    Set absolute available quantities in Shopify for a batch of SKUs.

    Body: {"items": [{"sku": "...", "quantity": 5}, ...]}. Every item gets
    exactly one result, in input order; per-item failures never abort the
    batch.
    """
    try:
        try:
            body = await request.json()
        except ValueError:
            body = None

        items = parse_sync_request(body)
        orchestrator = InventorySyncOrchestrator(client)
        results = await run_in_threadpool(orchestrator.sync_batch, items)
        return InventorySyncResponse(results=results)

    except BatchValidationError as e:
        _logger.warning(f"Rejected inventory sync payload: {e.message}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": e.message},
        )
    except Exception as e:
        _logger.error(f"Error in /api/inventory-sync: {e}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": SyncErrorMessage.INTERNAL},
        )
