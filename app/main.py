import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1.endpoints.inventory_sync import router as inventory_sync_router
from app.api.v1.endpoints.products import router as products_router
from app.core.config import settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
_logger = logging.getLogger(__name__)


app = FastAPI(title="Shopify Inventory Sync")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


app.include_router(inventory_sync_router, prefix="/api", tags=["inventory"])
app.include_router(products_router, prefix="/api", tags=["products"])

if __name__ == "__main__":
    import uvicorn
    _logger.info(f"Server running on http://localhost:{settings.http_port}")
    uvicorn.run(app, host="0.0.0.0", port=settings.http_port)
