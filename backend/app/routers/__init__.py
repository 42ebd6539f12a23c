from app.routers.order import router as order_router
from app.routers.ui import router as ui_router

__all__ = ["order_router", "ui_router"]
