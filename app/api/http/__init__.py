from app.api.http.health import router as health_router
from app.api.http.editor import router as editor_router
from app.api.http.documents import router as documents_router

__all__ = [
    "health_router",
    "editor_router",
    "documents_router"
]
