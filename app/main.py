from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from app.api.http.health import router as health_router
from app.api.http.editor import router as editor_router
from app.api.http.documents import router as documents_router
from app.core.config import settings
from app.core.logging import setup_logging


def create_app() -> FastAPI:
    setup_logging(settings.log_level)
    
    app = FastAPI(
        title=settings.app_title,
        description="Документы пользователя: свои, избранные, общие и корзина",
        version="1.0.0"
    )
    
    # Подключаем роутеры
    app.include_router(health_router)
    app.include_router(editor_router)
    app.include_router(documents_router)
    
    @app.get("/", include_in_schema=False)
    async def root():
        """Корневой эндпоинт - отправляем на страницу документов"""
        return RedirectResponse(url="/editor")
    
    return app


app = create_app()
