import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import HTMLResponse, RedirectResponse

from app.core.auth import get_current_user
from app.core.config import settings
from app.core.supabase import get_document_repository
from app.db.repositories.document_repository import DocumentRepository
from app.domains.documents.entities import ViewSection
from app.domains.documents.services import DocumentsViewService
from app.domains.identity.entities import SessionUser
from app.views.editor import render_editor_page

logger = logging.getLogger(__name__)

router = APIRouter(tags=["editor"])


@router.get("/editor", response_class=HTMLResponse)
async def editor_page(
    section: Optional[str] = Query(None),
    current_user: Optional[SessionUser] = Depends(get_current_user),
    repository: DocumentRepository = Depends(get_document_repository)
):
    """Страница документов редактора"""
    if current_user is None:
        return RedirectResponse(url=settings.login_path, status_code=status.HTTP_302_FOUND)
    
    service = DocumentsViewService(repository)
    page = await service.build_page(current_user, ViewSection.parse(section))
    
    logger.info(f"Rendered editor page for user {current_user.id}, section {page.section.value}")
    return HTMLResponse(render_editor_page(page, title=settings.app_title))
