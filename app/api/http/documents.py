from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.core.auth import require_current_user
from app.core.supabase import get_document_repository
from app.db.repositories.document_repository import DocumentRepository
from app.domains.documents.entities import ViewSection
from app.domains.documents.schemas import EditorPage
from app.domains.documents.services import DocumentsViewService
from app.domains.identity.entities import SessionUser

router = APIRouter(prefix="/api/editor", tags=["documents"])


@router.get("/documents", response_model=EditorPage)
async def get_editor_documents(
    section: Optional[str] = Query(None),
    current_user: SessionUser = Depends(require_current_user),
    repository: DocumentRepository = Depends(get_document_repository)
):
    """Документы страницы редактора в виде JSON"""
    service = DocumentsViewService(repository)
    return await service.build_page(current_user, ViewSection.parse(section))
