import asyncio
import logging
from typing import Awaitable, List, TypeVar, TYPE_CHECKING

from app.domains.documents.entities import ViewSection
from app.domains.documents.exceptions import DocumentQueryError
from app.domains.documents.schemas import (
    DocumentCollections, EditorPage, OwnedDocument, TrashedDocument
)
from app.domains.identity.entities import SessionUser
from app.domains.identity.schemas import SessionUserResponse

if TYPE_CHECKING:
    from app.db.repositories.document_repository import DocumentRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DocumentsViewService:
    """Сервис сборки страницы документов редактора"""
    
    def __init__(self, repository: "DocumentRepository"):
        self.repository = repository
    
    async def load_documents(self, user: SessionUser) -> DocumentCollections:
        """Загрузка всех четырех списков документов пользователя.

        Запросы выполняются параллельно и не зависят друг от друга:
        ошибка одного из них логируется и заменяется пустым списком.
        """
        owned, starred, shared, trashed = await asyncio.gather(
            self._safe_fetch("documents", self.repository.list_documents(user.id)),
            self._safe_fetch(
                "starred documents",
                self.repository.list_starred_documents_with_owners()
            ),
            self._safe_fetch(
                "shared documents",
                self.repository.list_shared_documents_with_owners()
            ),
            self._safe_fetch(
                "trashed documents",
                self.repository.list_trashed_documents(user.id)
            ),
        )
        
        return DocumentCollections(
            owned=[OwnedDocument.with_owner(doc, user) for doc in owned],
            starred=starred,
            shared=shared,
            trash=[TrashedDocument.with_owner(doc, user) for doc in trashed]
        )
    
    async def build_page(self, user: SessionUser, section: ViewSection) -> EditorPage:
        """Страница редактора для выбранной секции"""
        documents = await self.load_documents(user)
        visible = section.visible_lists()
        
        lists = {
            document_list.value: documents.get(document_list)
            for document_list in visible
        }
        
        return EditorPage(
            user=SessionUserResponse.model_validate(user),
            section=section,
            visible_sections=list(visible),
            **lists
        )
    
    async def _safe_fetch(self, label: str, request: Awaitable[List[T]]) -> List[T]:
        try:
            return await request
        except DocumentQueryError as e:
            logger.error(f"Failed to load {label}: {e.cause}")
            return []
