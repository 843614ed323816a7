from typing import Any, Awaitable, List, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError
from supabase import AsyncClient, PostgrestAPIError

from app.core.config import settings
from app.domains.documents.exceptions import DocumentQueryError
from app.domains.documents.schemas import (
    AggregateDocument, DocumentRecord, TrashedDocumentRecord
)

RecordT = TypeVar("RecordT", bound=BaseModel)


class DocumentRepository:
    """Репозиторий документов поверх Supabase (PostgREST)"""
    
    def __init__(self, client: AsyncClient):
        self.client = client
    
    async def list_documents(self, owner_id: str) -> List[DocumentRecord]:
        """Документы владельца, новые изменения первыми"""
        query = (
            self.client.table(settings.documents_table)
            .select("*")
            .eq("owner_id", owner_id)
            .order("updated_at", desc=True)
        )
        return await self._fetch(settings.documents_table, query.execute(), DocumentRecord)
    
    async def list_starred_documents_with_owners(self) -> List[AggregateDocument]:
        """Избранные документы вместе с данными владельцев"""
        rpc = settings.starred_documents_rpc
        return await self._fetch(rpc, self.client.rpc(rpc, {}).execute(), AggregateDocument)
    
    async def list_shared_documents_with_owners(self) -> List[AggregateDocument]:
        """Документы, к которым пользователю открыт доступ, с данными владельцев"""
        rpc = settings.shared_documents_rpc
        return await self._fetch(rpc, self.client.rpc(rpc, {}).execute(), AggregateDocument)
    
    async def list_trashed_documents(self, owner_id: str) -> List[TrashedDocumentRecord]:
        """Удаленные документы владельца, последние удаленные первыми"""
        query = (
            self.client.table(settings.trashed_documents_table)
            .select("*")
            .eq("owner_id", owner_id)
            .order("trashed_at", desc=True)
        )
        return await self._fetch(
            settings.trashed_documents_table, query.execute(), TrashedDocumentRecord
        )
    
    async def _fetch(
        self,
        source: str,
        request: Awaitable[Any],
        model: Type[RecordT]
    ) -> List[RecordT]:
        """Выполнение запроса и преобразование строк в схемы"""
        try:
            response = await request
            return [model.model_validate(row) for row in response.data or []]
        except (PostgrestAPIError, httpx.HTTPError, ValidationError) as e:
            raise DocumentQueryError(source, e) from e
