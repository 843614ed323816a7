"""In-memory fakes for the external Supabase collaborators."""

from __future__ import annotations

import asyncio
from typing import Dict, List, Optional

from app.domains.documents.exceptions import DocumentQueryError
from app.domains.documents.schemas import (
    AggregateDocument,
    DocumentRecord,
    TrashedDocumentRecord,
)


class FakeDocumentRepository:
    """In-memory stand-in for DocumentRepository that records every call."""

    def __init__(
        self,
        owned: Optional[List[DocumentRecord]] = None,
        starred: Optional[List[AggregateDocument]] = None,
        shared: Optional[List[AggregateDocument]] = None,
        trashed: Optional[List[TrashedDocumentRecord]] = None,
        failing: tuple = (),
    ):
        self.results: Dict[str, list] = {
            "documents": owned or [],
            "starred": starred or [],
            "shared": shared or [],
            "trashed": trashed or [],
        }
        self.failing = set(failing)
        self.calls: List[tuple] = []

    async def _result(self, source: str, *args):
        self.calls.append((source, *args))
        await asyncio.sleep(0)
        if source in self.failing:
            raise DocumentQueryError(source, RuntimeError(f"{source} unavailable"))
        return list(self.results[source])

    async def list_documents(self, owner_id: str):
        return await self._result("documents", owner_id)

    async def list_starred_documents_with_owners(self):
        return await self._result("starred")

    async def list_shared_documents_with_owners(self):
        return await self._result("shared")

    async def list_trashed_documents(self, owner_id: str):
        return await self._result("trashed", owner_id)
