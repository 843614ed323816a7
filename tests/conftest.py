"""
Shared fixtures for the editor documents tests.

External collaborators (Supabase auth and PostgREST) are replaced with
in-memory fakes; the FastAPI app is driven through httpx's ASGI transport.
"""

from __future__ import annotations

from typing import List

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.core.auth import get_current_user
from app.core.supabase import get_document_repository
from app.domains.documents.schemas import (
    AggregateDocument,
    DocumentRecord,
    TrashedDocumentRecord,
)
from app.domains.identity.entities import SessionUser
from app.main import app as fastapi_app
from tests.fakes import FakeDocumentRepository


@pytest.fixture
def session_user() -> SessionUser:
    return SessionUser(
        id="u1",
        email="ada@example.com",
        display_name="Ada Lovelace",
        avatar_url="https://cdn.example.com/ada.png",
    )


@pytest.fixture
def owned_records() -> List[DocumentRecord]:
    return [
        DocumentRecord(id="d2", owner_id="u1", title="Roadmap", updated_at="2024-01-03"),
        DocumentRecord(id="d1", owner_id="u1", title="Notes", updated_at="2024-01-02"),
    ]


@pytest.fixture
def starred_records() -> List[AggregateDocument]:
    return [
        AggregateDocument(
            id="s1",
            owner_id="u2",
            title="Team plan",
            user_name="Grace",
            user_email="grace@example.com",
        )
    ]


@pytest.fixture
def shared_records() -> List[AggregateDocument]:
    return [
        AggregateDocument(
            id="h1",
            owner_id="u3",
            title="Budget",
            user_name="Linus",
            user_email="linus@example.com",
        )
    ]


@pytest.fixture
def trashed_records() -> List[TrashedDocumentRecord]:
    return [
        TrashedDocumentRecord(
            id="t1", owner_id="u1", title="Old draft", trashed_at="2024-01-05"
        )
    ]


@pytest.fixture
def repository(owned_records, starred_records, shared_records, trashed_records):
    return FakeDocumentRepository(
        owned=owned_records,
        starred=starred_records,
        shared=shared_records,
        trashed=trashed_records,
    )


@pytest.fixture
def app(repository, session_user):
    """FastAPI app with an authenticated session and the fake repository."""
    fastapi_app.dependency_overrides[get_current_user] = lambda: session_user
    fastapi_app.dependency_overrides[get_document_repository] = lambda: repository
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def anonymous_app(repository):
    """FastAPI app without a session."""
    fastapi_app.dependency_overrides[get_current_user] = lambda: None
    fastapi_app.dependency_overrides[get_document_repository] = lambda: repository
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def anonymous_client(anonymous_app):
    async with AsyncClient(
        transport=ASGITransport(app=anonymous_app), base_url="http://test"
    ) as c:
        yield c
