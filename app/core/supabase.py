from typing import AsyncIterator, Optional

from fastapi import Depends
from supabase import AsyncClient, acreate_client
from supabase.lib.client_options import AsyncClientOptions

from app.core.config import settings
from app.core.security import get_access_token
from app.db.repositories.document_repository import DocumentRepository


async def create_supabase_client(access_token: Optional[str] = None) -> AsyncClient:
    """Клиент Supabase, действующий от имени пользователя"""
    client = await acreate_client(
        settings.supabase_url,
        settings.supabase_anon_key,
        options=AsyncClientOptions(auto_refresh_token=False, persist_session=False)
    )
    if access_token:
        # Запросы к PostgREST идут с токеном пользователя, чтобы работал RLS
        client.postgrest.auth(access_token)
    return client


async def close_supabase_client(client: AsyncClient) -> None:
    """Закрытие HTTP-соединений PostgREST и сервиса аутентификации"""
    try:
        await client.postgrest.aclose()
    finally:
        await client.auth._http_client.aclose()


# Функция для dependency injection в FastAPI
async def get_supabase(
    access_token: Optional[str] = Depends(get_access_token)
) -> AsyncIterator[AsyncClient]:
    client = await create_supabase_client(access_token)
    try:
        yield client
    finally:
        await close_supabase_client(client)


async def get_document_repository(
    client: AsyncClient = Depends(get_supabase)
) -> DocumentRepository:
    return DocumentRepository(client)
