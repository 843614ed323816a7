from typing import Optional

from fastapi import Depends, HTTPException, status
from supabase import AsyncClient

from app.core.security import get_access_token
from app.core.supabase import get_supabase
from app.domains.identity.entities import SessionUser
from app.domains.identity.services import AuthService


async def get_auth_service(client: AsyncClient = Depends(get_supabase)) -> AuthService:
    return AuthService(client)


async def get_current_user(
    access_token: Optional[str] = Depends(get_access_token),
    auth_service: AuthService = Depends(get_auth_service)
) -> Optional[SessionUser]:
    """Зависимость для получения пользователя сессии (None без сессии)"""
    return await auth_service.get_current_user(access_token)


async def require_current_user(
    current_user: Optional[SessionUser] = Depends(get_current_user)
) -> SessionUser:
    """Зависимость для API: без сессии отвечаем 401"""
    if current_user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return current_user
