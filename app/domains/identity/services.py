import logging
from typing import Optional

import httpx
from supabase import AsyncClient, AuthError

from app.core.security import is_token_expired, read_token_claims
from app.domains.identity.entities import SessionUser

logger = logging.getLogger(__name__)


class AuthService:
    """Сервис получения текущего пользователя из Supabase Auth"""
    
    def __init__(self, client: AsyncClient):
        self.client = client
    
    async def get_current_user(self, access_token: Optional[str]) -> Optional[SessionUser]:
        """Получение пользователя по токену доступа.

        Отсутствующий, битый или просроченный токен, как и недоступный
        сервис аутентификации, дают None.
        """
        if not access_token:
            return None
        
        claims = read_token_claims(access_token)
        if claims is None:
            logger.warning("Rejected malformed access token")
            return None
        
        if is_token_expired(claims):
            logger.info(f"Access token for {claims.get('sub')} has expired")
            return None
        
        try:
            response = await self.client.auth.get_user(access_token)
        except (AuthError, httpx.HTTPError) as e:
            logger.warning(f"Auth service rejected or failed to resolve session: {e}")
            return None
        
        if response is None or response.user is None:
            return None
        
        user = response.user
        return SessionUser.from_metadata(
            id=user.id,
            email=user.email,
            user_metadata=user.user_metadata
        )
