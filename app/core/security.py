from datetime import datetime, timezone
from typing import Optional, Dict, Any

from fastapi import Request
from jose import JWTError, jwt

from app.core.config import settings


def extract_token_from_header(authorization: str) -> Optional[str]:
    """Извлечение токена из заголовка Authorization"""
    if not authorization:
        return None
    
    parts = authorization.split()
    
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    
    return parts[1]


def get_access_token(request: Request) -> Optional[str]:
    """Токен доступа Supabase из заголовка или cookie"""
    token = extract_token_from_header(request.headers.get("Authorization", ""))
    if token:
        return token
    return request.cookies.get(settings.access_token_cookie) or None


def read_token_claims(token: str) -> Optional[Dict[str, Any]]:
    """Чтение claims JWT без проверки подписи.

    Подпись проверяет сервис аутентификации, здесь нужен только
    быстрый отсев битых и просроченных токенов.
    """
    try:
        return jwt.get_unverified_claims(token)
    except JWTError:
        return None


def is_token_expired(claims: Dict[str, Any], now: Optional[datetime] = None) -> bool:
    """Проверка истечения срока действия токена по claim exp"""
    exp = claims.get("exp")
    if exp is None:
        return False
    
    now = now or datetime.now(timezone.utc)
    try:
        return datetime.fromtimestamp(float(exp), tz=timezone.utc) <= now
    except (TypeError, ValueError):
        return True
