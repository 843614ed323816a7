from app.domains.identity.entities import SessionUser
from app.domains.identity.schemas import SessionUserResponse
from app.domains.identity.services import AuthService

__all__ = [
    "SessionUser",
    "SessionUserResponse",
    "AuthService"
]
