from typing import Any, Dict, Optional


class SessionUser:
    """Пользователь текущей сессии, полученный от сервиса аутентификации"""
    
    def __init__(
        self,
        id: str,
        email: Optional[str],
        display_name: Optional[str] = None,
        avatar_url: Optional[str] = None
    ):
        self.id = id
        self.email = email
        self.display_name = display_name
        self.avatar_url = avatar_url
    
    @property
    def owner_display_name(self) -> Optional[str]:
        """Имя для отображения владельца: имя профиля или email"""
        return self.display_name or self.email
    
    @classmethod
    def from_metadata(
        cls,
        id: str,
        email: Optional[str],
        user_metadata: Optional[Dict[str, Any]] = None
    ) -> "SessionUser":
        """Создание пользователя из user_metadata Supabase"""
        metadata = user_metadata or {}
        return cls(
            id=str(id),
            email=email,
            display_name=metadata.get("name") or metadata.get("full_name") or None,
            avatar_url=metadata.get("avatar_url") or metadata.get("picture") or None
        )
    
    def __eq__(self, other) -> bool:
        if not isinstance(other, SessionUser):
            return False
        return self.id == other.id
    
    def __repr__(self) -> str:
        return f"SessionUser(id={self.id}, email={self.email})"
