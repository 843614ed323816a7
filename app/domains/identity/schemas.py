from pydantic import BaseModel, ConfigDict
from typing import Optional


class SessionUserResponse(BaseModel):
    """Схема пользователя для заголовка страницы"""
    id: str
    email: Optional[str] = None
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None
    
    model_config = ConfigDict(from_attributes=True)
