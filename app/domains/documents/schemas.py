from pydantic import BaseModel, ConfigDict
from typing import Optional, List, Any, Dict

from app.domains.documents.entities import DocumentList, ViewSection
from app.domains.identity.entities import SessionUser
from app.domains.identity.schemas import SessionUserResponse


class DocumentRecord(BaseModel):
    """Строка таблицы документов; лишние колонки сохраняются как есть"""
    id: str
    owner_id: str
    title: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)


class TrashedDocumentRecord(DocumentRecord):
    """Строка таблицы удаленных документов"""
    trashed_at: Optional[str] = None


class OwnerDisplayMixin(BaseModel):
    """Данные владельца для отображения, вычисляются на каждый запрос"""
    user_name: Optional[str] = None
    user_email: Optional[str] = None
    user_picture_url: Optional[str] = None
    
    @classmethod
    def with_owner(cls, record: BaseModel, user: SessionUser):
        """Дополнение записи данными владельца из текущей сессии"""
        data: Dict[str, Any] = record.model_dump()
        data.update(
            user_name=user.owner_display_name,
            user_email=user.email,
            user_picture_url=user.avatar_url
        )
        return cls.model_validate(data)


class OwnedDocument(DocumentRecord, OwnerDisplayMixin):
    """Документ пользователя с данными владельца"""
    pass


class TrashedDocument(TrashedDocumentRecord, OwnerDisplayMixin):
    """Удаленный документ пользователя с данными владельца"""
    pass


class AggregateDocument(OwnerDisplayMixin):
    """Документ из агрегирующей функции (избранное, общий доступ).

    Данные владельца уже подставлены на стороне сервиса.
    """
    id: str
    owner_id: Optional[str] = None
    title: Optional[str] = None
    updated_at: Optional[str] = None
    
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)


class DocumentCollections(BaseModel):
    """Все четыре списка документов пользователя"""
    owned: List[OwnedDocument] = []
    starred: List[AggregateDocument] = []
    shared: List[AggregateDocument] = []
    trash: List[TrashedDocument] = []
    
    def get(self, document_list: DocumentList) -> List[BaseModel]:
        return getattr(self, document_list.value)


class EditorPage(BaseModel):
    """Модель страницы редактора: заголовок и видимые секции"""
    user: SessionUserResponse
    section: ViewSection
    visible_sections: List[DocumentList]
    owned: Optional[List[OwnedDocument]] = None
    starred: Optional[List[AggregateDocument]] = None
    shared: Optional[List[AggregateDocument]] = None
    trash: Optional[List[TrashedDocument]] = None
