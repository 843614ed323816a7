import enum
import logging
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)


class DocumentList(str, enum.Enum):
    """Списки документов, которые умеет показывать страница редактора"""
    OWNED = "owned"
    STARRED = "starred"
    SHARED = "shared"
    TRASH = "trash"


# Порядок отрисовки секций на странице
DOCUMENT_LISTS: Tuple[DocumentList, ...] = (
    DocumentList.OWNED,
    DocumentList.STARRED,
    DocumentList.SHARED,
    DocumentList.TRASH,
)


class ViewSection(str, enum.Enum):
    """Значение параметра section в адресе страницы"""
    ALL = "all-documents"
    RECENT = "recent"
    STARRED = "starred"
    SHARED = "shared"
    TRASH = "trash"
    # Неизвестное значение: только заголовок, без секций
    NONE = "none"
    
    @classmethod
    def parse(cls, value: Optional[str]) -> "ViewSection":
        """Разбор параметра запроса; неизвестное значение не показывает ни одной секции"""
        if not value:
            return cls.ALL
        try:
            return cls(value)
        except ValueError:
            logger.info(f"Unknown section {value!r}, showing no sections")
            return cls.NONE
    
    def visible_lists(self) -> Tuple[DocumentList, ...]:
        """Секции, видимые для данного значения, в порядке отрисовки"""
        if self is ViewSection.ALL:
            return DOCUMENT_LISTS
        if self is ViewSection.NONE:
            return ()
        return (_SECTION_LISTS[self],)


_SECTION_LISTS: Dict[ViewSection, DocumentList] = {
    ViewSection.RECENT: DocumentList.OWNED,
    ViewSection.STARRED: DocumentList.STARRED,
    ViewSection.SHARED: DocumentList.SHARED,
    ViewSection.TRASH: DocumentList.TRASH,
}
