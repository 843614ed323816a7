from html import escape
from typing import Dict, List, Optional

from pydantic import BaseModel

from app.domains.documents.entities import DocumentList
from app.domains.documents.schemas import EditorPage
from app.domains.identity.schemas import SessionUserResponse

SECTION_TITLES: Dict[DocumentList, str] = {
    DocumentList.OWNED: "My documents",
    DocumentList.STARRED: "Starred",
    DocumentList.SHARED: "Shared with me",
    DocumentList.TRASH: "Trash",
}


def _text(value: Optional[str]) -> str:
    return escape(value or "")


def render_page_header(user: SessionUserResponse) -> str:
    """Заголовок страницы с данными пользователя"""
    name = user.display_name or user.email
    avatar = ""
    if user.avatar_url:
        avatar = f'<img class="avatar" src="{_text(user.avatar_url)}" alt="">'
    
    return (
        '<header class="editor-header">'
        f"{avatar}"
        f'<span class="user-name">{_text(name)}</span>'
        f'<span class="user-email">{_text(user.email)}</span>'
        "</header>"
    )


def render_document_item(document: BaseModel, document_list: DocumentList) -> str:
    data = document.model_dump()
    timestamp = data.get("trashed_at") if document_list is DocumentList.TRASH else data.get("updated_at")
    
    return (
        f'<li class="document" data-id="{_text(data.get("id"))}">'
        f'<span class="title">{_text(data.get("title")) or "Untitled"}</span>'
        f'<span class="owner" title="{_text(data.get("user_email"))}">{_text(data.get("user_name"))}</span>'
        f'<time>{_text(timestamp)}</time>'
        "</li>"
    )


def render_document_section(document_list: DocumentList, documents: List[BaseModel]) -> str:
    """Секция со списком документов"""
    if documents:
        items = "".join(render_document_item(doc, document_list) for doc in documents)
        body = f"<ul>{items}</ul>"
    else:
        body = '<p class="empty">No documents found</p>'
    
    return (
        f'<section id="{document_list.value}">'
        f"<h2>{SECTION_TITLES[document_list]}</h2>"
        f"{body}"
        "</section>"
    )


def render_editor_page(page: EditorPage, title: str = "DocCollab") -> str:
    """Полная HTML-страница: заголовок и видимые секции по порядку"""
    sections = "".join(
        render_document_section(document_list, getattr(page, document_list.value) or [])
        for document_list in page.visible_sections
    )
    
    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>{escape(title)}</title>
</head>
<body>
    {render_page_header(page.user)}
    <main class="container">{sections}</main>
</body>
</html>
"""
