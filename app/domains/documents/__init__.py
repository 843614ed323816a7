from app.domains.documents.entities import DocumentList, ViewSection, DOCUMENT_LISTS
from app.domains.documents.exceptions import DocumentQueryError
from app.domains.documents.schemas import (
    DocumentRecord, TrashedDocumentRecord, OwnedDocument, TrashedDocument,
    AggregateDocument, DocumentCollections, EditorPage
)
from app.domains.documents.services import DocumentsViewService

__all__ = [
    "DocumentList", "ViewSection", "DOCUMENT_LISTS",
    "DocumentQueryError",
    "DocumentRecord", "TrashedDocumentRecord", "OwnedDocument", "TrashedDocument",
    "AggregateDocument", "DocumentCollections", "EditorPage",
    "DocumentsViewService"
]
