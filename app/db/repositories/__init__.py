from app.db.repositories.document_repository import DocumentRepository
from app.domains.documents.exceptions import DocumentQueryError

__all__ = [
    "DocumentQueryError",
    "DocumentRepository"
]
