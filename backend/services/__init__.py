"""Backend services"""

from .query_service import fetch_documents, serialize_documents

__all__ = ['fetch_documents', 'serialize_documents']
