from .contracts import Document, DocumentQuery, DocumentStoreContract
from .memory import MemoryDocumentStore, Table, resolve
from .tables import TABLES

__all__ = [
    "Document",
    "DocumentQuery",
    "DocumentStoreContract",
    "MemoryDocumentStore",
    "TABLES",
    "Table",
    "resolve",
]
