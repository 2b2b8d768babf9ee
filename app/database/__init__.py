"""
Database module

Contains both data models (schemas) and storage operations.
"""

# Export schemas
from app.database.schemas import (
    AdminCredential,
    Client,
    Program,
    Recipe,
    Message,
    Ticket,
    Document,
)

# Export storage functions for convenience
from app.database.storage import (
    read_json,
    write_json,
    DocumentError,
    default_document,
    init_db,
    load_db,
    save_db,
    locked,
    transaction,
)

# Routers import the module itself as `database`
from app.database import storage

__all__ = [
    # Schemas
    "AdminCredential",
    "Client",
    "Program",
    "Recipe",
    "Message",
    "Ticket",
    "Document",
    # Storage functions
    "read_json",
    "write_json",
    "DocumentError",
    "default_document",
    "init_db",
    "load_db",
    "save_db",
    "locked",
    "transaction",
    # Storage module
    "storage",
]
