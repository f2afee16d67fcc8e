"""Find one All_agri record by slug and overwrite a single nested field.

Shared by update_application_link.py and update_regional_youtube.py. Every
MongoDB failure is raised as StoreError; the CLI entry points decide how to
exit.
"""

from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from errors import StoreError
from log_utils import log_error, log_event
from store_config import StoreConfig


# Wins over result order when several records share a slug
PREFERRED_DOCUMENT_ID = "775a846c8c5442458ea4860111b28c57"

NOT_FOUND = "Not found"


class UpdateOutcome(BaseModel):
    slug: str
    matched: int = 0
    document_id: Optional[Any] = None
    modified: bool = False
    current_value: Optional[str] = None


def slug_query(slug: str) -> Dict[str, Any]:
    return {"$or": [{"filter.slug": slug}, {"slug": slug}]}


def connect(config: StoreConfig, client_factory: Callable[..., Any] = MongoClient):
    """Open a client and ping the server so an unreachable cluster fails here."""
    try:
        client = client_factory(config.mongo_uri)
    except PyMongoError as e:
        raise StoreError("connect", str(e)) from e

    try:
        client.admin.command("ping")
    except PyMongoError as e:
        client.close()
        raise StoreError("connect", str(e)) from e
    return client


def find_by_slug(col, slug: str) -> List[Dict[str, Any]]:
    try:
        return list(col.find(slug_query(slug)))
    except PyMongoError as e:
        raise StoreError("query", str(e)) from e


def select_target(docs: List[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    for doc in docs:
        if doc.get("_id") == PREFERRED_DOCUMENT_ID:
            return doc
    return docs[0] if docs else None


def apply_update(col, doc_id: Any, field_path: str, value: str) -> bool:
    """$set one dotted path. Returns False when the stored value was already equal."""
    update = {"$set": {field_path: value}}
    print("Applying update:", update)
    try:
        res = col.update_one({"_id": doc_id}, update)
    except PyMongoError as e:
        raise StoreError("update", str(e)) from e
    return res.modified_count > 0


def get_nested(doc: Any, field_path: str) -> str:
    cur = doc
    for key in field_path.split("."):
        if not isinstance(cur, dict) or key not in cur:
            return NOT_FOUND
        cur = cur[key]
    return cur if isinstance(cur, str) else NOT_FOUND


def fetch_field(col, doc_id: Any, field_path: str) -> str:
    try:
        doc = col.find_one({"_id": doc_id})
    except PyMongoError as e:
        raise StoreError("verify", str(e)) from e
    if doc is None:
        raise StoreError("verify", f"document {doc_id} disappeared after update")
    return get_nested(doc, field_path)


def update_by_slug(
    config: StoreConfig,
    slug: str,
    field_path: str,
    value: str,
    label: str,
    title: str,
    client_factory: Callable[..., Any] = MongoClient,
) -> UpdateOutcome:
    """Run the whole lookup -> update -> verify sequence for one slug.

    `label` is the name printed next to the verified value and `title` the
    human name of the field in the verification header.
    """
    outcome = UpdateOutcome(slug=slug)
    log_event("update_start", {"slug": slug, "field": field_path})

    client = connect(config, client_factory)
    try:
        print("Connected to MongoDB")
        col = client[config.db_name][config.collection_name]

        docs = find_by_slug(col, slug)
        outcome.matched = len(docs)
        if not docs:
            print(f"No documents found with slug: {slug}")
            log_event("slug_not_found", {"slug": slug})
            return outcome

        print(f"Found {len(docs)} document(s) with slug: {slug}")

        target = select_target(docs)
        doc_id = target["_id"]
        outcome.document_id = doc_id
        print(f"Selected document with ID: {doc_id}")
        log_event("target_selected", {"slug": slug, "id": str(doc_id), "matched": len(docs)})

        outcome.modified = apply_update(col, doc_id, field_path, value)
        if outcome.modified:
            print(f"Successfully updated document with ID: {doc_id}")
        else:
            print("Document found but no changes were made")
        log_event("update_applied", {"id": str(doc_id), "field": field_path, "modified": outcome.modified})

        print(f"\nVerifying update - {title} after update:")
        outcome.current_value = fetch_field(col, doc_id, field_path)
        print(f"{label}: {outcome.current_value}")
        return outcome
    finally:
        try:
            client.close()
        except PyMongoError as e:
            log_error("close_failed", {"reason": str(e)})
        print("\nMongoDB connection closed")
