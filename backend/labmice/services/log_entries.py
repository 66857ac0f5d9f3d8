"""Free-text log entries linked to a user, a lab and one or more mice."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from loguru import logger
from sqlalchemy.orm import Query, Session, selectinload

from .. import models
from ..errors import EntryNotFound, InvalidIdentifier, MissingFields
from ..identifiers import parse_id
from .fields import as_list, is_blank


def _populated(db: Session) -> Query:
    return db.query(models.LogEntry).options(
        selectinload(models.LogEntry.user),
        selectinload(models.LogEntry.lab),
        selectinload(models.LogEntry.mouse_links).selectinload(models.LogEntryMouse.mouse),
    )


def _load(db: Session, entry_id: UUID) -> models.LogEntry | None:
    return (
        _populated(db)
        .populate_existing()
        .filter(models.LogEntry.id == entry_id)
        .one_or_none()
    )


def _key(value: Any) -> UUID:
    if is_blank(value):
        raise MissingFields()
    return parse_id(value)


def post_log_entry(
    db: Session, user_id: Any, lab_id: Any, mice: Any, content: str | None
) -> models.LogEntry:
    """Store an entry; a single mouse id is accepted in place of a list."""

    if is_blank(user_id) or is_blank(lab_id) or is_blank(mice) or is_blank(content):
        raise MissingFields()
    mouse_ids = as_list(mice)

    user_uuid = parse_id(user_id)
    lab_uuid = parse_id(lab_id)
    # a null slot in the list is malformed, not absent
    if any(is_blank(mouse_id) for mouse_id in mouse_ids):
        raise InvalidIdentifier()
    mouse_uuids = [parse_id(mouse_id) for mouse_id in mouse_ids]

    entry = models.LogEntry(user_id=user_uuid, lab_id=lab_uuid, content=content.strip())
    entry.mouse_links = [
        models.LogEntryMouse(position=i, mouse_id=mid) for i, mid in enumerate(mouse_uuids)
    ]
    db.add(entry)
    db.commit()
    logger.info("log entry {} posted for {} mice", entry.id, len(mouse_uuids))
    return _load(db, entry.id)


def read_log_entry(db: Session, entry_id: Any) -> models.LogEntry:
    entry = _load(db, parse_id(entry_id))
    if not entry:
        raise EntryNotFound()
    return entry


def read_log_entries(db: Session, mouse_id: Any) -> list[models.LogEntry]:
    """Entries that mention ``mouse_id``, newest first."""

    mouse_uuid = _key(mouse_id)
    return (
        _populated(db)
        .filter(
            models.LogEntry.mouse_links.any(models.LogEntryMouse.mouse_id == mouse_uuid)
        )
        .order_by(models.LogEntry.created_at.desc())
        .all()
    )


def read_log_entries_by_lab(db: Session, lab_id: Any) -> list[models.LogEntry]:
    lab_uuid = _key(lab_id)
    return (
        _populated(db)
        .filter(models.LogEntry.lab_id == lab_uuid)
        .order_by(models.LogEntry.created_at.desc())
        .all()
    )


def read_log_entries_by_user(db: Session, user_id: Any) -> list[models.LogEntry]:
    user_uuid = _key(user_id)
    return (
        _populated(db)
        .filter(models.LogEntry.user_id == user_uuid)
        .order_by(models.LogEntry.created_at.desc())
        .all()
    )


def update_log_entry(db: Session, entry_id: Any, content: str | None) -> models.LogEntry:
    if is_blank(entry_id) or is_blank(content):
        raise MissingFields()
    uid = parse_id(entry_id)
    entry = db.get(models.LogEntry, uid)
    if not entry:
        raise EntryNotFound()
    entry.content = content.strip()
    db.commit()
    return _load(db, uid)


def delete_log_entry(db: Session, entry_id: Any) -> bool:
    entry = db.get(models.LogEntry, _key(entry_id))
    if not entry:
        return False
    db.delete(entry)
    db.commit()
    logger.info("deleted log entry {}", entry_id)
    return True
