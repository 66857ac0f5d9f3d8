from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..errors import EntryNotFound
from ..services import log_entries as entry_store
from .. import schemas

router = APIRouter(prefix="/log-entry", tags=["log-entries"])


def _entry_response(message: str, entry) -> schemas.LogEntryResponse:
    return schemas.LogEntryResponse(
        message=message, log_entry=schemas.LogEntryOut.model_validate(entry)
    )


def _entries_response(message: str, entries) -> schemas.LogEntriesResponse:
    return schemas.LogEntriesResponse(
        message=message,
        log_entries=[schemas.LogEntryOut.model_validate(e) for e in entries],
    )


@router.post("/create", response_model=schemas.LogEntryResponse, status_code=201)
def create_entry(payload: schemas.LogEntryCreate, db: Session = Depends(get_db)):
    entry = entry_store.post_log_entry(
        db, payload.user_id, payload.lab_id, payload.mice, payload.content
    )
    return _entry_response("Log entry created successfully", entry)


@router.get("/{entry_id}", response_model=schemas.LogEntryResponse)
def read_entry(entry_id: str, db: Session = Depends(get_db)):
    entry = entry_store.read_log_entry(db, entry_id)
    return _entry_response("Log entry retrieved successfully", entry)


@router.get("/mouse/{mouse_id}", response_model=schemas.LogEntriesResponse)
def entries_for_mouse(mouse_id: str, db: Session = Depends(get_db)):
    entries = entry_store.read_log_entries(db, mouse_id)
    return _entries_response(f"Found {len(entries)} log entries for mouse", entries)


@router.get("/lab/{lab_id}", response_model=schemas.LogEntriesResponse)
def entries_for_lab(lab_id: str, db: Session = Depends(get_db)):
    entries = entry_store.read_log_entries_by_lab(db, lab_id)
    return _entries_response(f"Found {len(entries)} log entries for lab", entries)


@router.get("/user/{user_id}", response_model=schemas.LogEntriesResponse)
def entries_for_user(user_id: str, db: Session = Depends(get_db)):
    entries = entry_store.read_log_entries_by_user(db, user_id)
    return _entries_response(f"Found {len(entries)} log entries by user", entries)


@router.put("/update/{entry_id}", response_model=schemas.LogEntryResponse)
def update_entry(
    entry_id: str,
    payload: schemas.LogEntryUpdate,
    db: Session = Depends(get_db),
):
    entry = entry_store.update_log_entry(db, entry_id, payload.content)
    return _entry_response("Log entry updated successfully", entry)


@router.delete("/delete/{entry_id}", response_model=schemas.MessageOut)
def delete_entry(entry_id: str, db: Session = Depends(get_db)):
    if not entry_store.delete_log_entry(db, entry_id):
        raise EntryNotFound()
    return schemas.MessageOut(message="Log entry deleted successfully")
