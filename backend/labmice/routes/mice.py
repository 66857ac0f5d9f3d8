from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..errors import MouseNotFound
from ..services import mice as mouse_store
from .. import schemas

router = APIRouter(prefix="/mouse", tags=["mice"])


def _mouse_response(message: str, mouse) -> schemas.MouseResponse:
    return schemas.MouseResponse(message=message, mouse=schemas.MouseOut.model_validate(mouse))


def _mice_response(message: str, mice) -> schemas.MiceResponse:
    return schemas.MiceResponse(
        message=message,
        mice=[schemas.MouseOut.model_validate(m) for m in mice],
    )


@router.post("/create", response_model=schemas.MouseResponse, status_code=201)
def create_mouse(payload: schemas.MouseCreate, db: Session = Depends(get_db)):
    mouse = mouse_store.create_mouse(db, payload)
    return _mouse_response("Mouse created successfully", mouse)


@router.get("/user/{user_id}", response_model=schemas.MiceResponse)
def mice_by_user(user_id: str, db: Session = Depends(get_db)):
    mice = mouse_store.get_mice_by_user(db, user_id)
    return _mice_response(f"Found {len(mice)} mice for user", mice)


@router.get("/name/{name}", response_model=schemas.MouseResponse)
def mouse_info(name: str, db: Session = Depends(get_db)):
    mouse = mouse_store.mouse_info(db, name)
    return _mouse_response("Mouse retrieved successfully", mouse)


@router.get("/lab/{lab_id}", response_model=schemas.MiceResponse)
def mice_by_lab(lab_id: str, db: Session = Depends(get_db)):
    mice = mouse_store.get_mice_by_lab(db, lab_id)
    return _mice_response(f"Found {len(mice)} mice in lab", mice)


@router.get("/lab/{lab_id}/available", response_model=schemas.MiceResponse)
def available_mice(lab_id: str, db: Session = Depends(get_db)):
    mice = mouse_store.get_available_mice(db, lab_id)
    return _mice_response(f"Found {len(mice)} available mice in lab", mice)


@router.put("/update-availability/{mouse_id}", response_model=schemas.MouseResponse)
def update_availability(
    mouse_id: str,
    payload: schemas.AvailabilityUpdate,
    db: Session = Depends(get_db),
):
    mouse = mouse_store.update_mouse_availability(db, mouse_id, payload.availability)
    if not mouse:
        raise MouseNotFound()
    return _mouse_response("Mouse availability updated successfully", mouse)


@router.put("/update-notes/{mouse_id}", response_model=schemas.MouseResponse)
def update_notes(
    mouse_id: str,
    payload: schemas.NotesUpdate,
    db: Session = Depends(get_db),
):
    mouse = mouse_store.update_mouse_notes(db, mouse_id, payload.notes)
    if not mouse:
        raise MouseNotFound()
    return _mouse_response("Mouse notes updated successfully", mouse)


@router.delete("/delete/{mouse_id}", response_model=schemas.MessageOut)
def delete_mouse(mouse_id: str, db: Session = Depends(get_db)):
    if not mouse_store.delete_mouse(db, mouse_id):
        raise MouseNotFound()
    return schemas.MessageOut(message="Mouse deleted successfully")
