from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..services import labs as lab_store
from .. import schemas

router = APIRouter(tags=["labs"])


@router.post("/lab/create", response_model=schemas.LabResponse, status_code=201)
def create_lab(payload: schemas.LabCreate, db: Session = Depends(get_db)):
    lab = lab_store.create_lab(db, payload)
    return schemas.LabResponse(message="Lab created successfully", lab=schemas.LabOut.model_validate(lab))


@router.get("/lab", response_model=schemas.LabsResponse)
def list_labs(db: Session = Depends(get_db)):
    labs = lab_store.list_labs(db)
    return schemas.LabsResponse(
        message=f"Found {len(labs)} labs",
        labs=[schemas.LabOut.model_validate(lab) for lab in labs],
    )


@router.get("/lab/{lab_id}", response_model=schemas.LabResponse)
def read_lab(lab_id: str, db: Session = Depends(get_db)):
    lab = lab_store.get_lab(db, lab_id)
    return schemas.LabResponse(message="Lab retrieved successfully", lab=schemas.LabOut.model_validate(lab))


@router.post("/protocol/create", response_model=schemas.ProtocolResponse, status_code=201)
def create_protocol(payload: schemas.ProtocolCreate, db: Session = Depends(get_db)):
    protocol = lab_store.create_protocol(db, payload)
    return schemas.ProtocolResponse(
        message="Protocol created successfully",
        protocol=schemas.ProtocolOut.model_validate(protocol),
    )


@router.get("/protocol/{protocol_id}", response_model=schemas.ProtocolResponse)
def read_protocol(protocol_id: str, db: Session = Depends(get_db)):
    protocol = lab_store.get_protocol(db, protocol_id)
    return schemas.ProtocolResponse(
        message="Protocol retrieved successfully",
        protocol=schemas.ProtocolOut.model_validate(protocol),
    )
