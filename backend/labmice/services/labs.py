"""Labs and research protocols that mice and log entries point at."""

from __future__ import annotations

from typing import Any

from loguru import logger
from sqlalchemy.orm import Session, selectinload

from .. import models, schemas
from ..errors import MissingFields, NotFound
from ..identifiers import parse_id, parse_optional_id
from .fields import clean_text, is_blank


def create_lab(db: Session, payload: schemas.LabCreate) -> models.Lab:
    if is_blank(payload.name):
        raise MissingFields("Lab name is required")
    lab = models.Lab(name=payload.name.strip(), description=clean_text(payload.description))
    db.add(lab)
    db.commit()
    db.refresh(lab)
    logger.info("created lab {}", lab.id)
    return lab


def get_lab(db: Session, lab_id: Any) -> models.Lab:
    lab = db.get(models.Lab, parse_id(lab_id))
    if not lab:
        raise NotFound("Lab not found")
    return lab


def list_labs(db: Session) -> list[models.Lab]:
    return db.query(models.Lab).order_by(models.Lab.name.asc()).all()


def create_protocol(db: Session, payload: schemas.ProtocolCreate) -> models.ResearchProtocol:
    if is_blank(payload.title):
        raise MissingFields("Protocol title is required")
    protocol = models.ResearchProtocol(
        title=payload.title.strip(),
        description=clean_text(payload.description),
        lab_id=parse_optional_id(payload.lab_id),
    )
    db.add(protocol)
    db.commit()
    logger.info("created protocol {}", protocol.id)
    return get_protocol(db, protocol.id)


def get_protocol(db: Session, protocol_id: Any) -> models.ResearchProtocol:
    protocol = (
        db.query(models.ResearchProtocol)
        .options(selectinload(models.ResearchProtocol.lab))
        .filter(models.ResearchProtocol.id == parse_id(protocol_id))
        .one_or_none()
    )
    if not protocol:
        raise NotFound("Protocol not found")
    return protocol
