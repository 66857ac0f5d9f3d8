"""Mouse records: creation rules, lineage references and lab/user lookups."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session, selectinload

from .. import models, schemas
from ..errors import InvalidValue, MissingFields, MouseAlreadyExists, MouseNotFound
from ..identifiers import parse_id, parse_optional_id
from .fields import as_list, clean_text, is_blank

# purpose: enforce mouse uniqueness and reference shape before persisting
# depends_on: labmice.models.Mouse, labmice.models.MouseLittermate


def _populated(db: Session) -> Query:
    """Mouse query with every referenced entity joined in.

    Unresolvable references come back as None on the relationship while the
    raw id column keeps its value.
    """

    return db.query(models.Mouse).options(
        selectinload(models.Mouse.owner),
        selectinload(models.Mouse.lab),
        selectinload(models.Mouse.protocol),
        selectinload(models.Mouse.mother),
        selectinload(models.Mouse.father),
        selectinload(models.Mouse.littermate_links).selectinload(
            models.MouseLittermate.littermate
        ),
    )


def _load(db: Session, mouse_id: UUID) -> models.Mouse | None:
    return (
        _populated(db)
        .populate_existing()
        .filter(models.Mouse.id == mouse_id)
        .one_or_none()
    )


def get_mouse(db: Session, name: str) -> models.Mouse | None:
    return db.query(models.Mouse).filter(models.Mouse.name == name).first()


def create_mouse(db: Session, payload: schemas.MouseCreate) -> models.Mouse:
    """Validate and store a new mouse.

    Checks run in order: required fields, sex, identifier syntax, then name
    uniqueness. Names are unique across all labs.
    """

    genotype = [tag.strip() for tag in as_list(payload.genotype) if not is_blank(tag)]
    required = (payload.name, payload.sex, payload.strain, payload.birth_date, payload.user_id)
    if any(is_blank(value) for value in required) or not genotype:
        raise MissingFields()

    sex = payload.sex.strip().lower()
    if sex not in models.MOUSE_SEXES:
        raise InvalidValue("Sex must be one of: " + ", ".join(models.MOUSE_SEXES))

    user_id = parse_id(payload.user_id)
    lab_id = parse_optional_id(payload.lab_id)
    protocol_id = parse_optional_id(payload.protocol_id)
    mother_id = parse_optional_id(payload.mother_id)
    father_id = parse_optional_id(payload.father_id)
    littermates = [parse_id(m) for m in as_list(payload.littermates) if not is_blank(m)]

    name = payload.name.strip()
    if get_mouse(db, name):
        logger.warning("mouse name {} already taken", name)
        raise MouseAlreadyExists()

    mouse = models.Mouse(
        name=name,
        sex=sex,
        genotype=genotype,
        strain=payload.strain.strip(),
        birth_date=payload.birth_date,
        availability=True if payload.availability is None else payload.availability,
        notes=clean_text(payload.notes),
        user_id=user_id,
        lab_id=lab_id,
        protocol_id=protocol_id,
        mother_id=mother_id,
        father_id=father_id,
    )
    mouse.littermate_links = [
        models.MouseLittermate(position=i, littermate_id=mid)
        for i, mid in enumerate(littermates)
    ]
    db.add(mouse)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise MouseAlreadyExists() from exc
    logger.info("created mouse {} ({})", mouse.id, name)
    return _load(db, mouse.id)


def mouse_info(db: Session, name: str) -> models.Mouse:
    if is_blank(name):
        raise MissingFields()
    mouse = _populated(db).filter(models.Mouse.name == name.strip()).first()
    if not mouse:
        raise MouseNotFound()
    return mouse


def get_mice_by_lab(db: Session, lab_id: Any) -> list[models.Mouse]:
    lab_uuid = parse_id(lab_id)
    return (
        _populated(db)
        .filter(models.Mouse.lab_id == lab_uuid)
        .order_by(models.Mouse.name.asc())
        .all()
    )


def get_mice_by_user(db: Session, user_id: Any) -> list[models.Mouse]:
    user_uuid = parse_id(user_id)
    return (
        _populated(db)
        .filter(models.Mouse.user_id == user_uuid)
        .order_by(models.Mouse.created_at.desc())
        .all()
    )


def get_available_mice(db: Session, lab_id: Any) -> list[models.Mouse]:
    lab_uuid = parse_id(lab_id)
    return (
        _populated(db)
        .filter(models.Mouse.lab_id == lab_uuid, models.Mouse.availability.is_(True))
        .order_by(models.Mouse.name.asc())
        .all()
    )


def update_mouse_availability(
    db: Session, mouse_id: Any, availability: Any
) -> models.Mouse | None:
    """Set the availability flag. Returns None when no mouse has ``mouse_id``."""

    # strict: 1, "true" and None are all rejected
    if is_blank(mouse_id) or not isinstance(availability, bool):
        raise MissingFields()
    uid = parse_id(mouse_id)
    mouse = db.get(models.Mouse, uid)
    if not mouse:
        return None
    mouse.availability = availability
    db.commit()
    logger.info("mouse {} availability set to {}", uid, availability)
    return _load(db, uid)


def update_mouse_notes(db: Session, mouse_id: Any, notes: str | None) -> models.Mouse | None:
    if is_blank(mouse_id) or is_blank(notes):
        raise MissingFields()
    uid = parse_id(mouse_id)
    mouse = db.get(models.Mouse, uid)
    if not mouse:
        return None
    mouse.notes = notes.strip()
    db.commit()
    return _load(db, uid)


def delete_mouse(db: Session, mouse_id: Any) -> bool:
    if is_blank(mouse_id):
        raise MissingFields()
    mouse = db.get(models.Mouse, parse_id(mouse_id))
    if not mouse:
        return False
    db.delete(mouse)
    db.commit()
    logger.info("deleted mouse {}", mouse_id)
    return True
