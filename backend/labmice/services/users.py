"""Account registration, credential checks and password maintenance."""

from __future__ import annotations

from typing import Any

import sqlalchemy as sa
from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from .. import models
from ..auth import get_password_hash, verify_password
from ..errors import (
    InvalidValue,
    MissingFields,
    NotFound,
    UserAlreadyExists,
    UserNotFound,
    WrongPassword,
)
from ..identifiers import parse_id
from .fields import is_blank

MIN_PASSWORD_LENGTH = 6
_MISSING = "All fields are required"


def _check_password(password: str) -> None:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise InvalidValue(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
        )


def get_user(db: Session, username: str) -> models.User | None:
    return (
        db.query(models.User)
        .options(selectinload(models.User.lab))
        .filter(models.User.username == username.strip())
        .one_or_none()
    )


def get_user_by_id(db: Session, user_id: Any) -> models.User:
    if is_blank(user_id):
        raise MissingFields("User ID is required")
    user = (
        db.query(models.User)
        .options(selectinload(models.User.lab))
        .filter(models.User.id == parse_id(user_id))
        .one_or_none()
    )
    if not user:
        raise NotFound("User not found")
    return user


def register(db: Session, username: str, email: str, password: str) -> models.User:
    """Create an account with a bcrypt-hashed password.

    Username and email share one existence check, so the error does not say
    which of the two collided.
    """

    if is_blank(username) or is_blank(email) or is_blank(password):
        raise MissingFields(_MISSING)
    _check_password(password)

    username = username.strip()
    email = email.strip().lower()
    existing = (
        db.query(models.User.id)
        .filter(sa.or_(models.User.username == username, models.User.email == email))
        .first()
    )
    if existing:
        logger.warning("registration rejected, username or email taken")
        raise UserAlreadyExists()

    user = models.User(
        username=username,
        email=email,
        hashed_password=get_password_hash(password),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as exc:
        # lost a race against a concurrent registration
        db.rollback()
        raise UserAlreadyExists() from exc
    db.refresh(user)
    logger.info("registered user {}", user.id)
    return user


def login(db: Session, username: str, password: str) -> models.User:
    if is_blank(username) or is_blank(password):
        raise MissingFields(_MISSING)
    user = get_user(db, username)
    if not user:
        raise UserNotFound()
    if not verify_password(password, user.hashed_password):
        logger.info("wrong password for user {}", user.id)
        raise WrongPassword()
    return user


def update_password(db: Session, user_id: Any, password: str) -> models.User | None:
    """Rehash and store a new password.

    The caller is trusted to have authorized the change; the old password is
    not checked here. Returns None when no user has ``user_id``.
    """

    if is_blank(user_id) or is_blank(password):
        raise MissingFields(_MISSING)
    _check_password(password)
    uid = parse_id(user_id)
    user = db.get(models.User, uid)
    if not user:
        return None
    user.hashed_password = get_password_hash(password)
    db.commit()
    db.refresh(user)
    logger.info("password updated for user {}", user.id)
    return user


def delete_user(db: Session, user_id: Any) -> bool:
    if is_blank(user_id):
        raise MissingFields("User ID is required")
    deleted = (
        db.query(models.User)
        .filter(models.User.id == parse_id(user_id))
        .delete(synchronize_session=False)
    )
    db.commit()
    if deleted:
        logger.info("deleted user {}", user_id)
    return deleted > 0
