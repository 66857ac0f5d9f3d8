import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    String,
    Boolean,
    Date,
    DateTime,
    ForeignKey,
    JSON,
    Integer,
    Text,
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from .database import Base

# References between entities are plain UUID columns without foreign-key
# constraints; a deleted target leaves the reference in place and the
# matching relationship resolves to None.

USER_ROLES = ("principal investigator", "research assistant", "volunteer", "user")
MOUSE_SEXES = ("male", "female")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    username = Column(String, unique=True, nullable=False)
    email = Column(String, unique=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    lab_id = Column(UUID(as_uuid=True), nullable=True, index=True)
    role = Column(String, default="user", nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    lab = relationship(
        "Lab",
        primaryjoin="foreign(User.lab_id) == Lab.id",
        viewonly=True,
    )


class Lab(Base):
    __tablename__ = "labs"
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    description = Column(String)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)


class ResearchProtocol(Base):
    __tablename__ = "research_protocols"
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String, nullable=False)
    description = Column(String)
    lab_id = Column(UUID(as_uuid=True), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    lab = relationship(
        "Lab",
        primaryjoin="foreign(ResearchProtocol.lab_id) == Lab.id",
        viewonly=True,
    )


class Mouse(Base):
    __tablename__ = "mice"
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    # uniqueness is global, not per lab
    name = Column(String, unique=True, nullable=False)
    sex = Column(String, nullable=False)
    genotype = Column(JSON, default=list, nullable=False)
    strain = Column(String, nullable=False)
    birth_date = Column(Date, nullable=False)
    availability = Column(Boolean, default=True, nullable=False)
    notes = Column(Text, nullable=True)
    user_id = Column(UUID(as_uuid=True), nullable=False, index=True)
    lab_id = Column(UUID(as_uuid=True), nullable=True, index=True)
    protocol_id = Column(UUID(as_uuid=True), nullable=True, index=True)
    mother_id = Column(UUID(as_uuid=True), nullable=True)
    father_id = Column(UUID(as_uuid=True), nullable=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False, index=True)

    owner = relationship(
        "User",
        primaryjoin="foreign(Mouse.user_id) == User.id",
        viewonly=True,
    )
    lab = relationship(
        "Lab",
        primaryjoin="foreign(Mouse.lab_id) == Lab.id",
        viewonly=True,
    )
    protocol = relationship(
        "ResearchProtocol",
        primaryjoin="foreign(Mouse.protocol_id) == ResearchProtocol.id",
        viewonly=True,
    )
    mother = relationship(
        "Mouse",
        primaryjoin="foreign(Mouse.mother_id) == remote(Mouse.id)",
        viewonly=True,
    )
    father = relationship(
        "Mouse",
        primaryjoin="foreign(Mouse.father_id) == remote(Mouse.id)",
        viewonly=True,
    )
    littermate_links = relationship(
        "MouseLittermate",
        back_populates="mouse",
        cascade="all, delete-orphan",
        order_by="MouseLittermate.position",
        foreign_keys="MouseLittermate.mouse_id",
    )

    @property
    def littermates(self) -> list[uuid.UUID]:
        return [link.littermate_id for link in self.littermate_links]

    @property
    def littermate_summaries(self) -> list["Mouse | None"]:
        # aligned with littermates; None marks a littermate that was deleted
        return [link.littermate for link in self.littermate_links]


class MouseLittermate(Base):
    __tablename__ = "mouse_littermates"
    mouse_id = Column(
        UUID(as_uuid=True),
        ForeignKey("mice.id", ondelete="CASCADE"),
        primary_key=True,
    )
    position = Column(Integer, primary_key=True)
    littermate_id = Column(UUID(as_uuid=True), nullable=False, index=True)

    mouse = relationship(
        "Mouse",
        back_populates="littermate_links",
        foreign_keys=[mouse_id],
    )
    littermate = relationship(
        "Mouse",
        primaryjoin="foreign(MouseLittermate.littermate_id) == Mouse.id",
        viewonly=True,
    )


class LogEntry(Base):
    __tablename__ = "log_entries"
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(UUID(as_uuid=True), nullable=False, index=True)
    lab_id = Column(UUID(as_uuid=True), nullable=False, index=True)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False, index=True)

    user = relationship(
        "User",
        primaryjoin="foreign(LogEntry.user_id) == User.id",
        viewonly=True,
    )
    lab = relationship(
        "Lab",
        primaryjoin="foreign(LogEntry.lab_id) == Lab.id",
        viewonly=True,
    )
    mouse_links = relationship(
        "LogEntryMouse",
        back_populates="entry",
        cascade="all, delete-orphan",
        order_by="LogEntryMouse.position",
    )

    @property
    def mice(self) -> list[uuid.UUID]:
        return [link.mouse_id for link in self.mouse_links]

    @property
    def mouse_summaries(self) -> list["Mouse | None"]:
        return [link.mouse for link in self.mouse_links]


class LogEntryMouse(Base):
    __tablename__ = "log_entry_mice"
    entry_id = Column(
        UUID(as_uuid=True),
        ForeignKey("log_entries.id", ondelete="CASCADE"),
        primary_key=True,
    )
    position = Column(Integer, primary_key=True)
    mouse_id = Column(UUID(as_uuid=True), nullable=False, index=True)

    entry = relationship("LogEntry", back_populates="mouse_links")
    mouse = relationship(
        "Mouse",
        primaryjoin="foreign(LogEntryMouse.mouse_id) == Mouse.id",
        viewonly=True,
    )
