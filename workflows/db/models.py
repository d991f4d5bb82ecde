import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    String,
    Text,
    Integer,
    DateTime,
    ForeignKey,
    Index,
)
from sqlalchemy.orm import relationship

from .session import Base


def uuid4_str():
    return str(uuid.uuid4())


def utcnow():
    return datetime.now(timezone.utc)


class Project(Base):
    __tablename__ = "projects"

    id = Column(String(36), primary_key=True, default=uuid4_str)
    name = Column(String(255), nullable=False)
    priority = Column(String(255), nullable=True)
    backtech = Column(String(255), nullable=True)
    fronttech = Column(String(255), nullable=True)
    cloud_tech = Column(String(255), nullable=True)
    sprints_quantity = Column(Integer, nullable=True)
    end_date = Column(String(255), nullable=True)  # free text as returned by the LLM (e.g. DD/MM/YYYY)

    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), onupdate=utcnow)

    # Tasks are owned: saving a project cascades to them, dropping one from the list deletes it.
    tasks = relationship(
        "Task",
        back_populates="project",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
        order_by="Task.created_at",
    )


class Task(Base):
    __tablename__ = "tasks"

    id = Column(String(36), primary_key=True, default=uuid4_str)
    project_id = Column(String(36), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    assigned_to = Column(String(255), nullable=True)
    sprint = Column(Integer, nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow)

    project = relationship("Project", back_populates="tasks")

    __table_args__ = (Index("ix_tasks_project_id", "project_id"),)
