"""Audit columns shared by every table and the flush hook that stamps them."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta

from sqlalchemy import Boolean, Column, DateTime, String, event
from sqlalchemy.orm import Session


def utcnow() -> datetime:
    """Return the current UTC time as a naive datetime (SQLite stores naive values)."""
    return datetime.now(UTC).replace(tzinfo=None)


class AuditMixin:
    """Creation/update timestamps, soft-delete flag and free-text note."""

    created_date = Column(DateTime, nullable=False)
    last_updated_date = Column(DateTime, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    note = Column(String(1000), nullable=True)


def _stamp_new(instance: AuditMixin, now: datetime) -> None:
    instance.created_date = now
    instance.last_updated_date = now
    if instance.is_active is None:
        instance.is_active = True


def _stamp_modified(instance: AuditMixin, now: datetime) -> None:
    previous = instance.last_updated_date
    if previous is not None and now <= previous:
        # last_updated_date must strictly increase on every mutation
        now = previous + timedelta(microseconds=1)
    instance.last_updated_date = now


@event.listens_for(Session, "before_flush")
def stamp_audit_fields(session: Session, flush_context, instances) -> None:
    """Populate audit columns for every auditable row about to be flushed."""
    now = utcnow()

    for instance in session.new:
        if isinstance(instance, AuditMixin):
            _stamp_new(instance, now)

    for instance in session.dirty:
        if isinstance(instance, AuditMixin):
            _stamp_modified(instance, now)


__all__ = ["AuditMixin", "stamp_audit_fields", "utcnow"]
