"""
Tenant-scoped persistence layer

Every repository here takes the caller's tenant_id and refuses to read, write
or reference rows that belong to another tenant. A reference to a foreign
tenant's row is reported exactly like a reference to a missing row.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar
import uuid

from pydantic import BaseModel
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, SQLModel, select
import structlog

from stagehand.core.clock import as_utc, utcnow
from stagehand.core.errors import (
    DuplicateRecordError,
    IntegrityViolationError,
    InvalidTransitionError,
    RecordNotFoundError,
    TenantMismatchError,
)
from stagehand.models.booking import Booking, BookingStatus
from stagehand.models.client import Client
from stagehand.models.event import Event, EventStatus
from stagehand.models.event_task import EventTask, TaskStatus
from stagehand.models.performer import Performer
from stagehand.models.user import User
from stagehand.models.venue import Venue
from stagehand.schemas.booking import BookingCreate, BookingUpdate
from stagehand.schemas.client import ClientCreate, ClientUpdate
from stagehand.schemas.event import EventCreate, EventUpdate, EventTaskCreate, EventTaskUpdate
from stagehand.schemas.performer import PerformerCreate, PerformerUpdate
from stagehand.schemas.venue import VenueCreate, VenueUpdate

logger = structlog.get_logger(__name__)

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


def commit_or_raise(session: Session, db_obj: SQLModel) -> SQLModel:
    """Commit pending changes, mapping constraint violations to app errors"""
    session.add(db_obj)
    try:
        session.commit()
    except IntegrityError as e:
        session.rollback()
        message = str(e.orig).lower()
        logger.warning(f"Integrity error on {type(db_obj).__name__}: {e.orig}")
        if "unique" in message or "duplicate" in message:
            raise DuplicateRecordError(f"{type(db_obj).__name__} already exists") from e
        raise IntegrityViolationError() from e
    session.refresh(db_obj)
    return db_obj


class TenantScopedCRUD(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """CRUD operations restricted to one tenant's rows"""

    def __init__(
        self,
        model: Type[ModelType],
        references: Optional[Dict[str, Type[SQLModel]]] = None,
        filterable: Sequence[str] = (),
    ):
        self.model = model
        # field name -> model the field points at
        self.references = references or {}
        self.filterable = tuple(filterable)

    @property
    def model_name(self) -> str:
        return self.model.__name__

    def _scope(self, tenant_id: uuid.UUID):
        return select(self.model).where(self.model.tenant_id == tenant_id)

    def _apply_filters(self, statement, filters: Dict[str, Any]):
        for key, value in filters.items():
            if value is None:
                continue
            if key not in self.filterable:
                raise ValueError(f"{self.model_name} cannot be filtered by {key}")
            statement = statement.where(getattr(self.model, key) == value)
        return statement

    def check_references(self, session: Session, tenant_id: uuid.UUID, data: Dict[str, Any]) -> None:
        """Referenced rows must exist and belong to the same tenant"""
        for field, ref_model in self.references.items():
            ref_id = data.get(field)
            if ref_id is None:
                continue
            ref = session.get(ref_model, ref_id)
            if ref is None:
                raise RecordNotFoundError(ref_model.__name__, ref_id)
            if ref.tenant_id != tenant_id:
                logger.warning(
                    "cross_tenant_reference",
                    model=self.model_name,
                    field=field,
                    tenant_id=str(tenant_id),
                )
                raise TenantMismatchError(ref_model.__name__, ref_id)

    def get(self, session: Session, tenant_id: uuid.UUID, record_id: uuid.UUID) -> ModelType:
        db_obj = session.get(self.model, record_id)
        if db_obj is None or db_obj.tenant_id != tenant_id:
            raise RecordNotFoundError(self.model_name, record_id)
        return db_obj

    def list(
        self,
        session: Session,
        tenant_id: uuid.UUID,
        skip: int = 0,
        limit: int = 100,
        **filters: Any,
    ) -> List[ModelType]:
        statement = self._apply_filters(self._scope(tenant_id), filters)
        statement = statement.order_by(self.model.created_at).offset(skip).limit(limit)
        return list(session.exec(statement).all())

    def count(self, session: Session, tenant_id: uuid.UUID, **filters: Any) -> int:
        statement = select(func.count(self.model.id)).where(self.model.tenant_id == tenant_id)
        statement = self._apply_filters(statement, filters)
        return session.exec(statement).one()

    def create(
        self,
        session: Session,
        tenant_id: uuid.UUID,
        obj_in: CreateSchemaType,
        **extra: Any,
    ) -> ModelType:
        data = obj_in.model_dump()
        data.update(extra)
        self.check_references(session, tenant_id, data)

        db_obj = self.model(**data, tenant_id=tenant_id)
        commit_or_raise(session, db_obj)
        logger.info(f"{self.model_name} created: {db_obj.id}")
        return db_obj

    def update(
        self,
        session: Session,
        tenant_id: uuid.UUID,
        record_id: uuid.UUID,
        obj_in: UpdateSchemaType,
    ) -> ModelType:
        db_obj = self.get(session, tenant_id, record_id)
        data = obj_in.model_dump(exclude_unset=True)
        self.check_references(session, tenant_id, data)

        for key, value in data.items():
            setattr(db_obj, key, value)
        db_obj.updated_at = utcnow()

        commit_or_raise(session, db_obj)
        logger.info(f"{self.model_name} updated: {record_id}")
        return db_obj

    def delete(self, session: Session, tenant_id: uuid.UUID, record_id: uuid.UUID) -> None:
        db_obj = self.get(session, tenant_id, record_id)
        session.delete(db_obj)
        try:
            session.commit()
        except IntegrityError as e:
            session.rollback()
            raise IntegrityViolationError(f"{self.model_name} is still referenced") from e
        logger.info(f"{self.model_name} deleted: {record_id}")


class EventCRUD(TenantScopedCRUD[Event, EventCreate, EventUpdate]):
    """Events: status machine, closed-event guard and budget roll-up"""

    def _date_range(self, statement, date_from: Optional[datetime], date_to: Optional[datetime]):
        if date_from is not None:
            statement = statement.where(Event.date >= as_utc(date_from))
        if date_to is not None:
            statement = statement.where(Event.date <= as_utc(date_to))
        return statement

    def list(
        self,
        session: Session,
        tenant_id: uuid.UUID,
        skip: int = 0,
        limit: int = 100,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        **filters: Any,
    ) -> List[Event]:
        statement = self._apply_filters(self._scope(tenant_id), filters)
        statement = self._date_range(statement, date_from, date_to)
        statement = statement.order_by(Event.date, Event.start_time).offset(skip).limit(limit)
        return list(session.exec(statement).all())

    def count(
        self,
        session: Session,
        tenant_id: uuid.UUID,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        **filters: Any,
    ) -> int:
        statement = select(func.count(Event.id)).where(Event.tenant_id == tenant_id)
        statement = self._date_range(self._apply_filters(statement, filters), date_from, date_to)
        return session.exec(statement).one()

    def update(self, session, tenant_id, record_id, obj_in):
        event = self.get(session, tenant_id, record_id)
        if not event.is_editable():
            raise InvalidTransitionError(f"Event is {event.status.value} and can no longer be edited")
        return super().update(session, tenant_id, record_id, obj_in)

    def set_status(
        self,
        session: Session,
        tenant_id: uuid.UUID,
        event_id: uuid.UUID,
        new_status: EventStatus,
    ) -> Event:
        event = self.get(session, tenant_id, event_id)
        try:
            event.transition_to(new_status)
        except ValueError as e:
            raise InvalidTransitionError(str(e)) from e
        commit_or_raise(session, event)
        logger.info(f"Event {event_id} moved to {new_status.value}")
        return event

    def delete(self, session, tenant_id, record_id):
        event = self.get(session, tenant_id, record_id)
        # Bookings go with the event; give the performers their count back
        for booking in event.bookings:
            performer = session.get(Performer, booking.performer_id)
            if performer is not None:
                performer.total_bookings = max(0, performer.total_bookings - 1)
                session.add(performer)
        super().delete(session, tenant_id, record_id)

    def active_bookings(self, session: Session, event: Event) -> List[Booking]:
        statement = (
            select(Booking)
            .where(Booking.event_id == event.id)
            .where(Booking.status != BookingStatus.CANCELLED)
            .order_by(Booking.created_at)
        )
        return list(session.exec(statement).all())

    def budget_summary(self, session: Session, tenant_id: uuid.UUID, event_id: uuid.UUID) -> Dict[str, Any]:
        """Committed and paid amounts of the event's active bookings against its budget"""
        event = self.get(session, tenant_id, event_id)
        bookings = self.active_bookings(session, event)

        committed = sum((b.agreed_rate for b in bookings), Decimal("0.00"))
        paid = sum((b.paid_amount for b in bookings), Decimal("0.00"))
        remaining = None
        if event.total_budget is not None:
            remaining = event.total_budget - committed

        return {
            "event_id": event.id,
            "total_budget": event.total_budget,
            "spent_amount": event.spent_amount,
            "committed": committed,
            "paid": paid,
            "outstanding": committed - paid,
            "remaining": remaining,
            "booking_count": len(bookings),
        }


class BookingCRUD(TenantScopedCRUD[Booking, BookingCreate, BookingUpdate]):
    """Bookings keep Performer.total_bookings in step"""

    def create(self, session, tenant_id, obj_in, **extra):
        data = obj_in.model_dump()
        self.check_references(session, tenant_id, data)

        event = session.get(Event, data["event_id"])
        if not event.is_editable():
            raise InvalidTransitionError(f"Cannot book performers for a {event.status.value} event")

        performer = session.get(Performer, data["performer_id"])
        performer.total_bookings += 1
        performer.updated_at = utcnow()
        session.add(performer)

        booking = Booking(**data, tenant_id=tenant_id)
        commit_or_raise(session, booking)
        logger.info(f"Booking created: {booking.id} (performer {performer.id}, event {event.id})")
        return booking

    def update(self, session, tenant_id, record_id, obj_in):
        booking = self.get(session, tenant_id, record_id)
        if not booking.is_active():
            raise InvalidTransitionError("Booking is cancelled and can no longer be edited")
        return super().update(session, tenant_id, record_id, obj_in)

    def delete(self, session, tenant_id, record_id):
        booking = self.get(session, tenant_id, record_id)
        performer = session.get(Performer, booking.performer_id)
        if performer is not None:
            performer.total_bookings = max(0, performer.total_bookings - 1)
            performer.updated_at = utcnow()
            session.add(performer)
        super().delete(session, tenant_id, record_id)

    def set_status(
        self,
        session: Session,
        tenant_id: uuid.UUID,
        booking_id: uuid.UUID,
        new_status: BookingStatus,
    ) -> Booking:
        booking = self.get(session, tenant_id, booking_id)
        try:
            booking.transition_to(new_status)
        except ValueError as e:
            raise InvalidTransitionError(str(e)) from e
        commit_or_raise(session, booking)
        logger.info(f"Booking {booking_id} moved to {new_status.value}")
        return booking


class EventTaskCRUD:
    """Tasks have no tenant column; callers pass an event already scoped to the tenant"""

    def get(self, session: Session, event: Event, task_id: uuid.UUID) -> EventTask:
        task = session.get(EventTask, task_id)
        if task is None or task.event_id != event.id:
            raise RecordNotFoundError("EventTask", task_id)
        return task

    def list(
        self,
        session: Session,
        event: Event,
        status: Optional[TaskStatus] = None,
        overdue: Optional[bool] = None,
    ) -> List[EventTask]:
        statement = select(EventTask).where(EventTask.event_id == event.id)
        if status is not None:
            statement = statement.where(EventTask.status == status)
        statement = statement.order_by(EventTask.created_at)
        tasks = list(session.exec(statement).all())
        if overdue is not None:
            now = utcnow()
            tasks = [t for t in tasks if t.is_overdue(now) == overdue]
        return tasks

    def create(self, session: Session, event: Event, obj_in: EventTaskCreate) -> EventTask:
        data = obj_in.model_dump()
        status = data.pop("status")
        task = EventTask(**data, event_id=event.id)
        task.set_status(status)
        commit_or_raise(session, task)
        logger.info(f"EventTask created: {task.id} on event {event.id}")
        return task

    def update(self, session: Session, event: Event, task_id: uuid.UUID, obj_in: EventTaskUpdate) -> EventTask:
        task = self.get(session, event, task_id)
        data = obj_in.model_dump(exclude_unset=True)
        status = data.pop("status", None)

        for key, value in data.items():
            setattr(task, key, value)
        if status is not None:
            task.set_status(status)
        task.updated_at = utcnow()

        return commit_or_raise(session, task)

    def delete(self, session: Session, event: Event, task_id: uuid.UUID) -> None:
        task = self.get(session, event, task_id)
        session.delete(task)
        session.commit()


user = TenantScopedCRUD[User, BaseModel, BaseModel](User, filterable=("role",))
venue = TenantScopedCRUD[Venue, VenueCreate, VenueUpdate](Venue, filterable=("type", "city"))
client = TenantScopedCRUD[Client, ClientCreate, ClientUpdate](Client, filterable=("client_type",))
performer = TenantScopedCRUD[Performer, PerformerCreate, PerformerUpdate](Performer, filterable=("type",))
event = EventCRUD(
    Event,
    references={"venue_id": Venue, "client_id": Client, "created_by_id": User},
    filterable=("status", "type", "venue_id", "client_id"),
)
booking = BookingCRUD(
    Booking,
    references={"event_id": Event, "performer_id": Performer},
    filterable=("event_id", "performer_id", "status"),
)
event_task = EventTaskCRUD()
