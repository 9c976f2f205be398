"""
Test configuration for pytest
"""

import pytest
import os
from datetime import datetime, timezone
from decimal import Decimal
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session
from typing import Dict, Generator

# Test environment variables
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["JWT_SECRET_KEY"] = "test-jwt-secret"

from fastapi.testclient import TestClient

import stagehand.models  # noqa: F401
from stagehand.core.auth import create_access_token, hash_password
from stagehand.core.database import build_engine, get_session
from stagehand.main import app
from stagehand.models import (
    Booking,
    Event,
    EventType,
    Performer,
    PerformerType,
    Tenant,
    User,
    UserRole,
    Venue,
    VenueType,
)


# One shared in-memory database per test, foreign keys enforced
test_engine = build_engine("sqlite://", poolclass=StaticPool)


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """Create a clean database session for each test"""
    SQLModel.metadata.create_all(test_engine)

    with Session(test_engine, expire_on_commit=False) as session:
        yield session

    SQLModel.metadata.drop_all(test_engine)


@pytest.fixture(scope="function")
def client(db: Session) -> Generator[TestClient, None, None]:
    """API client bound to the test session"""
    def override_get_session():
        yield db

    app.dependency_overrides[get_session] = override_get_session
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def make_user(db: Session, tenant: Tenant, email: str, role: UserRole) -> User:
    user = User(
        tenant_id=tenant.id,
        email=email,
        password_hash=hash_password("password123"),
        name=email.split("@")[0].title(),
        role=role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def user_factory(db: Session):
    """Create extra users: user_factory(tenant, email, role)"""
    def factory(tenant: Tenant, email: str, role: UserRole = UserRole.MEMBER) -> User:
        return make_user(db, tenant, email, role)
    return factory


def auth_headers(user: User) -> Dict[str, str]:
    token = create_access_token(user_id=user.id, tenant_id=user.tenant_id, role=user.role.value)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def headers_for():
    """Bearer headers for any user: headers_for(user)"""
    return auth_headers


@pytest.fixture
def tenant(db: Session) -> Tenant:
    tenant = Tenant(name="Ember Events", slug="ember-events")
    db.add(tenant)
    db.commit()
    db.refresh(tenant)
    return tenant


@pytest.fixture
def other_tenant(db: Session) -> Tenant:
    tenant = Tenant(name="Rival Productions", slug="rival-productions")
    db.add(tenant)
    db.commit()
    db.refresh(tenant)
    return tenant


@pytest.fixture
def owner(db: Session, tenant: Tenant) -> User:
    return make_user(db, tenant, "owner@example.com", UserRole.OWNER)


@pytest.fixture
def member(db: Session, tenant: Tenant) -> User:
    return make_user(db, tenant, "member@example.com", UserRole.MEMBER)


@pytest.fixture
def other_owner(db: Session, other_tenant: Tenant) -> User:
    return make_user(db, other_tenant, "boss@example.com", UserRole.OWNER)


@pytest.fixture
def owner_headers(owner: User) -> Dict[str, str]:
    return auth_headers(owner)


@pytest.fixture
def member_headers(member: User) -> Dict[str, str]:
    return auth_headers(member)


@pytest.fixture
def other_headers(other_owner: User) -> Dict[str, str]:
    return auth_headers(other_owner)


@pytest.fixture
def venue(db: Session, tenant: Tenant) -> Venue:
    venue = Venue(
        tenant_id=tenant.id,
        name="The Foundry",
        type=VenueType.INDOOR,
        city="Lisbon",
        capacity=300,
        curfew="23:30",
    )
    db.add(venue)
    db.commit()
    db.refresh(venue)
    return venue


@pytest.fixture
def event(db: Session, tenant: Tenant, owner: User, venue: Venue) -> Event:
    event = Event(
        tenant_id=tenant.id,
        name="Annual Gala",
        type=EventType.CORPORATE,
        date=datetime(2026, 12, 5, tzinfo=timezone.utc),
        start_time="19:00",
        end_time="23:00",
        guest_count=120,
        venue_id=venue.id,
        total_budget=Decimal("20000.00"),
        created_by_id=owner.id,
    )
    db.add(event)
    db.commit()
    db.refresh(event)
    return event


@pytest.fixture
def fire_performer(db: Session, tenant: Tenant) -> Performer:
    performer = Performer(
        tenant_id=tenant.id,
        name="Ana Costa",
        stage_name="Blaze",
        type=PerformerType.FIRE,
        setup_time=30,
        performance_time=20,
        breakdown_time=15,
        requirements={"safety_distance": 3},
        standard_rate=Decimal("1200.00"),
    )
    db.add(performer)
    db.commit()
    db.refresh(performer)
    return performer


@pytest.fixture
def magician(db: Session, tenant: Tenant) -> Performer:
    performer = Performer(
        tenant_id=tenant.id,
        name="Rui Matos",
        type=PerformerType.MAGIC,
        setup_time=20,
        performance_time=40,
        breakdown_time=10,
        standard_rate=Decimal("800.00"),
    )
    db.add(performer)
    db.commit()
    db.refresh(performer)
    return performer


@pytest.fixture
def booking(db: Session, tenant: Tenant, event: Event, magician: Performer) -> Booking:
    booking = Booking(
        tenant_id=tenant.id,
        event_id=event.id,
        performer_id=magician.id,
        agreed_rate=Decimal("800.00"),
    )
    magician.total_bookings += 1
    db.add(magician)
    db.add(booking)
    db.commit()
    db.refresh(booking)
    return booking
