import os

os.environ.setdefault("DATABASE_URL", "sqlite:///./test-property-manager.db")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from datetime import datetime, timedelta, UTC
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from jose import jwt

from app.database import get_db
from app.models.base import Base
from app.config import settings
# Import all model classes to ensure they're registered with SQLAlchemy
from app.models.profile import Profile
from app.models.landlord import Landlord
from app.models.property import Property
from app.models.unit import Unit
from app.models.tenant import Tenant
from app.models.payment import Payment
from app.models.role import UserRole
# Import FastAPI app AFTER model imports
from app.main import app

# Test database (SQLite in-memory for speed)
# Use StaticPool to ensure all connections share the same in-memory database
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create fresh database for each test"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """FastAPI test client with test database"""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def create_test_token(
    user_id: str = "test-user-123",
    expired: bool = False,
    email: str | None = "landlord@example.com",
    metadata: dict | None = None,
) -> str:
    """
    Generate valid JWT token for testing.

    Args:
        user_id: User ID to embed in 'sub' claim
        expired: If True, create expired token
        email: Email claim
        metadata: user_metadata claim (first_name, last_name, full_name)

    Returns:
        Encoded JWT token
    """
    if expired:
        exp = datetime.now(UTC) - timedelta(minutes=5)
    else:
        exp = datetime.now(UTC) + timedelta(minutes=15)

    payload = {"sub": user_id, "exp": exp, "iat": datetime.now(UTC)}
    if email is not None:
        payload["email"] = email
    if metadata is not None:
        payload["user_metadata"] = metadata

    token = jwt.encode(payload, settings.SECRET_KEY, algorithm="HS256")
    return token


def headers_for(user_id: str, **kwargs) -> dict:
    return {"Authorization": f"Bearer {create_test_token(user_id=user_id, **kwargs)}"}


@pytest.fixture
def mock_jwt_token():
    """Generate valid JWT token"""
    return create_test_token()


@pytest.fixture
def auth_headers(mock_jwt_token):
    """Authorization headers for a landlord (default role on first access)"""
    return {"Authorization": f"Bearer {mock_jwt_token}"}


@pytest.fixture
def admin_profile(db_session):
    profile = Profile(
        id="admin-user",
        email="admin@example.com",
        first_name="Ada",
        last_name="Admin",
        role=UserRole.ADMIN,
        is_admin=True,
    )
    db_session.add(profile)
    db_session.commit()
    return profile


@pytest.fixture
def admin_headers(admin_profile):
    return headers_for("admin-user", email="admin@example.com")


@pytest.fixture
def tenant_profile(db_session):
    profile = Profile(
        id="tenant-user",
        email="renter@example.com",
        first_name="Rita",
        last_name="Renter",
        role=UserRole.TENANT,
        is_admin=False,
    )
    db_session.add(profile)
    db_session.commit()
    return profile


@pytest.fixture
def tenant_headers(tenant_profile):
    return headers_for("tenant-user", email="renter@example.com")


@pytest.fixture
def rental_property(db_session):
    """Approved rental with one unit"""
    landlord = Landlord(name="Kato Properties", email="kato@example.com")
    db_session.add(landlord)
    db_session.commit()

    property = Property(
        landlord_id=landlord.id,
        title="Kololo Heights",
        address="12 Acacia Avenue",
        city="Kampala",
        rent_amount=500,
    )
    db_session.add(property)
    db_session.commit()

    unit = Unit(property_id=property.id, unit_number="A1", rent_amount=500)
    db_session.add(unit)
    db_session.commit()
    return property, unit


def make_tenant(db_session, **overrides) -> Tenant:
    """Insert an active tenant with sensible defaults"""
    fields = {
        "first_name": "Grace",
        "last_name": "Nakato",
        "monthly_rent": 500,
        "balance": 0,
        "rent_due_day": 1,
    }
    fields.update(overrides)
    tenant = Tenant(**fields)
    db_session.add(tenant)
    db_session.commit()
    return tenant
