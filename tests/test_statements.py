from datetime import date

from app.core.result import ErrorCode, failure
from app.models.payment import Payment, PaymentStatus
from app.repositories.payment_repository import PaymentRepository
from app.repositories.property_repository import PropertyRepository
from app.services.statement_service import StatementService
from tests.conftest import make_tenant


def add_payment(db_session, tenant, amount, paid_on):
    payment = Payment(
        tenant_id=tenant.id,
        amount=amount,
        payment_date=paid_on,
        payment_period=paid_on.strftime("%Y-%m"),
        status=PaymentStatus.COMPLETED,
    )
    db_session.add(payment)
    db_session.commit()
    return payment


class TestTenantStatement:
    """Tests for GET /api/tenants/{id}/statement"""

    def test_full_statement(self, client, db_session, auth_headers, rental_property):
        property, unit = rental_property
        tenant = make_tenant(db_session, property_id=property.id, unit_id=unit.id)
        add_payment(db_session, tenant, 500, date(2026, 8, 2))
        add_payment(db_session, tenant, 500, date(2026, 10, 1))
        add_payment(db_session, tenant, 250, date(2026, 9, 4))

        response = client.get(f"/api/tenants/{tenant.id}/statement", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["tenant"]["id"] == tenant.id
        assert data["tenant"]["first_name"] == "Grace"
        assert data["property"]["title"] == "Kololo Heights"
        assert data["unit"]["unit_number"] == "A1"
        # Newest first
        assert [p["payment_date"] for p in data["payments"]] == [
            "2026-10-01",
            "2026-09-04",
            "2026-08-02",
        ]

    def test_no_property_with_unit(self, client, db_session, auth_headers, rental_property):
        """property_id null and unit_id set: property null, unit populated, payments empty"""
        _, unit = rental_property
        tenant = make_tenant(db_session, property_id=None, unit_id=unit.id)

        response = client.get(f"/api/tenants/{tenant.id}/statement", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["property"] is None
        assert data["unit"]["id"] == unit.id
        assert data["payments"] == []

    def test_unlinked_tenant(self, client, db_session, auth_headers):
        tenant = make_tenant(db_session)

        response = client.get(f"/api/tenants/{tenant.id}/statement", headers=auth_headers)

        data = response.json()
        assert data["property"] is None
        assert data["unit"] is None

    def test_nonexistent_tenant(self, client, auth_headers):
        """Missing tenant returns 404 and no partial data"""
        response = client.get("/api/tenants/99999/statement", headers=auth_headers)

        assert response.status_code == 404
        assert response.json() == {"detail": "Tenant not found", "code": "NOT_FOUND"}

    def test_property_lookup_failure_degrades_to_null(
        self, client, db_session, auth_headers, rental_property, monkeypatch
    ):
        property, unit = rental_property
        tenant = make_tenant(db_session, property_id=property.id, unit_id=unit.id)
        monkeypatch.setattr(
            PropertyRepository,
            "get_by_id",
            lambda self, property_id: failure(ErrorCode.DATABASE_ERROR, "timeout"),
        )

        response = client.get(f"/api/tenants/{tenant.id}/statement", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["property"] is None
        assert data["unit"]["id"] == unit.id

    def test_requires_landlord_role(self, client, db_session, tenant_headers):
        tenant = make_tenant(db_session)

        response = client.get(f"/api/tenants/{tenant.id}/statement", headers=tenant_headers)

        assert response.status_code == 403
        assert response.json()["code"] == "FORBIDDEN"


class TestStatementService:
    """Service-level tests for degraded lookups"""

    def test_payment_history_failure_degrades_to_empty(self, db_session, monkeypatch):
        tenant = make_tenant(db_session)
        add_payment(db_session, tenant, 500, date(2026, 10, 1))
        monkeypatch.setattr(
            PaymentRepository,
            "get_by_tenant",
            lambda self, tenant_id: failure(ErrorCode.DATABASE_ERROR, "timeout"),
        )

        result = StatementService(db_session).assemble(tenant.id)

        assert result.is_ok
        assert result.value.payments == []

    def test_dangling_unit_reference(self, db_session):
        """A unit_id pointing nowhere yields unit None"""
        tenant = make_tenant(db_session, unit_id=4242)

        result = StatementService(db_session).assemble(tenant.id)

        assert result.is_ok
        assert result.value.unit is None

    def test_tenant_lookup_failure_is_not_found(self, db_session, monkeypatch):
        from app.repositories.tenant_repository import TenantRepository

        monkeypatch.setattr(
            TenantRepository,
            "get_by_id",
            lambda self, tenant_id: failure(ErrorCode.DATABASE_ERROR, "timeout"),
        )

        result = StatementService(db_session).assemble(1)

        assert not result.is_ok
        assert result.error.code == ErrorCode.NOT_FOUND
