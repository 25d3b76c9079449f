from datetime import date
from decimal import Decimal

from app.models.payment import Payment, PaymentStatus
from app.services.payment_service import allocate_payment, next_period
from tests.conftest import make_tenant


def add_payment(db_session, tenant_id, amount, **overrides):
    fields = {
        "payment_date": date(2026, 10, 3),
        "payment_method": "mobile_money",
        "payment_period": "2026-10",
        "status": PaymentStatus.COMPLETED,
        "receipt_number": "0001",
    }
    fields.update(overrides)
    payment = Payment(tenant_id=tenant_id, amount=amount, **fields)
    db_session.add(payment)
    db_session.commit()
    return payment


class TestPaymentRetrieval:
    """Tests for GET /api/payments/{id}"""

    def test_get_payment(self, client, db_session, auth_headers):
        tenant = make_tenant(db_session)
        payment = add_payment(db_session, tenant.id, 500, external_reference="pi_123")

        response = client.get(f"/api/payments/{payment.id}", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == payment.id
        assert data["tenant_id"] == tenant.id
        assert data["amount"] == 500.0
        assert data["status"] == "completed"
        assert data["external_reference"] == "pi_123"

    def test_get_nonexistent_payment(self, client, auth_headers):
        response = client.get("/api/payments/99999", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"

    def test_tenant_role_forbidden(self, client, db_session, tenant_headers):
        tenant = make_tenant(db_session)
        payment = add_payment(db_session, tenant.id, 500)

        response = client.get(f"/api/payments/{payment.id}", headers=tenant_headers)

        assert response.status_code == 403


class TestPaymentReceipt:
    """Tests for GET /api/payments/{id}/receipt"""

    def test_receipt_with_whole_amount(self, client, db_session, auth_headers):
        tenant = make_tenant(db_session, balance=0)
        payment = add_payment(db_session, tenant.id, 123456)

        response = client.get(f"/api/payments/{payment.id}/receipt", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["payment"]["id"] == payment.id
        assert data["tenant"]["first_name"] == "Grace"
        assert data["amount_in_words"] == "one hundred twenty-three thousand four hundred fifty-six"

    def test_receipt_with_minor_units(self, client, db_session, auth_headers):
        tenant = make_tenant(db_session)
        payment = add_payment(db_session, tenant.id, 1250.50)

        response = client.get(f"/api/payments/{payment.id}/receipt", headers=auth_headers)

        assert response.json()["amount_in_words"] == "one thousand two hundred fifty and 50/100"

    def test_receipt_for_missing_tenant(self, client, db_session, auth_headers):
        payment = add_payment(db_session, 4242, 500)

        response = client.get(f"/api/payments/{payment.id}/receipt", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["detail"] == "Tenant not found"

    def test_receipt_for_missing_payment(self, client, auth_headers):
        response = client.get("/api/payments/99999/receipt", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["detail"] == "Payment not found"

    def test_refund_amount_written_with_minus(self, client, db_session, auth_headers):
        tenant = make_tenant(db_session)
        refund = add_payment(db_session, tenant.id, -500, status=PaymentStatus.REFUNDED)

        response = client.get(f"/api/payments/{refund.id}/receipt", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["amount_in_words"] == "minus five hundred"
        assert data["payment_breakdown"] == []

    def test_receipt_includes_property_and_unit(
        self, client, db_session, auth_headers, rental_property
    ):
        property, unit = rental_property
        tenant = make_tenant(db_session, property_id=property.id, unit_id=unit.id)
        payment = add_payment(db_session, tenant.id, 500)

        response = client.get(f"/api/payments/{payment.id}/receipt", headers=auth_headers)

        data = response.json()
        assert data["property"]["title"] == "Kololo Heights"
        assert data["unit"]["unit_number"] == "A1"

    def test_receipt_without_tenancy(self, client, db_session, auth_headers):
        tenant = make_tenant(db_session)
        payment = add_payment(db_session, tenant.id, 500)

        response = client.get(f"/api/payments/{payment.id}/receipt", headers=auth_headers)

        data = response.json()
        assert data["property"] is None
        assert data["unit"] is None


class TestReceiptBreakdown:
    """Balance at payment and per-month breakdown on receipts"""

    def test_partial_payment(self, client, db_session, auth_headers):
        tenant = make_tenant(db_session, monthly_rent=500)
        payment = add_payment(db_session, tenant.id, 200)

        response = client.get(f"/api/payments/{payment.id}/receipt", headers=auth_headers)

        data = response.json()
        assert data["balance_at_payment"] == 300.0
        assert data["payment_breakdown"] == [
            {"month": "2026-10", "amount": 200.0, "type": "partial_payment"}
        ]

    def test_payment_completing_the_month(self, client, db_session, auth_headers):
        tenant = make_tenant(db_session, monthly_rent=500)
        add_payment(db_session, tenant.id, 200, payment_date=date(2026, 10, 3))
        second = add_payment(db_session, tenant.id, 300, payment_date=date(2026, 10, 12))

        response = client.get(f"/api/payments/{second.id}/receipt", headers=auth_headers)

        data = response.json()
        assert data["balance_at_payment"] == 0.0
        assert data["payment_breakdown"] == [
            {"month": "2026-10", "amount": 300.0, "type": "full_payment"}
        ]

    def test_later_payments_are_ignored(self, client, db_session, auth_headers):
        tenant = make_tenant(db_session, monthly_rent=500)
        first = add_payment(db_session, tenant.id, 200, payment_date=date(2026, 10, 3))
        add_payment(db_session, tenant.id, 300, payment_date=date(2026, 10, 12))

        response = client.get(f"/api/payments/{first.id}/receipt", headers=auth_headers)

        data = response.json()
        assert data["balance_at_payment"] == 300.0
        assert data["payment_breakdown"][0]["type"] == "partial_payment"

    def test_overpayment_credited_to_next_month(self, client, db_session, auth_headers):
        tenant = make_tenant(db_session, monthly_rent=500)
        payment = add_payment(
            db_session,
            tenant.id,
            700,
            payment_date=date(2026, 12, 2),
            payment_period="2026-12",
        )

        response = client.get(f"/api/payments/{payment.id}/receipt", headers=auth_headers)

        data = response.json()
        assert data["balance_at_payment"] == 0.0
        assert data["payment_breakdown"] == [
            {"month": "2026-12", "amount": 500.0, "type": "full_payment"},
            {"month": "2027-01", "amount": 200.0, "type": "overpayment_credit"},
        ]

    def test_payment_after_month_is_settled(self, client, db_session, auth_headers):
        tenant = make_tenant(db_session, monthly_rent=500)
        add_payment(db_session, tenant.id, 500, payment_date=date(2026, 10, 1))
        extra = add_payment(db_session, tenant.id, 150, payment_date=date(2026, 10, 20))

        response = client.get(f"/api/payments/{extra.id}/receipt", headers=auth_headers)

        assert response.json()["payment_breakdown"] == [
            {"month": "2026-11", "amount": 150.0, "type": "overpayment_credit"}
        ]


def test_allocation_without_period():
    assert allocate_payment(Decimal("500"), Decimal("500"), Decimal("0"), None) == []


def test_next_period_wraps_year():
    assert next_period("2026-12") == "2027-01"
    assert next_period("2026-01") == "2026-02"
    assert next_period("bad") is None
