from app.models.profile import Profile
from app.models.property import Property, PropertyStatus
from app.models.role import UserRole


class TestUserRoleManagement:
    """Tests for /api/admin/users"""

    def test_list_users(self, client, admin_headers, tenant_profile):
        response = client.get("/api/admin/users", headers=admin_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert {p["id"] for p in data["profiles"]} == {"admin-user", "tenant-user"}

    def test_filter_users_by_role(self, client, admin_headers, tenant_profile):
        response = client.get("/api/admin/users?role=tenant", headers=admin_headers)

        data = response.json()
        assert data["total"] == 1
        assert data["profiles"][0]["id"] == "tenant-user"

    def test_promote_user_to_landlord(self, client, db_session, admin_headers, tenant_profile):
        response = client.patch(
            "/api/admin/users/tenant-user/role",
            headers=admin_headers,
            json={"role": "landlord"},
        )

        assert response.status_code == 200
        assert response.json()["role"] == "landlord"
        db_session.refresh(tenant_profile)
        assert tenant_profile.role == UserRole.LANDLORD

    def test_promote_to_admin_sets_flag(self, client, admin_headers, tenant_profile):
        response = client.patch(
            "/api/admin/users/tenant-user/role",
            headers=admin_headers,
            json={"role": "admin"},
        )

        assert response.json()["is_admin"] is True

    def test_cannot_change_own_role(self, client, admin_headers):
        response = client.patch(
            "/api/admin/users/admin-user/role",
            headers=admin_headers,
            json={"role": "tenant"},
        )

        assert response.status_code == 403
        assert response.json()["detail"] == "Cannot change your own role"

    def test_unknown_user(self, client, admin_headers):
        response = client.patch(
            "/api/admin/users/nobody/role", headers=admin_headers, json={"role": "tenant"}
        )

        assert response.status_code == 404

    def test_invalid_role_rejected(self, client, admin_headers, tenant_profile):
        response = client.patch(
            "/api/admin/users/tenant-user/role", headers=admin_headers, json={"role": "overlord"}
        )

        assert response.status_code == 422

    def test_landlord_cannot_manage_users(self, client, auth_headers):
        response = client.get("/api/admin/users", headers=auth_headers)

        assert response.status_code == 403


class TestListingModeration:
    """Tests for /api/admin/properties"""

    def _listing(self, db_session, title, status=PropertyStatus.PENDING):
        property = Property(title=title, status=status, amenities=["parking"])
        db_session.add(property)
        db_session.commit()
        return property

    def test_list_pending_listings(self, client, db_session, admin_headers):
        self._listing(db_session, "Ntinda Villa")
        self._listing(db_session, "Muyenga Flat", PropertyStatus.APPROVED)

        response = client.get("/api/admin/properties?status=pending", headers=admin_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["properties"][0]["title"] == "Ntinda Villa"

    def test_approve_listing(self, client, db_session, admin_headers):
        listing = self._listing(db_session, "Bugolobi Townhouse")

        response = client.patch(
            f"/api/admin/properties/{listing.id}/status",
            headers=admin_headers,
            json={"status": "approved"},
        )

        assert response.status_code == 200
        assert response.json()["status"] == "approved"
        db_session.refresh(listing)
        assert listing.status == PropertyStatus.APPROVED

    def test_moderate_unknown_listing(self, client, admin_headers):
        response = client.patch(
            "/api/admin/properties/99999/status",
            headers=admin_headers,
            json={"status": "rejected"},
        )

        assert response.status_code == 404

    def test_tenant_cannot_moderate(self, client, db_session, tenant_headers):
        listing = self._listing(db_session, "Kira Bungalow")

        response = client.patch(
            f"/api/admin/properties/{listing.id}/status",
            headers=tenant_headers,
            json={"status": "approved"},
        )

        assert response.status_code == 403
        db_session.refresh(listing)
        assert listing.status == PropertyStatus.PENDING
