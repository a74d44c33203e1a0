"""
Integration tests for partner administration endpoints.
"""
import uuid

import pytest
from django.contrib.auth.hashers import check_password

from accounts.infrastructure.models import UserAccount
from partners.infrastructure.models import Distributor, Location, Seller


def create_distributor(client, name="Riu Hotels", email="distributor@riuhotels.com"):
    return client.post(
        "/api/admin/distributors",
        {
            "name": name,
            "email": email,
            "password": "distributor123",
            "contactPerson": "Maria Lopez",
            "telephone": "+52 998 000 0000",
        },
        format="json",
    )


def create_location(client, distributor_id, name="Riu Cancun", email="location@riucancun.com"):
    return client.post(
        "/api/admin/locations",
        {
            "distributorId": str(distributor_id),
            "name": name,
            "email": email,
            "password": "location123",
        },
        format="json",
    )


@pytest.mark.django_db
@pytest.mark.integration
class TestDistributorAPI:
    """Integration tests for distributor endpoints."""

    def test_create_distributor(self, admin_client):
        """Test creating a distributor with its account."""
        response = create_distributor(admin_client)

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Riu Hotels"
        assert data["isActive"] is True
        assert data["contactPerson"] == "Maria Lopez"
        assert data["email"] == "distributor@riuhotels.com"
        assert data["user"]["role"] == "DISTRIBUTOR"
        assert data["locations"] == []
        assert "password" not in data
        account = UserAccount.objects.get(email="distributor@riuhotels.com")
        assert check_password("distributor123", account.password)

    def test_create_distributor_duplicate_email(self, admin_client):
        """Test emails are unique across accounts."""
        create_distributor(admin_client)

        response = create_distributor(admin_client, name="Copy", email="DISTRIBUTOR@riuhotels.com")

        assert response.status_code == 400
        assert response["X-Error-Code"] == "DUPLICATE_EMAIL"
        assert Distributor.objects.count() == 1

    def test_create_distributor_missing_name(self, admin_client):
        """Test request validation errors use the error format."""
        response = admin_client.post(
            "/api/admin/distributors",
            {"email": "x@example.com", "password": "secret123"},
            format="json",
        )

        assert response.status_code == 400
        assert response.json()["error"].startswith("name:")
        assert response["X-Error-Code"] == "VALIDATION_ERROR"

    def test_create_distributor_missing_password(self, admin_client):
        """Test a password is needed for the new account."""
        response = admin_client.post(
            "/api/admin/distributors",
            {"name": "No Password", "email": "nopw@example.com"},
            format="json",
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Password is required"}

    def test_list_distributors(self, admin_client):
        """Test the list is ordered by name with location counts."""
        zeta = create_distributor(admin_client, name="Zeta", email="zeta@example.com").json()
        create_distributor(admin_client, name="Alpha", email="alpha@example.com")
        create_location(admin_client, zeta["id"])

        response = admin_client.get("/api/admin/distributors")

        assert response.status_code == 200
        data = response.json()
        assert [d["name"] for d in data] == ["Alpha", "Zeta"]
        assert data[0]["locationCount"] == 0
        assert data[1]["locationCount"] == 1
        assert data[1]["user"]["email"] == "zeta@example.com"

    def test_distributor_details(self, admin_client):
        """Test details include locations, sellers and seller configuration."""
        distributor = create_distributor(admin_client).json()
        location = create_location(admin_client, distributor["id"]).json()
        admin_client.post(
            "/api/admin/sellers",
            {
                "locationId": location["id"],
                "name": "Pedrita Gomez",
                "email": "seller@riucancun.com",
                "password": "pedrita123",
                "config": {"defaultGuests": 4, "pricingType": "VARIABLE"},
            },
            format="json",
        )

        response = admin_client.get(f"/api/admin/distributors/{distributor['id']}")

        assert response.status_code == 200
        data = response.json()
        assert len(data["locations"]) == 1
        location_data = data["locations"][0]
        assert location_data["sellerCount"] == 1
        seller = location_data["sellers"][0]
        assert seller["name"] == "Pedrita Gomez"
        assert seller["config"]["defaultGuests"] == 4
        assert seller["config"]["pricingType"] == "VARIABLE"
        assert seller["config"]["sendMethod"] == "URL"

    def test_distributor_details_not_found(self, admin_client):
        """Test details of an unknown distributor return 404."""
        response = admin_client.get(f"/api/admin/distributors/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response["X-Error-Code"] == "DISTRIBUTOR_NOT_FOUND"

    def test_update_distributor(self, admin_client):
        """Test editing a distributor keeps its status and password."""
        distributor = create_distributor(admin_client).json()
        admin_client.patch(f"/api/admin/distributors/{distributor['id']}/toggle-status")

        response = admin_client.put(
            f"/api/admin/distributors/{distributor['id']}",
            {
                "name": "Riu Hotels & Resorts",
                "email": "partners@riuhotels.com",
                "notes": "Renewed",
                "password": "",
            },
            format="json",
        )

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Riu Hotels & Resorts"
        assert data["email"] == "partners@riuhotels.com"
        assert data["notes"] == "Renewed"
        assert data["isActive"] is False
        account = UserAccount.objects.get(id=data["user"]["id"])
        assert account.email == "partners@riuhotels.com"
        assert check_password("distributor123", account.password)

    def test_update_distributor_password(self, admin_client):
        """Test a non-empty password replaces the old one."""
        distributor = create_distributor(admin_client).json()

        admin_client.put(
            f"/api/admin/distributors/{distributor['id']}",
            {"name": "Riu Hotels", "email": "distributor@riuhotels.com", "password": "newpass456"},
            format="json",
        )

        account = UserAccount.objects.get(email="distributor@riuhotels.com")
        assert check_password("newpass456", account.password)


@pytest.mark.django_db
@pytest.mark.integration
class TestLocationAndSellerAPI:
    """Integration tests for location and seller endpoints."""

    def test_create_location(self, admin_client):
        """Test creating a location under a distributor."""
        distributor = create_distributor(admin_client).json()

        response = create_location(admin_client, distributor["id"])

        assert response.status_code == 201
        data = response.json()
        assert data["distributorId"] == distributor["id"]
        assert data["isActive"] is True
        assert data["sellerCount"] == 0
        assert data["user"]["role"] == "LOCATION"

    def test_create_location_unknown_distributor(self, admin_client):
        """Test a location needs an existing distributor."""
        response = create_location(admin_client, uuid.uuid4())

        assert response.status_code == 404
        assert response["X-Error-Code"] == "DISTRIBUTOR_NOT_FOUND"
        assert Location.objects.count() == 0
        assert not UserAccount.objects.filter(email="location@riucancun.com").exists()

    def test_update_location(self, admin_client):
        """Test editing a location."""
        distributor = create_distributor(admin_client).json()
        location = create_location(admin_client, distributor["id"]).json()

        response = admin_client.put(
            f"/api/admin/locations/{location['id']}",
            {"name": "Riu Palace", "email": "palace@riucancun.com", "telephone": "555-0100"},
            format="json",
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Riu Palace"
        assert response.json()["telephone"] == "555-0100"

    def test_update_unknown_location(self, admin_client):
        """Test editing an unknown location returns 404."""
        response = admin_client.put(
            f"/api/admin/locations/{uuid.uuid4()}",
            {"name": "Nowhere", "email": "nowhere@example.com"},
            format="json",
        )

        assert response.status_code == 404

    def test_create_seller_defaults(self, admin_client):
        """Test a seller without configuration gets the defaults."""
        distributor = create_distributor(admin_client).json()
        location = create_location(admin_client, distributor["id"]).json()

        response = admin_client.post(
            "/api/admin/sellers",
            {
                "locationId": location["id"],
                "name": "Pedrita Gomez",
                "email": "seller@riucancun.com",
                "password": "pedrita123",
            },
            format="json",
        )

        assert response.status_code == 201
        data = response.json()
        assert data["isActive"] is True
        assert data["locationId"] == location["id"]
        assert data["config"] == {
            "sendMethod": "URL",
            "landingPageRequired": True,
            "allowCustomGuestsDays": False,
            "defaultGuests": 2,
            "defaultDays": 3,
            "pricingType": "FIXED",
            "fixedPrice": "0.00",
            "sendRebuyEmail": False,
        }
        assert Seller.objects.get(id=data["id"]).config.default_days == 3

    def test_create_seller_invalid_config(self, admin_client):
        """Test configuration bounds are validated."""
        distributor = create_distributor(admin_client).json()
        location = create_location(admin_client, distributor["id"]).json()

        response = admin_client.post(
            "/api/admin/sellers",
            {
                "locationId": location["id"],
                "name": "Bad Config",
                "email": "bad@example.com",
                "password": "secret123",
                "config": {"defaultGuests": 0},
            },
            format="json",
        )

        assert response.status_code == 400
        assert Seller.objects.count() == 0
        assert not UserAccount.objects.filter(email="bad@example.com").exists()
