"""
Tests for the business listings: /api/meat-houses, /api/restaurants, /api/stores
"""
import pytest
from sqlalchemy import text
from meat_houses.models import MeatHouse
from restaurants.models import Restaurant, RestaurantType
from stores.models import Store


class TestMeatHousesAPI:
    def test_create_with_defaults(self, client, db_session):
        response = client.post("/api/meat-houses", json={"name": "Crescent Meats", "meatTypes": ["lamb", "goat"]})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Meat house created successfully"

        row = client.get("/api/meat-houses").json()[0]
        assert row["id"] == body["id"]
        assert row["meatTypes"] == ["lamb", "goat"]
        assert row["slaughterMethods"] == []
        assert row["images"] == []
        assert row["lastUpdated"] is not None

    def test_blobs_stored_as_given(self, client, sample_address):
        hours = {"mon": "9-5", "sun": None}
        reviews = [{"stars": 5, "text": "fresh"}]

        client.post("/api/meat-houses", json={
            "name": "Crescent Meats",
            "meatTypes": ["beef"],
            "addressId": sample_address.id,
            "businessHours": hours,
            "reviews": reviews,
            "wholesaleAvailable": True,
        })

        row = client.get("/api/meat-houses").json()[0]
        assert row["addressId"] == sample_address.id
        assert row["businessHours"] == hours
        assert row["reviews"] == reviews
        assert row["wholesaleAvailable"] is True
        assert row["retailAvailable"] is None

    def test_empty_meat_types_accepted(self, client):
        response = client.post("/api/meat-houses", json={"name": "Crescent Meats", "meatTypes": []})
        assert response.status_code == 200

    @pytest.mark.parametrize("body", [{"name": "No types"}, {"meatTypes": ["beef"]}])
    def test_required_fields(self, client, db_session, body):
        response = client.post("/api/meat-houses", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "Name and meat types are required"}
        assert db_session.query(MeatHouse).count() == 0

    def test_unknown_address(self, client, db_session):
        response = client.post("/api/meat-houses", json={"name": "X", "meatTypes": ["beef"], "addressId": 77})

        assert response.status_code == 400
        assert response.json() == {"error": "Address not found"}
        assert db_session.query(MeatHouse).count() == 0

    def test_omitted_documents_are_sql_null(self, client, db_session):
        client.post("/api/meat-houses", json={"name": "Crescent Meats", "meatTypes": ["beef"]})

        missing = db_session.execute(text(
            "SELECT business_hours IS NULL AND social_media IS NULL AND ratings IS NULL AND reviews IS NULL "
            "FROM meat_houses"
        )).scalar()
        assert missing == 1


class TestRestaurantsAPI:
    def test_create_with_defaults(self, client, db_session):
        response = client.post("/api/restaurants", json={"name": "Al Ameer"})

        assert response.status_code == 200
        assert response.json()["message"] == "Restaurant created successfully"

        restaurant = db_session.query(Restaurant).first()
        assert restaurant.has_alcohol is False
        assert restaurant.cuisine_types == []
        assert restaurant.specialties == []
        assert restaurant.delivery_options == []
        assert restaurant.images == []
        assert restaurant.restaurant_type is None
        assert restaurant.last_updated is not None

    def test_round_trip(self, client, sample_address):
        payload = {
            "name": "Al Ameer",
            "addressId": sample_address.id,
            "cuisineTypes": ["Lebanese"],
            "specialties": ["shawarma"],
            "priceRange": "$$",
            "restaurantType": "CASUAL",
            "menu": {"mains": ["kafta"]},
            "deliveryOptions": ["pickup"],
            "takeoutAvailable": True,
            "hasAlcohol": False,
            "images": ["https://img.example/1.jpg"],
        }

        body = client.post("/api/restaurants", json=payload).json()

        row = client.get("/api/restaurants").json()[0]
        assert row["id"] == body["id"]
        for key, value in payload.items():
            assert row[key] == value

    def test_restaurant_type_enum(self, client, db_session):
        client.post("/api/restaurants", json={"name": "Bakery", "restaurantType": "CAFE"})
        assert db_session.query(Restaurant).first().restaurant_type == RestaurantType.CAFE

        response = client.post("/api/restaurants", json={"name": "Bistro", "restaurantType": "BISTRO"})
        assert response.status_code == 400

    def test_name_required(self, client):
        response = client.post("/api/restaurants", json={"cuisineTypes": ["Yemeni"]})
        assert response.status_code == 400
        assert response.json() == {"error": "Name is required"}

    def test_list_ordered_by_id(self, client, db_session):
        db_session.add_all([
            Restaurant(id=4, name="d"),
            Restaurant(id=1, name="a"),
            Restaurant(id=3, name="c"),
        ])
        db_session.commit()

        rows = client.get("/api/restaurants").json()
        assert [row["id"] for row in rows] == [1, 3, 4]

    def test_unknown_address(self, client, db_session):
        response = client.post("/api/restaurants", json={"name": "Al Ameer", "addressId": 77})

        assert response.status_code == 400
        assert response.json() == {"error": "Address not found"}
        assert db_session.query(Restaurant).count() == 0


class TestStoresAPI:
    def test_create_and_list(self, client):
        response = client.post("/api/stores", json={
            "name": "Halal Mart",
            "storeType": "GROCERY",
            "productCategories": ["meat", "spices"],
            "onlineOrdering": True,
        })

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Store created successfully"

        row = client.get("/api/stores").json()[0]
        assert row["id"] == body["id"]
        assert row["storeType"] == "GROCERY"
        assert row["productCategories"] == ["meat", "spices"]
        assert row["onlineOrdering"] is True
        assert row["images"] == []

    @pytest.mark.parametrize("body", [
        {"name": "No type"},
        {"storeType": "BUTCHER"},
        {"name": "Blank type", "storeType": ""},
    ])
    def test_required_fields(self, client, db_session, body):
        response = client.post("/api/stores", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "Name and store type are required"}
        assert db_session.query(Store).count() == 0

    def test_address_relationship(self, client, db_session, sample_address):
        client.post("/api/stores", json={"name": "A", "storeType": "BUTCHER", "addressId": sample_address.id})
        client.post("/api/restaurants", json={"name": "B", "addressId": sample_address.id})

        db_session.expire_all()
        store = db_session.query(Store).first()
        assert store.address.city == "Dearborn"
        assert [r.name for r in store.address.restaurants] == ["B"]

    def test_unknown_address(self, client, db_session):
        response = client.post("/api/stores", json={"name": "A", "storeType": "BUTCHER", "addressId": 77})

        assert response.status_code == 400
        assert response.json() == {"error": "Address not found"}
        assert db_session.query(Store).count() == 0
