# tests/test_api.py
import json
import uuid
from datetime import datetime, timezone

from catering.core.config import settings
from catering.models.order import Order
from catering.models.user import Session

API = settings.API_V1_PREFIX


def _order_payload(catalog, *dishes, **header):
    return {"customer_id": str(catalog.customer.id), "dishes": list(dishes), **header}


def _dish(dish, quantity, unit, overrides=None):
    return {
        "dish_id": str(dish.id),
        "requested_quantity": quantity,
        "requested_unit": unit,
        "overrides": overrides or [],
    }


class TestAuth:
    async def test_me_requires_session(self, anonymous_client):
        response = await anonymous_client.get(f"{API}/auth/me")

        assert response.status_code == 401

    async def test_unknown_session_is_rejected(self, anonymous_client):
        response = await anonymous_client.get(
            f"{API}/auth/me", headers={"Cookie": f"{settings.SESSION_COOKIE_NAME}=bogus"}
        )

        assert response.status_code == 401

    async def test_me_returns_current_user(self, staff_client, staff):
        response = await staff_client.get(f"{API}/auth/me")

        assert response.status_code == 200
        assert response.json()["email"] == staff.email
        assert response.json()["role"] == "user"

    async def test_logout_invalidates_session(self, staff_client, staff):
        response = await staff_client.post(f"{API}/auth/logout")

        assert response.status_code == 204
        assert await Session.filter(user_id=staff.id).count() == 0
        assert (await staff_client.get(f"{API}/auth/me")).status_code == 401

    async def test_inactive_user_is_forbidden(self, staff_client, staff):
        staff.is_active = False
        await staff.save()

        response = await staff_client.get(f"{API}/auth/me")

        assert response.status_code == 403


class TestCatalogEndpoints:
    async def test_catalog_writes_require_admin(self, staff_client):
        response = await staff_client.post(f"{API}/categories", json={"name": "Dairy"})

        assert response.status_code == 403

    async def test_admin_builds_catalog(self, admin_client):
        category = (await admin_client.post(f"{API}/categories", json={"name": "Grains"})).json()
        ingredient = await admin_client.post(
            f"{API}/ingredients", json={"name": "Rice", "category_id": category["id"]}
        )
        assert ingredient.status_code == 201

        dish = await admin_client.post(f"{API}/dishes", json={
            "name": "Steamed rice",
            "base_quantity": 1,
            "base_unit": "kg",
            "price_per_base": 5,
            "ingredients": [
                {"ingredient_id": ingredient.json()["id"], "amount_per_base": 1, "unit": "kg"}
            ],
        })

        assert dish.status_code == 201
        body = dish.json()
        assert body["base_unit"] == "kg"
        assert body["ingredients"][0]["ingredient_name"] == "Rice"

    async def test_infinite_recipe_amount_is_rejected(self, admin_client, catalog):
        body = json.dumps({
            "name": "Bottomless rice",
            "base_quantity": 1,
            "base_unit": "kg",
            "price_per_base": float("inf"),
            "ingredients": [
                {"ingredient_id": str(catalog.ingredients["Rice"].id), "amount_per_base": float("inf"), "unit": "kg"}
            ],
        })

        response = await admin_client.post(
            f"{API}/dishes", content=body, headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 422
        assert {tuple(e["loc"][1:]) for e in response.json()["detail"]} == {
            ("price_per_base",),
            ("ingredients", 0, "amount_per_base"),
        }
        assert (await admin_client.get(f"{API}/dishes")).json()[0]["name"] == "Rice pilaf"

    async def test_duplicate_category_conflicts(self, admin_client):
        await admin_client.post(f"{API}/categories", json={"name": "Grains"})

        response = await admin_client.post(f"{API}/categories", json={"name": "Grains"})

        assert response.status_code == 409

    async def test_deleting_category_in_use_conflicts(self, admin_client, catalog):
        category_id = str(catalog.ingredients["Rice"].category_id)

        response = await admin_client.delete(f"{API}/categories/{category_id}")

        assert response.status_code == 409

    async def test_deleting_ingredient_in_recipe_conflicts(self, admin_client, catalog):
        response = await admin_client.delete(f"{API}/ingredients/{catalog.ingredients['Water'].id}")

        assert response.status_code == 409

    async def test_recipe_endpoint(self, staff_client, catalog):
        response = await staff_client.get(f"{API}/dishes/{catalog.pilaf.id}/recipe")

        assert response.status_code == 200
        assert [line["ingredient_name"] for line in response.json()] == ["Rice", "Salt", "Water"]

    async def test_recipe_of_missing_dish(self, staff_client, catalog):
        response = await staff_client.get(f"{API}/dishes/{uuid.uuid4()}/recipe")

        assert response.status_code == 404

    async def test_dish_list_is_readable_by_staff(self, staff_client, catalog):
        response = await staff_client.get(f"{API}/dishes")

        assert response.status_code == 200
        assert [d["name"] for d in response.json()] == ["Rice pilaf", "Soup"]


class TestOrderEndpoints:
    async def test_create_order(self, staff_client, catalog):
        response = await staff_client.post(
            f"{API}/orders",
            json=_order_payload(catalog, _dish(catalog.pilaf, 2, "kg"), person_count=25)
        )

        assert response.status_code == 201
        body = response.json()
        assert body["person_count"] == 25
        item = body["items"][0]
        assert item["scale_factor"] == 2
        assert {i["name"]: i["scaled_amount"] for i in item["ingredients"]} == {
            "Rice": 2, "Water": 3, "Salt": 20
        }

    async def test_unit_mismatch_is_bad_request(self, staff_client, catalog):
        response = await staff_client.post(
            f"{API}/orders", json=_order_payload(catalog, _dish(catalog.pilaf, 2, "litre"))
        )

        assert response.status_code == 400
        assert "Unit mismatch" in response.json()["detail"]

    async def test_missing_dish_rejects_whole_order(self, staff_client, catalog):
        missing = {"dish_id": str(uuid.uuid4()), "requested_quantity": 1, "requested_unit": "kg"}

        response = await staff_client.post(
            f"{API}/orders", json=_order_payload(catalog, _dish(catalog.pilaf, 2, "kg"), missing)
        )

        assert response.status_code == 404
        assert await Order.all().count() == 0

    async def test_infinite_quantity_is_rejected(self, staff_client, catalog):
        body = json.dumps(_order_payload(catalog, _dish(catalog.pilaf, float("inf"), "kg")))

        response = await staff_client.post(
            f"{API}/orders", content=body, headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 422
        assert await Order.all().count() == 0

    async def test_empty_order_is_bad_request(self, staff_client, catalog):
        response = await staff_client.post(f"{API}/orders", json=_order_payload(catalog))

        assert response.status_code == 400

    async def test_other_user_cannot_touch_order(self, staff_client, other_client, admin_client, catalog):
        created = await staff_client.post(
            f"{API}/orders", json=_order_payload(catalog, _dish(catalog.soup, 2, "litre"))
        )
        order_id = created.json()["id"]

        assert (await other_client.get(f"{API}/orders/{order_id}")).status_code == 403
        assert (await other_client.delete(f"{API}/orders/{order_id}")).status_code == 403
        assert (await other_client.get(f"{API}/orders")).json() == []
        assert (await admin_client.get(f"{API}/orders/{order_id}")).status_code == 200

    async def test_update_replaces_items(self, staff_client, catalog):
        created = await staff_client.post(
            f"{API}/orders", json=_order_payload(catalog, _dish(catalog.pilaf, 2, "kg"))
        )
        order_id = created.json()["id"]

        response = await staff_client.put(f"{API}/orders/{order_id}", json={
            "delivery_address": "Hall B",
            "dishes": [_dish(catalog.soup, 4, "litre")],
        })

        assert response.status_code == 200
        body = response.json()
        assert body["delivery_address"] == "Hall B"
        assert [item["dish_name"] for item in body["items"]] == ["Soup"]

    async def test_delete_order(self, staff_client, catalog):
        created = await staff_client.post(
            f"{API}/orders", json=_order_payload(catalog, _dish(catalog.pilaf, 1, "kg"))
        )
        order_id = created.json()["id"]

        assert (await staff_client.delete(f"{API}/orders/{order_id}")).status_code == 204
        assert (await staff_client.get(f"{API}/orders/{order_id}")).status_code == 404

    async def test_slips(self, staff_client, catalog):
        created = await staff_client.post(f"{API}/orders", json=_order_payload(
            catalog,
            _dish(catalog.pilaf, 2, "kg"),
            _dish(catalog.soup, 2, "litre"),
            person_count=50
        ))
        order_id = created.json()["id"]

        response = await staff_client.get(f"{API}/orders/{order_id}/slips")

        assert response.status_code == 200
        ingredient_slip = response.json()["ingredient_slip"]
        salt = [e for e in ingredient_slip["items"] if e["name"] == "Salt"]
        assert salt == [{"name": "Salt", "amount": 25, "unit": "g"}]
        order_slip = response.json()["order_slip"]
        assert order_slip["person_count"] == 50
        assert order_slip["customer_address"] == "1 Main St"
        assert [d["dish_name"] for d in order_slip["dishes"]] == ["Rice pilaf", "Soup"]


class TestReportEndpoint:
    async def test_report_requires_admin(self, staff_client):
        response = await staff_client.get(f"{API}/reports")

        assert response.status_code == 403

    async def test_unknown_range_is_rejected(self, admin_client):
        response = await admin_client.get(f"{API}/reports", params={"range": "weekly"})

        assert response.status_code == 400
        assert "weekly" in response.json()["detail"]

    async def test_monthly_report(self, admin_client, staff_client, catalog):
        ids = []
        for quantity in (1, 2):
            created = await staff_client.post(
                f"{API}/orders", json=_order_payload(catalog, _dish(catalog.pilaf, quantity, "kg"))
            )
            ids.append(created.json()["id"])
        await Order.filter(id=ids[0]).update(created_at=datetime(2024, 1, 5, 8, tzinfo=timezone.utc))
        await Order.filter(id=ids[1]).update(created_at=datetime(2024, 1, 20, 8, tzinfo=timezone.utc))

        response = await admin_client.get(f"{API}/reports", params={"range": "monthly"})

        assert response.status_code == 200
        body = response.json()
        assert body["range"] == "monthly"
        assert body["rows"] == [
            {"period": "2024-01", "orders_count": 2, "revenue": 30.0, "cost": 12.0, "profit": 18.0}
        ]
        assert body["totals"] == {"orders_count": 2, "revenue": 30.0, "cost": 12.0, "profit": 18.0}

    async def test_start_after_end_is_rejected(self, admin_client):
        response = await admin_client.get(
            f"{API}/reports", params={"start": "2024-02-01", "end": "2024-01-01"}
        )

        assert response.status_code == 400
