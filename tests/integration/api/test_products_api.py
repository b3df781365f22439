"""
API tests for product management
"""
import pytest
from decimal import Decimal

ANVIL = {
    "name": "Anvil",
    "sku": "ANV-001",
    "category": "Hardware",
    "price": "50.00",
    "stock": 12,
    "description": "Drop-forged",
}


@pytest.mark.asyncio
async def test_create_and_list_products(client, auth_headers):
    _, headers = await auth_headers("jane@acme.com")

    created = await client.post("/api/products", json=ANVIL, headers=headers)
    assert created.status_code == 201
    assert Decimal(str(created.json()["price"])) == Decimal("50.00")

    listed = (await client.get("/api/products", headers=headers)).json()
    assert [product["sku"] for product in listed] == ["ANV-001"]


@pytest.mark.asyncio
async def test_duplicate_sku_conflicts_within_tenant_only(client, auth_headers):
    _, jane = await auth_headers("jane@acme.com")
    _, john = await auth_headers("john@globex.com")
    await client.post("/api/products", json=ANVIL, headers=jane)

    duplicate = await client.post("/api/products", json=ANVIL, headers=jane)
    other_tenant = await client.post("/api/products", json=ANVIL, headers=john)

    assert duplicate.status_code == 409
    assert duplicate.json()["error"]["code"] == "CONFLICT"
    assert other_tenant.status_code == 201


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "override, field",
    [
        ({"price": "abc"}, "price"),
        ({"price": -1}, "price"),
        ({"stock": "lots"}, "stock"),
        ({"price": "1.005"}, "price"),
        ({"price": "1e30"}, "price"),
        ({"stock": "1e999999999"}, "stock"),
    ],
)
async def test_create_product_rejects_bad_numbers(client, auth_headers, override, field):
    _, headers = await auth_headers("jane@acme.com")

    response = await client.post("/api/products", json={**ANVIL, **override}, headers=headers)

    assert response.status_code == 400
    assert response.json()["error"]["details"]["field"] == field


@pytest.mark.asyncio
async def test_update_product_to_taken_sku_conflicts(client, auth_headers):
    _, headers = await auth_headers("jane@acme.com")
    await client.post("/api/products", json=ANVIL, headers=headers)
    rope = (
        await client.post(
            "/api/products", json={**ANVIL, "sku": "RP-002", "name": "Rope"}, headers=headers
        )
    ).json()

    response = await client.put(f"/api/products/{rope['id']}", json=ANVIL, headers=headers)

    assert response.status_code == 409


@pytest.mark.asyncio
async def test_update_unknown_product_is_not_found(client, auth_headers):
    _, headers = await auth_headers("jane@acme.com")

    response = await client.put("/api/products/999", json=ANVIL, headers=headers)

    assert response.status_code == 404
    assert response.json()["error"] == {"code": "NOT_FOUND", "message": "Product not found"}


@pytest.mark.asyncio
async def test_delete_product(client, auth_headers):
    _, headers = await auth_headers("jane@acme.com")
    product = (await client.post("/api/products", json=ANVIL, headers=headers)).json()

    response = await client.delete(f"/api/products/{product['id']}", headers=headers)

    assert response.json() == {"success": True}
    assert (await client.get("/api/products", headers=headers)).json() == []
