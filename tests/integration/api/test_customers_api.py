"""
API tests for customer management
"""
import pytest

ACME = {"name": "Acme", "email": "a@acme.com", "phone": "555-0100", "address": "1 Road Runner Way"}


@pytest.mark.asyncio
async def test_create_and_list_customers(client, auth_headers):
    _, headers = await auth_headers("jane@acme.com")

    created = await client.post("/api/customers", json=ACME, headers=headers)
    assert created.status_code == 201
    assert created.json()["name"] == "Acme"

    listed = await client.get("/api/customers", headers=headers)
    assert listed.status_code == 200
    body = listed.json()
    assert len(body) == 1
    assert body[0]["invoice_count"] == 0


@pytest.mark.asyncio
async def test_create_customer_requires_fields(client, auth_headers):
    _, headers = await auth_headers("jane@acme.com")

    response = await client.post("/api/customers", json={"name": "Acme"}, headers=headers)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_create_customer_rejects_bad_email(client, auth_headers):
    _, headers = await auth_headers("jane@acme.com")

    response = await client.post(
        "/api/customers", json={**ACME, "email": "not-an-email"}, headers=headers
    )

    assert response.status_code == 400
    assert response.json()["error"]["details"]["field"] == "email"


@pytest.mark.asyncio
async def test_update_customer(client, auth_headers):
    _, headers = await auth_headers("jane@acme.com")
    customer = (await client.post("/api/customers", json=ACME, headers=headers)).json()

    response = await client.put(
        f"/api/customers/{customer['id']}",
        json={**ACME, "name": "Acme Corp"},
        headers=headers,
    )

    assert response.status_code == 200
    assert response.json()["name"] == "Acme Corp"


@pytest.mark.asyncio
async def test_customers_are_isolated_between_tenants(client, auth_headers):
    _, jane = await auth_headers("jane@acme.com")
    _, john = await auth_headers("john@globex.com")
    customer = (await client.post("/api/customers", json=ACME, headers=jane)).json()

    assert (await client.get("/api/customers", headers=john)).json() == []

    update = await client.put(f"/api/customers/{customer['id']}", json=ACME, headers=john)
    assert update.status_code == 404

    # Deleting someone else's customer succeeds without touching it
    delete = await client.delete(f"/api/customers/{customer['id']}", headers=john)
    assert delete.status_code == 200
    assert len((await client.get("/api/customers", headers=jane)).json()) == 1


@pytest.mark.asyncio
async def test_delete_customer_is_idempotent(client, auth_headers):
    _, headers = await auth_headers("jane@acme.com")
    customer = (await client.post("/api/customers", json=ACME, headers=headers)).json()

    first = await client.delete(f"/api/customers/{customer['id']}", headers=headers)
    second = await client.delete(f"/api/customers/{customer['id']}", headers=headers)

    assert first.json() == {"success": True}
    assert second.json() == {"success": True}
    assert (await client.get("/api/customers", headers=headers)).json() == []
