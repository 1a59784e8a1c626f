from conftest import group_payload, pick_strategy_payload, hu_formation_payload


async def test_create_and_list_inventory_groups(client):
    response = await client.post("/api/inventory-groups", json=group_payload())
    assert response.status_code == 201
    group = response.json()
    assert group["name"] == "L0 Group"
    assert group["storage_instruction"] == "L0"
    assert group["version"] == 1

    response = await client.get("/api/inventory-groups")
    assert [g["id"] for g in response.json()] == [group["id"]]


async def test_duplicate_group_returns_400(client):
    await client.post("/api/inventory-groups", json=group_payload("First"))
    response = await client.post("/api/inventory-groups", json=group_payload("Second"))

    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "DUPLICATE_INVENTORY_GROUP"
    assert "already exists" in body["error"]

    response = await client.get("/api/inventory-groups")
    assert len(response.json()) == 1


async def test_created_group_completes_first_step(client):
    response = await client.get("/api/wizard/status")
    assert response.json()["steps"][0]["complete"] is False

    await client.post("/api/inventory-groups", json=group_payload())

    response = await client.get("/api/wizard/status")
    assert response.json()["steps"][0]["complete"] is True


async def test_new_group_is_seeded_with_pick_and_put(client):
    group = (await client.post("/api/inventory-groups", json=group_payload())).json()

    response = await client.get(f"/api/stock-allocation-strategies/by-group/{group['id']}")
    assert sorted(s["mode"] for s in response.json()) == ["PICK", "PUT"]

    response = await client.get("/api/stock-allocation-strategies/allocation-status")
    assert response.json()["configured_groups"] == 1


async def test_group_without_seeding(client):
    response = await client.post(
        "/api/inventory-groups", params={"seed_strategies": "false"}, json=group_payload()
    )
    group = response.json()
    response = await client.get(f"/api/stock-allocation-strategies/by-group/{group['id']}")
    assert response.json() == []


async def test_missing_required_field_returns_400(client):
    response = await client.post("/api/inventory-groups", json={"storageInstruction": "L0"})
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


async def test_unknown_group_returns_404(client):
    response = await client.get("/api/inventory-groups/999")
    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"


async def test_update_with_stale_version_returns_409(client):
    group = (await client.post("/api/inventory-groups", json=group_payload())).json()
    url = f"/api/inventory-groups/{group['id']}"

    response = await client.put(url, json={"description": "first"}, headers={"If-Match": '"1"'})
    assert response.status_code == 200
    assert response.json()["version"] == 2

    response = await client.put(url, json={"description": "second"}, headers={"If-Match": '"1"'})
    assert response.status_code == 409
    assert response.json()["code"] == "VERSION_CONFLICT"

    response = await client.get(url)
    assert response.json()["description"] == "first"


async def test_delete_group_cascades(client):
    group = (await client.post("/api/inventory-groups", json=group_payload())).json()
    strategy = (await client.post(
        "/api/pick-strategies", json=pick_strategy_payload(group["id"])
    )).json()
    await client.put(f"/api/hu-formations/by-strategy/{strategy['id']}", json=hu_formation_payload())

    response = await client.delete(f"/api/inventory-groups/{group['id']}")
    assert response.status_code == 200
    assert response.json()["deleted_dependents"] == {
        "pick_strategies": 1,
        "hu_formations": 1,
        "stock_allocation_strategies": 2,
    }

    assert (await client.get("/api/pick-strategies")).json() == []
    assert (await client.get("/api/hu-formations")).json() == []

    response = await client.delete(f"/api/inventory-groups/{group['id']}")
    assert response.status_code == 404
