from conftest import group_payload, pick_strategy_payload, hu_formation_payload


async def create_strategy(client):
    group = (await client.post("/api/inventory-groups", json=group_payload())).json()
    response = await client.post("/api/pick-strategies", json=pick_strategy_payload(group["id"]))
    assert response.status_code == 201
    return group, response.json()


async def test_pick_strategy_requires_existing_group(client):
    response = await client.post("/api/pick-strategies", json=pick_strategy_payload(999))
    assert response.status_code == 404


async def test_pick_strategy_field_aliases(client):
    _, strategy = await create_strategy(client)
    assert strategy["strat"] == "OPTIMIZE_PICK_PATH"
    assert strategy["task_kind"] == "OUTBOUND_PICK"
    assert strategy["group_by"] == []


async def test_hu_formation_upsert_keeps_one_record(client):
    _, strategy = await create_strategy(client)
    url = f"/api/hu-formations/by-strategy/{strategy['id']}"

    first = await client.put(url, json=hu_formation_payload(tripType="A"))
    assert first.status_code == 200
    second = await client.put(url, json={"tripType": "B"})
    assert second.status_code == 200
    assert second.json()["id"] == first.json()["id"]

    records = (await client.get("/api/hu-formations", params={"pick_strategy_id": strategy["id"]})).json()
    assert len(records) == 1
    assert records[0]["trip_type"] == "B"
    assert records[0]["carrier_hu_kind"] == "PALLET"


async def test_second_hu_formation_post_is_rejected(client):
    _, strategy = await create_strategy(client)
    payload = {**hu_formation_payload(), "pickStrategyId": strategy["id"]}

    assert (await client.post("/api/hu-formations", json=payload)).status_code == 201
    response = await client.post("/api/hu-formations", json=payload)
    assert response.status_code == 400
    assert response.json()["code"] == "CHILD_ALREADY_EXISTS"


async def test_work_order_management_by_strategy(client):
    _, strategy = await create_strategy(client)
    url = f"/api/work-order-management/by-strategy/{strategy['id']}"

    assert (await client.get(url)).status_code == 404

    response = await client.put(url, json={"loadingUnits": ["pallet", "crate"]})
    assert response.status_code == 200
    assert response.json()["loading_units"] == ["PALLET", "CRATE"]
    assert response.json()["disable_work_order"] is False

    response = await client.put(url, json={"disableWorkOrder": True})
    assert response.json()["disable_work_order"] is True
    assert response.json()["loading_units"] == ["PALLET", "CRATE"]


async def test_hu_formation_and_work_orders_complete_their_steps(client):
    _, strategy = await create_strategy(client)
    steps = (await client.get("/api/wizard/status")).json()["steps"]
    assert not steps[2]["complete"]
    assert not steps[3]["complete"]

    await client.put(f"/api/hu-formations/by-strategy/{strategy['id']}", json=hu_formation_payload())
    await client.put(f"/api/work-order-management/by-strategy/{strategy['id']}", json={})

    steps = (await client.get("/api/wizard/status")).json()["steps"]
    assert steps[2]["complete"]
    assert steps[3]["complete"]


async def test_delete_pick_strategy_removes_children(client):
    _, strategy = await create_strategy(client)
    await client.put(f"/api/hu-formations/by-strategy/{strategy['id']}", json=hu_formation_payload())

    response = await client.delete(f"/api/pick-strategies/{strategy['id']}")
    assert response.json()["deleted_dependents"] == {"hu_formations": 1}
    assert (await client.get("/api/hu-formations")).json() == []


async def test_task_execution_upsert_by_planning(client):
    group = (await client.post("/api/inventory-groups", json=group_payload())).json()
    response = await client.post("/api/task-planning", json={
        "inventoryGroupId": group["id"],
        "configurationName": "Default planning",
    })
    assert response.status_code == 201
    planning = response.json()

    url = f"/api/task-execution/by-planning/{planning['id']}"
    await client.put(url, json={"configurationName": "Execution", "tripType": "LM"})
    response = await client.put(url, json={"tripType": "FM"})

    assert response.json()["trip_type"] == "FM"
    assert len((await client.get("/api/task-execution")).json()) == 1


async def test_upsert_ignores_parent_id_in_body(client):
    _, strategy = await create_strategy(client)
    url = f"/api/hu-formations/by-strategy/{strategy['id']}"

    response = await client.put(url, json=hu_formation_payload(pickStrategyId=999))
    assert response.status_code == 200
    assert response.json()["pick_strategy_id"] == strategy["id"]

    response = await client.put(url, json={"pickStrategyId": 999, "pick_strategy_id": 999, "tripType": "B"})
    assert response.json()["pick_strategy_id"] == strategy["id"]
    assert (await client.get(url)).json()["trip_type"] == "B"

    records = (await client.get("/api/hu-formations")).json()
    assert [r["pick_strategy_id"] for r in records] == [strategy["id"]]


async def test_missing_child_returns_error_envelope(client):
    _, strategy = await create_strategy(client)

    for response in (
        await client.get(f"/api/hu-formations/by-strategy/{strategy['id']}"),
        await client.get(f"/api/work-order-management/by-strategy/{strategy['id']}"),
        await client.delete("/api/hu-formations/999"),
        await client.delete("/api/pick-strategies/999"),
    ):
        assert response.status_code == 404
        body = response.json()
        assert body["code"] == "NOT_FOUND"
        assert "not found" in body["error"]
        assert body["method"] in ("GET", "DELETE")
