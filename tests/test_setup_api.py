import json


EXPECTED_QUICK_SETUP = {
    "inventory_groups": 3,
    "task_sequences": 1,
    "pick_strategies": 2,
    "hu_formations": 1,
    "work_order_management": 1,
    "stock_allocation_strategies": 6,
    "task_planning": 0,
    "task_execution": 0,
}


async def test_quick_setup_creates_default_configuration(client):
    response = await client.post("/api/quick-setup")
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["summary"] == EXPECTED_QUICK_SETUP

    groups = (await client.get("/api/inventory-groups")).json()
    assert [g["name"] for g in groups] == [
        "L0 Inventory Group", "L2 Inventory Group", "Replenishment Group",
    ]

    status = (await client.get("/api/stock-allocation-strategies/allocation-status")).json()
    assert status["configured_groups"] == 3


async def test_quick_setup_completes_configuration_steps(client):
    await client.post("/api/quick-setup")

    steps = (await client.get("/api/wizard/status")).json()["steps"]
    assert [s["complete"] for s in steps] == [True, True, True, True, True, False]

    state = (await client.get("/api/wizard/state")).json()
    assert state["completed_steps"] == [1, 2, 3, 4, 5]
    assert state["current_step"] == 1


async def test_quick_setup_replaces_existing_configuration(client):
    await client.post("/api/quick-setup")
    response = await client.post("/api/quick-setup")

    assert response.json()["summary"] == EXPECTED_QUICK_SETUP
    assert len((await client.get("/api/inventory-groups")).json()) == 3
    assert len((await client.get("/api/stock-allocation-strategies")).json()) == 6


async def test_failed_setup_leaves_previous_configuration(client):
    await client.post("/api/quick-setup")
    response = await client.post("/api/quick-setup", json={"replace_existing": False})

    assert response.status_code == 400
    assert response.json()["code"] == "DUPLICATE_INVENTORY_GROUP"
    assert len((await client.get("/api/inventory-groups")).json()) == 3
    assert len((await client.get("/api/pick-strategies")).json()) == 2


async def test_seeded_template_is_listed(client):
    templates = (await client.get("/api/templates")).json()
    assert [t["name"] for t in templates] == ["Distribution Center"]
    assert templates[0]["template_data"]["inventoryGroups"][0]["name"] == "L0 Items"


async def test_apply_template(client):
    template = (await client.get("/api/templates")).json()[0]
    response = await client.post(f"/api/templates/{template['id']}/apply")

    assert response.status_code == 200
    body = response.json()
    assert body["template_name"] == "Distribution Center"
    assert body["summary"]["inventory_groups"] == 2
    assert body["summary"]["task_sequences"] == 2
    assert body["summary"]["stock_allocation_strategies"] == 4
    assert body["summary"]["task_planning"] == 2
    assert body["summary"]["task_execution"] == 2

    plannings = (await client.get("/api/task-planning")).json()
    assert {p["configuration_name"] for p in plannings} == {"PICK_BY_CUSTOMER"}
    assert plannings[0]["group_by"] == ["area", "uom"]

    sequences = (await client.get("/api/task-sequences")).json()
    assert all(s["shipment_acknowledgment"] == "SHIP_CONFIRM" for s in sequences)


async def test_apply_unknown_template_returns_404(client):
    response = await client.post("/api/templates/999/apply")
    assert response.status_code == 404


async def test_create_template_with_unknown_group_reference_is_rejected(client):
    response = await client.post("/api/templates", json={
        "name": "Broken",
        "template_data": {
            "inventoryGroups": [{"name": "A"}],
            "taskSequences": [{"inventoryGroup": "B", "taskSequences": ["OUTBOUND_PICK"]}],
        },
    })
    assert response.status_code == 400


async def test_create_and_apply_custom_template(client):
    response = await client.post("/api/templates", json={
        "name": "Single group",
        "template_data": {
            "inventoryGroups": [{"name": "Everything"}],
            "taskSequences": [{"taskSequences": ["outbound_pick", "OUTBOUND_SHIP"]}],
        },
    })
    assert response.status_code == 201

    response = await client.post(f"/api/templates/{response.json()['id']}/apply")
    assert response.json()["summary"]["stock_allocation_strategies"] == 2

    sequences = (await client.get("/api/task-sequences")).json()
    assert sequences[0]["task_sequences"] == ["OUTBOUND_PICK", "OUTBOUND_SHIP"]


async def test_export_outbound_configuration(client):
    await client.post("/api/quick-setup")

    response = await client.get("/api/export/outbound")
    assert response.status_code == 200
    disposition = response.headers["content-disposition"]
    assert disposition.startswith('attachment; filename="outbound-configuration-')
    assert disposition.endswith('.json"')

    document = json.loads(response.content)
    assert document["confirmed"] is False
    groups = {g["name"]: g for g in document["inventory_groups"]}
    l0 = groups["L0 Inventory Group"]
    assert l0["fully_allocated"] is True
    assert len(l0["task_sequences"]) == 1
    assert l0["pick_strategies"][0]["hu_formation"]["trip_type"] == "LM"
    assert l0["pick_strategies"][0]["work_order_management"]["loading_units"] == ["PALLET"]
    assert groups["L2 Inventory Group"]["pick_strategies"][0]["hu_formation"] is None

    legacy = await client.get("/api/export-configuration")
    assert legacy.status_code == 200
    assert len(json.loads(legacy.content)["inventory_groups"]) == 3


async def test_replacing_configuration_clears_confirmation(client):
    await client.post("/api/quick-setup")
    await client.post("/api/wizard/jump", json={"step": 6})
    assert (await client.post("/api/wizard/confirm")).json()["state"]["confirmed"] is True

    await client.post("/api/quick-setup")

    state = (await client.get("/api/wizard/state")).json()
    assert state["confirmed"] is False
    assert 6 not in state["completed_steps"]
    assert state["completed_steps"] == [1, 2, 3, 4, 5]
    document = json.loads((await client.get("/api/export/outbound")).content)
    assert document["confirmed"] is False
