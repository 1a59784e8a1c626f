from conftest import group_payload


async def test_initial_state(client):
    response = await client.get("/api/wizard/state")
    assert response.status_code == 200
    state = response.json()
    assert state["current_step"] == 1
    assert state["current_step_key"] == "INVENTORY_GROUPS"
    assert state["step_count"] == 6
    assert state["completed_steps"] == []
    assert [s["title"] for s in state["steps"]][0] == "Inventory Groups"


async def test_next_blocked_without_inventory_group(client):
    response = await client.post("/api/wizard/next")
    assert response.status_code == 200
    body = response.json()
    assert body["advanced"] is False
    assert body["message"] == "Please create at least one inventory group before proceeding."
    assert body["state"]["current_step"] == 1


async def test_next_advances_once_step_is_complete(client):
    await client.post("/api/inventory-groups", json=group_payload())

    body = (await client.post("/api/wizard/next")).json()
    assert body["advanced"] is True
    assert body["state"]["current_step"] == 2
    assert body["state"]["completed_steps"] == [1]

    # Task sequences missing
    body = (await client.post("/api/wizard/next")).json()
    assert body["advanced"] is False
    assert body["state"]["current_step"] == 2

    state = (await client.get("/api/wizard/state")).json()
    assert state["current_step"] == 2


async def test_previous_and_jump(client):
    body = (await client.post("/api/wizard/jump", json={"step": 4})).json()
    assert body["state"]["current_step"] == 4

    body = (await client.post("/api/wizard/previous")).json()
    assert body["state"]["current_step"] == 3

    await client.post("/api/wizard/jump", json={"step": 1})
    body = (await client.post("/api/wizard/previous")).json()
    assert body["advanced"] is False
    assert body["state"]["current_step"] == 1


async def test_jump_outside_range_returns_400(client):
    for step in (0, 7):
        response = await client.post("/api/wizard/jump", json={"step": step})
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_STEP"

    state = (await client.get("/api/wizard/state")).json()
    assert state["current_step"] == 1


async def test_confirm_only_on_review_step(client):
    response = await client.post("/api/wizard/confirm")
    assert response.status_code == 400

    await client.post("/api/wizard/jump", json={"step": 6})
    body = (await client.post("/api/wizard/confirm")).json()
    assert body["state"]["confirmed"] is True
    assert 6 in body["state"]["completed_steps"]

    steps = (await client.get("/api/wizard/status")).json()["steps"]
    assert steps[5]["complete"] is True


async def test_reset_clears_state_and_step_data(client):
    await client.post("/api/wizard/configurations", json={"step": 2, "data": {"draft": True}})
    await client.post("/api/wizard/jump", json={"step": 6})
    await client.post("/api/wizard/confirm")

    body = (await client.post("/api/wizard/reset")).json()
    assert body["state"]["current_step"] == 1
    assert body["state"]["completed_steps"] == []
    assert body["state"]["confirmed"] is False
    assert (await client.get("/api/wizard/configurations")).json() == []


async def test_step_configuration_is_replaced_on_save(client):
    await client.post("/api/wizard/configurations", json={"step": 3, "data": {"a": 1}})
    response = await client.post(
        "/api/wizard/configurations", json={"step": 3, "data": {"b": 2}, "isComplete": True}
    )
    assert response.status_code == 200

    saved = (await client.get("/api/wizard/configurations/3")).json()
    assert saved["data"] == {"b": 2}
    assert saved["is_complete"] is True
    assert len((await client.get("/api/wizard/configurations")).json()) == 1

    assert (await client.get("/api/wizard/configurations/4")).status_code == 404


async def test_step_configuration_outside_range_returns_400(client):
    response = await client.post("/api/wizard/configurations", json={"step": 9, "data": {}})
    assert response.status_code == 400


async def test_health_and_root(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["checks"]["database"] == "connected"

    response = await client.get("/")
    assert response.json()["docs"] == "/docs"
