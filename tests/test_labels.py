from taskboard.utils.constants import DEFAULT_LABEL_COLORS


def _create_label(client, headers, name="Work", color="#6366f1"):
    payload = {"name": name}
    if color is not None:
        payload["color"] = color
    r = client.post("/labels/", json=payload, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()["id"]


def _create_task(client, headers, title="Task"):
    r = client.post("/tasks/", json={"title": title, "priority": "low"}, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()["id"]


def test_create_and_list_labels(client, headers, other_headers):
    work = _create_label(client, headers, name="  Work  ")
    home = _create_label(client, headers, name="Home", color="#FFF")

    r = client.get("/labels/", headers=headers)
    assert r.status_code == 200
    labels = r.json()
    assert [label["id"] for label in labels] == [home, work]
    assert labels[1]["name"] == "Work"
    assert labels[0]["color"] == "#FFF"

    assert client.get("/labels/", headers=other_headers).json() == []
    assert client.get(f"/labels/{work}", headers=other_headers).status_code == 403
    assert client.get("/labels/999", headers=headers).status_code == 404


def test_color_defaults_to_palette(client, headers):
    first = _create_label(client, headers, name="a", color=None)
    second = _create_label(client, headers, name="b", color=None)

    assert client.get(f"/labels/{first}", headers=headers).json()["color"] == DEFAULT_LABEL_COLORS[0]
    assert client.get(f"/labels/{second}", headers=headers).json()["color"] == DEFAULT_LABEL_COLORS[1]


def test_invalid_label_payloads(client, headers):
    assert client.post("/labels/", json={"name": "x", "color": "red"}, headers=headers).status_code == 422
    assert client.post("/labels/", json={"name": "x", "color": "#12345"}, headers=headers).status_code == 422
    assert client.post("/labels/", json={"name": "n" * 51}, headers=headers).status_code == 422


def test_duplicate_names_are_rejected(client, headers, other_headers):
    _create_label(client, headers, name="Work")
    r = client.post("/labels/", json={"name": "Work"}, headers=headers)
    assert r.status_code == 422
    assert r.json()["detail"] == "A label with this name already exists"

    # names are unique per user only
    _create_label(client, other_headers, name="Work")


def test_update_label(client, headers):
    work = _create_label(client, headers, name="Work")
    _create_label(client, headers, name="Home")

    r = client.patch(f"/labels/{work}", json={"color": "#000000"}, headers=headers)
    assert r.status_code == 200
    assert r.json() == {"id": work}
    label = client.get(f"/labels/{work}", headers=headers).json()
    assert label["name"] == "Work"
    assert label["color"] == "#000000"

    # renaming to its own name is fine, taking another label's is not
    assert client.patch(f"/labels/{work}", json={"name": "Work"}, headers=headers).status_code == 200
    r = client.patch(f"/labels/{work}", json={"name": "Home"}, headers=headers)
    assert r.status_code == 422

    assert client.patch(f"/labels/{work}", json={"name": "Office"}, headers=headers).status_code == 200
    assert client.get(f"/labels/{work}", headers=headers).json()["name"] == "Office"


def test_attach_and_detach(client, headers):
    task_id = _create_task(client, headers)
    work = _create_label(client, headers, name="Work")
    home = _create_label(client, headers, name="Home")

    r = client.post(f"/labels/{work}/tasks/{task_id}", headers=headers)
    assert r.status_code == 201
    assert client.post(f"/labels/{home}/tasks/{task_id}", headers=headers).status_code == 201

    r = client.post(f"/labels/{work}/tasks/{task_id}", headers=headers)
    assert r.status_code == 422
    assert r.json()["detail"] == "This label is already added to the task"

    labels = client.get(f"/labels/task/{task_id}", headers=headers).json()
    assert [label["id"] for label in labels] == [work, home]
    tasks = client.get(f"/labels/{work}/tasks", headers=headers).json()
    assert [task["id"] for task in tasks] == [task_id]

    r = client.delete(f"/labels/{work}/tasks/{task_id}", headers=headers)
    assert r.status_code == 200
    assert r.json() == {"task_id": task_id, "label_id": work}
    assert [label["id"] for label in client.get(f"/labels/task/{task_id}", headers=headers).json()] == [home]

    # detaching something that is not attached still succeeds
    assert client.delete(f"/labels/{work}/tasks/{task_id}", headers=headers).status_code == 200


def test_cannot_attach_across_users(client, headers, other_headers):
    my_task = _create_task(client, headers)
    my_label = _create_label(client, headers)
    their_label = _create_label(client, other_headers)

    assert client.post(f"/labels/{their_label}/tasks/{my_task}", headers=headers).status_code == 403
    assert client.post(f"/labels/{my_label}/tasks/{my_task}", headers=other_headers).status_code == 403
    assert client.post(f"/labels/{my_label}/tasks/999", headers=headers).status_code == 404


def test_delete_label_detaches_tasks(client, headers):
    task_id = _create_task(client, headers)
    work = _create_label(client, headers, name="Work")
    client.post(f"/labels/{work}/tasks/{task_id}", headers=headers)

    r = client.delete(f"/labels/{work}", headers=headers)
    assert r.status_code == 200
    assert r.json() == {"id": work}

    assert client.get(f"/labels/{work}", headers=headers).status_code == 404
    assert client.get(f"/labels/task/{task_id}", headers=headers).json() == []
    # the task itself is untouched
    assert client.get(f"/tasks/{task_id}", headers=headers).status_code == 200


def test_create_label_rate_limit(client, headers, frozen_clock):
    for name in ("a", "b", "c"):
        _create_label(client, headers, name=name)

    r = client.post("/labels/", json={"name": "d"}, headers=headers)
    assert r.status_code == 429
    assert r.headers["Retry-After"] == "3"
