import concurrent.futures
import uuid
from datetime import datetime, timedelta, UTC

from fastapi.testclient import TestClient


def _register_and_login(client: TestClient, email: str, password: str = "Pass123!") -> str:
    r = client.post("/auth/register", json={"email": email, "password": password})
    assert r.status_code == 200
    r = client.post("/auth/login", json={"email": email, "password": password})
    assert r.status_code == 200
    return r.json()["token"]


class TestE2E:
    def test_complete_user_journey(self, client: TestClient):
        email = f"user_{uuid.uuid4().hex[:8]}@example.com"
        token = _register_and_login(client, email, "SecurePass123!")
        auth = {"Authorization": f"Bearer {token}"}

        # 1. Set up a board
        due = (datetime.now(UTC) + timedelta(hours=3)).isoformat()
        r = client.post("/tasks/", json={"title": "Ship release", "priority": "high", "due_date": due},
                        headers=auth)
        assert r.status_code == 201
        task_id = r.json()["id"]
        r = client.post("/labels/", json={"name": "Release"}, headers=auth)
        assert r.status_code == 201
        label_id = r.json()["id"]
        assert client.post(f"/labels/{label_id}/tasks/{task_id}", headers=auth).status_code == 201

        task = client.get(f"/tasks/{task_id}", headers=auth).json()
        assert task["due_status"] == "due_soon"

        # 2. Work the task
        assert client.patch(f"/tasks/{task_id}", json={"status": "in_progress"}, headers=auth).status_code == 200
        r = client.post(f"/tasks/{task_id}/comments", json={"content": "tagging the build"}, headers=auth)
        assert r.status_code == 201
        assert client.patch(f"/tasks/{task_id}", json={"status": "completed"}, headers=auth).status_code == 200

        summary = client.get("/dashboard/summary", headers=auth).json()
        assert summary == {"tasks": {"todo": 0, "inProgress": 0, "completed": 1, "total": 1}, "labels": 1}

        history = client.get(f"/activity/task/{task_id}", headers=auth).json()
        assert [entry["action"] for entry in history] == ["status_changed", "status_changed", "created"]
        assert history[0]["new_value"] == "completed"

        # 3. Another user sees none of it
        other = {"Authorization": f"Bearer {_register_and_login(client, f'other_{uuid.uuid4().hex[:8]}@example.com')}"}
        assert client.get("/tasks/", headers=other).json() == []
        assert client.get("/labels/", headers=other).json() == []
        assert client.delete(f"/tasks/{task_id}", headers=other).status_code == 403

        # 4. Clean up
        assert client.delete(f"/tasks/{task_id}", headers=auth).status_code == 200
        assert client.get("/tasks/", headers=auth).json() == []
        assert client.get(f"/labels/{label_id}/tasks", headers=auth).json() == []
        records = client.get("/dashboard/records", headers=auth).json()
        assert records["perTable"]["tasks"] == 0
        assert records["perTable"]["taskActivity"] == 4

    def test_input_validation_and_limits(self, client: TestClient):
        r = client.post("/auth/register", json={"email": "test@example.com", "password": "a" * 100})
        assert r.status_code in (400, 422)
        assert "too long" in r.text.lower() or "72" in r.text

        r = client.post("/auth/register", json={"email": "not_an_email", "password": "Pass123!"})
        assert r.status_code == 422

        token = _register_and_login(client, f"test_{uuid.uuid4().hex[:8]}@example.com")

        # no credentials at all is an authentication failure, not a validation one
        assert client.post("/tasks/", json={}).status_code == 401
        assert client.post(f"/tasks/?token={token}", json={}).status_code == 422
        assert client.post(f"/tasks/?token={token}", json={"title": "", "priority": "low"}).status_code == 422
        assert client.post(f"/tasks/?token={token}", json={"title": "ok"}).status_code == 422

    def test_concurrent_operations(self, client: TestClient):
        token = _register_and_login(client, f"test_{uuid.uuid4().hex[:8]}@example.com")

        def create_task(i):
            return client.post(
                f"/tasks/?token={token}",
                json={"title": f"Concurrent Task {i}", "priority": "medium"},
            )

        with concurrent.futures.ThreadPoolExecutor(max_workers=3) as executor:
            futures = [executor.submit(create_task, i) for i in range(5)]
            responses = [f.result() for f in futures]

        assert all(r.status_code == 201 for r in responses)

        tasks = client.get(f"/tasks/?token={token}").json()
        assert len(tasks) == 5
        assert len({task["title"] for task in tasks}) == 5
        assert len({task["user_id"] for task in tasks}) == 1
