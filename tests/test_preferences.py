DEFAULTS = {
    "theme": "system",
    "default_view": "list",
    "sort_by": "created",
    "sort_order": "desc",
    "show_completed": True,
    "enable_ai": True,
}


def test_defaults_are_returned_without_a_stored_row(client, headers):
    r = client.get("/preferences/", headers=headers)
    assert r.status_code == 200
    assert r.json() == DEFAULTS

    records = client.get("/dashboard/records", headers=headers).json()
    assert records["perTable"]["userPreferences"] == 0


def test_update_creates_then_patches(client, headers):
    r = client.patch("/preferences/", json={"theme": "dark"}, headers=headers)
    assert r.status_code == 200
    assert r.json() == {**DEFAULTS, "theme": "dark"}
    assert client.get("/preferences/", headers=headers).json() == {**DEFAULTS, "theme": "dark"}

    r = client.patch("/preferences/", json={"sort_by": "dueDate", "show_completed": False, "theme": None},
                     headers=headers)
    assert r.status_code == 200
    assert r.json() == {**DEFAULTS, "theme": "dark", "sort_by": "dueDate", "show_completed": False}

    records = client.get("/dashboard/records", headers=headers).json()
    assert records["perTable"]["userPreferences"] == 1


def test_preferences_are_per_user(client, headers, other_headers):
    client.patch("/preferences/", json={"default_view": "board"}, headers=headers)
    assert client.get("/preferences/", headers=other_headers).json() == DEFAULTS


def test_invalid_preferences(client, headers):
    assert client.patch("/preferences/", json={"theme": "blue"}, headers=headers).status_code == 422
    assert client.patch("/preferences/", json={"sort_by": "title"}, headers=headers).status_code == 422
    assert client.get("/preferences/").status_code == 401


def test_get_or_create_survives_a_concurrent_insert(monkeypatch):
    from taskboard.crud import preferences as preferences_crud
    from taskboard.crud.users import create_user
    from taskboard.database import SessionLocal

    first, second = SessionLocal(), SessionLocal()
    try:
        user = create_user(first, email="race@example.com", hashed_password="x")
        user_id = user.id

        real_lookup = preferences_crud.get_user_preferences_by_user
        calls = []

        def lookup_then_lose_race(db, uid):
            # the first lookup misses, then another session inserts the row
            if not calls:
                calls.append(uid)
                preferences_crud.create_user_preferences(second, uid, **preferences_crud.default_preferences())
                return None
            return real_lookup(db, uid)

        monkeypatch.setattr(preferences_crud, "get_user_preferences_by_user", lookup_then_lose_race)
        prefs = preferences_crud.get_or_create_user_preferences(first, user_id)

        assert prefs is not None
        assert prefs.user_id == user_id
        assert preferences_crud.count_preferences_by_user(first, user_id) == 1
    finally:
        first.close()
        second.close()
