MISSING_ID = "65a1f0c2b3d4e5f6a7b8c9d0"


def fetch(client, path, body, headers):
    return client.request("GET", f"/api/tasks/{path}", json=body, headers=headers)


def test_create_and_fetch_by_subject(client, auth_headers, task_payload):
    created = client.post("/api/tasks", json=task_payload, headers=auth_headers)
    assert created.status_code == 201
    assert created.json() == {"message": "Successful task creation"}

    response = fetch(client, "subject", {"subject": task_payload["subject"]}, auth_headers)
    assert response.status_code == 200
    data = response.json()["data"]
    for key in ("subject", "description", "status", "username"):
        assert data[key] == task_payload[key]
    assert len(data["id"]) == 24


def test_create_for_unknown_owner(client, auth_headers, task_payload):
    task_payload["username"] = "nobody"
    response = client.post("/api/tasks", json=task_payload, headers=auth_headers)

    assert response.status_code == 404
    assert response.json() == {"message": "User was not found"}


def test_duplicate_subject(client, auth_headers, task_payload):
    client.post("/api/tasks", json=task_payload, headers=auth_headers)
    response = client.post("/api/tasks", json=task_payload, headers=auth_headers)

    assert response.status_code == 409
    assert response.json() == {"message": "subject already exists"}


def test_validation_runs_before_authentication(client, task_payload):
    task_payload["subject"] = "too short"
    response = client.post("/api/tasks", json=task_payload)

    assert response.status_code == 400
    assert response.json()["errors"] == [{"message": "Subject must be at least 10 characters long"}]


def test_missing_body_is_validated_as_empty(client, auth_headers):
    response = client.request("DELETE", "/api/tasks", headers=auth_headers)

    assert response.status_code == 400
    assert len(response.json()["errors"]) == 3


def test_fetches_are_idempotent(client, auth_headers, task_payload):
    client.post("/api/tasks", json=task_payload, headers=auth_headers)

    by_status = [fetch(client, "status", {"status": "Pending"}, auth_headers).json() for _ in range(2)]
    by_username = [fetch(client, "username", {"username": "alice"}, auth_headers).json() for _ in range(2)]

    assert by_status[0] == by_status[1]
    assert by_username[0] == by_username[1]
    assert len(by_status[0]["data"]) == 1


def test_fetch_by_status_without_matches(client, auth_headers, task_payload):
    client.post("/api/tasks", json=task_payload, headers=auth_headers)
    response = fetch(client, "status", {"status": "Complete"}, auth_headers)

    assert response.status_code == 404
    assert response.json() == {"message": "Tasks were not found"}


def test_update_converges(client, auth_headers, task_payload):
    client.post("/api/tasks", json=task_payload, headers=auth_headers)
    task_id = client.get("/api/tasks", headers=auth_headers).json()["data"][0]["id"]

    for _ in range(2):
        response = client.put("/api/tasks", json={"id": task_id, "status": "Complete"}, headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"message": "Successful task update"}

    data = fetch(client, "subject", {"subject": task_payload["subject"]}, auth_headers).json()["data"]
    assert data["status"] == "Complete"
    assert data["description"] == task_payload["description"]


def test_update_missing_task(client, auth_headers):
    response = client.put("/api/tasks", json={"id": MISSING_ID, "status": "Complete"}, headers=auth_headers)

    assert response.status_code == 404
    assert response.json() == {"message": "Task was not found"}


def test_delete_task(client, auth_headers, task_payload):
    client.post("/api/tasks", json=task_payload, headers=auth_headers)
    task_id = client.get("/api/tasks", headers=auth_headers).json()["data"][0]["id"]

    response = client.request("DELETE", "/api/tasks", json={"id": task_id}, headers=auth_headers)
    assert response.status_code == 204
    assert response.content == b""

    assert client.get("/api/tasks", headers=auth_headers).status_code == 404


def test_delete_missing_task(client, auth_headers):
    response = client.request("DELETE", "/api/tasks", json={"id": MISSING_ID}, headers=auth_headers)

    assert response.status_code == 404
    assert response.json() == {"message": "Task was not found"}


def test_update_to_taken_subject(client, auth_headers, task_payload):
    client.post("/api/tasks", json=task_payload, headers=auth_headers)
    client.post("/api/tasks", json=dict(task_payload, subject="Plan the next sprint"), headers=auth_headers)
    second_id = fetch(client, "subject", {"subject": "Plan the next sprint"}, auth_headers).json()["data"]["id"]

    response = client.put(
        "/api/tasks",
        json={"id": second_id, "subject": task_payload["subject"]},
        headers=auth_headers,
    )

    assert response.status_code == 409
    assert response.json() == {"message": "subject already exists"}

    unchanged = fetch(client, "subject", {"subject": "Plan the next sprint"}, auth_headers)
    assert unchanged.json()["data"]["id"] == second_id
