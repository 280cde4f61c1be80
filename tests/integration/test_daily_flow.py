from fastapi.testclient import TestClient


def test_category_and_task_lifecycle(test_client: TestClient) -> None:
    """Walk a task through a day: categorize, complete, delete."""
    response = test_client.post(
        "/api/categories", json={"name": "Work", "color": "#ff0000"}
    )
    assert response.status_code == 201
    category_id = response.json()["id"]

    response = test_client.post(
        "/api/tasks",
        json={"text": "Write report", "date": "2024-01-15", "categoryId": category_id},
    )
    assert response.status_code == 201
    task = response.json()
    assert task["completed"] is False
    assert task["priority"] == "medium"
    assert task["order"] == 0
    assert task["categoryId"] == category_id

    response = test_client.get("/api/tasks", params={"date": "2024-01-15"})
    assert response.status_code == 200
    assert response.json() == [task]

    response = test_client.patch(f"/api/tasks/{task['id']}", json={"completed": True})
    assert response.status_code == 200

    response = test_client.get("/api/tasks", params={"date": "2024-01-15"})
    [fetched] = response.json()
    assert fetched["completed"] is True

    response = test_client.delete(f"/api/tasks/{task['id']}")
    assert response.status_code == 204

    response = test_client.get("/api/tasks", params={"date": "2024-01-15"})
    assert response.json() == []

