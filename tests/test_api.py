"""HTTP API tests.

Test Categories:
- Health and registration
- Recommendations and error mapping
- Task generation, completion and progress
- Vaccinations and calendar
"""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from babymind.main import app

BIRTH_DATE = "2023-11-25"  # 200 days before 2024-06-12
ON = "2024-06-12"
AT = "2024-06-12T10:00:00"


@pytest.fixture
def client() -> Iterator[TestClient]:
    with TestClient(app) as client:
        yield client


@pytest.fixture
def baby_id(client: TestClient) -> str:
    response = client.post("/babies", json={"name": "Deniz", "birth_date": BIRTH_DATE, "gender": "female"})
    assert response.status_code == 201
    return response.json()["baby_id"]


# =============================================================================
# Test Class: basics
# =============================================================================


class TestBasics:
    def test_health(self, client: TestClient) -> None:
        assert client.get("/health").json() == {"status": "ok"}

    def test_age(self, client: TestClient, baby_id: str) -> None:
        body = client.get(f"/babies/{baby_id}/age", params={"on": ON}).json()
        assert body["weeks"] == 28
        assert body["months"] == 6
        assert body["description"] == "6 months"

    def test_unknown_baby(self, client: TestClient) -> None:
        response = client.get("/babies/00000000-0000-0000-0000-000000000000/age")
        assert response.status_code == 404

    def test_invalid_birth_date(self, client: TestClient) -> None:
        assert client.post("/babies", json={"birth_date": "not-a-date"}).status_code == 422


# =============================================================================
# Test Class: recommendations
# =============================================================================


class TestRecommendations:
    def test_play_bucket(self, client: TestClient) -> None:
        body = client.get("/recommendations/play", params={"age_months": 4}).json()
        assert body["domain"] == "play"
        assert body["bundle"]["age_range_label"] == "3-6 months"
        assert body["bundle"]["activities"]

    def test_age_past_last_bucket(self, client: TestClient) -> None:
        body = client.get("/recommendations/vaccination", params={"age_months": 40}).json()
        assert body["bundle"]["name"] == "12 month vaccines"

    def test_unknown_domain(self, client: TestClient) -> None:
        assert client.get("/recommendations/astrology").status_code == 404


# =============================================================================
# Test Class: tasks
# =============================================================================


class TestTasks:
    def test_generate_once_per_day(self, client: TestClient, baby_id: str) -> None:
        first = client.post(f"/babies/{baby_id}/tasks/generate", params={"on": ON}).json()
        again = client.post(f"/babies/{baby_id}/tasks/generate", params={"on": ON}).json()
        assert len(first) == 4
        assert again == []
        assert len(client.get(f"/babies/{baby_id}/tasks").json()) == 4

    def test_complete_and_progress(self, client: TestClient, baby_id: str) -> None:
        tasks = client.post(f"/babies/{baby_id}/tasks/generate", params={"on": ON}).json()
        task = next(t for t in tasks if t["category"] == "milestone")

        progress = client.post(
            f"/babies/{baby_id}/tasks/{task['id']}/complete", params={"at": AT}
        ).json()
        assert progress["total_points"] == 25
        assert progress["achievements"] == ["First Step"]

        pending = client.get(f"/babies/{baby_id}/tasks", params={"pending": True}).json()
        assert task["id"] not in {t["id"] for t in pending}

        deleted = client.delete(f"/babies/{baby_id}/tasks/{task['id']}").json()
        assert deleted == {"deleted": True}
        body = client.get(f"/babies/{baby_id}/progress", params={"on": ON}).json()
        assert body["total_points"] == 25
        assert body["level"] == 1

    def test_toggle(self, client: TestClient, baby_id: str) -> None:
        task = client.post(f"/babies/{baby_id}/tasks/generate", params={"on": ON}).json()[0]
        url = f"/babies/{baby_id}/tasks/{task['id']}/toggle"
        assert client.post(url, params={"at": AT}).json()["completed_tasks"] == 1
        assert client.post(url, params={"at": AT}).json()["total_points"] == task["points"]


# =============================================================================
# Test Class: vaccinations and calendar
# =============================================================================


class TestVaccinationsAndCalendar:
    def test_upcoming_vaccinations(self, client: TestClient, baby_id: str) -> None:
        doses = client.get(f"/babies/{baby_id}/vaccinations/upcoming", params={"on": ON}).json()
        assert [d["recommended_age_months"] for d in doses] == [6, 6, 12]

    def test_calendar(self, client: TestClient) -> None:
        body = client.get("/calendar/2024/6").json()
        assert len(body["weeks"]) == 6
        assert body["weeks"][0][0] == "2024-05-27"

    def test_calendar_invalid_month(self, client: TestClient) -> None:
        assert client.get("/calendar/2024/13").status_code == 422
