"""Tests for the HTTP API."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

CHICKEN = {
    "name": "Chicken Breast",
    "type": "solid",
    "category": "meat",
    "kcals_per_100": 165,
    "protein_per_100": 31,
    "fats_per_100": 3.6,
}
OLIVE_OIL = {
    "name": "Olive Oil",
    "type": "liquid",
    "category": "oils",
    "kcals_per_100": 884,
    "fats_per_100": 100,
}


def _create_salad(client: TestClient) -> dict:
    chicken = client.post("/ingredients", json=CHICKEN).json()
    oil = client.post("/ingredients", json=OLIVE_OIL).json()
    food = client.post(
        "/foods", json={"name": "Grilled Chicken Salad", "portion_name": "Plate"}
    ).json()
    client.post(
        f"/foods/{food['id']}/ingredients",
        json={"ingredient_id": chicken["id"], "amount": 200},
    )
    response = client.post(
        f"/foods/{food['id']}/ingredients",
        json={"ingredient_id": oil["id"], "amount": 10},
    )
    return response.json()


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_ingredient_crud(client: TestClient) -> None:
    created = client.post("/ingredients", json=CHICKEN)
    assert created.status_code == 201
    ingredient_id = created.json()["id"]

    updated = client.put(f"/ingredients/{ingredient_id}", json={"name": "Thigh"})
    assert updated.json()["name"] == "Thigh"
    assert updated.json()["protein_per_100"] == 31

    listed = client.get("/ingredients", params={"q": "thi"})
    assert [item["id"] for item in listed.json()] == [ingredient_id]

    assert client.delete(f"/ingredients/{ingredient_id}").status_code == 204
    assert client.get(f"/ingredients/{ingredient_id}").status_code == 404


def test_ingredients_grouped_by_category(client: TestClient) -> None:
    client.post("/ingredients", json=OLIVE_OIL)
    client.post("/ingredients", json=CHICKEN)

    response = client.get("/ingredients/grouped")

    assert list(response.json()) == ["meat", "oils"]


def test_negative_density_is_rejected(client: TestClient) -> None:
    response = client.post("/ingredients", json={**CHICKEN, "kcals_per_100": -1})

    assert response.status_code == 422


def test_food_totals_from_ingredients(client: TestClient) -> None:
    food = _create_salad(client)

    assert len(food["ingredients"]) == 2
    assert food["totals"]["kcals"] == pytest.approx(418.4)
    assert food["totals"]["protein"] == pytest.approx(62)
    assert food["totals"]["fats"] == pytest.approx(17.2)


def test_food_errors_map_to_status_codes(client: TestClient) -> None:
    food = _create_salad(client)
    ingredient_id = food["ingredients"][0]["ingredient"]["id"]

    bad_amount = client.post(
        f"/foods/{food['id']}/ingredients",
        json={"ingredient_id": ingredient_id, "amount": 0},
    )
    bad_index = client.delete(f"/foods/{food['id']}/ingredients/5")
    bad_portion = client.put(f"/foods/{food['id']}", json={"portion_size": 0})
    missing = client.get(f"/foods/{uuid4()}")

    assert bad_amount.status_code == 422
    assert bad_index.status_code == 404
    assert bad_portion.status_code == 422
    assert missing.status_code == 404
    assert "not found" in missing.json()["detail"]


def test_food_update_and_manual_macros(client: TestClient) -> None:
    food = _create_salad(client)

    manual = client.put(
        f"/foods/{food['id']}",
        json={"manual_macros": {"kcals": 500, "protein": 40}},
    ).json()
    assert manual["totals"]["kcals"] == 500
    assert manual["name"] == "Grilled Chicken Salad"

    cleared = client.put(f"/foods/{food['id']}", json={"manual_macros": None}).json()
    assert cleared["manual_macros"] is None
    assert cleared["totals"]["kcals"] == pytest.approx(418.4)


def test_diary_flow(client: TestClient) -> None:
    food = _create_salad(client)
    client.put(
        "/goals",
        json={"kcals": 2000, "protein": 100, "carbs": 250, "fats": 70, "sugars": 50},
    )

    logged = client.post(
        "/diary",
        json={
            "logged_at": "2024-05-01T12:30:00Z",
            "meal_type": "lunch",
            "food_id": food["id"],
            "portion_size": 0.5,
        },
    )
    quick = client.post(
        "/diary/quick-add",
        json={
            "logged_at": "2024-05-01T20:00:00Z",
            "meal_type": "snacks",
            "name": "Yogurt",
            "macros": {"kcals": 100, "protein": 10, "sugars": 8},
            "servings": 2,
        },
    )
    client.post(
        "/diary/quick-add",
        json={
            "logged_at": "2024-05-02T08:00:00Z",
            "meal_type": "breakfast",
            "name": "Toast",
            "macros": {"kcals": 150},
        },
    )

    assert logged.status_code == 201
    assert logged.json()["totals"]["kcals"] == pytest.approx(209.2)
    assert quick.status_code == 201

    day = client.get("/diary", params={"date": "2024-05-01"}).json()
    assert [entry["food"]["name"] for entry in day] == [
        "Grilled Chicken Salad",
        "Yogurt",
    ]
    snacks = client.get("/diary", params={"date": "2024-05-01", "meal_type": "snacks"})
    assert [entry["id"] for entry in snacks.json()] == [quick.json()["id"]]

    summary = client.get("/diary/summary", params={"date": "2024-05-01"}).json()
    assert summary["totals"]["kcals"] == pytest.approx(409.2)
    assert summary["progress"]["protein"]["percent"] == 51
    assert list(summary["meals"]) == ["breakfast", "lunch", "dinner", "snacks"]
    assert summary["meals"]["breakfast"] == []

    breakdown = client.get(
        "/diary/breakdown", params={"date": "2024-05-01", "macro": "protein"}
    ).json()
    assert breakdown == [
        {"food_name": "Grilled Chicken Salad", "value": pytest.approx(31)},
        {"food_name": "Yogurt", "value": pytest.approx(20)},
    ]

    assert client.delete(f"/diary/{quick.json()['id']}").status_code == 204
    assert client.delete(f"/diary/{quick.json()['id']}").status_code == 404
    assert len(client.get("/diary", params={"date": "2024-05-01"}).json()) == 1


def test_diary_rejects_zero_portion(client: TestClient) -> None:
    food = _create_salad(client)

    response = client.post(
        "/diary",
        json={
            "logged_at": "2024-05-01T12:30:00Z",
            "meal_type": "lunch",
            "food_id": food["id"],
            "portion_size": 0,
        },
    )

    assert response.status_code == 422
    assert client.get("/diary", params={"date": "2024-05-01"}).json() == []


def test_goals_round_trip(client: TestClient) -> None:
    goals = {"kcals": 1800, "protein": 120, "carbs": 180, "fats": 60, "sugars": 30}

    assert client.put("/goals", json=goals).json() == goals
    assert client.get("/goals").json() == goals


@pytest.mark.parametrize(
    ("kcals", "servings"), [("100", "NaN"), ("Infinity", "1"), ("100", "Infinity")]
)
def test_quick_add_rejects_non_finite_numbers(
    client: TestClient, kcals: str, servings: str
) -> None:
    body = (
        '{"logged_at": "2024-05-01T20:00:00Z", "meal_type": "snacks",'
        f' "name": "Yogurt", "macros": {{"kcals": {kcals}}}, "servings": {servings}}}'
    )

    response = client.post(
        "/diary/quick-add", content=body, headers={"content-type": "application/json"}
    )

    assert response.status_code == 422
    summary = client.get("/diary/summary", params={"date": "2024-05-01"})
    assert summary.status_code == 200
    assert summary.json()["totals"]["kcals"] == 0


def test_food_quantities_must_be_finite(client: TestClient) -> None:
    food = _create_salad(client)
    ingredient_id = food["ingredients"][0]["ingredient"]["id"]
    json_headers = {"content-type": "application/json"}

    bad_amount = client.post(
        f"/foods/{food['id']}/ingredients",
        content=f'{{"ingredient_id": "{ingredient_id}", "amount": Infinity}}',
        headers=json_headers,
    )
    bad_portion = client.put(
        f"/foods/{food['id']}",
        content='{"portion_size": NaN}',
        headers=json_headers,
    )
    bad_create = client.post(
        "/foods",
        content='{"name": "Air", "portion_size": -Infinity}',
        headers=json_headers,
    )

    assert bad_amount.status_code == 422
    assert bad_portion.status_code == 422
    assert bad_create.status_code == 422
    stored = client.get(f"/foods/{food['id']}").json()
    assert stored["portion_size"] == food["portion_size"]
    assert len(stored["ingredients"]) == 2
