"""Tests for the HTTP endpoints."""

from fastapi.testclient import TestClient

from food_advisor.api.app import create_app
from food_advisor.domain.errors import UpstreamUnavailableError
from tests.conftest import PNG_BASE64, recipe_record


def test_health_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/api/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["services"]["recipeDB"] == "Foodoscope API"
    assert "timestamp" in data


def test_supported_foods_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/api/supported-foods")

    assert response.status_code == 200
    assert len(response.json()["foods"]) == 20


def test_detect_food_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/api/detect-food", json={"image": PNG_BASE64})

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["mappedFood"] == "samosa"
    assert data["confidence"] == 91
    assert data["isKnown"] is True
    assert data["allPredictions"][0] == {"label": "samosa", "confidence": 91}


def test_detect_food_requires_image(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/api/detect-food", json={})

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request"


def test_detect_food_rejects_bad_image(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/api/detect-food", json={"image": "not base64!!"})

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid image"


def test_detect_food_reports_detection_failures(container, vision_client) -> None:
    vision_client.predictions = []
    client = TestClient(create_app(container))

    response = client.post("/api/detect-food", json={"image": PNG_BASE64})

    assert response.status_code == 500
    data = response.json()
    assert data["error"] == "Food detection failed"
    assert len(data["supportedFoods"]) == 20


def test_analyze_food_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/analyze-food", json={"foodName": "samosa", "goal": "weight_loss"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["detectedFood"] == "samosa"
    assert data["recipe"]["title"] == "Punjabi Samosa"
    assert data["nutrition"]["calories"] == 308
    assert isinstance(data["healthScore"], int)
    assert data["healthLabel"] in {"Excellent", "Good", "Moderate", "Poor"}
    assert data["suitability"]["suitable"] is False
    assert data["suitability"]["goal"] == "Weight Loss"
    assert [alt["name"] for alt in data["alternatives"]] == [
        "steamed momos",
        "baked samosa",
    ]
    assert data["flavorData"]["query"] == "samosa"


def test_analyze_food_unknown_returns_404(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/api/analyze-food", json={"foodName": "quokka"})

    assert response.status_code == 404
    data = response.json()
    assert data["error"] == "Food not found"
    assert data["message"].startswith('"quokka" is not in our database.')
    assert "samosa" in data["supportedFoods"]


def test_analyze_food_requires_food_name(container) -> None:
    client = TestClient(create_app(container))

    missing = client.post("/api/analyze-food", json={"goal": "weight_loss"})
    blank = client.post("/api/analyze-food", json={"foodName": "   "})

    assert missing.status_code == 400
    assert blank.status_code == 400


def test_unexpected_errors_return_500(container, recipedb_client) -> None:
    recipedb_client.failures["search_by_title"] = RuntimeError("boom")
    client = TestClient(create_app(container), raise_server_exceptions=False)

    response = client.post("/api/analyze-food", json={"foodName": "samosa"})

    assert response.status_code == 500
    assert response.json() == {
        "error": "Internal error",
        "message": "An unexpected error occurred.",
    }


def test_search_endpoint_falls_back_to_samples(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/api/recipes/search", params={"q": "pizza"})

    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 1
    assert data["recipes"][0]["title"] == "Margherita Pizza"
    assert data["recipes"][0]["source"] == "Local JSON"


def test_search_endpoint_uses_api(container, recipedb_client) -> None:
    recipedb_client.payloads["search_by_title"] = {"data": [recipe_record()]}
    client = TestClient(create_app(container))

    response = client.get(
        "/api/recipes/search", params={"q": "samosa", "page": 1, "limit": 10}
    )

    data = response.json()
    assert data["recipes"][0]["id"] == "9001"
    assert data["recipes"][0]["calories"] == 300


def test_search_endpoint_requires_query(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/api/recipes/search")

    assert response.status_code == 400
    assert response.json() == {"error": 'Query parameter "q" is required'}


def test_method_search_endpoint(container, recipedb_client) -> None:
    recipedb_client.failures["search_by_method"] = UpstreamUnavailableError("down")
    client = TestClient(create_app(container))

    response = client.get("/api/recipes/method/bake")

    assert response.status_code == 200
    assert [r["id"] for r in response.json()["recipes"]] == ["2613"]


def test_recipe_detail_endpoints(container) -> None:
    client = TestClient(create_app(container))

    nutrition = client.get("/api/recipes/2610/nutrition").json()
    instructions = client.get("/api/recipes/2610/instructions").json()
    utensils = client.get("/api/recipes/2610/utensils").json()
    processes = client.get("/api/recipes/2610/processes").json()
    ingredients = client.get("/api/recipes/2610/ingredients-categories").json()

    assert nutrition["success"] is True
    assert nutrition["nutrition"]["Energy (kcal)"] == "1040"
    assert instructions["instructions"][0] == "Step 1: Soak"
    assert utensils["utensils"] == ["griddle", "ladle", "blender"]
    assert processes["processes"][-1] == "cook"
    assert ingredients["ingredients"][0] == {
        "name": "rice",
        "category": None,
        "quantity": None,
    }


def test_recipe_detail_endpoints_report_missing_data(container) -> None:
    client = TestClient(create_app(container))

    taste = client.get("/api/recipes/9999/taste")
    utensils = client.get("/api/recipes/9999/utensils")

    assert taste.status_code == 200
    assert taste.json()["success"] is False
    assert taste.json()["message"] == "No taste profile available for recipe 9999"
    assert utensils.json()["utensils"] == []


def test_recipe_details_endpoint(container, recipedb_client) -> None:
    recipedb_client.failures["get_flavor"] = RuntimeError("unexpected")
    client = TestClient(create_app(container))

    response = client.get("/api/recipes/2612/details")

    assert response.status_code == 200
    details = response.json()["details"]
    assert details["recipe_id"] == "2612"
    assert details["flavor"] is None
    assert details["processes"] == ["marinate", "toss", "grill"]


def test_health_intel_endpoint(container) -> None:
    client = TestClient(create_app(container))

    missing_title = client.get("/api/recipes/1/health-intel")
    unknown = client.get("/api/recipes/1/health-intel", params={"title": "quokka"})
    known = client.get(
        "/api/recipes/1/health-intel",
        params={"title": "Garden Salad", "goal": "weight_loss"},
    )

    assert missing_title.status_code == 400
    assert unknown.json() == {"success": False, "message": "No health data available"}
    data = known.json()
    assert data["success"] is True
    assert data["healthScore"] == 84
    assert data["suitability"]["suitable"] is True
    assert len(data["alternatives"]) == 3


def test_precision_health_endpoint(container) -> None:
    client = TestClient(create_app(container))

    known = client.get("/api/recipes/2612/precision-health").json()
    unknown = client.get("/api/recipes/9999/precision-health").json()

    assert known["success"] is True
    assert known["category"] == "Very Healthy"
    assert known["perServing"]["calories"] == 320
    assert "High Protein" in known["benefits"]
    assert unknown == {
        "success": False,
        "message": "Nutrition data unavailable for scoring",
    }
