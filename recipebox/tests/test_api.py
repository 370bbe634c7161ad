"""
Tests for Recipebox API ViewSet (recipebox.api.views).

Verifies the HTTP contract for /recipes: list, create, retrieve,
update and delete, including status codes and JSON bodies.
"""

import pytest

pytestmark = pytest.mark.urls("recipebox.tests.test_api_urls")

from rest_framework.test import APIClient, APIRequestFactory

from recipebox.api.views import RecipeViewSet
from recipebox.conf import get_store, reset_store
from recipebox.store import RecipeStore

MILKSHAKE = ["2 tbsp cocoa", "2 cups vanilla ice cream", "1 cup milk"]


# ═══════════════════════════════════════════════════════════════════
# Fixtures
# ═══════════════════════════════════════════════════════════════════


@pytest.fixture(autouse=True)
def fresh_store():
    reset_store()
    yield
    reset_store()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def first_recipe(api_client):
    return api_client.get("/recipes").json()[0]


# ═══════════════════════════════════════════════════════════════════
# GET /recipes
# ═══════════════════════════════════════════════════════════════════


class TestRecipeList:
    """Tests for listing recipes."""

    def test_list_recipes(self, api_client):
        """GET /recipes returns the seeded recipes as a JSON array."""
        response = api_client.get("/recipes")

        assert response.status_code == 200
        assert response["Content-Type"] == "application/json"

        body = response.json()
        assert isinstance(body, list)
        assert len(body) >= 1
        for item in body:
            assert isinstance(item, dict)
            assert {"id", "name", "ingredients"} <= set(item)
            assert isinstance(item["ingredients"], list)

    def test_list_is_stable_without_mutation(self, api_client):
        """Listing twice returns identical content."""
        first = api_client.get("/recipes").json()
        second = api_client.get("/recipes").json()

        assert first == second

    def test_new_recipe_is_listed_last(self, api_client):
        """Created recipes are appended in insertion order."""
        created = api_client.post(
            "/recipes", {"name": "toast", "ingredients": ["bread"]}, format="json"
        ).json()

        body = api_client.get("/recipes").json()

        assert body[-1] == created


# ═══════════════════════════════════════════════════════════════════
# POST /recipes
# ═══════════════════════════════════════════════════════════════════


class TestRecipeCreate:
    """Tests for creating recipes."""

    def test_create_recipe(self, api_client):
        """POST /recipes returns 201 and the recipe plus its new id."""
        new_item = {"name": "milkshake", "ingredients": MILKSHAKE}

        response = api_client.post("/recipes", new_item, format="json")

        assert response.status_code == 201
        assert response["Content-Type"] == "application/json"
        body = response.json()
        assert body["id"] is not None
        assert body == {**new_item, "id": body["id"]}

    def test_create_missing_name_returns_400(self, api_client):
        """POST without name is rejected and nothing is stored."""
        before = len(api_client.get("/recipes").json())

        response = api_client.post(
            "/recipes", {"ingredients": MILKSHAKE}, format="json"
        )

        assert response.status_code == 400
        assert "name" in response.json()
        assert len(api_client.get("/recipes").json()) == before

    def test_create_blank_name_returns_400(self, api_client):
        response = api_client.post(
            "/recipes", {"name": "   ", "ingredients": []}, format="json"
        )

        assert response.status_code == 400

    def test_create_without_ingredients(self, api_client):
        """Ingredients default to an empty list."""
        response = api_client.post("/recipes", {"name": "water"}, format="json")

        assert response.status_code == 201
        assert response.json()["ingredients"] == []

    def test_create_assigns_distinct_ids(self, api_client):
        ids = {
            api_client.post("/recipes", {"name": f"dish {i}"}, format="json").json()["id"]
            for i in range(5)
        }

        assert len(ids) == 5

    def test_create_ignores_client_supplied_id(self, api_client):
        """The id is assigned by the store, never by the caller."""
        response = api_client.post(
            "/recipes", {"id": "mine", "name": "toast"}, format="json"
        )

        assert response.status_code == 201
        assert response.json()["id"] != "mine"

    def test_create_keeps_name_verbatim(self, api_client):
        """Surrounding whitespace is not trimmed from the name."""
        new_item = {"name": " milkshake ", "ingredients": [" 1 cup milk "]}

        response = api_client.post("/recipes", new_item, format="json")

        assert response.status_code == 201
        body = response.json()
        assert body == {**new_item, "id": body["id"]}

    def test_create_non_string_name_returns_400(self, api_client):
        before = api_client.get("/recipes").json()

        response = api_client.post("/recipes", {"name": 42}, format="json")

        assert response.status_code == 400
        assert "name" in response.json()
        assert api_client.get("/recipes").json() == before

    def test_create_non_string_ingredients_returns_400(self, api_client):
        response = api_client.post(
            "/recipes", {"name": "x", "ingredients": [1, 2]}, format="json"
        )

        assert response.status_code == 400
        assert "ingredients" in response.json()


# ═══════════════════════════════════════════════════════════════════
# GET /recipes/{id}
# ═══════════════════════════════════════════════════════════════════


class TestRecipeRetrieve:
    """Tests for fetching a single recipe."""

    def test_retrieve_recipe(self, api_client, first_recipe):
        response = api_client.get(f"/recipes/{first_recipe['id']}")

        assert response.status_code == 200
        assert response.json() == first_recipe

    def test_retrieve_unknown_returns_404(self, api_client):
        response = api_client.get("/recipes/does-not-exist")

        assert response.status_code == 404
        assert response.json()["code"] == "RECIPE_NOT_FOUND"


# ═══════════════════════════════════════════════════════════════════
# PUT /recipes/{id}
# ═══════════════════════════════════════════════════════════════════


class TestRecipeUpdate:
    """Tests for replacing recipes."""

    def test_update_recipe(self, api_client, first_recipe):
        """PUT returns 200 and a body equal to the submitted payload."""
        update_data = {
            "id": first_recipe["id"],
            "name": "foo",
            "ingredients": MILKSHAKE,
        }

        response = api_client.put(
            f"/recipes/{update_data['id']}", update_data, format="json"
        )

        assert response.status_code == 200
        assert response["Content-Type"] == "application/json"
        assert response.json() == update_data

    def test_update_is_persisted(self, api_client, first_recipe):
        api_client.put(
            f"/recipes/{first_recipe['id']}",
            {"name": "foo", "ingredients": ["bar"]},
            format="json",
        )

        listed = api_client.get("/recipes").json()[0]

        assert listed == {"id": first_recipe["id"], "name": "foo", "ingredients": ["bar"]}

    def test_update_without_body_id(self, api_client, first_recipe):
        """The id may be omitted from the body; the URL id is kept."""
        response = api_client.put(
            f"/recipes/{first_recipe['id']}", {"name": "foo"}, format="json"
        )

        assert response.status_code == 200
        assert response.json() == {
            "id": first_recipe["id"],
            "name": "foo",
            "ingredients": [],
        }

    def test_update_unknown_returns_404(self, api_client):
        response = api_client.put(
            "/recipes/does-not-exist", {"name": "foo"}, format="json"
        )

        assert response.status_code == 404
        assert response.json()["code"] == "RECIPE_NOT_FOUND"

    def test_update_unknown_with_invalid_body_returns_404(self, api_client):
        """An unknown id wins over body errors, as in RecipeStore.update."""
        response = api_client.put(
            "/recipes/does-not-exist", {"ingredients": []}, format="json"
        )

        assert response.status_code == 404
        assert response.json()["code"] == "RECIPE_NOT_FOUND"

    def test_update_non_string_values_return_400(self, api_client, first_recipe):
        response = api_client.put(
            f"/recipes/{first_recipe['id']}",
            {"name": 42, "ingredients": [1]},
            format="json",
        )

        assert response.status_code == 400
        assert set(response.json()) == {"name", "ingredients"}
        assert api_client.get("/recipes").json()[0] == first_recipe

    def test_update_id_mismatch_returns_400(self, api_client, first_recipe):
        response = api_client.put(
            f"/recipes/{first_recipe['id']}",
            {"id": "other", "name": "foo"},
            format="json",
        )

        assert response.status_code == 400
        assert response.json()["code"] == "ID_MISMATCH"

    def test_update_missing_name_returns_400(self, api_client, first_recipe):
        response = api_client.put(
            f"/recipes/{first_recipe['id']}",
            {"ingredients": ["bar"]},
            format="json",
        )

        assert response.status_code == 400
        assert api_client.get("/recipes").json()[0] == first_recipe


# ═══════════════════════════════════════════════════════════════════
# DELETE /recipes/{id}
# ═══════════════════════════════════════════════════════════════════


class TestRecipeDelete:
    """Tests for deleting recipes."""

    def test_delete_recipe(self, api_client, first_recipe):
        response = api_client.delete(f"/recipes/{first_recipe['id']}")

        assert response.status_code == 204
        assert response.content == b""

        ids = [r["id"] for r in api_client.get("/recipes").json()]
        assert first_recipe["id"] not in ids

    def test_delete_unknown_returns_204(self, api_client):
        """Delete is idempotent: unknown ids succeed too."""
        before = api_client.get("/recipes").json()

        response = api_client.delete("/recipes/does-not-exist")

        assert response.status_code == 204
        assert api_client.get("/recipes").json() == before

    def test_delete_twice(self, api_client, first_recipe):
        url = f"/recipes/{first_recipe['id']}"

        assert api_client.delete(url).status_code == 204
        assert api_client.delete(url).status_code == 204


# ═══════════════════════════════════════════════════════════════════
# Store injection
# ═══════════════════════════════════════════════════════════════════


class TestStoreInjection:
    """The ViewSet uses an injected store instead of the global one."""

    def test_injected_store_is_used(self):
        store = RecipeStore([{"name": "toast", "ingredients": ["bread"]}])
        view = RecipeViewSet.as_view({"get": "list", "post": "create"}, store=store)
        factory = APIRequestFactory()

        response = view(factory.get("/recipes"))

        assert response.status_code == 200
        assert [r["name"] for r in response.data] == ["toast"]

    def test_injected_store_isolated_from_global(self):
        store = RecipeStore()
        view = RecipeViewSet.as_view({"post": "create"}, store=store)
        factory = APIRequestFactory()

        response = view(
            factory.post("/recipes", {"name": "soup"}, format="json")
        )

        assert response.status_code == 201
        assert len(store) == 1
        assert response.data["id"] not in get_store()
