# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from tests.support import ApiTestCase


class TestFoodsApi(ApiTestCase):
    @classmethod
    def setUpClass(cls) -> None:
        super().setUpClass()
        resp = cls.client.post(
            "/api/auth/signup",
            json={"name": "Foods", "email": "foods@example.com", "password": "password123"},
        )
        cls.headers = {"Authorization": f"Bearer {resp.json()['token']}"}

    def test_search_is_case_insensitive_substring(self) -> None:
        self.create_food(self.headers, "Cauliflower Rice", category="VEGETABLES", calories=25)
        self.create_food(self.headers, "White Rice", category="GRAINS", calories=130)
        self.create_food(self.headers, "Oat Milk", category="BEVERAGES", calories=45)

        resp = self.client.get("/api/foods", params={"search": "RICE"}, headers=self.headers)
        self.assertEqual(resp.status_code, 200)
        payload = resp.json()
        self.assertEqual([f["name"] for f in payload["foods"]], ["Cauliflower Rice", "White Rice"])
        self.assertEqual(payload["total"], 2)
        self.assertEqual(payload["totalPages"], 1)
        self.assertEqual(payload["currentPage"], 1)

        resp = self.client.get(
            "/api/foods",
            params={"search": "rice", "category": "GRAINS"},
            headers=self.headers,
        )
        self.assertEqual([f["name"] for f in resp.json()["foods"]], ["White Rice"])

    def test_pagination(self) -> None:
        for idx in range(5):
            self.create_food(self.headers, f"Paged Snack {idx}", category="SNACKS", calories=idx)

        resp = self.client.get(
            "/api/foods",
            params={"search": "paged snack", "page": 2, "limit": 2},
            headers=self.headers,
        )
        payload = resp.json()
        self.assertEqual([f["name"] for f in payload["foods"]], ["Paged Snack 2", "Paged Snack 3"])
        self.assertEqual(payload["total"], 5)
        self.assertEqual(payload["totalPages"], 3)
        self.assertEqual(payload["currentPage"], 2)

    def test_create_food_validation(self) -> None:
        bad = {"name": "Bad", "servingSize": 100, "servingSizeUnit": "g", "nutrients": {"sodium": -1}}
        resp = self.client.post("/api/foods", json=bad, headers=self.headers)
        self.assertEqual(resp.status_code, 400)

        bad = {"name": "Bad", "servingSize": 0, "servingSizeUnit": "g"}
        resp = self.client.post("/api/foods", json=bad, headers=self.headers)
        self.assertEqual(resp.status_code, 400)

        resp = self.client.get("/api/foods", params={"category": "CANDY"}, headers=self.headers)
        self.assertEqual(resp.status_code, 400)

    def test_created_food_shape(self) -> None:
        food = self.create_food(self.headers, "Egg White", category="PROTEIN", protein=11, sodium=166)
        self.assertEqual(food["category"], "PROTEIN")
        self.assertEqual(food["nutrients"]["protein"], 11)
        self.assertEqual(food["nutrients"]["potassium"], 0)
        self.assertTrue(food["isKidneyFriendly"])
        self.assertTrue(food["id"])


class TestSeededCatalog(ApiTestCase):
    seed_foods = True

    def test_sample_foods_present(self) -> None:
        headers = self.signup("seed@example.com")
        resp = self.client.get("/api/foods", headers=headers)
        names = [f["name"] for f in resp.json()["foods"]]
        self.assertEqual(names, ["Broccoli", "Brown Rice", "Grilled Chicken Breast"])

    def test_seed_is_skipped_when_catalog_not_empty(self) -> None:
        from ckd_diet.foods.seed import seed_foods

        self.assertEqual(seed_foods(), 0)


class TestMealsApi(ApiTestCase):
    def setUp(self) -> None:
        self.headers = self.signup(f"meals-{self.id()}@example.com")
        self.food = self.create_food(self.headers, "Chicken", protein=31, calories=165)
        self.other_food = self.create_food(self.headers, "Rice", protein=2.7, calories=130)

    def test_create_and_list(self) -> None:
        first = self.create_meal(self.headers, "Breakfast", [(self.food["id"], 1)])
        second = self.create_meal(self.headers, "Lunch", [(self.food["id"], 1.5), (self.other_food["id"], 1)], 250)

        self.assertEqual(second["waterIntake"], 250)
        self.assertEqual([f["quantity"] for f in second["foods"]], [1.5, 1])
        self.assertEqual(second["foods"][0]["food"]["name"], "Chicken")

        resp = self.client.get("/api/meals", headers=self.headers)
        self.assertEqual([m["id"] for m in resp.json()], [second["id"], first["id"]])

    def test_unknown_food_is_404(self) -> None:
        resp = self.client.post(
            "/api/meals",
            json={"name": "Ghost", "foods": [{"foodId": "missing", "quantity": 1}]},
            headers=self.headers,
        )
        self.assertEqual(resp.status_code, 404)

    def test_quantity_must_be_positive(self) -> None:
        resp = self.client.post(
            "/api/meals",
            json={"name": "Zero", "foods": [{"foodId": self.food["id"], "quantity": 0}]},
            headers=self.headers,
        )
        self.assertEqual(resp.status_code, 400)

    def test_update_and_append(self) -> None:
        meal = self.create_meal(self.headers, "Dinner", [(self.food["id"], 1)])

        resp = self.client.put(
            f"/api/meals/{meal['id']}",
            json={"waterIntake": 300, "timeOfDay": "dinner"},
            headers=self.headers,
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        updated = resp.json()["meal"]
        self.assertEqual(updated["name"], "Dinner")
        self.assertEqual(updated["waterIntake"], 300)
        self.assertEqual(updated["timeOfDay"], "dinner")

        resp = self.client.post(
            f"/api/meals/{meal['id']}/foods",
            json={"foodId": self.other_food["id"], "quantity": 2},
            headers=self.headers,
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual([f["foodId"] for f in resp.json()["meal"]["foods"]], [self.food["id"], self.other_food["id"]])

    def test_other_users_meal_is_hidden(self) -> None:
        meal = self.create_meal(self.headers, "Mine", [(self.food["id"], 1)])
        other = self.signup(f"other-{self.id()}@example.com")

        self.assertEqual(self.client.put(f"/api/meals/{meal['id']}", json={"name": "x"}, headers=other).status_code, 404)
        self.assertEqual(self.client.delete(f"/api/meals/{meal['id']}", headers=other).status_code, 404)
        resp = self.client.post(
            f"/api/meals/{meal['id']}/foods",
            json={"foodId": self.food["id"], "quantity": 1},
            headers=other,
        )
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(self.client.get("/api/meals", headers=other).json(), [])

    def test_delete(self) -> None:
        meal = self.create_meal(self.headers, "Snack", [])
        resp = self.client.delete(f"/api/meals/{meal['id']}", headers=self.headers)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(self.client.delete(f"/api/meals/{meal['id']}", headers=self.headers).status_code, 404)


if __name__ == "__main__":
    unittest.main()
