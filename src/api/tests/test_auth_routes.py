"""Tests for /auth routes."""

import unittest
from fastapi.testclient import TestClient

from api.dependencies import get_password_hasher, get_user_repo
from api.main import app
from api.security import verify_token
from adapter.bcrypt.password_hasher import BcryptPasswordHasher
from adapter.fake.user_repository import FakeUserRepository
from utils.settings import Settings, get_settings

TEST_SETTINGS = Settings(jwt_secret_key="test-secret", bcrypt_rounds=4)

ALICE = {
    "username": "alice",
    "password": "secret1",
    "first_name": "Alice",
    "last_name": "A",
    "phone": "555-0100",
}


class AuthRoutesTestCase(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)
        self.repo = FakeUserRepository()
        app.dependency_overrides[get_user_repo] = lambda: self.repo
        app.dependency_overrides[get_password_hasher] = lambda: BcryptPasswordHasher(rounds=4)
        app.dependency_overrides[get_settings] = lambda: TEST_SETTINGS

    def tearDown(self):
        app.dependency_overrides.clear()


class TestRegister(AuthRoutesTestCase):

    def test_register_returns_token_for_username(self):
        response = self.client.post("/auth/register", json=ALICE)

        self.assertEqual(response.status_code, 201)
        token = response.json()["token"]
        self.assertEqual(verify_token(token, TEST_SETTINGS), "alice")
        self.assertIn("alice", self.repo.store)

    def test_register_response_has_no_password_material(self):
        response = self.client.post("/auth/register", json=ALICE)

        self.assertEqual(set(response.json()), {"token"})
        self.assertNotIn(self.repo.store["alice"].password_hash, response.text)

    def test_register_duplicate_returns_409(self):
        self.client.post("/auth/register", json=ALICE)
        response = self.client.post("/auth/register", json={**ALICE, "first_name": "Mallory"})

        self.assertEqual(response.status_code, 409)
        self.assertEqual(self.repo.store["alice"].first_name, "Alice")

    def test_register_missing_field_returns_422(self):
        response = self.client.post("/auth/register", json={"username": "alice", "password": "x"})
        self.assertEqual(response.status_code, 422)

    def test_register_over_long_password_returns_422(self):
        response = self.client.post("/auth/register", json={**ALICE, "password": "x" * 80})

        self.assertEqual(response.status_code, 422)
        self.assertEqual(self.repo.store, {})

    def test_register_password_at_limit_succeeds(self):
        response = self.client.post("/auth/register", json={**ALICE, "password": "x" * 72})
        self.assertEqual(response.status_code, 201)




class TestLogin(AuthRoutesTestCase):

    def setUp(self):
        super().setUp()
        self.client.post("/auth/register", json=ALICE)
        self.before = self.repo.store["alice"].last_login_at

    def test_login_success_updates_last_login(self):
        response = self.client.post("/auth/login", json={"username": "alice", "password": "secret1"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(verify_token(response.json()["token"], TEST_SETTINGS), "alice")
        self.assertGreater(self.repo.store["alice"].last_login_at, self.before)

    def test_login_wrong_password_returns_400(self):
        response = self.client.post("/auth/login", json={"username": "alice", "password": "wrong"})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"], "Invalid username or password")
        self.assertEqual(self.repo.store["alice"].last_login_at, self.before)

    def test_login_unknown_user_is_indistinguishable(self):
        wrong = self.client.post("/auth/login", json={"username": "alice", "password": "wrong"})
        unknown = self.client.post("/auth/login", json={"username": "nobody", "password": "secret1"})

        self.assertEqual(unknown.status_code, wrong.status_code)
        self.assertEqual(unknown.json(), wrong.json())

    def test_login_over_long_password_returns_400(self):
        response = self.client.post("/auth/login", json={"username": "alice", "password": "x" * 80})
        self.assertEqual(response.status_code, 400)


if __name__ == '__main__':
    unittest.main()
