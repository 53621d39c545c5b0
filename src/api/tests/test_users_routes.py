"""Tests for /users routes, including the login guard."""

import unittest
from fastapi.testclient import TestClient

from api.dependencies import get_message_repo, get_user_repo
from api.main import app
from api.security import create_access_token
from adapter.bcrypt.password_hasher import BcryptPasswordHasher
from adapter.fake.message_repository import FakeMessageRepository
from adapter.fake.user_repository import FakeUserRepository
from services import auth_service, message_service
from utils.settings import Settings, get_settings

TEST_SETTINGS = Settings(jwt_secret_key="test-secret", bcrypt_rounds=4)


class TestUsersRoutes(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)
        self.users = FakeUserRepository()
        self.messages = FakeMessageRepository(self.users)
        hasher = BcryptPasswordHasher(rounds=4)
        auth_service.register(self.users, hasher, "bob", "secret2", "Bob", "B", "555-0101")
        auth_service.register(self.users, hasher, "alice", "secret1", "Alice", "A", "555-0100")
        self.message = message_service.send_message(self.users, self.messages, "alice", "bob", "hi")

        app.dependency_overrides[get_user_repo] = lambda: self.users
        app.dependency_overrides[get_message_repo] = lambda: self.messages
        app.dependency_overrides[get_settings] = lambda: TEST_SETTINGS
        token = create_access_token("alice", TEST_SETTINGS)
        self.headers = {"Authorization": f"Bearer {token}"}

    def tearDown(self):
        app.dependency_overrides.clear()

    def test_requires_token(self):
        for path in ("/users", "/users/alice", "/users/alice/to", "/users/alice/from"):
            self.assertEqual(self.client.get(path).status_code, 401, path)

    def test_rejects_token_signed_with_other_secret(self):
        forged = create_access_token("alice", Settings(jwt_secret_key="other-secret"))
        response = self.client.get("/users", headers={"Authorization": f"Bearer {forged}"})
        self.assertEqual(response.status_code, 401)

    def test_list_users_ordered(self):
        response = self.client.get("/users", headers=self.headers)

        self.assertEqual(response.status_code, 200)
        users = response.json()["users"]
        self.assertEqual([u["username"] for u in users], ["alice", "bob"])
        self.assertEqual(set(users[0]), {"username", "first_name", "last_name", "phone"})

    def test_get_user_detail(self):
        response = self.client.get("/users/alice", headers=self.headers)

        self.assertEqual(response.status_code, 200)
        user = response.json()["user"]
        self.assertEqual(user["first_name"], "Alice")
        self.assertIn("join_at", user)
        self.assertIn("last_login_at", user)
        self.assertNotIn("password_hash", user)

    def test_get_unknown_user_returns_404(self):
        response = self.client.get("/users/nobody", headers=self.headers)
        self.assertEqual(response.status_code, 404)

    def test_messages_from(self):
        response = self.client.get("/users/alice/from", headers=self.headers)

        messages = response.json()["messages"]
        self.assertEqual(len(messages), 1)
        self.assertEqual(messages[0]["id"], self.message.id)
        self.assertEqual(messages[0]["body"], "hi")
        self.assertIsNone(messages[0]["read_at"])
        self.assertEqual(messages[0]["to_user"]["username"], "bob")

    def test_messages_to(self):
        response = self.client.get("/users/bob/to", headers=self.headers)

        messages = response.json()["messages"]
        self.assertEqual(len(messages), 1)
        self.assertEqual(messages[0]["from_user"]["username"], "alice")

    def test_messages_for_unknown_user_are_empty(self):
        self.assertEqual(self.client.get("/users/nobody/to", headers=self.headers).json(), {"messages": []})
        self.assertEqual(self.client.get("/users/nobody/from", headers=self.headers).json(), {"messages": []})


if __name__ == '__main__':
    unittest.main()
