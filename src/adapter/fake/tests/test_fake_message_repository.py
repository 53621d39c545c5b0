"""Unit tests for FakeMessageRepository joins."""

import unittest
from datetime import datetime, timezone

from adapter.fake.message_repository import FakeMessageRepository
from adapter.fake.user_repository import FakeUserRepository

NOW = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class TestFakeMessageRepository(unittest.TestCase):

    def setUp(self):
        self.users = FakeUserRepository()
        for name in ('alice', 'bob'):
            self.users.create(name, 'hash', name.title(), 'X', '555', NOW)
        self.repo = FakeMessageRepository(self.users)

    def test_create_assigns_unique_ids(self):
        a = self.repo.create('alice', 'bob', 'one', NOW)
        b = self.repo.create('alice', 'bob', 'two', NOW)
        self.assertNotEqual(a.id, b.id)
        self.assertEqual(self.repo.get_by_id(a.id).body, 'one')

    def test_find_sent_and_received(self):
        self.repo.create('alice', 'bob', 'hi', NOW)

        sent = self.repo.find_sent('alice')
        received = self.repo.find_received('bob')

        self.assertEqual(sent[0].to_user.first_name, 'Bob')
        self.assertEqual(sent[0].sent_at, NOW)
        self.assertEqual(received[0].from_user.first_name, 'Alice')
        self.assertEqual(self.repo.find_sent('bob'), [])

    def test_join_drops_rows_with_missing_counterpart(self):
        self.repo.create('alice', 'ghost', 'hi', NOW)
        self.assertEqual(self.repo.find_sent('alice'), [])


if __name__ == '__main__':
    unittest.main()
