"""Tests for create_index_safe conflict handling."""

import unittest
from unittest.mock import MagicMock
from pymongo.errors import OperationFailure

from adapter.mongodb.indexes import create_index_safe, ensure_all_indexes


class TestCreateIndexSafe(unittest.TestCase):

    def test_creates_index(self):
        collection = MagicMock()

        self.assertTrue(create_index_safe(collection, [('to_username', 1)], 'idx_messages_to'))
        collection.create_index.assert_called_once_with([('to_username', 1)], name='idx_messages_to')

    def test_replaces_index_with_same_keys_different_name(self):
        collection = MagicMock()
        collection.create_index.side_effect = [OperationFailure("Index already exists with a different name"), None]
        collection.index_information.return_value = {
            '_id_': {'key': [('_id', 1)]},
            'old_name': {'key': [('to_username', 1)]},
        }

        self.assertTrue(create_index_safe(collection, [('to_username', 1)], 'idx_messages_to'))
        collection.drop_index.assert_called_once_with('old_name')

    def test_unrelated_failure_propagates(self):
        collection = MagicMock()
        collection.create_index.side_effect = OperationFailure("not authorized")

        with self.assertRaises(OperationFailure):
            create_index_safe(collection, [('to_username', 1)], 'idx_messages_to')

    def test_unresolved_conflict_returns_false(self):
        collection = MagicMock()
        collection.create_index.side_effect = OperationFailure("IndexKeySpecsConflict")
        collection.index_information.return_value = {'_id_': {'key': [('_id', 1)]}}

        self.assertFalse(create_index_safe(collection, [('to_username', 1)], 'idx_messages_to'))


class TestEnsureAllIndexes(unittest.TestCase):

    def test_ensures_users_and_messages(self):
        db = MagicMock()
        self.assertTrue(ensure_all_indexes(db))
        names = {c.kwargs['name'] for c in db.__getitem__.return_value.create_index.call_args_list}
        self.assertEqual(names, {'idx_users_joined_at', 'idx_messages_from', 'idx_messages_to'})


if __name__ == '__main__':
    unittest.main()
