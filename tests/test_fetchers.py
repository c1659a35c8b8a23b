"""
Unit tests for the quiz API fetchers and the requests adapter.

Run with:
    python -m pytest tests/test_fetchers.py
"""
import random
import unittest
from unittest.mock import MagicMock

import requests

from src.jeopardy_board.adapters.quiz_api_requests import RequestsQuizApi
from src.jeopardy_board.domain import RevealState
from src.jeopardy_board.services.fetchers import fetch_category, fetch_category_ids
from tests.helpers import FakeQuizApi, category_record


class TestFetchCategoryIds(unittest.IsolatedAsyncioTestCase):

    async def test_samples_six_unique_ids_from_pool(self):
        api = FakeQuizApi()
        for seed in range(20):
            ids = await fetch_category_ids(api, random.Random(seed))
            self.assertEqual(len(ids), 6)
            self.assertEqual(len(set(ids)), 6)
            self.assertTrue(set(ids) <= set(range(1, 101)))
        self.assertEqual(api.calls[0], ('/categories', {'count': 100}))

    async def test_small_pool_returns_everything(self):
        api = FakeQuizApi(category_ids=[4, 8, 4, 15])
        ids = await fetch_category_ids(api, random.Random(1))
        self.assertEqual(sorted(ids), [4, 8, 15])

    async def test_network_failure_returns_empty(self):
        api = MagicMock()
        api.get_json.side_effect = requests.Timeout('slow')
        self.assertEqual(await fetch_category_ids(api), [])

    async def test_malformed_response_returns_empty(self):
        api = MagicMock()
        api.get_json.return_value = {'error': 'nope'}
        self.assertEqual(await fetch_category_ids(api), [])
        api.get_json.side_effect = ValueError('bad json')
        self.assertEqual(await fetch_category_ids(api), [])


class TestFetchCategory(unittest.IsolatedAsyncioTestCase):

    async def test_truncates_and_hides_clues(self):
        api = FakeQuizApi()
        cat = await fetch_category(api, 42)
        self.assertEqual(cat.title, 'category 42')
        self.assertEqual(len(cat.clues), 5)
        self.assertTrue(all(c.reveal_state is RevealState.HIDDEN for c in cat.clues))
        self.assertEqual(api.calls, [('/category', {'id': 42})])

    async def test_network_failure_returns_none(self):
        api = FakeQuizApi(failing={42})
        self.assertIsNone(await fetch_category(api, 42))

    async def test_short_category_returns_none(self):
        api = FakeQuizApi(overrides={9: category_record(9, n_clues=3)})
        self.assertIsNone(await fetch_category(api, 9))

    async def test_id_filled_from_request_when_missing(self):
        rec = category_record(11)
        del rec['id']
        api = FakeQuizApi(overrides={11: rec})
        cat = await fetch_category(api, 11)
        self.assertEqual(cat.id, 11)


class TestRequestsQuizApi(unittest.TestCase):

    def test_get_json_builds_url_and_passes_timeout(self):
        session = MagicMock()
        session.get.return_value.json.return_value = [{'id': 1}]
        api = RequestsQuizApi(base_url='https://quiz.example/api/', timeout=3, session=session)
        self.assertEqual(api.get_json('/categories', {'count': 100}), [{'id': 1}])
        session.get.assert_called_once_with(
            'https://quiz.example/api/categories', params={'count': 100}, timeout=3
        )
        session.get.return_value.raise_for_status.assert_called_once()

    def test_http_error_propagates(self):
        session = MagicMock()
        session.get.return_value.raise_for_status.side_effect = requests.HTTPError('404')
        api = RequestsQuizApi(session=session)
        with self.assertRaises(requests.HTTPError):
            api.get_json('/category', {'id': 1})


if __name__ == '__main__':
    unittest.main()
