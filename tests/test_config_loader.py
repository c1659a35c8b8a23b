"""
Unit tests for the runtime TOML configuration.

Run with:
    python -m pytest tests/test_config_loader.py
"""
import unittest

from src.jeopardy_board.app.state import Settings
from src.jeopardy_board.domain.constants import DEFAULT_API_BASE_URL, DEFAULT_TIMEOUT
from src.jeopardy_board.services.config_loader import (
    get_app_title,
    load_default_settings,
    load_default_settings_values,
    set_runtime_config,
    set_runtime_toml_bytes,
)

_TOML = b"""
title = "  Friday Trivia  "

[api]
base_url = "http://localhost:8000/api"
timeout = 2.5

[settings]
muted = true
"""


class TestConfigLoader(unittest.TestCase):

    def tearDown(self):
        set_runtime_config(None)

    def test_defaults_without_runtime_config(self):
        self.assertEqual(load_default_settings_values(), {})
        self.assertEqual(get_app_title('Jeopardy!'), 'Jeopardy!')
        self.assertEqual(load_default_settings(), Settings())
        self.assertEqual(Settings().api_base_url, DEFAULT_API_BASE_URL)
        self.assertEqual(Settings().timeout, DEFAULT_TIMEOUT)

    def test_uploaded_toml_is_applied(self):
        self.assertTrue(set_runtime_toml_bytes(_TOML))
        self.assertEqual(get_app_title(), 'Friday Trivia')
        settings = load_default_settings()
        self.assertEqual(settings.api_base_url, 'http://localhost:8000/api')
        self.assertEqual(settings.timeout, 2.5)
        self.assertTrue(settings.muted)

    def test_invalid_toml_clears_config(self):
        set_runtime_toml_bytes(_TOML)
        self.assertFalse(set_runtime_toml_bytes(b'title = '))
        self.assertEqual(load_default_settings(), Settings())

    def test_wrong_types_fall_back(self):
        set_runtime_config({'api': {'base_url': 3, 'timeout': True}, 'settings': {'muted': 'yes'}})
        self.assertEqual(load_default_settings_values(), {})
        set_runtime_config({'api': {'timeout': -1}})
        self.assertEqual(load_default_settings().timeout, DEFAULT_TIMEOUT)


if __name__ == '__main__':
    unittest.main()
