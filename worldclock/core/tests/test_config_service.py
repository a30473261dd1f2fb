"""
worldclock/core/tests/test_config_service.py

Layer precedence and typing of the ConfigService.
"""

from __future__ import annotations

import unittest
from pathlib import Path
from unittest import mock

from worldclock.core.config.config_service import ConfigService


class TestConfigService(unittest.TestCase):
    def test_embedded_defaults(self) -> None:
        with mock.patch.dict("os.environ", {}, clear=False):
            svc = ConfigService(user_ini=Path("/nonexistent/config.ini"))
        self.assertEqual(svc.clock.namespace, "worldclock")
        self.assertEqual(svc.clock.tick_seconds, 60)
        self.assertIsInstance(svc.database.settings, Path)

    def test_user_ini_overrides_defaults(self) -> None:
        import tempfile

        with tempfile.TemporaryDirectory() as tmp:
            ini = Path(tmp) / "config.ini"
            ini.write_text("[Clock]\ntick_seconds = 30\n", encoding="utf-8")
            svc = ConfigService(user_ini=ini)
            self.assertEqual(svc.clock.tick_seconds, 30)
            self.assertEqual(svc.meta_source("Clock", "tick_seconds")["layer"], "user")

    def test_env_overrides_user_ini(self) -> None:
        import tempfile

        with tempfile.TemporaryDirectory() as tmp:
            ini = Path(tmp) / "config.ini"
            ini.write_text("[General]\napp_name = From INI\n", encoding="utf-8")
            with mock.patch.dict("os.environ", {"WORLDCLOCK_GENERAL__APP_NAME": "From Env"}):
                svc = ConfigService(user_ini=ini)
            self.assertEqual(svc.general.app_name, "From Env")
            self.assertEqual(svc.meta_source("General", "app_name")["layer"], "env")

    def test_get_with_cast(self) -> None:
        with mock.patch.dict("os.environ", {"WORLDCLOCK_CLOCK__TICK_SECONDS": "15"}):
            svc = ConfigService(user_ini=Path("/nonexistent/config.ini"))
        self.assertEqual(svc.get("Clock", "tick_seconds", cast=int), 15)
        self.assertIsNone(svc.get("Clock", "missing"))


if __name__ == "__main__":
    unittest.main()
