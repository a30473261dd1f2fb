"""Keeps test runs away from the user's settings and log databases."""

import os
import tempfile
from pathlib import Path

_TMP = Path(tempfile.mkdtemp(prefix="worldclock-tests-"))

os.environ.setdefault("WORLDCLOCK_DATABASE__SETTINGS", str(_TMP / "settings.db"))
os.environ.setdefault("WORLDCLOCK_DATABASE__LOGGING", str(_TMP / "logs.db"))
os.environ["XDG_CONFIG_HOME"] = str(_TMP / "config")
