import os

import pytest

from shortlinks.constants import ENV


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    """Run every test without SHORTLINKS_*/DB_*/REDIS_*/LOG_* variables and away from any .env file.

    Variables a test loads from a .env file (which bypasses monkeypatch) are
    popped on teardown; monkeypatch then restores whatever the shell had set.
    """
    names = [name for group in (ENV.Store, ENV.File, ENV.Database, ENV.Redis, ENV.Logging) for name in group]
    for name in names:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    for name in names:
        os.environ.pop(name, None)
