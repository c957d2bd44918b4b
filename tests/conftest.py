import logging

import pytest


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point HOME at a temp dir so config and log files never touch the real one."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setattr("retyper.config.USER_CONFIG_PATH",
                        str(home / ".config" / "retyper" / "config.json"))
    yield home

    # Drop handlers the CLI attached so log files can be cleaned up
    logger = logging.getLogger("retyper")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def us_ru():
    return ["com.apple.keylayout.US", "com.apple.keylayout.Russian"]
