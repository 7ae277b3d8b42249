import pytest
import yaml

from testsuites.ui_testing.framework.browser_manager import BrowserManager
from testsuites.ui_testing.framework.config_loader import ConfigLoader


@pytest.fixture
def config(monkeypatch, tmp_path):
    for key in ("UI_USERNAME", "UI_PASSWORD", "UI_BROWSER", "UI_HEADLESS", "UI_VIEWPORT_WIDTH"):
        monkeypatch.delenv(key, raising=False)
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        yaml.dump({"ui": {"username": "admin", "password": "admin", "browser": "firefox"}}),
        encoding="utf-8",
    )
    ConfigLoader.reset()
    yield ConfigLoader(config_path=config_path)
    ConfigLoader.reset()


def test_settings_come_from_config(config):
    manager = BrowserManager(config=config)
    assert manager.browser_type == "firefox"
    assert manager.headless is True


def test_explicit_arguments_win(config):
    manager = BrowserManager(headless=False, browser_type="webkit", config=config)
    assert manager.browser_type == "webkit"
    assert manager.headless is False


def test_unsupported_browser_rejected(config):
    with pytest.raises(ValueError):
        BrowserManager(browser_type="netscape", config=config)


def test_context_options_include_viewport_and_credentials(config, monkeypatch):
    monkeypatch.setenv("UI_VIEWPORT_WIDTH", "1280")
    options = BrowserManager(config=config).context_options(locale="en-US")

    assert options["viewport"] == {"width": 1280, "height": 1080}
    assert options["http_credentials"] == {"username": "admin", "password": "admin"}
    assert options["ignore_https_errors"] is True
    assert options["locale"] == "en-US"


@pytest.mark.asyncio
async def test_new_context_requires_started_browser(config):
    with pytest.raises(RuntimeError):
        await BrowserManager(config=config).new_context()
