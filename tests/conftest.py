"""Shared pytest fixtures for viewrender tests."""

import pytest
from pathlib import Path
from urllib.parse import urlencode
from viewrender.container import Container, CONFIG, URL_HELPER, SERVER_URL_HELPER


class FakeUrlHelper:
    """Upstream URL helper generating ``/route/param...`` URLs."""

    def __init__(self):
        self.calls = []

    def generate(self, route, params, query_params, fragment, options):
        self.calls.append((route, params, query_params, fragment, options))
        url = "/" + (route or "")
        for value in params.values():
            url += f"/{value}"
        if query_params:
            url += "?" + urlencode(query_params)
        if fragment:
            url += "#" + fragment
        return url


class FakeServerUrlHelper:
    """Upstream server URL helper prefixing paths with base URL."""

    def __init__(self, base_url="https://example.com"):
        self.base_url = base_url

    def generate(self, path=None):
        return self.base_url + (path or "")


@pytest.fixture
def templates_dir():
    """Directory with test templates."""
    return Path(__file__).parent / "data" / "templates"


@pytest.fixture
def url_helper():
    return FakeUrlHelper()


@pytest.fixture
def server_url_helper():
    return FakeServerUrlHelper()


@pytest.fixture
def templates_config(templates_dir):
    """Application configuration using test templates."""
    return {
        "templates": {
            "layout": "layout::default",
            "paths": {
                "app": str(templates_dir / "app"),
                "layout": [str(templates_dir / "layout")],
                0: str(templates_dir / "shared"),
            },
        }
    }


@pytest.fixture
def container(templates_config, url_helper, server_url_helper):
    """Container with configuration and both upstream URL helpers."""
    return Container(
        {
            CONFIG: templates_config,
            URL_HELPER: url_helper,
            SERVER_URL_HELPER: server_url_helper,
        }
    )


@pytest.fixture
def make_url_helper():
    """Factory for additional upstream URL helpers."""
    return FakeUrlHelper


@pytest.fixture
def make_server_url_helper():
    """Factory for additional upstream server URL helpers."""
    return FakeServerUrlHelper
