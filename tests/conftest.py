from pathlib import Path
from unittest.mock import MagicMock

import pytest

from limelight import create_app
from limelight.services.template_cache import TemplateCache

TEMPLATE = (Path(__file__).resolve().parent.parent / "static" / "article.html").read_text(encoding="utf-8")

ARTICLE_RECORD = {
    "title": 'Hi "There"',
    "excerpt": "An excerpt",
    "image_url": "https://x/img.png",
    "authors": {"full_name": "Jane Doe"},
}


class ArticleTestConfig:
    TESTING = True
    SUPABASE_URL = "https://backend.example.co/"
    SUPABASE_SERVICE_KEY = "service-secret-key"
    BACKEND_TIMEOUT = (1, 2)
    SITE_NAME = "The Limelight"
    TEMPLATE_PATH = "/article.html"
    TEMPLATE_SOURCE = "http"
    ASSET_BASE_URL = "https://assets.example.com"
    ASSET_TIMEOUT = (1, 2)


def backend_response(status=200, body=None, text=""):
    r = MagicMock()
    r.status_code = status
    r.ok = status < 400
    r.text = text
    if isinstance(body, Exception):
        r.json.side_effect = body
    else:
        r.json.return_value = body
    return r


@pytest.fixture
def asset_fetch():
    """Stands in for the static asset layer; counts template fetches."""
    return MagicMock(return_value=TEMPLATE)


@pytest.fixture
def app(asset_fetch):
    app = create_app(ArticleTestConfig)
    app.extensions["supabase"]["session"] = MagicMock()
    app.extensions["template_cache"] = TemplateCache(asset_fetch, base_url=ArticleTestConfig.ASSET_BASE_URL)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def backend(app):
    """The mocked PostgREST session; set .get.return_value / .side_effect per test."""
    session = app.extensions["supabase"]["session"]
    session.get.return_value = backend_response(200, dict(ARTICLE_RECORD))
    return session
