from flask import Flask
import os
from .errors import ConfigurationError
from .extensions.supabase import init_supabase
from .services.template_cache import init_template_cache
from .blueprints.article import bp as article_bp


def create_app(config_object="config.Config") -> Flask:
    # static assets (article.html template) live at project root (../static)
    base_dir = os.path.dirname(__file__)
    static_dir = os.path.abspath(os.path.join(base_dir, "..", "static"))
    # static_url_path="" mirrors the asset layer: /article.html is served from static/
    app = Flask(__name__, static_folder=static_dir, static_url_path="")
    app.config.from_object(config_object)

    missing = [k for k in ("SUPABASE_URL", "SUPABASE_SERVICE_KEY") if not app.config.get(k)]
    if missing:
        raise ConfigurationError(f"Missing required configuration: {', '.join(missing)}")
    source = app.config.get("TEMPLATE_SOURCE", "static")
    if source not in ("http", "static"):
        raise ConfigurationError(f"Unknown TEMPLATE_SOURCE: {source!r}")
    if source == "http" and not app.config.get("ASSET_BASE_URL"):
        raise ConfigurationError("TEMPLATE_SOURCE=http requires ASSET_BASE_URL")

    # Extensions
    init_supabase(app)
    init_template_cache(app)

    # Blueprints
    app.register_blueprint(article_bp)

    return app
