import os

from limelight.errors import ConfigurationError


def _timeout(name: str, default: str) -> tuple[float, float]:
    # "5,10" -> (5.0, 10.0); a single number is used for both connect and read
    raw = os.getenv(name, default)
    try:
        parts = [float(p) for p in raw.split(",") if p.strip()]
    except ValueError:
        raise ConfigurationError(f"{name} must be one or two numbers, got {raw!r}") from None
    if len(parts) == 1:
        return parts[0], parts[0]
    if len(parts) != 2:
        raise ConfigurationError(f"{name} must be one or two numbers, got {raw!r}")
    return parts[0], parts[1]


class Config:
    # Supabase (PostgREST) backend holding posts and authors
    SUPABASE_URL = os.getenv("SUPABASE_URL", "")
    SUPABASE_SERVICE_KEY = os.getenv("SUPABASE_SERVICE_KEY", "")
    BACKEND_TIMEOUT = _timeout("BACKEND_TIMEOUT", "5,10")

    # Article page template. "static" reads it from the static folder;
    # "http" fetches it from ASSET_BASE_URL, never from the request's host.
    SITE_NAME = os.getenv("SITE_NAME", "The Limelight")
    TEMPLATE_PATH = os.getenv("TEMPLATE_PATH", "/article.html")
    TEMPLATE_SOURCE = os.getenv("TEMPLATE_SOURCE", "static").lower()
    ASSET_BASE_URL = os.getenv("ASSET_BASE_URL", "")
    ASSET_TIMEOUT = _timeout("ASSET_TIMEOUT", "5,10")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
