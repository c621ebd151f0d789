"""Report which article placeholder tags a template is missing.

Usage:
    python scripts/check_template.py                       # static/article.html
    python scripts/check_template.py path/to/article.html
    python scripts/check_template.py https://example.com/article.html
"""
import os
import sys

import requests
from dotenv import load_dotenv

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from limelight.utils.meta_tags import TAG_NAMES, missing_meta_tags  # noqa: E402


def load_template(source: str) -> str:
    if source.startswith(("http://", "https://")):
        r = requests.get(source, timeout=(5, 10))
        r.raise_for_status()
        r.encoding = "utf-8"
        return r.text
    with open(source, encoding="utf-8") as f:
        return f.read()


def main(argv=None):
    load_dotenv()
    argv = sys.argv[1:] if argv is None else argv
    default = os.path.join(os.path.dirname(__file__), "..", "static", "article.html")
    source = argv[0] if argv else os.getenv("TEMPLATE_FILE", default)

    try:
        html = load_template(source)
    except (OSError, requests.RequestException) as e:
        print(f"[err] could not read template {source}: {e}")
        return 2

    missing = missing_meta_tags(html)
    for name in TAG_NAMES:
        print(f"{'-' if name in missing else '+'} {name}")
    if missing:
        print(f"[warn] {len(missing)} of {len(TAG_NAMES)} tags missing; they will not be replaced")
        return 1
    print(f"Done. All {len(TAG_NAMES)} tags present.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
