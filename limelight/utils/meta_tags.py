import re

DEFAULT_SITE_NAME = "The Limelight"


def _meta_re(attr: str, name: str) -> re.Pattern:
    # <meta name="description" content="..." /> with or without the closing slash
    return re.compile(rf'<meta\s+{attr}="{re.escape(name)}"\s+content=".*?"\s*/?>')


_title_re = re.compile(r"<title>.*?</title>", re.DOTALL)

# (tag name, pattern, attribute, metadata field) in substitution order
META_TAGS = [
    ("description", _meta_re("name", "description"), "name", "excerpt"),
    ("author", _meta_re("name", "author"), "name", "author_full_name"),
    ("og:title", _meta_re("property", "og:title"), "property", "title"),
    ("og:description", _meta_re("property", "og:description"), "property", "excerpt"),
    ("og:image", _meta_re("property", "og:image"), "property", "image_url"),
    ("og:url", _meta_re("property", "og:url"), "property", "page_url"),
    ("twitter:title", _meta_re("property", "twitter:title"), "property", "title"),
    ("twitter:description", _meta_re("property", "twitter:description"), "property", "excerpt"),
    ("twitter:image", _meta_re("property", "twitter:image"), "property", "image_url"),
    ("twitter:url", _meta_re("property", "twitter:url"), "property", "page_url"),
]

TAG_NAMES = ["title", *(name for name, _, _, _ in META_TAGS)]


def escape_quotes(value) -> str:
    if not value:
        return ""
    return str(value).replace('"', "&quot;")


def article_page_url(origin: str, slug: str) -> str:
    # slug goes in as-is, no percent-encoding
    return f"{origin.rstrip('/')}/article/{slug}"


def missing_meta_tags(template: str) -> list[str]:
    """Names of placeholder tags the template does not contain."""
    missing = [] if _title_re.search(template) else ["title"]
    missing.extend(name for name, pattern, _, _ in META_TAGS if not pattern.search(template))
    return missing


def inject_meta_tags(template: str, metadata, page_url: str, site_name: str = DEFAULT_SITE_NAME) -> str:
    """Replace the eleven placeholder tags with the article's values.

    Each tag is replaced at most once; a tag the template lacks is skipped.
    Every value is quote-escaped before it lands inside an attribute.
    """
    values = {
        "title": escape_quotes(metadata.title),
        "excerpt": escape_quotes(metadata.excerpt),
        "author_full_name": escape_quotes(metadata.author_full_name),
        "image_url": escape_quotes(metadata.image_url),
        "page_url": escape_quotes(page_url),
    }
    title_tag = f"<title>{values['title']} | {site_name}</title>"
    # callables keep backslashes in values from being read as group references
    html = _title_re.sub(lambda m: title_tag, template, count=1)
    for name, pattern, attr, field in META_TAGS:
        tag = f'<meta {attr}="{name}" content="{values[field]}" />'
        html = pattern.sub(lambda m, tag=tag: tag, html, count=1)
    return html
