import logging

from flask import Blueprint, current_app, make_response, request

from ..errors import MissingSlugError
from ..services.articles import fetch_article_metadata
from ..utils.meta_tags import article_page_url, inject_meta_tags

logger = logging.getLogger(__name__)

bp = Blueprint("article", __name__)

MISSING_SLUG_MESSAGE = "Article slug is missing."
INTERNAL_ERROR_MESSAGE = "An internal error occurred while processing the article."


def _text_response(body, status):
    resp = make_response(body, status)
    resp.mimetype = "text/plain"
    return resp


def first_slug_segment(path):
    # /article/<slug>/anything-else -> <slug>
    slug = (path or "").split("/", 1)[0]
    if not slug:
        raise MissingSlugError(MISSING_SLUG_MESSAGE)
    return slug


@bp.get("/article")
@bp.get("/article/")
@bp.get("/article/<path:slug>")
def article_page(slug=None):
    try:
        slug = first_slug_segment(slug)
    except MissingSlugError:
        return _text_response(MISSING_SLUG_MESSAGE, 400)

    # root_url keeps any mount prefix, so page links and the redirect stay inside it
    origin = request.root_url.rstrip("/")
    try:
        article = fetch_article_metadata(slug)
        if article is None:
            return make_response("", 302, {"Location": f"{origin}/"})

        template = current_app.extensions["template_cache"].get_template()
        html = inject_meta_tags(
            template,
            article,
            article_page_url(origin, slug),
            site_name=current_app.config.get("SITE_NAME", "The Limelight"),
        )
    except Exception:
        logger.exception("Failed to render article page for slug %r", slug)
        return _text_response(INTERNAL_ERROR_MESSAGE, 500)

    resp = make_response(html, 200)
    resp.headers["Content-Type"] = "text/html;charset=UTF-8"
    return resp
