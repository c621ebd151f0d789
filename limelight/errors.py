class ArticlePageError(Exception):
    """Base class for failures while rendering an article page."""


class ConfigurationError(ArticlePageError):
    """Required settings are missing at startup."""


class MissingSlugError(ArticlePageError):
    """The request did not carry an article slug."""


class AssetUnavailableError(ArticlePageError):
    """The article template could not be fetched from the asset layer."""


class MalformedArticleError(ArticlePageError):
    """The backend returned an article record that cannot be rendered."""
