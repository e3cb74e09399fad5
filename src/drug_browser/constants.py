"""Project-wide constants."""

# -- openFDA drugs@FDA ------------------------------------------------------
OPENFDA_DRUGSFDA_URL: str = "https://api.fda.gov/drug/drugsfda.json"

# Dotted field paths OR-combined into the free-text search expression.
DRUGSFDA_SEARCH_FIELDS: tuple[str, ...] = (
    "products.brand_name",
    "products.generic_name",
    "products.active_ingredients.name",
    "products.route",
    "sponsor_name",
    "application_number",
)

# -- Pagination -------------------------------------------------------------
DEFAULT_PAGE: int = 1
DEFAULT_PAGE_SIZE: int = 10
MAX_PAGE_SIZE: int = 100

# -- Normalization ----------------------------------------------------------
UNKNOWN_DRUG_ID: str = "unknown"
SUBSTANCE_SEPARATOR: str = ", "
STRENGTH_SEPARATOR: str = " / "

# -- HTTP surface -----------------------------------------------------------
LIST_CACHE_CONTROL: str = "public, max-age=10800, s-maxage=10800"  # 3 hours
DETAIL_CACHE_CONTROL: str = "public, max-age=86400, s-maxage=86400"  # 24 hours

DEFAULT_CORS_ORIGINS: list[str] = ["http://localhost:5173"]

CONTENT_SECURITY_POLICY: str = "; ".join(
    [
        "default-src 'none'",
        "script-src 'self' 'unsafe-inline' 'unsafe-eval'",
        "style-src 'self' 'unsafe-inline'",
        "img-src 'self' data:",
        "connect-src 'self' http://backend:3000 http://localhost:3000",
        "font-src 'self' data:",
        "frame-ancestors 'none'",
        "base-uri 'self'",
        "form-action 'self'",
    ]
)

SECURITY_HEADERS: dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "X-XSS-Protection": "0",
    "Permissions-Policy": "geolocation=(), microphone=(), camera=()",
    "Content-Security-Policy": CONTENT_SECURITY_POLICY,
}
