"""
Client-side API configuration — picks the API base URLs for the environment
the front-end is served from.
"""

from urllib.parse import urlparse

from pydantic import BaseModel

LOCAL = "local"
PRODUCTION = "production"

_LOCAL_HOSTNAMES = {"localhost", "127.0.0.1", ""}


class ApiConfig(BaseModel):
    environment: str
    rest_api_url: str
    hateoas_api_url: str


API_URLS = {
    LOCAL: ApiConfig(
        environment=LOCAL,
        rest_api_url="http://localhost:3000",
        hateoas_api_url="http://localhost:3001",
    ),
    PRODUCTION: ApiConfig(
        environment=PRODUCTION,
        rest_api_url="https://demo-hypermedia-rest.onrender.com",
        hateoas_api_url="https://demo-hypermedia.onrender.com",
    ),
}


def detect_environment(page_url: str) -> str:
    """localhost, 127.0.0.1, no host or file:// → local; anything else → production."""
    parsed = urlparse(page_url)
    if parsed.scheme == "file" or (parsed.hostname or "") in _LOCAL_HOSTNAMES:
        return LOCAL
    return PRODUCTION


def api_config_for(page_url: str) -> ApiConfig:
    return API_URLS[detect_environment(page_url)]
