"""
Hypermedia navigator — the discovery side of the HATEOAS API.

The navigator hardcodes exactly one URL, the entry point. After that it only
ever follows links the server just sent:

  1. start()          GET <api>/v1/start           → link table replaced
  2. follow("menu")   uses links["menu"].href      → link table replaced
  3. follow("order", json=...)                     → link table replaced
  ...

The link table is replaced wholesale by every response, error responses
included. A relation that disappeared (``cancel`` once the pizza is ready)
therefore cannot be followed from a stale copy.
"""

import logging

import httpx
from pydantic import BaseModel

from ..hateoas.links import Rel

logger = logging.getLogger(__name__)

ENTRY_PATH = "/v1/start"


class LinkTarget(BaseModel):
    href: str
    method: str = "GET"
    description: str = ""


class NavigationError(Exception):
    """User-facing navigation failure; the current page is left as it was."""


class LinkNotAvailableError(NavigationError):
    def __init__(self, rel: str, available: list[str]) -> None:
        super().__init__(
            f"Action not available: {rel} (available: {', '.join(available) or 'none'})"
        )
        self.rel = rel


class Page:
    """One server response as seen by the navigator."""

    def __init__(self, status_code: int, data: dict) -> None:
        self.status_code = status_code
        self.data = data

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def error(self) -> str | None:
        return self.data.get("error")


class HypermediaNavigator:
    def __init__(self, api_url: str, client: httpx.AsyncClient) -> None:
        self.entry_url = api_url.rstrip("/") + ENTRY_PATH
        self.client = client
        self.links: dict[Rel, LinkTarget] = {}
        self.page: Page | None = None

    async def start(self) -> Page:
        """Hit the entry point — the only URL built on the client side."""
        return await self._fetch("GET", self.entry_url)

    async def follow(self, rel: Rel | str, json: dict | None = None) -> Page:
        target = self.link(rel)
        logger.info("Following %s → %s %s", Rel(rel).value, target.method, target.href)
        return await self._fetch(target.method, target.href, json=json)

    def link(self, rel: Rel | str) -> LinkTarget:
        try:
            return self.links[Rel(rel)]
        except (ValueError, KeyError):
            name = str(getattr(rel, "value", rel))
            raise LinkNotAvailableError(name, self.available()) from None

    def available(self) -> list[str]:
        return [rel.value for rel in self.links]

    def can(self, rel: Rel | str) -> bool:
        try:
            return Rel(rel) in self.links
        except ValueError:
            return False

    async def _fetch(self, method: str, url: str, json: dict | None = None) -> Page:
        try:
            resp = await self.client.request(method, url, json=json)
            data = resp.json()
        except httpx.HTTPError as e:
            logger.warning("Request to %s failed: %s", url, e)
            raise NavigationError(f"Could not reach the server: {e}") from e
        except ValueError as e:
            raise NavigationError(f"Unreadable response from {url}") from e

        if not isinstance(data, dict):
            data = {"data": data}
        self._save_links(data.get("links") or [])
        self.page = Page(resp.status_code, data)
        return self.page

    def _save_links(self, raw_links: list[dict]) -> None:
        links: dict[Rel, LinkTarget] = {}
        for raw in raw_links:
            try:
                rel = Rel(raw["rel"])
                href = raw["href"]
            except (KeyError, ValueError):
                logger.warning("Ignoring malformed link: %r", raw)
                continue
            links[rel] = LinkTarget(
                href=href,
                method=raw.get("method") or "GET",
                description=raw.get("description") or rel.value,
            )
        self.links = links
