"""HTTP client for the PokeAPI endpoints the Pokedex uses, with response caching."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from typing import Any, Callable

from pokedexcli.cache import Cache
from pokedexcli.models import LocationArea, LocationPage, Pokemon

BASE_URL = "https://pokeapi.co/api/v2"

Fetch = Callable[[str, float], bytes]


class PokeAPIError(Exception):
    """Raised when a PokeAPI request fails or returns an unusable body."""


def _urlopen_fetch(url: str, timeout: float) -> bytes:
    with urllib.request.urlopen(url, timeout=timeout) as response:
        return response.read()


class Client:
    """Fetches PokeAPI resources, caching raw response bodies by URL."""

    def __init__(
        self,
        timeout: float = 5.0,
        cache_interval: float = 300.0,
        fetch: Fetch | None = None,
    ) -> None:
        self._timeout = timeout
        self._fetch = fetch if fetch is not None else _urlopen_fetch
        self._cache = Cache(cache_interval)

    def list_locations(self, page_url: str | None = None) -> LocationPage:
        """Return a page of location areas; the first page when ``page_url`` is None."""
        url = page_url if page_url is not None else f"{BASE_URL}/location-area"
        return self._load(url, LocationPage.from_dict)

    def list_pokemons(self, location: str) -> LocationArea:
        """Return the location area named ``location`` with its encounters."""
        return self._load(f"{BASE_URL}/location-area/{location}", LocationArea.from_dict)

    def get_pokemon(self, name: str) -> Pokemon:
        """Return the Pokemon named ``name``."""
        return self._load(f"{BASE_URL}/pokemon/{name}", Pokemon.from_dict)

    def close(self) -> None:
        """Release the response cache."""
        self._cache.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _load(self, url: str, parse: Callable[[Any], Any]) -> Any:
        cached = self._cache.get(url)
        if cached is not None:
            return self._decode(url, cached, parse)
        try:
            body = self._fetch(url, self._timeout)
        except (urllib.error.URLError, OSError) as exc:
            raise PokeAPIError(f"request to {url} failed: {exc}") from exc
        result = self._decode(url, body, parse)
        self._cache.add(url, body)
        return result

    @staticmethod
    def _decode(url: str, body: bytes, parse: Callable[[Any], Any]) -> Any:
        try:
            return parse(json.loads(body))
        except ValueError as exc:
            raise PokeAPIError(f"invalid response from {url}: {exc}") from exc