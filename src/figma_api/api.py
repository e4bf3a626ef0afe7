"""Figma REST API transport with optional caching."""

import hashlib
import json
from pathlib import Path
from typing import Any

import requests
from loguru import logger

from figma_api.auth import Token, auth_header
from figma_api.config import API_BASE_URL, API_CACHE_PREFIX, REQUEST_TIMEOUT, resolve_token
from figma_api.errors import ApiError


class FigmaApi:
    """Authenticated Figma API session.

    GET responses can be cached on disk (``from_cache=True``) to avoid rate
    limits while developing; the cache returns stale data and is never used
    for writes.
    """

    def __init__(self, token: Token | None = None, *, from_cache: bool = False) -> None:
        self.from_cache = from_cache
        self.token = token if token is not None else resolve_token()
        self.sess = requests.Session()
        header, value = auth_header(self.token)
        self.sess.headers[header] = value

        self.api_cache_prefix: str | None = API_CACHE_PREFIX if from_cache else None

        logger.debug(
            "API ready: token {}, from_cache {!r}, api_cache_prefix {!r}",
            type(self.token).__name__, self.from_cache, self.api_cache_prefix,
        )

        if self.api_cache_prefix:
            Path(self.api_cache_prefix).parent.mkdir(parents=True, exist_ok=True)

    def _cache_name(self, path: str, args: dict[str, Any]) -> str | None:
        if not self.api_cache_prefix:
            return None
        name_last = path
        if args:
            params_str = json.dumps(args, sort_keys=True, separators=(",", ":"))
            if len(params_str) > 64:
                params_str = hashlib.sha1(params_str.encode("utf-8")).hexdigest()
            name_last += "--" + params_str
        return self.api_cache_prefix + name_last.replace("/", "--")

    def call(self, path: str, args: dict[str, Any], *, method: str = "GET") -> dict[str, Any]:
        """Invoke a Figma API endpoint, return json.

        GET sends ``args`` as query parameters, anything else as a JSON body.

        Raises:
            requests.HTTPError: On a non-2xx status without a JSON error body.
            ApiError: When the server returns an error payload.
        """
        cache_name = self._cache_name(path, args) if method == "GET" else None
        if cache_name and Path(cache_name).exists():
            logger.debug("Filled from cache: {!r}", cache_name)
            with open(cache_name, encoding="utf-8") as f:
                return json.load(f)  # type: ignore[no-any-return]

        logger.debug("Making request: {} {!r} {}", method, path, repr(args)[:32])

        url = f"{API_BASE_URL}/{path.lstrip('/')}"
        if method == "GET":
            r = self.sess.get(url, params=args, timeout=REQUEST_TIMEOUT)
        else:
            r = self.sess.request(method, url, json=args, timeout=REQUEST_TIMEOUT)

        try:
            rv: dict[str, Any] = r.json()
        except ValueError:
            r.raise_for_status()
            raise

        # Errors arrive as {"status": 404, "err": "Not found"}; successful
        # responses may carry "err": null or "error": false.
        detail = rv.get("err") or (rv.get("message") if rv.get("error") else None)
        if detail or not r.ok:
            raise ApiError(path, rv.get("status", r.status_code), str(detail or r.reason))

        if cache_name:
            with open(cache_name, "w", encoding="utf-8") as f:
                f.write(r.text)

        return rv
