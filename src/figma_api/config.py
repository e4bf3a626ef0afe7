"""Configuration constants for figma-api."""

import os
from pathlib import Path

from figma_api.auth import OAuth2Token, PersonalAccessToken, Token

API_BASE_URL: str = "https://api.figma.com/v1"

# Seconds before an HTTP request is abandoned.
REQUEST_TIMEOUT: float = 60.0

# Environment variables checked for a token, OAuth first.
API_OAUTH_TOKEN_ENV: str = "FIGMA_OAUTH_TOKEN"
API_TOKEN_ENV: str = "FIGMA_TOKEN"

# Personal access token location. First file found is used.
API_TOKEN_FILES: list[Path] = [
    Path("~/.config/figma-token.txt").expanduser(),
    Path("~/.config/secret/figma-token.txt").expanduser(),
]

# Cache directory, used only when --cache is passed.
API_CACHE_PREFIX: str = "/tmp/figma-api-cache/cache-"


def resolve_token() -> Token:
    """Find an API token in the environment or the token files.

    Raises:
        RuntimeError: When no token is configured anywhere.
    """
    oauth = os.environ.get(API_OAUTH_TOKEN_ENV, "").strip()
    if oauth:
        return OAuth2Token(oauth)
    personal = os.environ.get(API_TOKEN_ENV, "").strip()
    if personal:
        return PersonalAccessToken(personal)
    for token_path in API_TOKEN_FILES:
        try:
            return PersonalAccessToken(token_path.read_text(encoding="utf-8").strip())
        except FileNotFoundError:
            pass
    msg = (
        f"Cannot find figma token: set ${API_OAUTH_TOKEN_ENV} or ${API_TOKEN_ENV}, "
        f"or create one of {[str(p) for p in API_TOKEN_FILES]!r}"
    )
    raise RuntimeError(msg)
