"""API token variants and the request header each one needs."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PersonalAccessToken:
    value: str


@dataclass(frozen=True)
class OAuth2Token:
    value: str


Token = PersonalAccessToken | OAuth2Token


def auth_header(token: Token) -> tuple[str, str]:
    """Return the (header name, header value) pair authenticating ``token``."""
    match token:
        case OAuth2Token(value=value):
            return "Authorization", f"Bearer {value}"
        case PersonalAccessToken(value=value):
            return "X-Figma-Token", value
    msg = f"Unknown token type: {type(token).__name__}"
    raise TypeError(msg)
