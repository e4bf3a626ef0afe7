"""Typed client binding for the Figma REST API."""

from figma_api.api import FigmaApi
from figma_api.auth import OAuth2Token, PersonalAccessToken, auth_header
from figma_api.client import FigmaClient
from figma_api.core.decode.tree import decode_node, decode_tree
from figma_api.errors import ApiError, DecodeError
from figma_api.models.tree import Tree, children, foldl, node, singleton, tree
from figma_api.protocols import ApiProtocol

__all__ = [
    "ApiError",
    "ApiProtocol",
    "DecodeError",
    "FigmaApi",
    "FigmaClient",
    "OAuth2Token",
    "PersonalAccessToken",
    "Tree",
    "auth_header",
    "children",
    "decode_node",
    "decode_tree",
    "foldl",
    "node",
    "singleton",
    "tree",
]
