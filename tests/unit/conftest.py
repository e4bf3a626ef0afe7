"""Shared test fixtures."""

import pytest

from figma_api.core.decode.tree import decode_tree
from figma_api.models.node import Node
from figma_api.models.tree import Tree
from tests.unit.fakes import FakeApi
from tests.unit.payloads import make_sample_document


@pytest.fixture
def sample_tree() -> Tree[Node]:
    """DOCUMENT > 2 CANVAS > FRAME > 3 shapes, decoded."""
    return decode_tree(make_sample_document())


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()
