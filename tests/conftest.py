from pathlib import Path

import pytest

from spa_service_generator.frontend.base import (
    AnnotatedMethod,
    AttributeNode,
    DocElement,
    LoadedSolution,
    ParameterNode,
    TypeRef,
)
from spa_service_generator.frontend.snapshot import load_snapshot

FIXTURES = Path(__file__).parent / "fixtures"


def make_method(**overrides) -> AnnotatedMethod:
    defaults = dict(
        name="GetOrder",
        return_type=TypeRef(name="Task", arguments=[TypeRef(name="OrderDto")]),
        parameters=[
            ParameterNode(name="id", type=TypeRef(name="int")),
            ParameterNode(name="status", type=TypeRef(name="string", nullable=True)),
        ],
        attributes=[AttributeNode(name="HttpGet", arguments=["orders/{id}"])],
        modifiers=["public"],
        documentation=[
            DocElement(tag="summary", text="Gets an order"),
            DocElement(tag="param", attributes={"name": "id"}, text="Order id."),
        ],
    )
    defaults.update(overrides)
    return AnnotatedMethod(**defaults)


@pytest.fixture
def empty_solution() -> LoadedSolution:
    return LoadedSolution([])


@pytest.fixture
def solution() -> LoadedSolution:
    return load_snapshot(FIXTURES / "solution.yaml")
