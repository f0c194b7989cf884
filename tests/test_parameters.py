import pytest

from spa_service_generator.errors import AmbiguousBodyParameterError
from spa_service_generator.frontend.base import TypeRef
from spa_service_generator.generator.model import Parameter
from spa_service_generator.generator.parameters import classify_parameters


def _param(name: str, from_body: bool = False) -> Parameter:
    return Parameter(name=name, type=TypeRef(name="int"), is_from_body=from_body)


class TestClassifyParameters:
    def test_uri_query_and_body(self):
        params = [_param("id"), _param("status"), _param("order", from_body=True)]
        bindings = classify_parameters(params, ["id"])
        assert [p.name for p in bindings.uri] == ["id"]
        assert [p.name for p in bindings.query] == ["status"]
        assert bindings.body.name == "order"

    def test_partition_covers_all_parameters_without_overlap(self):
        params = [_param("a"), _param("b", from_body=True), _param("c"), _param("d")]
        bindings = classify_parameters(params, ["c", "unbound"])
        uri = {p.name for p in bindings.uri}
        query = {p.name for p in bindings.query}
        assert uri | query | {bindings.body.name} == {"a", "b", "c", "d"}
        assert not uri & query
        assert uri <= {"c", "unbound"}

    def test_body_parameter_named_like_placeholder_stays_body(self):
        bindings = classify_parameters([_param("id", from_body=True)], ["id"])
        assert bindings.uri == []
        assert bindings.body.name == "id"

    def test_no_body(self):
        bindings = classify_parameters([_param("q")], [])
        assert bindings.body is None

    def test_several_body_parameters_raise(self):
        params = [_param("a", from_body=True), _param("b", from_body=True)]
        with pytest.raises(AmbiguousBodyParameterError) as exc_info:
            classify_parameters(params, [], method="Save")
        assert exc_info.value.parameters == ["a", "b"]
        assert "Save" in str(exc_info.value)
