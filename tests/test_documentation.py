import pytest

from spa_service_generator.errors import MissingDocumentationError
from spa_service_generator.frontend.base import DocElement
from spa_service_generator.generator.documentation import extract_documentation


class TestExtractDocumentation:
    def test_summary_is_normalized(self):
        doc = extract_documentation([
            DocElement(tag="summary", text="\n Gets an order\n        by id.\n "),
        ])
        assert doc.summary == "Gets an order by id."

    def test_first_summary_wins(self):
        doc = extract_documentation([
            DocElement(tag="summary", text="First."),
            DocElement(tag="summary", text="Second."),
        ])
        assert doc.summary == "First."

    def test_params_keep_order_and_text(self):
        doc = extract_documentation([
            DocElement(tag="param", attributes={"name": "b"}, text=" Second param."),
            DocElement(tag="summary", text="Summary."),
            DocElement(tag="returns", text="Ignored."),
            DocElement(tag="param", attributes={"name": "a"}, text="First param."),
        ])
        assert doc.parameters == [("b", " Second param."), ("a", "First param.")]

    def test_lookup_by_name(self):
        doc = extract_documentation([
            DocElement(tag="summary", text="Summary."),
            DocElement(tag="param", attributes={"name": "id"}, text="Order id."),
        ])
        assert doc.description_for("id") == "Order id."
        assert doc.description_for("missing") is None

    def test_missing_summary_raises(self):
        with pytest.raises(MissingDocumentationError, match="GetOrder"):
            extract_documentation([DocElement(tag="param", attributes={"name": "id"})], "GetOrder")

    def test_no_documentation_raises(self):
        with pytest.raises(MissingDocumentationError):
            extract_documentation(None)
