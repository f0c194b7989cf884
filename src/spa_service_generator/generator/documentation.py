"""Summary and parameter descriptions from XML documentation comments."""

from spa_service_generator.errors import MissingDocumentationError
from spa_service_generator.frontend.base import DocElement
from spa_service_generator.generator.model import Documentation


def normalize_whitespace(text: str) -> str:
    """Collapse continuation lines and indentation into single spaces."""
    return " ".join(text.split())


def extract_documentation(elements: list[DocElement] | None, method: str = "") -> Documentation:
    """Build a Documentation from a method's documentation elements.

    The first <summary> element is required. <param> descriptions keep their
    text verbatim and their order of appearance.
    """
    summary = next((e for e in elements or [] if e.tag == "summary"), None)
    if summary is None:
        raise MissingDocumentationError(method)

    parameters = [
        (e.attributes.get("name", ""), e.text)
        for e in elements
        if e.tag == "param"
    ]
    return Documentation(summary=normalize_whitespace(summary.text), parameters=parameters)
