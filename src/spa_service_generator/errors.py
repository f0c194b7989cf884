"""Error taxonomy for service generation.

Controller-scoped errors derive from GenerationError: the driver reports them
and moves on to the next controller. SolutionLoadError and
NoFrontEndProjectsError abort the whole run.
"""


class GenerationError(Exception):
    """Base class for errors that abort generation of a single controller."""


class MissingDocumentationError(GenerationError):
    def __init__(self, method: str):
        self.method = method
        super().__init__(f"Method '{method}' has no <summary> documentation.")


class MissingVerbAnnotationError(GenerationError):
    def __init__(self, method: str):
        self.method = method
        super().__init__(f"Method '{method}' has no HTTP verb attribute.")


class AmbiguousVerbAnnotationError(GenerationError):
    def __init__(self, method: str, attributes: list[str]):
        self.method = method
        self.attributes = attributes
        super().__init__(
            f"Method '{method}' has several HTTP verb attributes: {', '.join(attributes)}."
        )


class AmbiguousBodyParameterError(GenerationError):
    def __init__(self, method: str, parameters: list[str]):
        self.method = method
        self.parameters = parameters
        super().__init__(
            f"Method '{method}' has several [FromBody] parameters: {', '.join(parameters)}."
        )


class MalformedRouteError(GenerationError):
    def __init__(self, route: str | None, reason: str, method: str | None = None):
        self.route = route
        self.reason = reason
        self.method = method
        where = f" on method '{method}'" if method else ""
        super().__init__(f"Malformed route {route!r}{where}: {reason}.")


class UnresolvableBaseControllerError(GenerationError):
    def __init__(self, controller: str, base_type: str):
        self.controller = controller
        self.base_type = base_type
        super().__init__(
            f"Base controller '{base_type}' of '{controller}' is not declared in the loaded solution."
        )


class MissingControllerClassError(GenerationError):
    def __init__(self, document: str):
        self.document = document
        super().__init__(f"Document '{document}' does not declare any class.")


class IOFailureError(GenerationError):
    def __init__(self, path: str, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not write '{path}': {cause}")


class SolutionLoadError(Exception):
    """The solution could not be opened or parsed."""


class NoFrontEndProjectsError(Exception):
    def __init__(self, project_name: str):
        self.project_name = project_name
        super().__init__(f"No front-end project matches '{project_name}*FrontEnd'.")
