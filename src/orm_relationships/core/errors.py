"""Errors raised by the repositories, the example registry and the SQL script loader."""


class RelationshipsError(Exception):
    """Base class for errors raised by this package."""


class DataIntegrityViolationError(RelationshipsError):
    """The database rejected a write because it would break a constraint.

    Raised for foreign key, unique and not-null violations. The original
    driver error is chained as ``__cause__``.
    """

    def __init__(self, operation: str, entity_name: str, detail: str) -> None:
        self.operation = operation
        self.entity_name = entity_name
        self.detail = detail
        super().__init__(f"Could not {operation} {entity_name}: {detail}")


class UnknownExampleError(RelationshipsError, KeyError):
    """No example is registered under the requested slug or number."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Unknown example: {self.key!r}"


class SqlScriptNotFoundError(RelationshipsError, FileNotFoundError):
    """A schema or fixture script does not exist for an example."""

    def __init__(self, example: str, script: str) -> None:
        self.example = example
        self.script = script
        super().__init__(f"No SQL script {script!r} for example {example!r}")
