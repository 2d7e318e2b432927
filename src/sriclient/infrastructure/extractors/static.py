"""Static parameter extractor implementation."""

from collections.abc import Mapping

from sriclient.core.entities.operation import Operation


class StaticParameterExtractor:
    """Looks up declared parameter names in an operation table."""

    def __init__(self, operations: Mapping[str, Operation] | None = None) -> None:
        """Initialize the extractor.

        Args:
            operations: Operation table keyed by method name. Defaults to
                the operations of :class:`~sriclient.client.SriClient`.
        """
        if operations is None:
            from sriclient.operations import OPERATIONS

            operations = OPERATIONS
        self._operations = operations

    def extract(self, operation_name: str) -> list[str]:
        """Return the ordered parameter names of an operation.

        Raises:
            KeyError: If the operation is unknown.
        """
        try:
            operation = self._operations[operation_name]
        except KeyError:
            raise KeyError(f"Unknown operation: {operation_name}") from None
        return list(operation.parameters)
