"""Parameter extractor interface."""

from typing import Protocol


class IParameterExtractor(Protocol):
    """Contract for looking up the declared parameters of an operation."""

    def extract(self, operation_name: str) -> list[str]:
        """Return the ordered parameter names of an operation.

        Args:
            operation_name: Name of the client method.

        Returns:
            The declared parameter names, in order.
        """
        ...
