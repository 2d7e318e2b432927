"""Operation entity."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Operation:
    """Static description of one cached API operation.

    Attributes:
        name: Name of the client method implementing the operation.
        namespace: Cache key prefix shared by all calls of the operation.
        path: Resource path relative to the API URL. May contain an
            ``{id}`` placeholder.
        parameters: Declared optional parameter names, in order.
        relations: Parameters sent as relation filters, mapped to their
            dotted query key (e.g. ``type`` -> ``type.id``).
    """

    name: str
    namespace: str
    path: str
    parameters: tuple[str, ...] = ()
    relations: Mapping[str, str] = field(default_factory=dict)

    def resource_path(self, identifier: Any = None) -> str:
        """Return the request path, filling in ``identifier`` if needed."""
        if identifier is None:
            return self.path
        return self.path.format(id=identifier)

    def build_arguments(
        self,
        parameter_names: tuple[str, ...] | list[str],
        supplied: Mapping[str, Any],
    ) -> dict[str, Any]:
        """Build the argument mapping sent as query and hashed into the key.

        Only parameters the caller supplied take part. Falsy values are
        dropped, so an explicit ``0`` or ``""`` behaves like an omitted
        argument. Relation parameters are renamed to their dotted form.

        Args:
            parameter_names: Declared parameter names, in order.
            supplied: Values passed by the caller, ``None`` for omitted.

        Returns:
            The argument mapping.
        """
        arguments: dict[str, Any] = {}
        for name in parameter_names:
            value = supplied.get(name)
            if not value:
                continue
            arguments[self.relations.get(name, name)] = value
        return arguments
