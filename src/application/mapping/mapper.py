"""Type-keyed object mapper.

Holds a table of pure transform functions keyed by ``(source_type,
target_type)``. Profiles (see ``product_mapping``) fill the table once at
startup; call sites resolve a transform by the runtime type of the source
and the requested target type.

Thread-safe after configuration: the table is only read by ``map``.

Example:
    >>> mapper = Mapper()
    >>> mapper.register_bidirectional(Product, ProductViewDto, to_view, from_view)
    >>> dto = mapper.map(product, ProductViewDto)
"""

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

T = TypeVar("T")

MapFunction = Callable[[Any], Any]


class MappingError(Exception):
    """Raised when an object cannot be transformed to the requested type.

    Covers a missing source, an unregistered type pair and a malformed
    source that the transform rejects.

    Attributes:
        source_type: Name of the source type (or "None").
        target_type: Name of the requested target type.
    """

    def __init__(self, message: str, *, source_type: str, target_type: str) -> None:
        super().__init__(message)
        self.source_type = source_type
        self.target_type = target_type


class Mapper:
    """Registry of transform functions between types."""

    def __init__(self) -> None:
        self._maps: dict[tuple[type, type], MapFunction] = {}

    def register(
        self, source_type: type, target_type: type, fn: MapFunction
    ) -> None:
        """Register a one-way transform.

        Args:
            source_type: Type accepted by ``fn``.
            target_type: Type produced by ``fn``.
            fn: Pure transform function.

        Raises:
            ValueError: If the pair is already registered.
        """
        key = (source_type, target_type)
        if key in self._maps:
            raise ValueError(
                f"Mapping {source_type.__name__} -> {target_type.__name__} "
                "is already registered"
            )
        self._maps[key] = fn

    def register_bidirectional(
        self,
        first: type,
        second: type,
        forward: MapFunction,
        reverse: MapFunction,
    ) -> None:
        """Register a transform and its reverse.

        Args:
            first: Source type of ``forward``.
            second: Target type of ``forward``.
            forward: ``first -> second`` transform.
            reverse: ``second -> first`` transform.
        """
        self.register(first, second, forward)
        self.register(second, first, reverse)

    def has_mapping(self, source_type: type, target_type: type) -> bool:
        """Check whether a transform is registered for the pair."""
        return (source_type, target_type) in self._maps

    def map(self, source: object, target_type: type[T]) -> T:
        """Transform ``source`` into ``target_type``.

        Args:
            source: Object to transform.
            target_type: Requested result type.

        Returns:
            Transformed object.

        Raises:
            MappingError: If source is None, the pair is not registered, or
                the transform rejects the source.
        """
        target_name = target_type.__name__
        if source is None:
            raise MappingError(
                f"Cannot map None to {target_name}",
                source_type="None",
                target_type=target_name,
            )

        source_name = type(source).__name__
        fn = self._maps.get((type(source), target_type))
        if fn is None:
            raise MappingError(
                f"No mapping registered for {source_name} -> {target_name}",
                source_type=source_name,
                target_type=target_name,
            )

        try:
            result: T = fn(source)
        except (AttributeError, TypeError, ValueError) as e:
            raise MappingError(
                f"Failed to map {source_name} -> {target_name}: {e}",
                source_type=source_name,
                target_type=target_name,
            ) from e
        return result

    def map_many(self, sources: Iterable[object], target_type: type[T]) -> list[T]:
        """Transform every item of ``sources``.

        Args:
            sources: Objects to transform.
            target_type: Requested result type.

        Returns:
            List of transformed objects, in input order.

        Raises:
            MappingError: If any item cannot be mapped.
        """
        return [self.map(source, target_type) for source in sources]
