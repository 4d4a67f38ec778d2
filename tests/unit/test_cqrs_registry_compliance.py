"""CQRS Registry Compliance Tests.

Self-enforcing tests that fail if the registry, the handlers and the
container drift apart.

Test categories:
1. Completeness - Every request registered exactly once
2. Handler compliance - Every handler has handle()
3. Container wiring - Every handler has a factory and the dispatcher covers all
"""

from unittest.mock import patch

import pytest

from src.application.commands.handlers.create_product_handler import (
    CreateProductHandler,
)
from src.application.commands.product_commands import (
    CreateProduct,
    DeleteProduct,
    UpdateProduct,
)
from src.application.cqrs.metadata import (
    QueryMetadata,
    get_handler_factory_name,
    request_class,
)
from src.application.cqrs.registry import (
    COMMAND_REGISTRY,
    QUERY_REGISTRY,
    get_all_commands,
    get_all_queries,
    get_handler_class,
    validate_registry_consistency,
)
from src.application.dtos import ProductViewDto
from src.application.queries.handlers.get_product_by_id_handler import (
    GetProductByIdHandler,
)
from src.application.queries.product_queries import GetAllProducts, GetProductById
from src.core import container
from src.infrastructure.persistence.in_memory import InMemoryProductRepository

ALL_METADATA = [*COMMAND_REGISTRY, *QUERY_REGISTRY]


class TestRegistryCompleteness:
    """Verify all commands and queries are registered."""

    def test_expected_commands_registered(self) -> None:
        assert set(get_all_commands()) == {CreateProduct, UpdateProduct, DeleteProduct}

    def test_expected_queries_registered(self) -> None:
        assert set(get_all_queries()) == {GetProductById, GetAllProducts}

    def test_every_request_has_exactly_one_handler(self) -> None:
        request_types = [request_class(meta) for meta in ALL_METADATA]
        duplicates = {t for t in request_types if request_types.count(t) > 1}
        assert not duplicates, f"Requests registered twice: {duplicates}"

    def test_registry_is_consistent(self) -> None:
        assert validate_registry_consistency() == []

    def test_get_handler_class_lookup(self) -> None:
        assert get_handler_class(CreateProduct) is CreateProductHandler
        assert get_handler_class(object) is None

    def test_only_list_query_is_paginated(self) -> None:
        paginated = [meta.query_class for meta in QUERY_REGISTRY if meta.is_paginated]
        assert paginated == [GetAllProducts]

    def test_paginated_flag_must_match_handler_envelope(self) -> None:
        mislabeled = QueryMetadata(
            query_class=GetProductById,
            handler_class=GetProductByIdHandler,
            result_dto_class=ProductViewDto,
            is_paginated=True,
        )

        with patch("src.application.cqrs.registry.QUERY_REGISTRY", [mislabeled]):
            errors = validate_registry_consistency()

        assert errors == [
            "Handler GetProductByIdHandler response type does not "
            "match is_paginated=True"
        ]


class TestHandlerCompliance:
    """Verify handlers satisfy the handler contract."""

    @pytest.mark.parametrize(
        "metadata", ALL_METADATA, ids=lambda m: m.handler_class.__name__
    )
    def test_handler_has_handle_method(self, metadata) -> None:
        assert callable(getattr(metadata.handler_class, "handle", None))

    @pytest.mark.parametrize(
        "metadata", ALL_METADATA, ids=lambda m: m.handler_class.__name__
    )
    def test_handler_name_matches_request(self, metadata) -> None:
        expected = f"{request_class(metadata).__name__}Handler"
        assert metadata.handler_class.__name__ == expected


class TestContainerWiring:
    """Verify container factories cover the registry."""

    @pytest.mark.parametrize(
        "metadata", ALL_METADATA, ids=lambda m: request_class(m).__name__
    )
    def test_factory_exists_and_builds_registered_handler(self, metadata) -> None:
        factory_name = get_handler_factory_name(metadata)
        factory = getattr(container, factory_name, None)

        assert factory is not None, f"Missing container factory {factory_name}"
        handler = factory(InMemoryProductRepository())
        assert isinstance(handler, metadata.handler_class)

    def test_dispatcher_covers_every_registered_request(self) -> None:
        dispatcher = container.build_dispatcher(InMemoryProductRepository())

        assert set(dispatcher.registered_types()) == {
            request_class(meta) for meta in ALL_METADATA
        }

    def test_factory_name_convention(self) -> None:
        metadata = next(m for m in QUERY_REGISTRY if m.query_class is GetProductById)
        assert get_handler_factory_name(metadata) == "get_get_product_by_id_handler"
