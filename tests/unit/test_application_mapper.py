"""Unit tests for Mapper and the product mapping profile.

Tests cover:
- Registration (duplicates rejected, bidirectional pairs)
- Resolution by source type
- MappingError for None sources, unknown pairs and failing transforms
- Product <-> ProductViewDto round trip
"""

from dataclasses import dataclass

import pytest

from src.application.commands.product_commands import CreateProduct
from src.application.dtos import ProductViewDto
from src.application.mapping import Mapper, MappingError
from src.domain.entities.product import Product
from tests.conftest import create_product


@dataclass
class Source:
    value: int


@dataclass
class Target:
    value: int


@pytest.mark.unit
class TestMapperRegistry:
    """Test registration and lookup."""

    def test_register_and_map(self):
        mapper = Mapper()
        mapper.register(Source, Target, lambda s: Target(value=s.value * 2))

        assert mapper.map(Source(value=21), Target) == Target(value=42)

    def test_duplicate_registration_rejected(self):
        mapper = Mapper()
        mapper.register(Source, Target, lambda s: Target(value=s.value))

        with pytest.raises(ValueError, match="already registered"):
            mapper.register(Source, Target, lambda s: Target(value=0))

    def test_register_bidirectional_registers_both_directions(self):
        mapper = Mapper()
        mapper.register_bidirectional(
            Source,
            Target,
            lambda s: Target(value=s.value),
            lambda t: Source(value=t.value),
        )

        assert mapper.has_mapping(Source, Target)
        assert mapper.has_mapping(Target, Source)

    def test_map_many_preserves_order(self):
        mapper = Mapper()
        mapper.register(Source, Target, lambda s: Target(value=s.value))

        result = mapper.map_many([Source(value=3), Source(value=1)], Target)

        assert result == [Target(value=3), Target(value=1)]


@pytest.mark.unit
class TestMapperErrors:
    """Test MappingError cases."""

    def test_none_source_raises_mapping_error(self):
        mapper = Mapper()
        mapper.register(Source, Target, lambda s: Target(value=s.value))

        with pytest.raises(MappingError) as exc_info:
            mapper.map(None, Target)

        assert exc_info.value.source_type == "None"
        assert exc_info.value.target_type == "Target"

    def test_unknown_pair_raises_mapping_error(self):
        mapper = Mapper()

        with pytest.raises(MappingError, match="No mapping registered"):
            mapper.map(Source(value=1), Target)

    def test_failing_transform_wrapped_in_mapping_error(self):
        mapper = Mapper()

        def broken(source: Source) -> Target:
            raise ValueError("bad value")

        mapper.register(Source, Target, broken)

        with pytest.raises(MappingError) as exc_info:
            mapper.map(Source(value=1), Target)

        assert isinstance(exc_info.value.__cause__, ValueError)


@pytest.mark.unit
class TestProductMappingProfile:
    """Test the registered product profile."""

    def test_product_to_view_copies_all_fields(self, mapper: Mapper):
        product = create_product("Laptop", 10, 149)

        dto = mapper.map(product, ProductViewDto)

        assert dto.id == product.id
        assert dto.name == "Laptop"
        assert dto.quality == 10
        assert dto.quantity == 149
        assert dto.create_date == product.create_date

    def test_view_round_trip_returns_equal_product(self, mapper: Mapper):
        product = create_product("TV", 10, 257)

        round_tripped = mapper.map(mapper.map(product, ProductViewDto), Product)

        assert round_tripped == product

    def test_create_command_maps_to_new_product(self, mapper: Mapper):
        command = CreateProduct(name="Desktop PC", quality=10, quantity=124)

        product = mapper.map(command, Product)

        assert product.name == "Desktop PC"
        assert product.quality == 10
        assert product.quantity == 124
        assert product.create_date.tzinfo is not None

    def test_product_maps_back_to_create_command(self, mapper: Mapper):
        product = create_product("Mobile Phone", 10, 52)

        command = mapper.map(product, CreateProduct)

        assert command == CreateProduct(name="Mobile Phone", quality=10, quantity=52)
