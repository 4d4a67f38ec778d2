"""Product mapping profile.

Field-to-field correspondences between the Product entity and its
transport shapes. Field names match one-to-one; nothing is renamed or
computed.

Registered pairs:
    Product <-> ProductViewDto
    Product <-> CreateProduct
"""

from src.application.commands.product_commands import CreateProduct
from src.application.dtos.product_dtos import ProductViewDto
from src.application.mapping.mapper import Mapper
from src.domain.entities.product import Product


def product_to_view(product: Product) -> ProductViewDto:
    """Map Product entity to its view DTO."""
    return ProductViewDto(
        id=product.id,
        name=product.name,
        quality=product.quality,
        quantity=product.quantity,
        create_date=product.create_date,
    )


def view_to_product(dto: ProductViewDto) -> Product:
    """Map view DTO back to a Product entity."""
    return Product(
        id=dto.id,
        name=dto.name,
        quality=dto.quality,
        quantity=dto.quantity,
        create_date=dto.create_date,
    )


def create_command_to_product(command: CreateProduct) -> Product:
    """Map CreateProduct to a new Product (fresh id and create_date)."""
    return Product.create(
        name=command.name,
        quality=command.quality,
        quantity=command.quantity,
    )


def product_to_create_command(product: Product) -> CreateProduct:
    """Map Product to the command that would create an equivalent product."""
    return CreateProduct(
        name=product.name,
        quality=product.quality,
        quantity=product.quantity,
    )


def configure_product_mappings(mapper: Mapper) -> Mapper:
    """Register the product profile on ``mapper``.

    Args:
        mapper: Mapper to configure.

    Returns:
        The same mapper, for chaining.
    """
    mapper.register_bidirectional(Product, ProductViewDto, product_to_view, view_to_product)
    mapper.register_bidirectional(
        Product, CreateProduct, product_to_create_command, create_command_to_product
    )
    return mapper
