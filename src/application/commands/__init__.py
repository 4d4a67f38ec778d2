"""Commands - Write operations that change state.

Commands represent intent to perform an action. They are immutable
dataclasses with imperative names (CreateProduct, DeleteProduct).

Each command has a corresponding handler that executes it.
"""

from src.application.commands.product_commands import (
    CreateProduct,
    DeleteProduct,
    UpdateProduct,
)

__all__ = [
    "CreateProduct",
    "DeleteProduct",
    "UpdateProduct",
]
