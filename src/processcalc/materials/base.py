"""
Registry lookup shared by all material families.

Each process family keeps its own registry; the same key may name different
materials in different registries, so lookups always go through the registry
for the process being calculated.
"""

from typing import List, Mapping, Optional, Tuple, TypeVar

from ..exceptions import MaterialNotFoundError

T = TypeVar("T")


def validate_material(registry: Mapping[str, T], key: str, registry_name: Optional[str] = None) -> T:
    """
    Look up a material record by key.

    Args:
        registry: Material registry for the process family
        key: Material key, e.g. 'steel-low-carbon'
        registry_name: Registry label carried on the error (for messages)

    Returns:
        The material record

    Raises:
        MaterialNotFoundError: If key is not in the registry
    """
    try:
        return registry[key]
    except (KeyError, TypeError):
        raise MaterialNotFoundError(key, registry_name) from None


def list_materials(registry: Mapping[str, T]) -> List[Tuple[str, str]]:
    """Return (key, display name) pairs in registry order."""
    return [(key, material.name) for key, material in registry.items()]
