"""Core data models for mapcache."""

from .bound import BoundMappingSet
from .value import ListValue, MapValue, Scalar, Value, list_of, map_of, value_from_node, value_to_node

__all__ = [
    "BoundMappingSet",
    "ListValue",
    "MapValue",
    "Scalar",
    "Value",
    "list_of",
    "map_of",
    "value_from_node",
    "value_to_node",
]
