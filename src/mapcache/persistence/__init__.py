"""Persistence codec and version guard for mapping sets."""

from .codec import decode, encode, encode_result, mappings_schema
from .guard import check_version

__all__ = ["check_version", "decode", "encode", "encode_result", "mappings_schema"]
