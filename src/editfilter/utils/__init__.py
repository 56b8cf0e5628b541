"""
editfilter.utils – Small shared utilities.
"""
from .imports import load_object_from_ref

__all__ = ["load_object_from_ref"]
