from .parser import _build_parser, parse_range

__all__ = ['_build_parser', 'parse_range']
