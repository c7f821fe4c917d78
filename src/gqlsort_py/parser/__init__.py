"""Parsers for GraphQL SDL and introspection JSON."""
from gqlsort_py.parser.sdl_parser import parse_sdl, parse_sdl_file
from gqlsort_py.parser.introspection_parser import parse_introspection, parse_introspection_file
