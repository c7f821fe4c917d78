"""Lexicographic schema sorting and the name comparator behind it."""
from gqlsort_py.converter.collation import build_sort_key
from gqlsort_py.converter.lexicographic_sort import SchemaSorter, lexicographic_sort_schema
from gqlsort_py.converter.sort_check import is_lexicographically_sorted
