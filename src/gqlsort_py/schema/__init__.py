"""Value models shared by the sorter, parsers and CLI."""
from gqlsort_py.schema.options import CompareOptions, coerce_compare_options
