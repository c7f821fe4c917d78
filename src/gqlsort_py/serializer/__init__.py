"""Serializers for SDL, introspection JSON and schema fingerprints."""
from gqlsort_py.serializer.sdl_serializer import serialize_sdl
from gqlsort_py.serializer.json_serializer import serialize_json
from gqlsort_py.serializer.fingerprint import compute_schema_fingerprint
