"""Tests for the gqlsort command line."""
import json
import os
import shutil

from graphql import introspection_from_schema

from gqlsort_py.cli import build_parser, compare_options_from_args, detect_format, main
from gqlsort_py.parser.sdl_parser import parse_sdl_file
from gqlsort_py.schema.options import CompareOptions
from gqlsort_py.serializer.fingerprint import compute_schema_fingerprint

DATASET_DIR = os.path.join(os.path.dirname(__file__), "..", "dataset")
STARWARS = os.path.join(DATASET_DIR, "starwars.graphql")
CYCLIC = os.path.join(DATASET_DIR, "cyclic.graphql")


def test_sort_to_stdout(capsys):
    assert main(["--input", STARWARS]) == 0
    out = capsys.readouterr().out
    assert out.index("type Droid") < out.index("type Human") < out.index("type Query")
    assert "directive @rollout(flag: String!, percent: Int) repeatable on" in out


def test_sort_to_file_then_check(tmp_path):
    output = tmp_path / "sorted" / "starwars.graphql"
    assert main(["--input", STARWARS, "--output", str(output)]) == 0
    assert output.exists()
    assert main(["--input", str(output), "--check"]) == 0


def test_check_unsorted_fails():
    assert main(["--input", STARWARS, "--check"]) == 1


def test_fingerprint(capsys):
    assert main(["--input", STARWARS, "--fingerprint"]) == 0
    out = capsys.readouterr().out.strip()
    assert out == compute_schema_fingerprint(parse_sdl_file(STARWARS))


def test_json_output(capsys):
    assert main(["--input", CYCLIC, "--to", "json"]) == 0
    data = json.loads(capsys.readouterr().out)
    names = [t["name"] for t in data["__schema"]["types"]]
    assert names.index("A") < names.index("B") < names.index("Query")


def test_introspection_input(tmp_path, capsys):
    path = tmp_path / "cyclic.json"
    schema = parse_sdl_file(CYCLIC)
    path.write_text(json.dumps({"data": introspection_from_schema(schema)}), encoding="utf-8")
    assert main(["--input", str(path)]) == 0
    out = capsys.readouterr().out
    assert "type A {\n  b: B!\n  name: String\n  self: A\n}" in out


def test_locale_flag_changes_order(tmp_path, capsys):
    path = tmp_path / "mixed.graphql"
    path.write_text("type Query { gamma: Int Beta: Int alpha: Int }\n", encoding="utf-8")
    assert main(["--input", str(path), "--locale", "en"]) == 0
    out = capsys.readouterr().out
    assert out.index("alpha") < out.index("Beta") < out.index("gamma")


def test_batch(tmp_path, capsys):
    input_dir = tmp_path / "in"
    output_dir = tmp_path / "out"
    input_dir.mkdir()
    shutil.copy(STARWARS, input_dir / "starwars.graphql")
    shutil.copy(CYCLIC, input_dir / "cyclic.gql")
    (input_dir / "notes.txt").write_text("not a schema", encoding="utf-8")

    assert main(["--input-dir", str(input_dir), "--output-dir", str(output_dir)]) == 0
    assert sorted(os.listdir(output_dir)) == ["cyclic.graphql", "starwars.graphql"]
    out = capsys.readouterr().out
    assert "OK  cyclic.gql -> cyclic.graphql" in out
    assert "Sorted 2 files, 0 failed" in out


def test_batch_reports_failures(tmp_path, capsys):
    input_dir = tmp_path / "in"
    input_dir.mkdir()
    shutil.copy(CYCLIC, input_dir / "cyclic.graphql")
    (input_dir / "broken.graphql").write_text("type Query {", encoding="utf-8")

    assert main(["--input-dir", str(input_dir), "--output-dir", str(tmp_path / "out")]) == 1
    out = capsys.readouterr().out
    assert "FAIL broken.graphql" in out
    assert "Sorted 1 files, 1 failed" in out


def test_missing_file_reports_error(tmp_path, capsys):
    assert main(["--input", str(tmp_path / "missing.graphql")]) == 1
    assert "error:" in capsys.readouterr().err


def test_no_input_prints_help(capsys):
    assert main([]) == 1
    assert "usage: gqlsort" in capsys.readouterr().out


def test_compare_options_from_args():
    parser = build_parser()
    assert compare_options_from_args(parser.parse_args(["-i", "x.graphql"])) is None
    args = parser.parse_args([
        "-i", "x.graphql", "--locale", "en", "--locale", "fr",
        "--numeric", "--sensitivity", "accent", "--case-first", "upper",
    ])
    assert compare_options_from_args(args) == CompareOptions(
        locales=["en", "fr"],
        options={"sensitivity": "accent", "numeric": True, "caseFirst": "upper"},
    )


def test_detect_format():
    assert detect_format("schema.json") == "introspection"
    assert detect_format("schema.graphql") == "sdl"
