"""
Tests for variable source loading.
Verifies source file parsing, failure kinds and file-over-environment precedence.
"""

import pytest
from pathlib import Path

from envsmart.exceptions import ErrorKind, SourceLoadError
from envsmart.sources.loader import VariableSourceLoader, parse_source_lines


class TestParseSourceLines:
    """Parsing NAME=VALUE records."""

    def test_basic_records(self):
        table = parse_source_lines(["FOO=bar\n", "BAZ=qux\n"])
        assert table == {'FOO': 'bar', 'BAZ': 'qux'}

    def test_value_keeps_further_separators(self):
        table = parse_source_lines(["URL=postgres://u:p@host/db?sslmode=require"])
        assert table['URL'] == "postgres://u:p@host/db?sslmode=require"

    def test_empty_value_is_allowed(self):
        assert parse_source_lines(["EMPTY="]) == {'EMPTY': ''}

    def test_value_is_kept_verbatim(self):
        table = parse_source_lines(['QUOTED=" padded "\r\n'])
        assert table['QUOTED'] == '" padded "'

    def test_blank_lines_and_comments_skipped(self):
        table = parse_source_lines(["\n", "# comment=ignored\n", "   \n", "FOO=bar\n"])
        assert table == {'FOO': 'bar'}

    def test_name_without_value(self):
        with pytest.raises(SourceLoadError) as exc_info:
            parse_source_lines(["FOO=bar\n", "LONELY\n"])

        error = exc_info.value
        assert error.kind == ErrorKind.SOURCE_MALFORMED_LINE
        assert error.name == "LONELY"
        assert error.line_number == 2
        assert str(error) == ".env file has 'LONELY' without value"

    def test_empty_name(self):
        with pytest.raises(SourceLoadError) as exc_info:
            parse_source_lines(["=value"])

        assert exc_info.value.kind == ErrorKind.SOURCE_MALFORMED_LINE
        assert exc_info.value.name == ""

    def test_duplicate_name(self):
        with pytest.raises(SourceLoadError) as exc_info:
            parse_source_lines(["FOO=1\n", "BAR=2\n", "FOO=1\n"])

        error = exc_info.value
        assert error.kind == ErrorKind.SOURCE_DUPLICATE_KEY
        assert error.name == "FOO"
        assert error.line_number == 3
        assert str(error) == ".env file has multiple instances of 'FOO'"


class TestVariableSourceLoader:
    """Reading the file and merging the environment."""

    def test_file_wins_over_environment(self, tmp_path):
        source = tmp_path / ".env"
        source.write_text("NAME=file-value\n")

        loader = VariableSourceLoader(source, environ={'NAME': 'env-value', 'OTHER': 'x'})
        table = loader.load()

        assert table['NAME'] == 'file-value'
        assert table['OTHER'] == 'x'

    def test_missing_file_uses_environment_only(self, tmp_path):
        loader = VariableSourceLoader(tmp_path / "absent.env", environ={'PWD': '/x'})
        assert loader.load() == {'PWD': '/x'}

    def test_unreadable_source_is_a_read_failure(self, tmp_path):
        # A directory exists but cannot be opened as a file
        source_dir = tmp_path / "dir.env"
        source_dir.mkdir()

        with pytest.raises(SourceLoadError) as exc_info:
            VariableSourceLoader(source_dir, environ={}).load()

        assert exc_info.value.kind == ErrorKind.SOURCE_READ_FAILURE
        assert exc_info.value.path == source_dir
        assert str(exc_info.value).startswith(".env: Cannot open:")

    def test_undecodable_source_is_a_read_failure(self, tmp_path):
        source = tmp_path / ".env"
        source.write_bytes(b"FOO=\xff\xfe\n")

        with pytest.raises(SourceLoadError) as exc_info:
            VariableSourceLoader(source, environ={}).load()

        assert exc_info.value.kind == ErrorKind.SOURCE_READ_FAILURE

    def test_duplicate_in_file_fails_load(self, tmp_path):
        source = tmp_path / ".env"
        source.write_text("FOO=1\nFOO=1\n")

        with pytest.raises(SourceLoadError) as exc_info:
            VariableSourceLoader(source, environ={}).load()

        assert exc_info.value.kind == ErrorKind.SOURCE_DUPLICATE_KEY
        assert exc_info.value.path == source

    def test_load_does_not_modify_environment(self, tmp_path):
        source = tmp_path / ".env"
        source.write_text("FOO=bar\n")
        environ = {'BAZ': 'qux'}

        VariableSourceLoader(source, environ=environ).load()

        assert environ == {'BAZ': 'qux'}
        assert source.read_text() == "FOO=bar\n"

    def test_default_path_is_dotenv(self):
        assert VariableSourceLoader().path == Path(".env")
