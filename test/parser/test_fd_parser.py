import pytest

from fdkeys.elements.attribute_set import AttributeSet
from fdkeys.exceptions import DependencyParseError
from fdkeys.keys.enumerator import enumerate_all
from fdkeys.parser.fd_parser import (
    ParserConfig,
    load_dependency_file,
    parse_attribute_count,
    parse_attribute_list,
    parse_dependencies,
    parse_dependency_line,
)


class TestAttributeLists:
    def test_letters_become_ids(self):
        assert parse_attribute_list("A, C,B", 3) == AttributeSet((0, 1, 2))

    def test_duplicates_collapse(self):
        assert parse_attribute_list("B,B", 2) == AttributeSet((1,))

    def test_letter_beyond_universe(self):
        with pytest.raises(DependencyParseError, match="Expected attributes from A to C"):
            parse_attribute_list("A,D", 3)

    @pytest.mark.parametrize("text", ["a", "A,,B", "AB", "1", "A,"])
    def test_invalid_tokens(self, text):
        with pytest.raises(DependencyParseError, match="Missing valid attribute"):
            parse_attribute_list(text, 5)


class TestDependencyLines:
    def test_parse_line(self):
        dependency = parse_dependency_line("A,B -> C", 3)
        assert dependency.lhs == AttributeSet((0, 1))
        assert dependency.rhs == AttributeSet((2,))

    def test_whitespace_is_optional(self):
        assert str(parse_dependency_line("A->B,C", 3)) == "A -> B,C"

    def test_missing_separator(self):
        with pytest.raises(DependencyParseError, match="Missing '->'"):
            parse_dependency_line("A, B", 3)

    def test_empty_right_side(self):
        with pytest.raises(DependencyParseError, match="Right-hand side empty"):
            parse_dependency_line("A ->", 3)

    def test_empty_left_side(self):
        with pytest.raises(DependencyParseError, match="Left-hand side empty"):
            parse_dependency_line(" -> A", 3)

    def test_two_separators(self):
        with pytest.raises(DependencyParseError, match="More than one"):
            parse_dependency_line("A -> B -> C", 3)

    def test_custom_separator(self):
        config = ParserConfig(separator="=>", delimiter=" ")
        dependency = parse_dependency_line("A B => C", 3, config)
        assert dependency.lhs == AttributeSet((0, 1))


class TestAttributeCount:
    @pytest.mark.parametrize("text, expected", [("1", 1), (" 26 ", 26)])
    def test_valid_counts(self, text, expected):
        assert parse_attribute_count(text) == expected

    @pytest.mark.parametrize("text", ["0", "27", "-3"])
    def test_out_of_range(self, text):
        with pytest.raises(DependencyParseError, match="Must be between 1 and 26"):
            parse_attribute_count(text)

    def test_not_a_number(self):
        with pytest.raises(DependencyParseError, match="expected an integer"):
            parse_attribute_count("three")


class TestFiles:
    def test_parse_lines(self):
        deps = parse_dependencies(["2\n", "A -> B\n"])
        assert deps.n_attributes == 2
        assert len(deps) == 1

    def test_blank_and_comment_lines_are_skipped(self):
        deps = parse_dependencies(["# header", "", "3", "  ", "A -> B", "# note"])
        assert deps.n_attributes == 3
        assert [str(d) for d in deps] == ["A -> B"]

    def test_empty_input(self):
        with pytest.raises(DependencyParseError, match="File is empty!") as info:
            parse_dependencies(["", "# nothing"])
        assert info.value.line_number is None

    def test_error_carries_line_number(self):
        with pytest.raises(DependencyParseError) as info:
            parse_dependencies(["3", "A -> B", "A -> E"])
        assert info.value.line_number == 3
        assert str(info.value).startswith("Line 3:")

    def test_count_only_file_has_one_key(self):
        deps = parse_dependencies(["4"])
        assert enumerate_all(4, deps) == [AttributeSet.full(4)]

    def test_load_reference_file(self, data_dir, reference_deps):
        assert load_dependency_file(data_dir / "reference.fd") == reference_deps

    def test_load_file_with_comment(self, data_dir, cycle_deps):
        assert load_dependency_file(data_dir / "cycle.fd") == cycle_deps

    def test_missing_separator_in_file(self, data_dir):
        with pytest.raises(DependencyParseError, match="Missing '->'") as info:
            load_dependency_file(data_dir / "missing_separator.fd")
        assert info.value.line_number == 3

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_dependency_file(tmp_path / "absent.fd")

    def test_invalid_utf8_is_a_parse_error(self, tmp_path):
        path = tmp_path / "binary.fd"
        path.write_bytes(b"2\nA -> \xff\n")
        with pytest.raises(DependencyParseError, match="not valid UTF-8") as info:
            load_dependency_file(path)
        assert info.value.line_number == 2

    def test_crlf_line_endings(self, tmp_path):
        path = tmp_path / "windows.fd"
        path.write_bytes(b"2\r\nA -> B\r\n")
        assert [str(d) for d in load_dependency_file(path)] == ["A -> B"]
