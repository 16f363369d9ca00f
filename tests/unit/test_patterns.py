"""Unit tests for pattern compilation."""

import re

import pytest

from dotignore.constants import PatternKind
from dotignore.core.errors import InvalidPatternError, PatternCompileError, PatternError
from dotignore.core.patterns import compile_pattern, compile_patterns, translate_glob


class TestTranslateGlob:
    """Tests for translate_glob function."""

    def test_star_stays_within_segment(self):
        """Test that '*' does not cross a separator."""
        regex = re.compile(translate_glob("*.txt"))

        for path in ["file.txt", "a.txt", "log.txt", ".txt"]:
            assert regex.fullmatch(path), path
        for path in ["file.log", "a/b.txt", "filetxt"]:
            assert not regex.fullmatch(path), path

    def test_question_mark_matches_one_character(self):
        """Test that '?' matches exactly one non-separator character."""
        regex = re.compile(translate_glob("file?.txt"))

        for path in ["file1.txt", "fileX.txt", "file_.txt"]:
            assert regex.fullmatch(path), path
        for path in ["file.txt", "file12.txt", "file/.txt"]:
            assert not regex.fullmatch(path), path

    def test_double_star_slash_matches_zero_or_more_segments(self):
        """Test that '**/' matches any depth, including none."""
        regex = re.compile(translate_glob("**/build"))

        assert translate_glob("**/build") == "(?:.*/)?build"
        assert regex.fullmatch("build")
        assert regex.fullmatch("a/build")
        assert regex.fullmatch("a/b/c/build")
        assert not regex.fullmatch("xbuild")

    def test_trailing_double_star_matches_everything_below(self):
        """Test that a trailing '**' matches across separators."""
        regex = re.compile(translate_glob("abc/**"))

        assert regex.fullmatch("abc/anything")
        assert regex.fullmatch("abc/deep/er/file")
        assert not regex.fullmatch("abc")

    def test_double_star_inside_segment_acts_like_star(self):
        """Test that '**' not followed by '/' or the end behaves like '*'."""
        regex = re.compile(translate_glob("a**b"))

        assert regex.fullmatch("axyzb")
        assert not regex.fullmatch("ax/yb")

    def test_regex_metacharacters_are_literal(self):
        """Test that '.', '$', '+' and '(' match themselves."""
        regex = re.compile(translate_glob("a.b$c+(d)"))

        assert regex.fullmatch("a.b$c+(d)")
        assert not regex.fullmatch("aXb$c+(d)")

    def test_escaped_metacharacter_is_literal(self):
        """Test that a backslash escape matches the character itself."""
        regex = re.compile(translate_glob("a\\*b"))

        assert regex.fullmatch("a*b")
        assert not regex.fullmatch("axb")

    @pytest.mark.parametrize("pattern,matching,non_matching", [
        ("a[b-d]e", ["abe", "ace", "ade"], ["aae", "afe", "a/e"]),
        ("a[!b-d]e", ["aae", "afe"], ["abe", "a/e"]),
        ("a[^b-d]e", ["aae"], ["ace"]),
        ("[]x]", ["]", "x"], ["y"]),
    ])
    def test_character_classes(self, pattern, matching, non_matching):
        """Test character classes, negated classes and a leading ']'."""
        regex = re.compile(translate_glob(pattern))

        for path in matching:
            assert regex.fullmatch(path), path
        for path in non_matching:
            assert not regex.fullmatch(path), path

    def test_escape_inside_class_is_literal(self):
        """Test that '\\-' inside a class is a literal dash, not a range or separator."""
        pattern = compile_pattern("[a\\-c]")
        regex = re.compile(translate_glob("[a\\-c]"))

        assert pattern.raw == "[a\\-c]"
        for path in ["a", "-", "c"]:
            assert regex.fullmatch(path), path
        for path in ["b", "/", "0", "B"]:
            assert not regex.fullmatch(path), path

    def test_class_never_matches_separator(self):
        """Test that a class listing '/' still does not match it."""
        regex = re.compile(translate_glob("foo[/]bar"))

        assert not regex.fullmatch("foo/bar")

    def test_unterminated_class_rejected(self):
        """Test that an unterminated character class raises ValueError."""
        with pytest.raises(ValueError, match="unterminated character class"):
            translate_glob("a[bc")

    def test_unterminated_escape_rejected(self):
        """Test that a trailing backslash raises ValueError."""
        with pytest.raises(ValueError, match="unterminated escape sequence"):
            translate_glob("abc\\")


class TestCompilePattern:
    """Tests for compile_pattern function."""

    @pytest.mark.parametrize("line", ["", "   ", "# comment", "   # indented comment", "\t"])
    def test_blank_and_comment_lines_skipped(self, line):
        """Test that blank and comment lines produce no pattern."""
        assert compile_pattern(line) is None

    def test_escaped_hash_is_not_a_comment(self):
        """Test that '\\#' starts a pattern rather than a comment."""
        pattern = compile_pattern("\\#notes")

        assert pattern is not None
        assert pattern.literal == "#notes"

    def test_negation(self):
        """Test that a leading '!' sets negate and is removed."""
        pattern = compile_pattern("!docs/README.md")

        assert pattern.negate is True
        assert pattern.raw == "docs/README.md"

    @pytest.mark.parametrize("line", ["  !docs/README.md", "!docs/README.md  "])
    def test_surrounding_whitespace_trimmed(self, line):
        """Test that whitespace around a negated pattern is insignificant."""
        pattern = compile_pattern(line)

        assert pattern.negate is True
        assert pattern.raw == "docs/README.md"

    @pytest.mark.parametrize("line", ["!", "  !  "])
    def test_single_exclamation_rejected(self, line):
        """Test that a line that is exactly '!' is an error."""
        with pytest.raises(InvalidPatternError) as exc_info:
            compile_pattern(line, 4)

        assert "single '!' is not allowed" in str(exc_info.value)
        assert exc_info.value.line_number == 4

    @pytest.mark.parametrize("line", ["/", "!/", "///"])
    def test_empty_after_markers_rejected(self, line):
        """Test that a pattern with nothing left after its markers is an error."""
        with pytest.raises(InvalidPatternError):
            compile_pattern(line)

    def test_directory_only(self):
        """Test that a trailing '/' sets directory_only and is removed."""
        pattern = compile_pattern("build/")

        assert pattern.directory_only is True
        assert pattern.raw == "build"
        assert pattern.kind is PatternKind.SEGMENT
        assert pattern.anchored is False

    def test_backslash_separators_normalized(self):
        """Test that backslashes not escaping anything become separators."""
        assert compile_pattern("build\\").raw == "build"
        assert compile_pattern("build\\").directory_only is True
        assert compile_pattern("src\\lib").raw == "src/lib"
        assert compile_pattern("src\\lib").kind is PatternKind.PREFIX

    def test_escaped_asterisk_is_literal(self):
        """Test that an escaped '*' is not a wildcard."""
        pattern = compile_pattern("a\\*b")

        assert pattern.has_wildcard is False
        assert pattern.kind is PatternKind.SEGMENT
        assert pattern.literal == "a*b"
        assert pattern.raw == "a\\*b"

    @pytest.mark.parametrize("line,kind,has_wildcard", [
        ("node_modules", PatternKind.SEGMENT, False),
        ("docs/config/CONFIG.md", PatternKind.PREFIX, False),
        ("*.log", PatternKind.FLOATING, True),
        ("file?.txt", PatternKind.FLOATING, True),
        ("a[b-d]e", PatternKind.FLOATING, False),
        ("src/*.txt", PatternKind.ANCHORED, True),
        ("**/foo/bar", PatternKind.ANCHORED, True),
    ])
    def test_kind_chosen_at_compile_time(self, line, kind, has_wildcard):
        """Test that each pattern gets the kind matching its syntax."""
        pattern = compile_pattern(line)

        assert pattern.kind is kind
        assert pattern.has_wildcard is has_wildcard

    def test_segments_recorded(self):
        """Test that the pattern is split on '/' into segments."""
        pattern = compile_pattern("docs/config/CONFIG.md")

        assert pattern.raw == "docs/config/CONFIG.md"
        assert pattern.segments == ("docs", "config", "CONFIG.md")

    def test_anchored_depth(self):
        """Test that anchored globs record their fixed depth unless they use '**'."""
        assert compile_pattern("src/*.txt").depth == 2
        assert compile_pattern("src/**/*.txt").depth is None

    def test_leading_slash_anchors(self):
        """Test that a leading '/' anchors the pattern and is not matched."""
        pattern = compile_pattern("/foo")

        assert pattern.anchored is True
        assert pattern.kind is PatternKind.PREFIX
        assert pattern.literal == "foo"
        assert pattern.segments == ("foo",)

    @pytest.mark.parametrize("line", ["[z-a]", "a[bc", "[]"])
    def test_malformed_glob_rejected(self, line):
        """Test that malformed character classes raise PatternCompileError."""
        with pytest.raises(PatternCompileError) as exc_info:
            compile_pattern(line, 7)

        assert exc_info.value.pattern == line
        assert exc_info.value.line_number == 7

    def test_pattern_errors_are_value_errors(self):
        """Test that pattern errors can be caught as ValueError."""
        assert issubclass(InvalidPatternError, PatternError)
        assert issubclass(PatternCompileError, ValueError)

    @pytest.mark.parametrize("line", ["*.log", "!keep.log", "build/", "!src/gen/"])
    def test_str_reproduces_line(self, line):
        """Test that str() gives back the pattern with its markers."""
        assert str(compile_pattern(line)) == line


class TestCompilePatterns:
    """Tests for compile_patterns function."""

    def test_blank_and_comment_lines_filtered(self):
        """Test that only real patterns are compiled."""
        lines = ["docs", "", "# comment", "config", "   ", "# another", "!config/keep"]

        patterns = compile_patterns(lines)

        assert [p.raw for p in patterns] == ["docs", "config", "config/keep"]

    def test_order_preserved(self):
        """Test that compiled patterns keep input order."""
        lines = ["c", "a", "!b", "a"]

        assert [str(p) for p in compile_patterns(lines)] == lines

    def test_line_numbers_count_skipped_lines(self):
        """Test that line numbers refer to the source, comments included."""
        patterns = compile_patterns(["# header", "", "*.log"])

        assert patterns[0].line_number == 3

    def test_error_reports_source_line(self):
        """Test that an error carries the 1-based source line number."""
        with pytest.raises(PatternCompileError) as exc_info:
            compile_patterns(["*.log", "", "[z-a]"])

        assert exc_info.value.line_number == 3

    def test_single_exclamation_fails_whole_list(self):
        """Test that one invalid line fails the whole compile step."""
        with pytest.raises(InvalidPatternError):
            compile_patterns(["!", "valid.txt"])

    def test_compilation_is_deterministic(self):
        """Test that compiling the same lines twice gives equal patterns."""
        lines = ["*.log", "!important.log", "build/", "src/**/*.py"]

        assert compile_patterns(lines) == compile_patterns(lines)

    def test_empty_input(self):
        """Test that no lines compile to no patterns."""
        assert compile_patterns([]) == []
