"""Tests for gitignore-style path suppression."""

from leaksniff.scanner.ignore import IgnoreMatcher, build_ignore_matcher, should_ignore_path


def test_respects_gitignore_style_patterns(tmp_path):
    ignore_file = tmp_path / "ignore.txt"
    ignore_file.write_text("secrets/*.env\n")
    matcher = build_ignore_matcher(str(ignore_file))
    assert should_ignore_path("secrets/prod.env", matcher) is True
    assert should_ignore_path("src/app.ts", matcher) is False


def test_comments_blank_lines_and_negation(tmp_path):
    ignore_file = tmp_path / ".secret-scan-ignore"
    ignore_file.write_text("# generated fixtures\n\nfixtures/\n*.md\n!README.md\r\n")
    matcher = build_ignore_matcher(str(ignore_file))
    assert matcher.matches("fixtures/keys.json")
    assert matcher.matches("docs/notes.md")
    assert not matcher.matches("README.md")
    assert not matcher.matches("# generated fixtures")


def test_directory_patterns_match_nested_paths():
    matcher = IgnoreMatcher.from_lines(["generated/"])
    assert matcher.matches("generated/a.ts")
    assert matcher.matches("pkg/generated/b/c.ts")
    assert not matcher.matches("src/generated.ts")


def test_missing_file_is_permissive(tmp_path):
    assert build_ignore_matcher(str(tmp_path / "does-not-exist")) is None
    assert build_ignore_matcher(None) is None
    assert should_ignore_path("anything.ts", None) is False
