import pytest

from interviewkit.validator import PatternError, StringValidator

PATTERNS = ["^user_", r"\d{3}", "_test$"]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("user_123_test", True),
        ("user_456", False),
        ("admin_123_test", False),
        ("user_12_test", False),
    ],
)
def test_validate_against_all_patterns(text, expected):
    assert StringValidator(PATTERNS).validate(text) is expected


def test_empty_validator_accepts_anything():
    assert StringValidator().validate("anything at all") is True


def test_from_file_skips_blank_lines(tmp_path):
    path = tmp_path / "patterns.cfg"
    path.write_text("^user_\n\n\\d{3}\n_test$\n", encoding="utf-8")
    validator = StringValidator.from_file(path)
    assert validator.patterns == PATTERNS
    assert validator.validate("user_123_test") is True
    assert validator.validate("user_123") is False


def test_from_file_without_trailing_newline(tmp_path):
    path = tmp_path / "patterns.cfg"
    path.write_text("^user_\n_test$", encoding="utf-8")
    validator = StringValidator.from_file(path)
    assert validator.patterns == ["^user_", "_test$"]


def test_from_file_reports_bad_line(tmp_path):
    path = tmp_path / "patterns.cfg"
    path.write_text("^ok\n\n(unclosed\n", encoding="utf-8")
    with pytest.raises(PatternError) as info:
        StringValidator.from_file(path)
    assert info.value.line == 3
    assert "(unclosed" in str(info.value)


def test_constructor_rejects_bad_pattern():
    with pytest.raises(PatternError):
        StringValidator(["[a-"])


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        StringValidator.from_file(tmp_path / "absent.cfg")