import pytest

from byte_efficiency.domain.exceptions import ValidationError
from byte_efficiency.utils import formatting, validators


@pytest.mark.parametrize(
    "value,expected",
    [(0.5, 1), (2.5, 3), (1.49, 1), (457.746, 458), (-0.5, 0), (0.0, 0)],
)
def test_round_half_up_matches_javascript_rounding(value, expected):
    assert formatting.round_half_up(value) == expected


def test_bytes_to_kb_string():
    assert formatting.bytes_to_kb_string(2048) == "2.0 KB"
    assert formatting.bytes_to_kb_string(1_536_000) == "1,500.0 KB"
    assert formatting.bytes_to_kb_string(0) == "0.0 KB"


def test_format_savings_includes_rounded_percent():
    assert formatting.format_savings(4577, 45.77) == "4.5 KB (46%)"
    assert formatting.format_savings(2048, 12.5) == "2.0 KB (13%)"


def test_threshold_validators():
    validators.validate_threshold_percent(0)
    validators.validate_threshold_percent(0.1)
    with pytest.raises(ValidationError):
        validators.validate_threshold_percent(1)
    with pytest.raises(ValidationError):
        validators.validate_threshold_percent(-0.1)

    validators.validate_threshold_bytes(0)
    with pytest.raises(ValueError):
        validators.validate_threshold_bytes(-1)


def test_validate_content_rejects_non_strings():
    with pytest.raises(ValidationError):
        validators.validate_content(b"var a;")  # type: ignore[arg-type]
