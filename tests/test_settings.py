import pytest

from core.models import FetchOutcome, FetchSettings


def test_defaults_when_environment_is_empty():
    settings = FetchSettings.from_env({})
    assert settings == FetchSettings(http_timeout=30.0, max_retry_attempts=3, retry_delay=1.0)


def test_blank_values_fall_back_to_defaults():
    assert FetchSettings.from_env({"PARLIAMENT_HTTP_TIMEOUT": "  "}) == FetchSettings()


def test_overrides():
    settings = FetchSettings.from_env({
        "PARLIAMENT_HTTP_TIMEOUT": "12.5",
        "PARLIAMENT_MAX_RETRY_ATTEMPTS": "5",
        "PARLIAMENT_RETRY_DELAY": "0.25",
    })
    assert settings.http_timeout == 12.5
    assert settings.max_retry_attempts == 5
    assert settings.retry_delay == 0.25


@pytest.mark.parametrize("name, raw, message", [
    ("PARLIAMENT_HTTP_TIMEOUT", "soon", "must be a number"),
    ("PARLIAMENT_MAX_RETRY_ATTEMPTS", "2.5", "must be an integer"),
    ("PARLIAMENT_MAX_RETRY_ATTEMPTS", "3.0", "must be an integer"),
    ("PARLIAMENT_MAX_RETRY_ATTEMPTS", "three", "must be an integer"),
    ("PARLIAMENT_RETRY_DELAY", "fast", "must be a number"),
    ("PARLIAMENT_MAX_RETRY_ATTEMPTS", "0", "must be greater than zero"),
    ("PARLIAMENT_RETRY_DELAY", "-1", "must be greater than zero"),
])
def test_invalid_values_are_rejected(name, raw, message):
    with pytest.raises(ValueError, match=message):
        FetchSettings.from_env({name: raw})


def test_outcome_omits_status_code_when_absent():
    outcome = FetchOutcome.failure("https://x", "Network error: refused")
    assert not outcome.ok
    assert outcome.to_json() == '{"url":"https://x","error":"Network error: refused"}'


def test_outcome_success_json():
    outcome = FetchOutcome.success("https://x", '{"items":[]}')
    assert outcome.to_json() == '{"url":"https://x","data":"{\\"items\\":[]}"}'
