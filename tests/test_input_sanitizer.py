"""Tests for chat input sanitation"""
import pytest

from services.helpers.error_handlers import InputError
from utils.input_sanitizer import InputSanitizer


@pytest.fixture
def sanitizer(test_config):
    return InputSanitizer(test_config)


def test_collapses_whitespace_and_control_characters(sanitizer):
    assert sanitizer.sanitize("  Tell mom\x00 I\n\nmiss   her \n") == 'Tell mom I miss her'


def test_strips_script_tags(sanitizer):
    assert sanitizer.sanitize('hi <script>alert(1)</script>there') == 'hi there'


def test_truncates_long_input(sanitizer, test_config):
    text = 'a' * (test_config.MAX_MESSAGE_LENGTH + 50)
    assert len(sanitizer.sanitize(text)) == test_config.MAX_MESSAGE_LENGTH


def test_none_becomes_empty(sanitizer):
    assert sanitizer.sanitize(None) == ''


@pytest.mark.parametrize('value, expected', [
    ('astro-1', 'astro-1'),
    ('3f2b8c1e-9a4d-4c1b-8f7e-2d6a1b0c9e55', '3f2b8c1e-9a4d-4c1b-8f7e-2d6a1b0c9e55'),
    ('  jane_1 ', 'jane_1'),
    ('x),or(id.neq.0', ''),
    ('', ''),
    (None, ''),
])
def test_sanitize_id(sanitizer, value, expected):
    assert sanitizer.sanitize_id(value) == expected


def test_search_term_drops_filter_syntax(sanitizer):
    assert sanitizer.sanitize_search_term('Jane%,(x)*') == 'Janex'


def test_check_message_keeps_text_as_written(sanitizer):
    message = 'Dear mom,\n\nI love javascript: it   rocks <script>x</script>'
    assert sanitizer.check_message(message) == message


def test_check_message_non_text_becomes_empty(sanitizer):
    assert sanitizer.check_message(None) == ""
    assert sanitizer.check_message(['hi']) == ""


def test_check_message_rejects_overlong_text(sanitizer, test_config):
    with pytest.raises(InputError):
        sanitizer.check_message('a' * (test_config.MAX_MESSAGE_LENGTH + 1))

    assert sanitizer.check_message('a' * test_config.MAX_MESSAGE_LENGTH)
