"""
Directive parsing for model replies

The model asks for a message to be forwarded by appending a marker such as

    [[ROUTE to="mom" message="I miss her"]]

Parsing is best-effort: output without a well-formed marker is simply a
reply with nothing to route.
"""
import re
from typing import Dict, Optional, Tuple

DIRECTIVE_PATTERN = re.compile(
    r'\[\[\s*ROUTE\b(?P<attrs>(?:[^\]"\']|"[^"]*"|\'[^\']*\'|\](?!\]))*)\]\]',
    re.IGNORECASE
)
ATTRIBUTE_PATTERN = re.compile(r'(?P<key>\w+)\s*=\s*(?:"(?P<dq>[^"]*)"|\'(?P<sq>[^\']*)\')')


def _parse_attributes(attrs: str) -> Dict[str, str]:
    values = {}
    for match in ATTRIBUTE_PATTERN.finditer(attrs):
        key = match.group('key').lower()
        value = match.group('dq') if match.group('dq') is not None else match.group('sq')
        # First occurrence wins
        values.setdefault(key, value.strip())
    return values


def parse_directive(raw_output: str) -> Tuple[str, Optional[Dict]]:
    """
    Split raw model output into the visible reply and an optional directive

    Returns:
        (visible_reply, directive) where directive is
        {'recipient': str, 'content': Optional[str]} or None. With no
        well-formed marker present the raw output comes back untouched.
    """
    if not raw_output:
        return raw_output or '', None

    matches = list(DIRECTIVE_PATTERN.finditer(raw_output))
    if not matches:
        return raw_output, None

    directive = None
    for match in matches:
        attrs = _parse_attributes(match.group('attrs'))
        recipient = attrs.get('to', '')
        if recipient:
            directive = {
                'recipient': recipient,
                'content': attrs.get('message') or None
            }
            break

    visible = DIRECTIVE_PATTERN.sub('', raw_output)
    visible = re.sub(r'[ \t]+\n', '\n', visible)
    visible = re.sub(r'\n{3,}', '\n\n', visible).strip()

    return visible, directive
