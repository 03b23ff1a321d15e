"""
Credential redaction for logged SQL.

Redshift COPY/UNLOAD statements embed AWS credentials inline:

    copy t from 's3://bucket/key'
    with credentials 'aws_access_key_id=AKIA...;aws_secret_access_key=...'

Never log a statement without passing it through cleanse_statement first.
"""

import re
from typing import Any, Iterable, List, Optional

from dbapi_helpers.config import get_settings

# Secret keys are matched on word and slash characters only, so a closing
# quote after the secret stays in place.
CREDENTIAL_PATTERN = re.compile(
    r"aws_access_key_id\s*=\s*(?P<key_id>.{20})\s*;\s*"
    r"|aws_secret_access_key\s*=\s*(?P<secret>[\w/]{40,41})",
    re.IGNORECASE,
)

WHITESPACE_PATTERN = re.compile(r"\s+")


def _as_text(value: Any) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def cleanse_statement(statement: Any, placeholder: Optional[str] = None) -> str:
    """
    Remove AWS credentials from a statement and collapse whitespace.

    Args:
        statement: SQL text; non-strings are coerced with str()
        placeholder: Replacement text (default from settings, "<removed>")

    Returns:
        Statement safe to log
    """
    if placeholder is None:
        placeholder = get_settings().redaction_placeholder

    # placeholder is inserted literally, no backreference expansion
    text = CREDENTIAL_PATTERN.sub(lambda _match: placeholder, _as_text(statement))
    return WHITESPACE_PATTERN.sub(" ", text)


def credential_values(statement: Any) -> List[str]:
    """Return the raw AWS key id and secret values embedded in a statement."""
    values = []
    for match in CREDENTIAL_PATTERN.finditer(_as_text(statement)):
        value = (match.group("key_id") or match.group("secret") or "").strip()
        if value:
            values.append(value)
    return values


def cleanse_message(
    message: Any,
    secrets: Iterable[Optional[str]] = (),
    placeholder: Optional[str] = None,
) -> str:
    """
    Redact an error message before it is wrapped into a HelperError.

    Drivers often echo the failing SQL, or just the offending token, in their
    messages. Besides the credential patterns, every literal in ``secrets``
    (typically credential_values(statement), or a password) is replaced.
    """
    if placeholder is None:
        placeholder = get_settings().redaction_placeholder

    text = _as_text(message)
    for secret in secrets:
        if secret:
            text = text.replace(secret, placeholder)
    return cleanse_statement(text, placeholder)
