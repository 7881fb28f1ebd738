"""Placeholder substitution for CI/CD templates.

Templates mark values with ``{{ KEY }}``. Substitution is textual: it does
not understand YAML or shell quoting, and GitHub expressions such as
``${{ secrets.PROD_HOST }}`` pass through because only whitespace may sit
between the braces and a key.
"""
import re
from typing import Any, Mapping, Set

_PLACEHOLDER = re.compile(r"{{\s*([A-Za-z_][A-Za-z0-9_]*)\s*}}")


def _placeholder_pattern(keys) -> "re.Pattern[str]":
    alternatives = "|".join(re.escape(k) for k in sorted(keys, key=len, reverse=True))
    return re.compile(r"{{\s*(" + alternatives + r")\s*}}")


def render_placeholders(text: str, variables: Mapping[str, Any]) -> str:
    """Replace every ``{{ KEY }}`` whose key is in *variables*.

    ``None`` values render as the empty string. Placeholders without a
    matching key are left as they are; keys that never appear are ignored.
    All placeholders are replaced in one pass, so a value that itself
    contains ``{{ OTHER }}`` is inserted literally.
    """
    if not variables:
        return text
    values = {key: "" if value is None else str(value) for key, value in variables.items()}
    # Callable replacement keeps backslashes in values literal
    return _placeholder_pattern(values).sub(lambda m: values[m.group(1)], text)


def find_placeholders(text: str) -> Set[str]:
    """Return the names of all placeholders still present in *text*."""
    return set(_PLACEHOLDER.findall(text))


class TemplateEngine:
    """Handles placeholder rendering for scaffolding."""

    def render(self, text: str, variables: Mapping[str, Any]) -> str:
        """Render template text with the given variables."""
        return render_placeholders(text, variables)

    def unresolved(self, text: str) -> Set[str]:
        return find_placeholders(text)
