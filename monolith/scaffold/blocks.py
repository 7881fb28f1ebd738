"""Line-oriented removal of named workflow steps.

Works on indented step blocks such as::

      - name: Run migrations (staging)
        run: ...

without parsing the YAML. A step runs from its ``- name:`` header up to the
next line that starts a sibling step (``- name:``, ``- uses:`` or ``- run:``).
"""
import re
from typing import Iterable

STEP_HEADER = "- name:"
_STEP_BOUNDARY = re.compile(r"^\s+- (name:|uses:|run:)")


def remove_step_block(document: str, name_substring: str) -> str:
    """Remove every step whose header line contains *name_substring*.

    Matching is a case-sensitive substring test on the whole header line.
    A boundary line that also contains the substring does not end the
    skip, so adjacent matching steps are removed together. If no following
    boundary exists the removal runs to the end of the document.
    """
    result = []
    skipping = False

    for line in document.split("\n"):
        trimmed = line.strip()
        if not skipping and trimmed.startswith(STEP_HEADER) and name_substring in trimmed:
            skipping = True
            continue
        if skipping and _STEP_BOUNDARY.match(line) and name_substring not in trimmed:
            skipping = False
        if not skipping:
            result.append(line)

    return "\n".join(result)


def remove_step_blocks(document: str, names: Iterable[str]) -> str:
    """Apply :func:`remove_step_block` for each name in order."""
    for name in names:
        document = remove_step_block(document, name)
    return document
