"""Line scanner for task declarations in Gradle build file text."""

import logging
from typing import Iterator, Optional

from .models import Diagnostic, TargetDeclaration

logger = logging.getLogger(__name__)

TASK_KEYWORD = "task "


def scan_declarations(
    text: str, diagnostics: Optional[list[Diagnostic]] = None
) -> Iterator[TargetDeclaration]:
    """
    Yield single-line `task <name>(` declarations in source order.

    Only declarations whose name and opening parenthesis share one line are
    recognized. Lines that start with the keyword but carry no usable name
    are skipped, and recorded in `diagnostics` when a list is given.

    Args:
        text: Full contents of one build file
        diagnostics: Optional list collecting skipped declarations

    Yields:
        TargetDeclaration for every recognized line
    """
    for line_number, raw_line in enumerate(text.split("\n"), start=1):
        line = raw_line.strip()
        if not line or not line.lower().startswith(TASK_KEYWORD):
            continue

        name_start = line.index(" ") + 1
        paren = line.find("(", name_start)
        if paren == -1:
            _skip(diagnostics, line_number, line, "missing '('")
            continue

        name = line[name_start:paren].strip()
        if not name:
            _skip(diagnostics, line_number, line, "empty target name")
            continue

        yield TargetDeclaration(name=name, line_number=line_number, line=line)


def extract_targets(
    text: str, diagnostics: Optional[list[Diagnostic]] = None
) -> list[str]:
    """
    Extract target names from build file text.

    Names are unique within the result and keep first-seen order.

    Args:
        text: Full contents of one build file
        diagnostics: Optional list collecting skipped declarations

    Returns:
        List of target names
    """
    targets: dict[str, str] = {}
    for declaration in scan_declarations(text, diagnostics):
        targets[declaration.name] = ""
        logger.debug(f"Found target '{declaration.name}' (line {declaration.line_number})")
    return list(targets)


def _skip(
    diagnostics: Optional[list[Diagnostic]], line_number: int, line: str, reason: str
) -> None:
    logger.debug(f"Skipping line {line_number} ({reason}): {line}")
    if diagnostics is not None:
        diagnostics.append(Diagnostic(line_number=line_number, line=line, reason=reason))
