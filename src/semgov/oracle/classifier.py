"""Interpret oracle answers as version bump verdicts."""

import logging
import re
from dataclasses import dataclass

from semgov.errors import ClassificationError, OracleError
from semgov.utils.versioning import BumpKind

from .base import ClassificationOracle
from .rubric import binary_prompt, graded_prompt

logger = logging.getLogger(__name__)

_DECISION_RE = re.compile(r"DECISION:\s*(PATCH|MINOR|MAJOR|NONE)", re.IGNORECASE)
_REASON_RE = re.compile(r"REASON:\s*(.+)", re.IGNORECASE)
_YES_RE = re.compile(r"\bYES\b")
_NO_RE = re.compile(r"\bNO\b")

NO_REASON = "No reason provided"


@dataclass(frozen=True)
class BumpVerdict:
    """Graded classification of a diff."""

    kind: BumpKind
    reason: str


def parse_bump_verdict(response: str) -> BumpVerdict:
    """Extract ``DECISION``/``REASON`` lines from an oracle response.

    Raises:
        ClassificationError: If no decision token is present.
    """
    decision = _DECISION_RE.search(response)
    if not decision:
        raise ClassificationError(f"Could not parse decision from response: {response!r}")
    reason = _REASON_RE.search(response)
    return BumpVerdict(
        kind=BumpKind(decision.group(1).upper()),
        reason=reason.group(1).strip() if reason else NO_REASON,
    )


def parse_required(response: str) -> bool:
    """Read a YES/NO answer; anything unrecognizable counts as YES."""
    answer = response.strip().upper()
    if _YES_RE.search(answer):
        return True
    if _NO_RE.search(answer):
        return False
    logger.warning(
        f"Unclear response from oracle: {response!r}; "
        "defaulting to requiring a version update"
    )
    return True


class VersionBumpClassifier:
    """Ask an oracle how a diff affects a plugin's version.

    The graded check refuses to guess: any failure raises. The binary check
    gates commits, so every failure resolves to "bump required".
    """

    def __init__(self, oracle: ClassificationOracle) -> None:
        self.oracle = oracle

    def classify_bump(self, plugin_name: str, diff: str) -> BumpVerdict:
        """Decide NONE/PATCH/MINOR/MAJOR for a plugin diff.

        Raises:
            ClassificationError: If the oracle fails or its answer has no decision.
        """
        try:
            response = self.oracle.ask(graded_prompt(plugin_name, diff))
        except OracleError as e:
            raise ClassificationError(f"Oracle request failed for '{plugin_name}': {e}") from e
        verdict = parse_bump_verdict(response)
        logger.info(f"{plugin_name}: {verdict.kind.value} ({verdict.reason})")
        return verdict

    def classify_required(self, diff: str) -> bool:
        """Decide whether a diff requires any version bump at all."""
        if not diff.strip():
            return False
        try:
            response = self.oracle.ask(binary_prompt(diff))
        except OracleError as e:
            logger.warning(f"Oracle request failed: {e}; defaulting to requiring a version update")
            return True
        return parse_required(response)
