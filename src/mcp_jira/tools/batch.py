"""Per-key batch execution with partial success reporting.

Multi-issue tools run one operation per issue key. A failing key never stops
the remaining keys; the outcome lists every success and every failure, and
is flagged as an error only when no key succeeded.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from .response import ToolResponse, describe_error

logger = logging.getLogger("mcp-jira.tools")


@dataclass(frozen=True)
class BatchSuccess:
    key: str
    message: str


@dataclass(frozen=True)
class BatchFailure:
    key: str
    error: str


@dataclass
class BatchOutcome:
    succeeded: list[BatchSuccess] = field(default_factory=list)
    failed: list[BatchFailure] = field(default_factory=list)

    @property
    def attempted(self) -> int:
        return len(self.succeeded) + len(self.failed)

    @property
    def all_failed(self) -> bool:
        return not self.succeeded

    def to_response(
        self,
        success_title: Callable[[int, int], str],
        failure_title: Callable[[int], str],
    ) -> ToolResponse:
        """
        Render the outcome as prose.

        Args:
            success_title: Builds the successes header from (succeeded, attempted)
            failure_title: Builds the failures header from the failure count

        Returns:
            ToolResponse flagged as an error when every key failed
        """
        if not self.attempted:
            return ToolResponse(text="No issues processed.", is_error=True)

        sections = []
        if self.succeeded:
            lines = "\n".join(f"{s.key}: {s.message}" for s in self.succeeded)
            sections.append(f"{success_title(len(self.succeeded), self.attempted)}\n{lines}")
        if self.failed:
            lines = "\n".join(f"{f.key}: {f.error}" for f in self.failed)
            sections.append(f"{failure_title(len(self.failed))}\n{lines}")

        return ToolResponse(text="\n\n".join(sections), is_error=self.all_failed)


def run_batch(keys: Iterable[str], operation: Callable[[str], str]) -> BatchOutcome:
    """
    Run operation once per key, collecting results instead of stopping.

    Args:
        keys: Issue keys, processed in order
        operation: Performs the change for one key and returns a success message

    Returns:
        BatchOutcome with one entry per key
    """
    outcome = BatchOutcome()
    for key in keys:
        try:
            message = operation(key)
        except Exception as e:
            logger.warning(f"Batch operation failed for {key}: {e}")
            outcome.failed.append(BatchFailure(key=key, error=describe_error(e)))
        else:
            outcome.succeeded.append(BatchSuccess(key=key, message=message))
    return outcome
