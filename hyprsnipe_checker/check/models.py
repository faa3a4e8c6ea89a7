"""Data models for check results."""

from dataclasses import dataclass, field
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from hyprsnipe_checker.fetch.constants import HTTP_STATUS_BAD_REQUEST, HTTP_STATUS_OK


class CheckResult(BaseModel):
    """Outcome of checking one code."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    code: Annotated[str, Field(min_length=1)]
    status_code: Annotated[int, Field(ge=100, le=999)]
    duration_ms: Annotated[float, Field(ge=0.0)]

    @property
    def elapsed_ms(self) -> int:
        """Elapsed time rounded down to whole milliseconds."""
        return int(self.duration_ms)


@dataclass
class ResultBuckets:
    """Results partitioned by status, in the order codes were checked.

    Attributes:
        ok: Codes that returned exactly 200.
        bad: Codes that returned exactly 400.
        other: ``(code, status)`` pairs for every other status.
    """

    ok: list[str] = field(default_factory=list)
    bad: list[str] = field(default_factory=list)
    other: list[tuple[str, int]] = field(default_factory=list)

    def add(self, result: CheckResult) -> None:
        """Append a result to the bucket matching its status.

        Args:
            result: The result to classify.
        """
        if result.status_code == HTTP_STATUS_OK:
            self.ok.append(result.code)
        elif result.status_code == HTTP_STATUS_BAD_REQUEST:
            self.bad.append(result.code)
        else:
            self.other.append((result.code, result.status_code))

    @property
    def total(self) -> int:
        """Total number of classified codes."""
        return len(self.ok) + len(self.bad) + len(self.other)

    def counts(self) -> dict[str, int]:
        """Get the size of each bucket.

        Returns:
            Mapping of bucket label to count.
        """
        return {"200": len(self.ok), "400": len(self.bad), "other": len(self.other)}
