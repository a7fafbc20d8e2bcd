"""Report data structures shared by every analyzer and renderer."""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any


class Severity(str, Enum):
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Finding:
    severity: Severity
    message: str


@dataclass
class ReportSection:
    """A titled group of graded findings with its own recommendations.

    Usage::

        section = ReportSection("Keyword Density")
        section.warn("Density is too low (aim for 0.5% - 2.5%)")
        section.recommend("Increase keyword usage naturally throughout the content")
    """

    title: str
    findings: list[Finding] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    subsections: list["ReportSection"] = field(default_factory=list)

    def add(self, severity: Severity, message: str) -> None:
        self.findings.append(Finding(severity, message))

    def success(self, message: str) -> None:
        self.add(Severity.SUCCESS, message)

    def info(self, message: str) -> None:
        self.add(Severity.INFO, message)

    def warn(self, message: str) -> None:
        self.add(Severity.WARNING, message)

    def error(self, message: str) -> None:
        self.add(Severity.ERROR, message)

    def recommend(self, recommendation: str) -> None:
        """Add a recommendation unless an identical one is already listed."""
        if recommendation not in self.recommendations:
            self.recommendations.append(recommendation)

    def subsection(self, title: str) -> "ReportSection":
        child = ReportSection(title)
        self.subsections.append(child)
        return child

    def iter_findings(self):
        """Findings of this section and all nested subsections, depth first."""
        yield from self.findings
        for child in self.subsections:
            yield from child.iter_findings()

    def count(self, severity: Severity) -> int:
        return sum(1 for f in self.iter_findings() if f.severity == severity)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class AuditReport:
    """Everything one audit run produced, keyed by analyzer step."""

    url: str
    sections: list[ReportSection] = field(default_factory=list)
    steps: dict[str, dict[str, Any]] = field(default_factory=dict)
    elapsed_seconds: float = 0.0
    error: str = ""

    @property
    def ok(self) -> bool:
        return not self.error

    def severity_totals(self) -> dict[str, int]:
        totals = {severity.value: 0 for severity in Severity}
        for section in self.sections:
            for severity in Severity:
                totals[severity.value] += section.count(severity)
        return totals

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "error": self.error,
            "elapsed_seconds": self.elapsed_seconds,
            "steps": self.steps,
            "summary": self.severity_totals(),
            "sections": [section.to_dict() for section in self.sections],
        }
