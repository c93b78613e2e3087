"""
Core data structures for floor plan validation.

Defines the types used to report problems in a solved floor plan:
- Severity: Issue severity levels (INFO, WARN, FAIL)
- ValidationIssue: Individual validation finding
- ValidationResult: Collection of issues with pass/fail status
- ValidationError: Exception raised when validation fails
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional

from netplan.src.document.errors import NetplanError


class Severity(Enum):
    """Validation issue severity levels.

    - INFO: Informational, logged but doesn't affect pass/fail
    - WARN: Warning, the plan is still shown
    - FAIL: Error, the plan is rejected
    """
    INFO = auto()
    WARN = auto()
    FAIL = auto()

    def __str__(self) -> str:
        return self.name


@dataclass
class ValidationIssue:
    """Represents a single validation finding.

    Attributes:
        severity: Issue severity (INFO, WARN, FAIL)
        code: Rule code (e.g., "LAYOUT-001")
        message: Human-readable description
        room: Optional room id the issue refers to
        symbol: Optional symbol the issue refers to
        remediation: Optional suggested fix
    """
    severity: Severity
    code: str
    message: str
    room: Optional[int] = None
    symbol: Optional[str] = None
    remediation: Optional[str] = None

    def format(self) -> str:
        """Format issue for display.

        Returns:
            [SEVERITY] CODE room=R symbol=S :: message :: fix=FIX
        """
        room = '-' if self.room is None else str(self.room)
        symbol = self.symbol or '-'
        fix = self.remediation or 'N/A'
        return (
            f"[{self.severity}] {self.code} room={room} symbol={symbol} :: "
            f"{self.message} :: fix={fix}"
        )

    def __str__(self) -> str:
        return self.format()


@dataclass
class ValidationResult:
    """Collection of validation issues with pass/fail determination.

    Properties:
        passed: True if no FAIL severity issues
        failed: True if any FAIL severity issues
        warnings: List of WARN severity issues
        errors: List of FAIL severity issues
        infos: List of INFO severity issues
    """
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.failed

    @property
    def failed(self) -> bool:
        return any(i.severity == Severity.FAIL for i in self.issues)

    @property
    def warnings(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.WARN]

    @property
    def errors(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.FAIL]

    @property
    def infos(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.INFO]

    def add_issue(self, issue: ValidationIssue) -> None:
        self.issues.append(issue)

    def codes(self) -> List[str]:
        """Rule codes of all issues, in insertion order."""
        return [i.code for i in self.issues]

    def report(self) -> str:
        """Generate a formatted report of all issues.

        Returns:
            Multi-line string with all issues formatted
        """
        if not self.issues:
            return "Validation passed: No issues found"

        status = "PASSED" if self.passed else "FAILED"
        lines = [f"Validation {status}: {len(self.issues)} issue(s)", "-" * 60]

        # Group by severity
        for severity in [Severity.FAIL, Severity.WARN, Severity.INFO]:
            severity_issues = [i for i in self.issues if i.severity == severity]
            if severity_issues:
                lines.append(f"\n{severity.name} ({len(severity_issues)}):")
                for issue in severity_issues:
                    lines.append(issue.format())

        return "\n".join(lines)


class ValidationError(NetplanError):
    """Exception raised when validation fails with FAIL severity issues.

    Attributes:
        result: The ValidationResult that caused the failure
    """

    def __init__(self, result: ValidationResult):
        self.result = result
        super().__init__(result.report())
