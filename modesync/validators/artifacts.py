from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple

from .errors import ArtifactMissing
from .types import ExtractionResult, FieldIssue, ValidationResult


def read_artifact(path: str) -> str:
	artifact_path = Path(path)
	if not artifact_path.is_file():
		raise ArtifactMissing(path)
	try:
		return artifact_path.read_text(encoding="utf-8")
	except (OSError, UnicodeDecodeError) as exc:
		raise ArtifactMissing(path, reason=f"unreadable ({exc})") from exc


def literal(value: str) -> str:
	return re.escape(value)


def collect_issues(results: Iterable[ExtractionResult]) -> List[FieldIssue]:
	issues: List[FieldIssue] = []
	for result in results:
		if result.matches:
			continue
		issues.append(
			FieldIssue(
				mode=result.mode,
				field=result.field,
				kind="mismatch" if result.found else "absent",
				expected=result.expected,
				actual=result.value,
			)
		)
	return issues


def found_suffix(issue: FieldIssue) -> str:
	if issue.kind == "mismatch" and issue.actual is not None:
		return f' (found "{issue.actual}")'
	return ""


def format_details(groups: Sequence[Tuple[str, List[str]]]) -> str:
	return " ".join(f"{label}: {', '.join(items)}." for label, items in groups if items)


def missing_artifact_result(artifact: str, name: str, message: str, exc: ArtifactMissing) -> ValidationResult:
	details = exc.path if exc.reason == "not found" else f"{exc.path} ({exc.reason})"
	return ValidationResult(
		artifact=artifact,
		name=name,
		passed=False,
		message=message,
		details=details,
		path=exc.path,
	)
