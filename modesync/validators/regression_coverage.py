from __future__ import annotations

import re
from typing import List

from modesync import constants
from .artifacts import collect_issues, format_details, literal, missing_artifact_result, read_artifact
from .errors import ArtifactMissing
from .types import ExtractionResult, FieldIssue, ModeDefinition, ValidationResult, ValidatorContext


ARTIFACT = "regression_suite"
NAME = "Test Coverage"

_TABLE_RE = re.compile(r"\b" + literal(constants.TEST_MODE_TABLE) + r"\s*=\s*\[")


def mode_table(text: str) -> str:
	"""Return the bracketed test-mode table, or the whole text when absent."""
	match = _TABLE_RE.search(text)
	if match is None:
		return text
	depth = 0
	for index in range(match.end() - 1, len(text)):
		char = text[index]
		if char == "[":
			depth += 1
		elif char == "]":
			depth -= 1
			if depth == 0:
				return text[match.end() - 1:index + 1]
	return text[match.end() - 1:]


def extract(mode: ModeDefinition, text: str) -> List[ExtractionResult]:
	pattern = re.compile(r"\bname\s*:\s*(['\"])" + literal(mode.backend_mode) + r"\1")
	declared = pattern.search(mode_table(text)) is not None
	return [
		ExtractionResult(
			mode=mode.name,
			field="backend_mode",
			expected=mode.backend_mode,
			found=declared,
			value=mode.backend_mode if declared else None,
		)
	]


def check(ctx: ValidatorContext) -> ValidationResult:
	path = ctx.paths.regression_suite
	try:
		text = read_artifact(path)
	except ArtifactMissing as exc:
		return missing_artifact_result(ARTIFACT, NAME, "UI regression test file not found", exc)

	issues: List[FieldIssue] = []
	missing_modes: List[str] = []
	for mode in ctx.modes:
		for issue in collect_issues(extract(mode, text)):
			issues.append(issue)
			missing_modes.append(mode.backend_mode)

	if not issues:
		return ValidationResult(
			artifact=ARTIFACT,
			name=NAME,
			passed=True,
			message="All scaling modes are covered in UI regression tests",
			path=path,
		)

	return ValidationResult(
		artifact=ARTIFACT,
		name=NAME,
		passed=False,
		message="Some scaling modes are missing from tests",
		details=format_details([("Missing modes", missing_modes)]),
		path=path,
		issues=issues,
	)
