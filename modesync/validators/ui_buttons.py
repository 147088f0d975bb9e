from __future__ import annotations

import re
from typing import List

from .artifacts import collect_issues, format_details, literal, missing_artifact_result, read_artifact
from .errors import ArtifactMissing
from .types import ExtractionResult, FieldIssue, ModeDefinition, ValidationResult, ValidatorContext


ARTIFACT = "ui_markup"
NAME = "UI Buttons"


def _id_pattern(button_id: str) -> re.Pattern:
	return re.compile(r"(?<![\w-])id\s*=\s*([\"'])" + literal(button_id) + r"\1")


def extract(mode: ModeDefinition, text: str) -> List[ExtractionResult]:
	id_found = _id_pattern(mode.ui_button_id).search(text) is not None
	results = [
		ExtractionResult(
			mode=mode.name,
			field="ui_button_id",
			expected=mode.ui_button_id,
			found=id_found,
			value=mode.ui_button_id if id_found else None,
		)
	]
	if not id_found:
		return results

	text_found = re.search(literal(mode.ui_button_text), text) is not None
	results.append(
		ExtractionResult(
			mode=mode.name,
			field="ui_button_text",
			expected=mode.ui_button_text,
			found=text_found,
			value=mode.ui_button_text if text_found else None,
		)
	)
	return results


def check(ctx: ValidatorContext) -> ValidationResult:
	path = ctx.paths.ui_markup
	try:
		text = read_artifact(path)
	except ArtifactMissing as exc:
		return missing_artifact_result(ARTIFACT, NAME, "HTML file not found", exc)

	issues: List[FieldIssue] = []
	missing_buttons: List[str] = []
	incorrect_texts: List[str] = []
	for mode in ctx.modes:
		for issue in collect_issues(extract(mode, text)):
			issues.append(issue)
			if issue.field == "ui_button_id":
				missing_buttons.append(f"{mode.ui_button_id} ({mode.name} mode)")
			else:
				incorrect_texts.append(f'{mode.ui_button_id}: expected "{mode.ui_button_text}"')

	if not issues:
		return ValidationResult(
			artifact=ARTIFACT,
			name=NAME,
			passed=True,
			message="All UI buttons are correctly defined",
			path=path,
		)

	return ValidationResult(
		artifact=ARTIFACT,
		name=NAME,
		passed=False,
		message="UI button validation failed",
		details=format_details(
			[
				("Missing buttons", missing_buttons),
				("Incorrect text", incorrect_texts),
			]
		),
		path=path,
		issues=issues,
	)
