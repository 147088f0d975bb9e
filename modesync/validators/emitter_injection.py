from __future__ import annotations

import re
from typing import List, Optional

from modesync import constants
from .artifacts import collect_issues, format_details, literal, missing_artifact_result, read_artifact
from .errors import ArtifactMissing
from .types import ExtractionResult, FieldIssue, ModeDefinition, ValidationResult, ValidatorContext


ARTIFACT = "dependency_wiring"
NAME = "Emitter Injection"

_PAYLOAD = (
	r"\w*["
	+ constants.PAYLOAD_VARIABLE[0].upper()
	+ constants.PAYLOAD_VARIABLE[0].lower()
	+ "]"
	+ literal(constants.PAYLOAD_VARIABLE[1:])
)
_ANNOTATION = r"@\w+(?:\([^)]*\))?"


def _injection_pattern(channel: str) -> re.Pattern:
	return re.compile(r"@Channel\(\s*\"" + literal(channel) + r"\"\s*\)")


def _declared_field_pattern(channel: str) -> re.Pattern:
	return re.compile(
		r"@Channel\(\s*\"" + literal(channel) + r"\"\s*\)"
		r"(?:\s*" + _ANNOTATION + r")*"
		r"\s*(?:(?:private|protected|public|final)\s+)*"
		r"[\w.]+(?:<[^>]*>)?\s+(\w+)\s*;"
	)


def _send_pattern(field_name: str) -> re.Pattern:
	return re.compile(r"\b" + literal(field_name) + r"\s*\.\s*send\(\s*" + _PAYLOAD + r"\s*\)")


def declared_field(text: str, channel: str) -> Optional[str]:
	match = _declared_field_pattern(channel).search(text)
	return match.group(1) if match else None


def extract(mode: ModeDefinition, text: str) -> List[ExtractionResult]:
	channel = mode.emitter_channel
	injected = _injection_pattern(channel).search(text) is not None
	results = [
		ExtractionResult(
			mode=mode.name,
			field="emitter_channel",
			expected=channel,
			found=injected,
			value=channel if injected else None,
		)
	]
	if not injected:
		return results

	expected_field = mode.emitter_field
	used = _send_pattern(expected_field).search(text) is not None
	value: Optional[str] = expected_field if used else None
	if not used:
		declared = declared_field(text, channel)
		if declared != expected_field:
			value = declared
	results.append(
		ExtractionResult(
			mode=mode.name,
			field="emitter_field",
			expected=expected_field,
			found=value is not None,
			value=value,
		)
	)
	return results


def check(ctx: ValidatorContext) -> ValidationResult:
	path = ctx.paths.dependency_wiring
	try:
		text = read_artifact(path)
	except ArtifactMissing as exc:
		return missing_artifact_result(ARTIFACT, NAME, "Java endpoint file not found", exc)

	issues: List[FieldIssue] = []
	missing_injections: List[str] = []
	incorrect_usage: List[str] = []
	for mode in ctx.modes:
		for issue in collect_issues(extract(mode, text)):
			issues.append(issue)
			if issue.field == "emitter_channel":
				missing_injections.append(mode.emitter_channel)
				continue
			entry = f'{mode.name}: emitter "{mode.emitter_field}" not used correctly'
			if issue.actual is not None:
				entry += f' (channel injected into "{issue.actual}")'
			incorrect_usage.append(entry)

	if not issues:
		return ValidationResult(
			artifact=ARTIFACT,
			name=NAME,
			passed=True,
			message="All emitter channels are properly injected and used",
			path=path,
		)

	return ValidationResult(
		artifact=ARTIFACT,
		name=NAME,
		passed=False,
		message="Emitter injection validation failed",
		details=format_details(
			[
				("Missing injections", missing_injections),
				("Incorrect usage", incorrect_usage),
			]
		),
		path=path,
		issues=issues,
	)
