from __future__ import annotations

import re
from typing import List

from .artifacts import collect_issues, format_details, found_suffix, literal, missing_artifact_result, read_artifact
from .errors import ArtifactMissing
from .types import ExtractionResult, FieldIssue, ModeDefinition, ValidationResult, ValidatorContext


ARTIFACT = "backend_router"
NAME = "Backend Modes"

_ANY_LABEL_RE = re.compile(r"\b(?:case\s+\"[^\"\n]*\"|default)\s*(?::|->)")
_LEADING_LABEL_RE = re.compile(r"\s*(?:case\s+\"[^\"\n]*\"|default)\s*(?::|->)")
_TOPIC_ASSIGN_RE = re.compile(r"\b\w*[Tt]opic\s*=\s*\"([^\"\n]*)\"")
_EVENT_TYPE_ASSIGN_RE = re.compile(r"\b\w*[Ee]vent[Tt]ype\s*=\s*\"([^\"\n]*)\"")


def _case_pattern(backend_mode: str) -> re.Pattern:
	return re.compile(r"\bcase\s+\"" + literal(backend_mode) + r"\"\s*(?::|->)")


def _switch_end(text: str, start: int) -> int:
	"""Index of the brace closing the switch body that contains ``start``."""
	depth = 0
	index = start
	while index < len(text):
		char = text[index]
		if char in "\"'":
			index += 1
			while index < len(text) and text[index] not in (char, "\n"):
				index += 2 if text[index] == "\\" else 1
		elif text.startswith("//", index):
			newline = text.find("\n", index)
			index = len(text) if newline == -1 else newline
			continue
		elif char == "{":
			depth += 1
		elif char == "}":
			if depth == 0:
				return index
			depth -= 1
		index += 1
	return len(text)


def case_blocks(text: str, backend_mode: str) -> List[str]:
	"""Return the statements handled under every ``case "<backend_mode>"``.

	Labels stacked directly after a matched one fall through into the
	same block; a block ends at the next case or default label, or at the
	brace closing its switch.
	"""
	blocks: List[str] = []
	for match in _case_pattern(backend_mode).finditer(text):
		start = match.end()
		while True:
			stacked = _LEADING_LABEL_RE.match(text, start)
			if stacked is None:
				break
			start = stacked.end()
		following = _ANY_LABEL_RE.search(text, start)
		end = _switch_end(text, start)
		if following is not None and following.start() < end:
			end = following.start()
		blocks.append(text[start:end])
	return blocks


def _assigned(pattern: re.Pattern, blocks: List[str], mode: str, field: str, expected: str) -> ExtractionResult:
	values = [value for block in blocks for value in pattern.findall(block)]
	if not values:
		return ExtractionResult(mode=mode, field=field, expected=expected, found=False)
	value = expected if expected in values else values[0]
	return ExtractionResult(mode=mode, field=field, expected=expected, found=True, value=value)


def extract(mode: ModeDefinition, text: str) -> List[ExtractionResult]:
	blocks = case_blocks(text, mode.backend_mode)
	results = [
		ExtractionResult(
			mode=mode.name,
			field="backend_mode",
			expected=mode.backend_mode,
			found=bool(blocks),
			value=mode.backend_mode if blocks else None,
		)
	]
	if not blocks:
		return results
	results.append(_assigned(_TOPIC_ASSIGN_RE, blocks, mode.name, "broker_topic", mode.broker_topic))
	results.append(_assigned(_EVENT_TYPE_ASSIGN_RE, blocks, mode.name, "event_type", mode.event_type))
	return results


def check(ctx: ValidatorContext) -> ValidationResult:
	path = ctx.paths.backend_router
	try:
		text = read_artifact(path)
	except ArtifactMissing as exc:
		return missing_artifact_result(ARTIFACT, NAME, "Java endpoint file not found", exc)

	issues: List[FieldIssue] = []
	missing_modes: List[str] = []
	incorrect_topics: List[str] = []
	incorrect_event_types: List[str] = []
	for mode in ctx.modes:
		for issue in collect_issues(extract(mode, text)):
			issues.append(issue)
			if issue.field == "backend_mode":
				missing_modes.append(mode.backend_mode)
			elif issue.field == "broker_topic":
				incorrect_topics.append(f'{mode.name}: expected topic "{mode.broker_topic}"{found_suffix(issue)}')
			else:
				incorrect_event_types.append(
					f'{mode.name}: expected event type "{mode.event_type}"{found_suffix(issue)}'
				)

	if not issues:
		return ValidationResult(
			artifact=ARTIFACT,
			name=NAME,
			passed=True,
			message="All backend modes are correctly mapped",
			path=path,
		)

	return ValidationResult(
		artifact=ARTIFACT,
		name=NAME,
		passed=False,
		message="Backend mode validation failed",
		details=format_details(
			[
				("Missing modes", missing_modes),
				("Incorrect topics", incorrect_topics),
				("Incorrect event types", incorrect_event_types),
			]
		),
		path=path,
		issues=issues,
	)
