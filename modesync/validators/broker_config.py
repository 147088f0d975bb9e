from __future__ import annotations

import re
from typing import Dict, List

from modesync import constants
from .artifacts import collect_issues, format_details, found_suffix, literal, missing_artifact_result, read_artifact
from .errors import ArtifactMissing
from .types import ExtractionResult, FieldIssue, ModeDefinition, ValidationResult, ValidatorContext


ARTIFACT = "broker_config"
NAME = "Kafka Config"

_OUTGOING_RE = re.compile(
	r"^[ \t]*(%[\w,-]+\.)?" + literal(constants.OUTGOING_BINDING_PREFIX) + r"\.([^.\s=:]+)\.([^\s=:]+)[ \t]*[=:](.*)$",
	re.MULTILINE,
)


def parse_outgoing_bindings(text: str) -> Dict[str, Dict[str, str]]:
	"""Map each outgoing channel to its declared attributes; later lines win.

	Keys without a ``%profile.`` prefix are authoritative; profile-scoped
	keys only supply attributes the unprefixed configuration leaves out.
	"""
	bindings: Dict[str, Dict[str, str]] = {}
	profiled: Dict[str, Dict[str, str]] = {}
	for match in _OUTGOING_RE.finditer(text):
		profile, channel, attribute, value = match.groups()
		target = profiled if profile else bindings
		target.setdefault(channel, {})[attribute] = value.strip()
	for channel, attributes in profiled.items():
		merged = bindings.setdefault(channel, {})
		for attribute, value in attributes.items():
			merged.setdefault(attribute, value)
	return bindings


def extract(mode: ModeDefinition, text: str) -> List[ExtractionResult]:
	bindings = parse_outgoing_bindings(text)
	channel = mode.emitter_channel
	declared = channel in bindings
	results = [
		ExtractionResult(
			mode=mode.name,
			field="emitter_channel",
			expected=channel,
			found=declared,
			value=channel if declared else None,
		)
	]
	if not declared:
		return results
	topic = bindings[channel].get("topic")
	results.append(
		ExtractionResult(
			mode=mode.name,
			field="broker_topic",
			expected=mode.broker_topic,
			found=topic is not None,
			value=topic,
		)
	)
	return results


def check(ctx: ValidatorContext) -> ValidationResult:
	path = ctx.paths.broker_config
	try:
		text = read_artifact(path)
	except ArtifactMissing as exc:
		return missing_artifact_result(ARTIFACT, NAME, "Application properties file not found", exc)

	issues: List[FieldIssue] = []
	missing_channels: List[str] = []
	incorrect_topics: List[str] = []
	for mode in ctx.modes:
		for issue in collect_issues(extract(mode, text)):
			issues.append(issue)
			if issue.field == "emitter_channel":
				missing_channels.append(mode.emitter_channel)
			else:
				incorrect_topics.append(
					f'{mode.name}: channel "{mode.emitter_channel}" should map to topic '
					f'"{mode.broker_topic}"{found_suffix(issue)}'
				)

	if not issues:
		return ValidationResult(
			artifact=ARTIFACT,
			name=NAME,
			passed=True,
			message="All Kafka configurations are correct",
			path=path,
		)

	return ValidationResult(
		artifact=ARTIFACT,
		name=NAME,
		passed=False,
		message="Kafka configuration validation failed",
		details=format_details(
			[
				("Missing channels", missing_channels),
				("Incorrect topic mappings", incorrect_topics),
			]
		),
		path=path,
		issues=issues,
	)
