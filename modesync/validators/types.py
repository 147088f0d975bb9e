# modesync/validators/types.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional

from modesync import constants
from modesync.adapters.artifact_paths import ArtifactPaths
from .naming import emitter_field_name


IssueKind = Literal["absent", "mismatch"]


@dataclass(frozen=True)
class ModeDefinition:
	name: str
	ui_button_id: str
	ui_button_text: str
	backend_mode: str
	broker_topic: str
	event_type: str
	emitter_channel: str

	@property
	def emitter_field(self) -> str:
		return emitter_field_name(self.emitter_channel)


@dataclass(frozen=True)
class ExtractionResult:
	mode: str
	field: str
	expected: str
	found: bool
	value: Optional[str] = None

	@property
	def matches(self) -> bool:
		return self.found and self.value == self.expected


@dataclass(frozen=True)
class FieldIssue:
	mode: str
	field: str
	kind: IssueKind
	expected: str
	actual: Optional[str] = None


@dataclass(frozen=True)
class ValidationResult:
	artifact: str
	name: str
	passed: bool
	message: str
	details: Optional[str] = None
	path: Optional[str] = None
	issues: List[FieldIssue] = field(default_factory=list)


@dataclass(frozen=True)
class ValidationSummary:
	results: List[ValidationResult]
	total: int
	passed: int
	status: str
	summary: str

	@property
	def failed(self) -> int:
		return self.total - self.passed

	@property
	def failures(self) -> List[ValidationResult]:
		return [result for result in self.results if not result.passed]

	@property
	def exit_code(self) -> int:
		return constants.EXIT_OK if self.passed == self.total else constants.EXIT_VALIDATION_FAILED


@dataclass
class ValidatorContext:
	modes: List[ModeDefinition]
	paths: ArtifactPaths
