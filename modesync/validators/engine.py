# modesync/validators/engine.py
from __future__ import annotations

from typing import List

from modesync import constants
from modesync.adapters.artifact_paths import ArtifactPaths
from .backend_modes import check as check_backend_modes
from .broker_config import check as check_broker_config
from .emitter_injection import check as check_emitter_injection
from .regression_coverage import check as check_regression_coverage
from .ui_buttons import check as check_ui_buttons
from .types import ModeDefinition, ValidationResult, ValidatorContext


def run_all_validators(ctx: ValidatorContext) -> List[ValidationResult]:
	checks = {
		"ui_markup": check_ui_buttons,
		"backend_router": check_backend_modes,
		"broker_config": check_broker_config,
		"dependency_wiring": check_emitter_injection,
		"regression_suite": check_regression_coverage,
	}
	return [checks[name](ctx) for name in constants.CHECK_ORDER]


def validate(modes: List[ModeDefinition], paths: ArtifactPaths) -> List[ValidationResult]:
	return run_all_validators(ValidatorContext(modes=list(modes), paths=paths))
