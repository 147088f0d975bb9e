from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from modesync import constants


@dataclass(frozen=True)
class ArtifactPaths:
	ui_markup: str
	backend_router: str
	broker_config: str
	dependency_wiring: str
	regression_suite: str


def resolve_path(path: str, repo_root: Optional[str] = None) -> Path:
	candidate = Path(path)
	if candidate.is_absolute() or repo_root is None:
		return candidate
	return Path(repo_root) / candidate


def get_default_paths(repo_root: Optional[str] = None) -> ArtifactPaths:
	return ArtifactPaths(
		ui_markup=resolve_path(constants.DEFAULT_UI_MARKUP_PATH, repo_root).as_posix(),
		backend_router=resolve_path(constants.DEFAULT_BACKEND_ROUTER_PATH, repo_root).as_posix(),
		broker_config=resolve_path(constants.DEFAULT_BROKER_CONFIG_PATH, repo_root).as_posix(),
		dependency_wiring=resolve_path(constants.DEFAULT_DEPENDENCY_WIRING_PATH, repo_root).as_posix(),
		regression_suite=resolve_path(constants.DEFAULT_REGRESSION_SUITE_PATH, repo_root).as_posix(),
	)
