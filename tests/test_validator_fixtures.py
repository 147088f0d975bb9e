import json
import shutil
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest import TestCase

from modesync import constants
from modesync.adapters.artifact_paths import get_default_paths
from modesync.validators.engine import validate
from modesync.validators.mapping_loader import load_modes
from modesync.validators.reporter import summarize

ROOT = Path(__file__).resolve().parents[1]
FIXTURES_ROOT = ROOT / "tests" / "fixtures" / "validators"
BASE_FIXTURE = "v00_all_pass"


def _load_json(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


def _build_workspace(fixture_id: str, workspace: Path) -> None:
    shutil.copytree(FIXTURES_ROOT / BASE_FIXTURE, workspace, dirs_exist_ok=True)
    if fixture_id != BASE_FIXTURE:
        shutil.copytree(FIXTURES_ROOT / fixture_id, workspace, dirs_exist_ok=True)


def _serialize_summary(summary) -> dict:
    return {
        "status": summary.status,
        "exit_code": summary.exit_code,
        "total": summary.total,
        "passed": summary.passed,
        "results": [
            {
                "artifact": result.artifact,
                "name": result.name,
                "passed": result.passed,
                "message": result.message,
                "details": result.details,
                "issues": [
                    {
                        "mode": issue.mode,
                        "field": issue.field,
                        "kind": issue.kind,
                        "expected": issue.expected,
                        "actual": issue.actual,
                    }
                    for issue in result.issues
                ],
            }
            for result in summary.results
        ],
        "summary": summary.summary,
    }


def _run_fixture(fixture_id: str) -> dict:
    with TemporaryDirectory() as tmpdir:
        workspace = Path(tmpdir) / "repo"
        _build_workspace(fixture_id, workspace)
        modes = load_modes(constants.DEFAULT_MAPPING_PATH, repo_root=workspace.as_posix())
        results = validate(modes, get_default_paths(workspace.as_posix()))
        return _serialize_summary(summarize(results))


class ValidatorFixtureTests(TestCase):
    def _assert_fixture(self, fixture_id: str) -> None:
        expected = _load_json(FIXTURES_ROOT / fixture_id / "expected.run_validate.json")
        actual = _run_fixture(fixture_id)
        self.assertEqual(expected, actual)

    def test_v00_all_pass(self) -> None:
        self._assert_fixture("v00_all_pass")

    def test_v01_drift(self) -> None:
        self._assert_fixture("v01_drift")

    def test_repeated_runs_are_identical(self) -> None:
        self.assertEqual(_run_fixture("v01_drift"), _run_fixture("v01_drift"))
