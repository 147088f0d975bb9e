import io
import os
import shutil
import sys
import tempfile
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest import TestCase
from unittest.mock import patch

from modesync import cli, constants

FIXTURES_ROOT = Path(__file__).resolve().parent / "fixtures" / "validators"


class CliTests(TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name) / "repo"
        shutil.copytree(FIXTURES_ROOT / "v00_all_pass", self.root)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _run(self, *argv: str):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = cli.main(["--root", self.root.as_posix(), *argv])
        return code, out.getvalue(), err.getvalue()

    def test_agreeing_repository_exits_zero(self) -> None:
        code, out, err = self._run()
        self.assertEqual(code, constants.EXIT_OK)
        self.assertIn(f"Loaded 4 scaling modes from {constants.DEFAULT_MAPPING_PATH}", out)
        self.assertIn("big-data: Big Data Mode (Memory-Intensive) → genetic-bigdata-raw", out)
        self.assertIn("Total validations: 5\nPassed: 5\nFailed: 0", out)
        self.assertEqual(err, "")

    def test_missing_button_exits_one(self) -> None:
        html = self.root / constants.DEFAULT_UI_MARKUP_PATH
        html.write_text(html.read_text(encoding="utf-8").replace('id="normalBtn"', 'id="standardBtn"'), encoding="utf-8")
        code, out, _err = self._run()
        self.assertEqual(code, constants.EXIT_VALIDATION_FAILED)
        self.assertIn("❌ UI Buttons: UI button validation failed", out)
        self.assertIn("Details: Missing buttons: normalBtn (normal mode).", out)
        self.assertIn("Failed: 1", out)

    def test_missing_mapping_exits_two_before_reading_artifacts(self) -> None:
        with patch("modesync.cli.validate") as validate:
            code, _out, err = self._run("--config", "does/not/exist.yaml")
        self.assertEqual(code, constants.EXIT_CONFIG_ERROR)
        self.assertIn("Configuration file not found", err)
        validate.assert_not_called()

    def test_invalid_mapping_exits_two(self) -> None:
        (self.root / "broken.yaml").write_text("scaling_modes:\n  normal: [\n", encoding="utf-8")
        code, _out, err = self._run("--config", "broken.yaml")
        self.assertEqual(code, constants.EXIT_CONFIG_ERROR)
        self.assertIn("Failed to parse broken.yaml", err)

    def test_missing_yaml_dependency_exits_two(self) -> None:
        with patch.dict(sys.modules, {"yaml": None}):
            code, _out, err = self._run()
        self.assertEqual(code, constants.EXIT_CONFIG_ERROR)
        self.assertIn("Missing dependency: PyYAML", err)

    def test_fix_flag_is_accepted_and_inert(self) -> None:
        html = self.root / constants.DEFAULT_UI_MARKUP_PATH
        before = html.read_text(encoding="utf-8").replace("Normal Mode", "Standard Mode")
        html.write_text(before, encoding="utf-8")
        code, out, _err = self._run("--fix")
        self.assertEqual(code, constants.EXIT_VALIDATION_FAILED)
        self.assertIn("Fix mode: ENABLED", out)
        self.assertIn("does not modify artifacts", out)
        self.assertEqual(html.read_text(encoding="utf-8"), before)

    def test_fix_mode_defaults_to_disabled(self) -> None:
        _code, out, _err = self._run()
        self.assertIn("Fix mode: DISABLED", out)

    def test_config_path_from_environment(self) -> None:
        source = self.root / constants.DEFAULT_MAPPING_PATH
        shutil.copy(source, self.root / "modes.yaml")
        source.unlink()
        with patch.dict(os.environ, {constants.MAPPING_PATH_ENV: "modes.yaml"}):
            code, out, _err = self._run()
        self.assertEqual(code, constants.EXIT_OK)
        self.assertIn("Configuration: modes.yaml", out)

    def test_verdicts_are_identical_across_runs(self) -> None:
        props = self.root / constants.DEFAULT_BROKER_CONFIG_PATH
        props.write_text(props.read_text(encoding="utf-8").replace("topic=genetic-data-raw", "topic=other"), encoding="utf-8")
        first = self._run()
        second = self._run()
        self.assertEqual(first, second)
        self.assertEqual(first[0], constants.EXIT_VALIDATION_FAILED)
