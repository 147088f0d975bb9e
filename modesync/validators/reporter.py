# modesync/validators/reporter.py
from __future__ import annotations

import os
from typing import Iterable, List, TextIO

from modesync import constants
from .types import ModeDefinition, ValidationResult, ValidationSummary


_COLORS = {
	"reset": "\033[0m",
	"red": "\033[0;31m",
	"green": "\033[0;32m",
	"yellow": "\033[1;33m",
	"blue": "\033[0;34m",
	"cyan": "\033[0;36m",
}


class Console:
	def __init__(self, stream: TextIO, color: bool | None = None):
		self.stream = stream
		if color is None:
			isatty = getattr(stream, "isatty", None)
			color = bool(isatty and isatty()) and "NO_COLOR" not in os.environ
		self.color = color

	def _write(self, color: str, message: str) -> None:
		if self.color:
			message = f"{_COLORS[color]}{message}{_COLORS['reset']}"
		print(message, file=self.stream)

	def plain(self, message: str) -> None:
		print(message, file=self.stream)

	def success(self, message: str) -> None:
		self._write("green", f"✅ {message}")

	def error(self, message: str) -> None:
		self._write("red", f"❌ {message}")

	def warning(self, message: str) -> None:
		self._write("yellow", f"⚠️  {message}")

	def info(self, message: str) -> None:
		self._write("cyan", f"ℹ️  {message}")

	def header(self, message: str) -> None:
		rule = "=" * 80
		self._write("blue", f"\n{rule}")
		self._write("blue", message)
		self._write("blue", rule)


def summarize(results: Iterable[ValidationResult]) -> ValidationSummary:
	collected: List[ValidationResult] = list(results)
	total = len(collected)
	passed = sum(1 for result in collected if result.passed)
	status = "pass" if passed == total else "fail"
	summary = "All validations passed." if status == "pass" else "One or more validations failed."
	return ValidationSummary(
		results=collected,
		total=total,
		passed=passed,
		status=status,
		summary=summary,
	)


def print_modes(console: Console, modes: List[ModeDefinition]) -> None:
	console.info(f"Validating {len(modes)} scaling modes:")
	for mode in modes:
		console.plain(f"   {mode.name}: {mode.ui_button_text} → {mode.broker_topic}")


def print_result(console: Console, result: ValidationResult) -> None:
	if result.passed:
		console.success(f"{result.name}: {result.message}")
		return
	console.error(f"{result.name}: {result.message}")
	if result.details:
		console.plain(f"   Details: {result.details}")


def print_summary(console: Console, summary: ValidationSummary) -> None:
	console.header("Validation Summary")
	console.plain(f"Total validations: {summary.total}")
	console.plain(f"Passed: {summary.passed}")
	console.plain(f"Failed: {summary.failed}")

	if summary.failures:
		console.error("Failed Validations:")
		for result in summary.failures:
			console.plain(f"   ❌ {result.name}: {result.message}")
			if result.details:
				console.plain(f"      {result.details}")
		console.error("To fix these issues:")
		for index, step in enumerate(constants.REMEDIATION_STEPS, start=1):
			console.plain(f"   {index}. {step}")
		return

	console.success("All scaling mode separation validations passed!")
	console.success("The separation of concerns is properly maintained.")


def report(console: Console, results: Iterable[ValidationResult]) -> ValidationSummary:
	summary = summarize(results)
	for result in summary.results:
		console.header(constants.CHECK_HEADINGS.get(result.artifact, result.name))
		print_result(console, result)
	print_summary(console, summary)
	return summary
