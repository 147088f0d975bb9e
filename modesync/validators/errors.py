from __future__ import annotations


class ConfigurationError(Exception):
	def __init__(self, message: str, *, path: str | None = None):
		super().__init__(message)
		self.message = message
		self.path = path


class ArtifactMissing(Exception):
	def __init__(self, path: str, reason: str = "not found"):
		super().__init__(f"{path}: {reason}")
		self.path = path
		self.reason = reason
