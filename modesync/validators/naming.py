"""Field-name conventions shared by the dependency-wiring checks."""
from __future__ import annotations

import re

from modesync import constants


_HYPHEN_LETTER_RE = re.compile(r"-([a-z])")


def channel_field_name(channel: str) -> str:
	"""Convert a kebab-case channel name to camelCase.

	Only a hyphen followed by a lowercase letter is folded, so
	``genetic-data-raw-out`` becomes ``geneticDataRawOut`` while a
	single-word name is returned unchanged.
	"""
	return _HYPHEN_LETTER_RE.sub(lambda match: match.group(1).upper(), channel)


def emitter_field_name(channel: str) -> str:
	return f"{channel_field_name(channel)}{constants.EMITTER_SUFFIX}"
