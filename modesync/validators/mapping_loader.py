# modesync/validators/mapping_loader.py
from __future__ import annotations

import re
from collections.abc import Hashable
from typing import Callable, List, Optional

import yaml
from pydantic import ValidationError

from modesync import constants
from modesync.adapters.artifact_paths import resolve_path
from modesync.schemas import ScalingModeDocument
from .errors import ConfigurationError
from .types import ModeDefinition


_BOOL_TAG = "tag:yaml.org,2002:bool"


class _UniqueKeyLoader(yaml.SafeLoader):
	"""SafeLoader that rejects a key repeated inside one mapping.

	Only ``true``/``false`` resolve to booleans, so labels such as ``On``
	or ``Yes`` stay strings.
	"""

	yaml_implicit_resolvers = {
		first: [(tag, regexp) for tag, regexp in resolvers if tag != _BOOL_TAG]
		for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
	}

	def construct_mapping(self, node, deep=False):
		seen = set()
		for key_node, _value_node in node.value:
			key = self.construct_object(key_node, deep=deep)
			if not isinstance(key, Hashable):
				continue
			if key in seen:
				raise yaml.constructor.ConstructorError(
					"while constructing a mapping",
					node.start_mark,
					f"found duplicate key {key!r}",
					key_node.start_mark,
				)
			seen.add(key)
		return super().construct_mapping(node, deep=deep)


_UniqueKeyLoader.add_implicit_resolver(
	_BOOL_TAG,
	re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
	list("tTfF"),
)


def _format_validation_error(exc: ValidationError) -> str:
	problems = []
	for error in exc.errors():
		location = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
		problems.append(f"{location}: {error.get('msg', 'invalid value')}")
	return "; ".join(problems)


def _to_definitions(document: ScalingModeDocument) -> List[ModeDefinition]:
	return [
		ModeDefinition(
			name=name,
			ui_button_id=entry.ui_button_id,
			ui_button_text=entry.ui_button_text,
			backend_mode=entry.backend_mode,
			broker_topic=entry.kafka_topic,
			event_type=entry.event_type,
			emitter_channel=entry.emitter_channel,
		)
		for name, entry in document.scaling_modes.items()
	]


def parse_modes(content: str, source: str = "<string>") -> List[ModeDefinition]:
	try:
		raw = yaml.load(content, Loader=_UniqueKeyLoader)
	except yaml.YAMLError as exc:
		raise ConfigurationError(f"Failed to parse {source}: {exc}", path=source) from exc
	if not isinstance(raw, dict):
		raise ConfigurationError(
			f"Failed to load {source}: expected a mapping with a '{constants.MAPPING_SECTION}' section",
			path=source,
		)
	try:
		document = ScalingModeDocument.model_validate(raw)
	except ValidationError as exc:
		raise ConfigurationError(
			f"Invalid mapping in {source}: {_format_validation_error(exc)}",
			path=source,
		) from exc
	return _to_definitions(document)


def load_modes(
	path: str,
	repo_root: Optional[str] = None,
	log: Optional[Callable[[str], None]] = None,
) -> List[ModeDefinition]:
	config_path = resolve_path(path, repo_root)
	if not config_path.is_file():
		raise ConfigurationError(f"Configuration file not found: {config_path.as_posix()}", path=config_path.as_posix())
	try:
		content = config_path.read_text(encoding="utf-8")
	except (OSError, UnicodeDecodeError) as exc:
		raise ConfigurationError(f"Failed to read configuration: {exc}", path=config_path.as_posix()) from exc
	modes = parse_modes(content, source=path)
	if log is not None:
		log(f"Loaded {len(modes)} scaling modes from {path}")
	return modes
