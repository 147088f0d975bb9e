from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


_STRING_FIELDS = (
	"ui_button_id",
	"ui_button_text",
	"backend_mode",
	"kafka_topic",
	"event_type",
	"emitter_channel",
)


def _scalar_to_str(value: Any) -> Any:
	if isinstance(value, bool):
		return "true" if value else "false"
	if isinstance(value, (int, float)):
		return str(value)
	return value


class ScalingModeEntry(BaseModel):
	model_config = ConfigDict(extra="allow", str_strip_whitespace=True)

	ui_button_id: str = Field(..., min_length=1, description="HTML id of the mode button.")
	ui_button_text: str = Field(..., min_length=1, description="Label displayed on the mode button.")
	backend_mode: str = Field(..., min_length=1, description="Literal matched by the backend switch.")
	kafka_topic: str = Field(..., min_length=1, description="Topic the backend publishes to.")
	event_type: str = Field(..., min_length=1, description="Event type attached to published messages.")
	emitter_channel: str = Field(..., min_length=1, description="Outgoing channel bound to the topic.")

	@field_validator(*_STRING_FIELDS, mode="before")
	@classmethod
	def _coerce_scalars(cls, value: Any) -> Any:
		return _scalar_to_str(value)


class ScalingModeDocument(BaseModel):
	model_config = ConfigDict(extra="allow")

	scaling_modes: Dict[str, ScalingModeEntry]

	@field_validator("scaling_modes", mode="before")
	@classmethod
	def _coerce_mode_names(cls, value: Any) -> Any:
		if isinstance(value, dict):
			return {_scalar_to_str(name): entry for name, entry in value.items()}
		return value

	@model_validator(mode="after")
	def _check_modes(self) -> "ScalingModeDocument":
		if not self.scaling_modes:
			raise ValueError("scaling_modes must declare at least one mode")
		for name in self.scaling_modes:
			if not name.strip():
				raise ValueError("mode names must not be empty")
		bound: Dict[str, str] = {}
		owner: Dict[str, str] = {}
		for name, entry in self.scaling_modes.items():
			channel = entry.emitter_channel
			if channel in bound and bound[channel] != entry.kafka_topic:
				raise ValueError(
					f"emitter channel '{channel}' is bound to topic '{bound[channel]}' "
					f"by mode '{owner[channel]}' and to topic '{entry.kafka_topic}' by mode '{name}'"
				)
			bound.setdefault(channel, entry.kafka_topic)
			owner.setdefault(channel, name)
		return self
