"""Word limit policy values supplied by the host."""

# Standard Library
from dataclasses import dataclass


STYLE_CHOICES = ("natural", "concise", "detailed")

DEFAULT_MIN_WORDS = 10
DEFAULT_MAX_WORDS = 100
DEFAULT_STYLE = "natural"

# mapping keys accepted by coerce_policy, host camelCase first
_KEY_ALIASES = {
	"enabled": ("enabled",),
	"min_words": ("min", "minWords", "min_words"),
	"max_words": ("max", "maxWords", "max_words"),
	"strict_mode": ("strictMode", "strict_mode", "strict"),
	"auto_trim": ("autoTrim", "auto_trim"),
	"style": ("style",),
	"instructions": ("instructions",),
}


#============================================
@dataclass(frozen=True)
class WordLimitPolicy:
	"""
	Per-entity word limit settings.

	`style` and `instructions` are carried for the host's prompt step
	and are not read by the reducer.
	"""
	enabled: bool = True
	min_words: int = DEFAULT_MIN_WORDS
	max_words: int = DEFAULT_MAX_WORDS
	strict_mode: bool = False
	auto_trim: bool = True
	style: str = DEFAULT_STYLE
	instructions: str = ""


#============================================
def policy_issue(policy: WordLimitPolicy) -> str:
	"""
	Return a description of why a policy cannot be enforced, or an empty string.
	"""
	if policy.max_words < 1:
		return f"max_words must be >= 1; got {policy.max_words}"
	if policy.min_words > policy.max_words:
		return f"min_words {policy.min_words} exceeds max_words {policy.max_words}"
	return ""


#============================================
def _pick(mapping: dict, field_name: str):
	for key in _KEY_ALIASES[field_name]:
		if key in mapping and mapping[key] is not None:
			return mapping[key]
	return None


#============================================
def _as_int(value, default_value: int) -> int:
	if value is None or isinstance(value, bool):
		return default_value
	try:
		return int(value)
	except (TypeError, ValueError):
		return default_value


#============================================
def _as_bool(value, default_value: bool) -> bool:
	if isinstance(value, bool):
		return value
	if isinstance(value, str):
		text = value.strip().lower()
		if text in {"1", "true", "yes", "on"}:
			return True
		if text in {"0", "false", "no", "off"}:
			return False
		return default_value
	if isinstance(value, int):
		return value != 0
	return default_value


#============================================
def coerce_policy(policy) -> WordLimitPolicy:
	"""
	Build a WordLimitPolicy from a policy object, mapping or None.

	Unreadable values fall back to defaults instead of raising, so a
	malformed host payload never aborts the caller's pipeline.
	"""
	if isinstance(policy, WordLimitPolicy):
		return policy
	if not isinstance(policy, dict):
		return WordLimitPolicy()
	style = str(_pick(policy, "style") or DEFAULT_STYLE).strip().lower()
	if style not in STYLE_CHOICES:
		style = DEFAULT_STYLE
	return WordLimitPolicy(
		enabled=_as_bool(_pick(policy, "enabled"), True),
		min_words=_as_int(_pick(policy, "min_words"), DEFAULT_MIN_WORDS),
		max_words=_as_int(_pick(policy, "max_words"), DEFAULT_MAX_WORDS),
		strict_mode=_as_bool(_pick(policy, "strict_mode"), False),
		auto_trim=_as_bool(_pick(policy, "auto_trim"), True),
		style=style,
		instructions=str(_pick(policy, "instructions") or ""),
	)
