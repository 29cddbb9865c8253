"""Word limit settings read from a YAML file.

Layout:

	word_limit:
	  enabled: true
	  defaults: {min_words, max_words, strict_mode, auto_trim, style, instructions}
	characters:
	  <name>: {enabled, min_words, max_words, strict_mode, auto_trim, style, instructions}
"""

import os

import yaml

from wordlimit import word_limit_policy


WORD_LIMIT_SECTION = "word_limit"
CHARACTERS_SECTION = "characters"
TRUE_WORDS = frozenset(["1", "true", "yes", "on"])
FALSE_WORDS = frozenset(["0", "false", "no", "off"])

_MISSING = object()


#============================================
def resolve_settings_path(path_text: str) -> str:
	"""
	Resolve a relative settings path against cwd, then the project directory.

	Returns the cwd candidate when neither location has the file.
	"""
	if os.path.isabs(path_text):
		return path_text
	project_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
	candidates = [os.path.abspath(path_text), os.path.join(project_dir, path_text)]
	for candidate in candidates:
		if os.path.isfile(candidate):
			return candidate
	return candidates[0]


#============================================
def load_settings(path_text: str) -> tuple[dict, str]:
	"""
	Load word limit settings and return them with the resolved path.

	A missing or empty file yields empty settings. The top level and the
	word_limit and characters sections must be mappings.
	"""
	resolved_path = resolve_settings_path(path_text)
	if not os.path.isfile(resolved_path):
		return {}, resolved_path
	with open(resolved_path, "r", encoding="utf-8") as handle:
		data = yaml.safe_load(handle)
	if data is None:
		return {}, resolved_path
	if not isinstance(data, dict):
		raise RuntimeError(f"Settings file must contain a mapping: {resolved_path}")
	for section in (WORD_LIMIT_SECTION, CHARACTERS_SECTION):
		value = data.get(section)
		if value is not None and not isinstance(value, dict):
			raise RuntimeError(f"Invalid settings: {section} must be a mapping in {resolved_path}")
	return data, resolved_path


#============================================
def _lookup(settings: dict, keys: list[str]):
	current = settings
	for key in keys:
		if not isinstance(current, dict) or key not in current:
			return _MISSING
		current = current[key]
	if current is None:
		return _MISSING
	return current


#============================================
def _invalid(kind: str, keys: list[str], value) -> RuntimeError:
	return RuntimeError(f"Invalid {kind} for setting path {'.'.join(keys)}: {value}")


#============================================
def read_word_count(settings: dict, keys: list[str], default_value: int) -> int:
	"""
	Read a non-negative word count; a missing value gives the default.
	"""
	value = _lookup(settings, keys)
	if value is _MISSING:
		return default_value
	if isinstance(value, bool):
		raise _invalid("word count", keys, value)
	try:
		count = int(value)
	except (TypeError, ValueError) as error:
		raise _invalid("word count", keys, value) from error
	if count < 0:
		raise _invalid("word count", keys, value)
	return count


#============================================
def read_flag(settings: dict, keys: list[str], default_value: bool) -> bool:
	"""
	Read an on/off switch, accepting yes/no style strings and integers.
	"""
	value = _lookup(settings, keys)
	if value is _MISSING:
		return default_value
	if isinstance(value, bool):
		return value
	if isinstance(value, int):
		return value != 0
	if isinstance(value, str):
		text = value.strip().lower()
		if text in TRUE_WORDS:
			return True
		if text in FALSE_WORDS:
			return False
	raise _invalid("boolean", keys, value)


#============================================
def read_text(settings: dict, keys: list[str], default_value: str) -> str:
	"""
	Read a free-text value such as character instructions.
	"""
	value = _lookup(settings, keys)
	if value is _MISSING:
		return default_value
	return str(value).strip()


#============================================
def read_style(settings: dict, keys: list[str], default_value: str) -> str:
	"""
	Read a response style name and validate it against known styles.
	"""
	style = read_text(settings, keys, "").lower()
	if not style:
		return default_value
	if style not in word_limit_policy.STYLE_CHOICES:
		raise RuntimeError(
			f"Invalid style for setting path {'.'.join(keys)}: {style} "
			+ f"(expected one of: {', '.join(word_limit_policy.STYLE_CHOICES)})"
		)
	return style


#============================================
def is_word_limit_enabled(settings: dict) -> bool:
	"""
	Return the global word_limit.enabled switch.
	"""
	return read_flag(settings, [WORD_LIMIT_SECTION, "enabled"], True)


#============================================
def get_default_policy(settings: dict) -> word_limit_policy.WordLimitPolicy:
	"""
	Build the fallback policy from word_limit.defaults.
	"""
	path = [WORD_LIMIT_SECTION, "defaults"]
	return word_limit_policy.WordLimitPolicy(
		enabled=is_word_limit_enabled(settings),
		min_words=read_word_count(settings, path + ["min_words"], word_limit_policy.DEFAULT_MIN_WORDS),
		max_words=read_word_count(settings, path + ["max_words"], word_limit_policy.DEFAULT_MAX_WORDS),
		strict_mode=read_flag(settings, path + ["strict_mode"], False),
		auto_trim=read_flag(settings, path + ["auto_trim"], True),
		style=read_style(settings, path + ["style"], word_limit_policy.DEFAULT_STYLE),
		instructions=read_text(settings, path + ["instructions"], ""),
	)


#============================================
def get_character_policy(settings: dict, character_name: str):
	"""
	Resolve one character's policy, filling gaps from word_limit.defaults.

	Returns None when the character is unknown, has no enabled flag set,
	or word limits are globally disabled.
	"""
	if not is_word_limit_enabled(settings):
		return None
	characters = _lookup(settings, [CHARACTERS_SECTION])
	if characters is _MISSING:
		return None
	if not isinstance(characters, dict):
		raise RuntimeError(f"Invalid settings: {CHARACTERS_SECTION} must be a mapping.")
	if not isinstance(characters.get(character_name), dict):
		return None
	path = [CHARACTERS_SECTION, character_name]
	if not read_flag(settings, path + ["enabled"], False):
		return None

	defaults = get_default_policy(settings)
	# zero, empty and false values fall back to the defaults
	min_words = read_word_count(settings, path + ["min_words"], 0) or defaults.min_words
	max_words = read_word_count(settings, path + ["max_words"], 0) or defaults.max_words
	strict_mode = read_flag(settings, path + ["strict_mode"], False) or defaults.strict_mode
	style = read_style(settings, path + ["style"], defaults.style)
	# auto trim stays on unless the character turns it off explicitly
	auto_trim = read_flag(settings, path + ["auto_trim"], True)
	return word_limit_policy.WordLimitPolicy(
		enabled=True,
		min_words=min_words,
		max_words=max_words,
		strict_mode=strict_mode,
		auto_trim=auto_trim,
		style=style,
		instructions=read_text(settings, path + ["instructions"], ""),
	)


#============================================
def build_policy_accessor(settings: dict, character_name: str):
	"""
	Return a zero-argument callable that reads the character policy on each call.
	"""
	def get_policy():
		if not character_name:
			return None
		return get_character_policy(settings, character_name)
	return get_policy
