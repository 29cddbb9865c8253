import pytest

from wordlimit import limit_gate
from wordlimit import limit_hooks
from wordlimit.word_limit_policy import WordLimitPolicy


#============================================
def test_empty_chain_passes_text_through() -> None:
	"""
	With no handlers the chain returns the text unchanged.
	"""
	chain = limit_hooks.WordLimitHookChain()
	result = chain.process("Hello there friend")
	assert result.text == "Hello there friend"
	assert result.applied is False
	assert result.method == limit_hooks.METHOD_PASSTHROUGH
	assert result.original_count == 3


#============================================
def test_handlers_run_in_registration_order() -> None:
	"""
	The first handler that returns a result wins; declining handlers are skipped.
	"""
	calls = []

	def declining(text, options):
		calls.append("declining")
		return None

	def answering(text, options):
		calls.append("answering")
		return limit_gate.LimitResult(text=text.upper(), applied=True, method="custom")

	def never_reached(text, options):
		calls.append("never")
		return None

	chain = limit_hooks.WordLimitHookChain()
	chain.register(declining)
	chain.register(answering)
	chain.register(never_reached)
	result = chain.process("quiet words", {"source": "test"})
	assert result.text == "QUIET WORDS"
	assert result.method == "custom"
	assert calls == ["declining", "answering"]


#============================================
def test_register_rejects_non_callable() -> None:
	"""
	Registering something that cannot be called raises TypeError.
	"""
	chain = limit_hooks.WordLimitHookChain()
	with pytest.raises(TypeError):
		chain.register("not a handler")


#============================================
def test_character_handler_applies_policy() -> None:
	"""
	An enabled character policy trims through the gate.
	"""
	policy = WordLimitPolicy(min_words=1, max_words=5)
	chain = limit_hooks.WordLimitHookChain()
	chain.register(limit_hooks.character_limit_handler(lambda: policy))
	result = chain.process("The cat sat on the mat quietly today")
	assert result.text == "cat sat mat quietly today"
	assert result.method == limit_gate.METHOD_TRIMMED


#============================================
@pytest.mark.parametrize(
	"raw_policy",
	[None, WordLimitPolicy(enabled=False, max_words=2), {"enabled": False, "max": 2}],
)
def test_character_handler_declines_without_enabled_policy(raw_policy) -> None:
	"""
	Missing or disabled character settings fall through to the passthrough.
	"""
	chain = limit_hooks.WordLimitHookChain()
	chain.register(limit_hooks.character_limit_handler(lambda: raw_policy))
	result = chain.process("one two three four")
	assert result.text == "one two three four"
	assert result.method == limit_hooks.METHOD_PASSTHROUGH


#============================================
def test_character_handler_declines_when_accessor_fails() -> None:
	"""
	Accessor lookup errors are logged and the handler declines.
	"""
	messages = []

	def broken_accessor():
		raise KeyError("no active character")

	chain = limit_hooks.WordLimitHookChain()
	chain.register(limit_hooks.character_limit_handler(broken_accessor, logger=messages.append))
	result = chain.process("one two three")
	assert result.method == limit_hooks.METHOD_PASSTHROUGH
	assert len(messages) == 1
	assert messages[0].startswith("Failed to get character word limit settings")


#============================================
def test_regeneration_retries_until_within_limits() -> None:
	"""
	Strict-mode reports trigger another generation attempt.
	"""
	drafts = ["too short", "still short", "now this answer has enough words"]
	attempts_seen = []

	def generate(attempt: int) -> str:
		attempts_seen.append(attempt)
		return drafts[attempt - 1]

	messages = []
	policy = WordLimitPolicy(min_words=5, max_words=100, strict_mode=True)
	result = limit_hooks.enforce_with_regeneration(generate, policy, logger=messages.append)
	assert attempts_seen == [1, 2, 3]
	assert result.text == "now this answer has enough words"
	assert result.method == limit_gate.METHOD_UNCHANGED
	assert "Attempt 1/3 reported too-short-reported; regenerating." in messages


#============================================
def test_regeneration_gives_up_after_max_attempts() -> None:
	"""
	The loop stops at max_attempts and returns the last reported result.
	"""
	attempts_seen = []

	def generate(attempt: int) -> str:
		attempts_seen.append(attempt)
		return "tiny"

	messages = []
	policy = WordLimitPolicy(min_words=5, max_words=100, strict_mode=True)
	result = limit_hooks.enforce_with_regeneration(generate, policy, logger=messages.append)
	assert attempts_seen == [1, 2, 3]
	assert result.method == limit_gate.METHOD_TOO_SHORT_REPORTED
	assert messages[-1] == "Giving up after 3 attempts (too-short-reported)."


#============================================
def test_regeneration_not_needed_without_strict_mode() -> None:
	"""
	Non-strict policies accept the first draft.
	"""
	attempts_seen = []

	def generate(attempt: int) -> str:
		attempts_seen.append(attempt)
		return "tiny"

	policy = WordLimitPolicy(min_words=5, max_words=100, strict_mode=False)
	result = limit_hooks.enforce_with_regeneration(generate, policy, max_attempts=5)
	assert attempts_seen == [1]
	assert result.method == limit_gate.METHOD_TOO_SHORT
