"""Policy gate that decides whether and how to enforce a word limit.

The gate never raises: every path returns a LimitResult. Conditions the
host may care about (strict-mode violations, unusable policies) are
recorded as LimitEvent entries and echoed to an optional logger.
"""

# Standard Library
from dataclasses import dataclass, field

from wordlimit import word_limit_policy
from wordlimit import word_reducer
from wordlimit import word_text_utils


METHOD_DISABLED = "disabled"
METHOD_UNCHANGED = "unchanged"
METHOD_INVALID_POLICY = "invalid-policy"
METHOD_TRIMMED = "trimmed"
METHOD_TOO_SHORT = "too-short"
METHOD_TOO_SHORT_REPORTED = "too-short-reported"
METHOD_TOO_LONG = "too-long"
METHOD_TOO_LONG_REPORTED = "too-long-reported"

EVENT_TOO_SHORT = "too-short"
EVENT_TOO_LONG = "too-long"
EVENT_INVALID_POLICY = "invalid-policy"

# methods that signal a strict-mode violation the host may act on
REPORTED_METHODS = frozenset([METHOD_TOO_SHORT_REPORTED, METHOD_TOO_LONG_REPORTED])


#============================================
@dataclass(frozen=True)
class LimitEvent:
	kind: str
	word_count: int
	limit: int
	message: str


#============================================
@dataclass
class LimitResult:
	text: str
	applied: bool
	method: str
	original_count: int = 0
	final_count: int = 0
	events: list = field(default_factory=list)

	@property
	def reported(self) -> bool:
		return self.method in REPORTED_METHODS


#============================================
def _log(logger, msg: str) -> None:
	"""Call the logger if it is not None.

	Args:
		logger: Callable(str) or None.
		msg: Message to log.
	"""
	if logger is not None:
		logger(msg)


#============================================
def _record(result: LimitResult, event: LimitEvent, logger) -> LimitResult:
	result.events.append(event)
	_log(logger, event.message)
	return result


#============================================
def apply_word_limit(text, policy, logger=None) -> LimitResult:
	"""Enforce a word limit policy on one piece of text.

	Args:
		text: Text to check. None or non-string input is treated as empty.
		policy: WordLimitPolicy or a host mapping (see coerce_policy).
		logger: Callable(msg) -> None for reported events, or None.

	Returns:
		LimitResult with the output text, whether trimming was applied,
		and which path fired.
	"""
	policy = word_limit_policy.coerce_policy(policy)
	if not isinstance(text, str):
		text = ""
	words = word_text_utils.split_words(text)
	word_count = len(words)
	if not policy.enabled:
		return LimitResult(
			text=text,
			applied=False,
			method=METHOD_DISABLED,
			original_count=word_count,
			final_count=word_count,
		)
	if not words:
		return LimitResult(text=text, applied=False, method=METHOD_UNCHANGED)

	result = LimitResult(
		text=text,
		applied=False,
		method=METHOD_UNCHANGED,
		original_count=word_count,
		final_count=word_count,
	)

	issue = word_limit_policy.policy_issue(policy)
	if issue:
		result.method = METHOD_INVALID_POLICY
		event = LimitEvent(
			kind=EVENT_INVALID_POLICY,
			word_count=word_count,
			limit=policy.max_words,
			message=f"Word limit skipped, invalid policy: {issue}",
		)
		return _record(result, event, logger)

	if policy.min_words <= word_count <= policy.max_words:
		return result

	if word_count < policy.min_words:
		if not policy.strict_mode:
			result.method = METHOD_TOO_SHORT
			return result
		result.method = METHOD_TOO_SHORT_REPORTED
		event = LimitEvent(
			kind=EVENT_TOO_SHORT,
			word_count=word_count,
			limit=policy.min_words,
			message=f"Response too short: {word_count} words (minimum: {policy.min_words})",
		)
		return _record(result, event, logger)

	# word_count > max_words from here on
	if policy.auto_trim:
		trimmed_words = word_reducer.shrink_words_to_limit(words, policy.max_words)
		result.text = word_text_utils.join_words(trimmed_words)
		result.applied = True
		result.method = METHOD_TRIMMED
		result.final_count = len(trimmed_words)
		return result
	if policy.strict_mode:
		result.method = METHOD_TOO_LONG_REPORTED
		event = LimitEvent(
			kind=EVENT_TOO_LONG,
			word_count=word_count,
			limit=policy.max_words,
			message=f"Response too long: {word_count} words (maximum: {policy.max_words})",
		)
		return _record(result, event, logger)
	result.method = METHOD_TOO_LONG
	return result
