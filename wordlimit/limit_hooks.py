"""Host integration for word limit enforcement.

Hosts register handlers on a WordLimitHookChain instead of wrapping
their own message-processing function. Handlers receive the text and
an options mapping, and either return a LimitResult or None to pass
the text on to the next handler.
"""

from wordlimit import limit_gate
from wordlimit import word_limit_policy
from wordlimit import word_text_utils


MAX_REGENERATION_ATTEMPTS = 3
METHOD_PASSTHROUGH = "passthrough"


#============================================
def _log(logger, msg: str) -> None:
	"""
	Call the logger if it is not None.
	"""
	if logger is not None:
		logger(msg)


#============================================
class WordLimitHookChain:
	"""
	Ordered list of word limit handlers with a passthrough fallback.
	"""

	def __init__(self):
		self.handlers = []

	def register(self, handler) -> None:
		"""
		Append a handler Callable(text, options) -> LimitResult | None.
		"""
		if not callable(handler):
			raise TypeError(f"handler must be callable; got {type(handler).__name__}")
		self.handlers.append(handler)

	def process(self, text, options: dict = None) -> limit_gate.LimitResult:
		"""
		Run handlers in registration order and return the first result.
		"""
		options = options or {}
		for handler in self.handlers:
			result = handler(text, options)
			if result is not None:
				return result
		if not isinstance(text, str):
			text = ""
		word_count = word_text_utils.count_words(text)
		return limit_gate.LimitResult(
			text=text,
			applied=False,
			method=METHOD_PASSTHROUGH,
			original_count=word_count,
			final_count=word_count,
		)


#============================================
def character_limit_handler(get_policy, logger=None):
	"""Build a handler that enforces the current character's policy.

	Args:
		get_policy: Callable() -> WordLimitPolicy | dict | None that reads
			the active character's settings from the host.
		logger: Callable(msg) -> None, or None.

	Returns:
		Handler for WordLimitHookChain.register. It declines (returns
		None) when there is no active policy or the policy is disabled.
	"""
	def handler(text, options: dict):
		try:
			raw_policy = get_policy()
		except (LookupError, AttributeError, TypeError, ValueError, RuntimeError) as error:
			_log(logger, f"Failed to get character word limit settings: {error}")
			return None
		if raw_policy is None:
			return None
		policy = word_limit_policy.coerce_policy(raw_policy)
		if not policy.enabled:
			return None
		return limit_gate.apply_word_limit(text, policy, logger=logger)
	return handler


#============================================
def enforce_with_regeneration(
	generate_fn,
	policy,
	max_attempts: int = MAX_REGENERATION_ATTEMPTS,
	logger=None,
) -> limit_gate.LimitResult:
	"""Generate text and regenerate while strict mode reports a violation.

	The caller owns generation; this loop only decides whether another
	attempt is warranted.

	Args:
		generate_fn: Callable(attempt: int) -> str producing candidate text.
			attempt counts from 1.
		policy: WordLimitPolicy or host mapping.
		max_attempts: Upper bound on generate_fn calls, at least 1.
		logger: Callable(msg) -> None, or None.

	Returns:
		LimitResult for the last attempt.
	"""
	attempts = max(1, max_attempts)
	result = None
	for attempt in range(1, attempts + 1):
		text = generate_fn(attempt)
		result = limit_gate.apply_word_limit(text, policy, logger=logger)
		if not result.reported:
			return result
		if attempt < attempts:
			_log(
				logger,
				f"Attempt {attempt}/{attempts} reported {result.method}; regenerating.",
			)
	_log(logger, f"Giving up after {attempts} attempts ({result.method}).")
	return result
