# Standard Library
import re

from wordlimit import lexicon


WHITESPACE_RE = re.compile(r"\s+")
# strip anything outside [a-z0-9'] from both ends of a lowercased word
EDGE_NOISE_RE = re.compile(r"^[^a-z0-9']+|[^a-z0-9']+$")


#============================================
def split_words(text) -> list[str]:
	"""
	Split text on whitespace runs into a word sequence.
	"""
	if not text or not isinstance(text, str):
		return []
	words = [word for word in WHITESPACE_RE.split(text.strip()) if word]
	return words


#============================================
def join_words(words) -> str:
	"""
	Join words with single spaces and collapse leftover whitespace.
	"""
	kept = [word for word in words if word]
	joined = " ".join(kept)
	return WHITESPACE_RE.sub(" ", joined).strip()


#============================================
def count_words(text) -> int:
	"""
	Count whitespace-delimited words.
	"""
	return len(split_words(text))


#============================================
def normalize_word(word) -> str:
	"""
	Return the lowercase classification form of one word.

	Only used to test lexicon membership; output text always keeps
	the original word.
	"""
	if not isinstance(word, str):
		return ""
	return EDGE_NOISE_RE.sub("", word.lower())


#============================================
def is_pure_punctuation(word) -> bool:
	"""
	Return True when a word carries no letters, digits or apostrophes.
	"""
	return not normalize_word(word)


#============================================
def apply_phrase_replacements(text: str) -> str:
	"""
	Rewrite common two-word phrases into their contracted forms.
	"""
	if not text:
		return ""
	result = text
	for pattern, replacement in lexicon.PHRASE_REPLACEMENTS:
		result = pattern.sub(replacement, result)
	return result


#============================================
def assert_word_limit(text: str, word_limit: int) -> None:
	"""
	Raise when text exceeds a word limit.
	"""
	count = count_words(text)
	if count > word_limit:
		raise RuntimeError(
			f"Word limit exceeded: {count} > {word_limit}"
		)
