"""Bounded word reduction.

Removes words in a fixed priority order until a word sequence fits
a maximum length:

1. pure punctuation tokens (end to start)
2. stopwords (end to start)
3. filler words (end to start)
4. shortest interior words (first and last word are kept)
5. hard truncation to the first N words

Each phase runs only while the sequence is still over the limit.
"""

from wordlimit import lexicon
from wordlimit import word_text_utils

# sort key for interior words whose normalized form is empty
EMPTY_NORMALIZED_LENGTH = 1000


#============================================
class _ReductionPass:
	"""
	Alive/removed flags over one word sequence.

	Words are only ever flagged, never spliced, so indices stay equal
	to the original positions and survivors keep their reading order.
	"""

	def __init__(self, words: list[str], limit: int):
		self.words = words
		self.limit = limit
		self.alive = [True] * len(words)
		self.remaining = len(words)

	def over_limit(self) -> bool:
		return self.remaining > self.limit

	def remove(self, index: int) -> None:
		if self.alive[index]:
			self.alive[index] = False
			self.remaining -= 1

	def alive_indices(self) -> list[int]:
		return [index for index, flag in enumerate(self.alive) if flag]

	def survivors(self) -> list[str]:
		return [self.words[index] for index in self.alive_indices()]


#============================================
def _remove_by_predicate(reduction: _ReductionPass, predicate) -> None:
	"""
	Scan from the end toward the start, removing matching words until at the limit.
	"""
	for index in range(len(reduction.words) - 1, -1, -1):
		if not reduction.over_limit():
			return
		if not reduction.alive[index]:
			continue
		if predicate(reduction.words[index]):
			reduction.remove(index)


#============================================
def _interior_sort_key(word: str, index: int) -> tuple[int, int]:
	length = len(word_text_utils.normalize_word(word)) or EMPTY_NORMALIZED_LENGTH
	return (length, index)


#============================================
def _remove_shortest_interior(reduction: _ReductionPass) -> None:
	"""
	Remove the shortest words, excluding the current first and last word.

	Ties keep reading order: the earlier word goes first.
	"""
	alive = reduction.alive_indices()
	if len(alive) <= 2:
		return
	candidates = alive[1:-1]
	candidates.sort(key=lambda index: _interior_sort_key(reduction.words[index], index))
	for index in candidates:
		if not reduction.over_limit():
			return
		reduction.remove(index)


#============================================
def _is_stopword(word: str) -> bool:
	return lexicon.is_stopword(word_text_utils.normalize_word(word))


#============================================
def _is_filler_word(word: str) -> bool:
	return lexicon.is_filler_word(word_text_utils.normalize_word(word))


#============================================
def shrink_words_to_limit(words, limit: int) -> list[str]:
	"""
	Reduce a word sequence to at most `limit` words.

	Args:
		words: Word sequence in reading order.
		limit: Maximum number of words to keep. Values below 1 yield
			an empty sequence.

	Returns:
		New list of surviving words in their original order. When the
		input already fits, the list holds the same words unchanged.
	"""
	word_list = list(words or [])
	if len(word_list) <= limit:
		return word_list

	reduction = _ReductionPass(word_list, limit)
	_remove_by_predicate(reduction, word_text_utils.is_pure_punctuation)
	_remove_by_predicate(reduction, _is_stopword)
	_remove_by_predicate(reduction, _is_filler_word)
	if reduction.over_limit():
		_remove_shortest_interior(reduction)

	result = reduction.survivors()
	# last resort when heuristics cannot reach the limit
	if len(result) > limit:
		return result[:max(limit, 0)]
	return result


#============================================
def reduce_text(text: str, limit: int) -> str:
	"""
	Split, shrink and rejoin text in one call.
	"""
	words = word_text_utils.split_words(text)
	trimmed = shrink_words_to_limit(words, limit)
	return word_text_utils.join_words(trimmed)
