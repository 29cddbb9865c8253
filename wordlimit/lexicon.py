"""Static word lists used to classify words during trimming.

All entries are normalized forms (lowercase, edge punctuation removed).
"""

# Standard Library
import re


# function words: articles, conjunctions, prepositions, degree/frequency adverbs
STOPWORDS = frozenset([
	"a", "an", "the", "and", "or", "but", "so", "to", "of", "for", "in", "on", "at", "by", "with", "from", "into", "about",
	"over", "under", "between", "through", "during", "before", "after", "up", "down", "out", "off", "than", "as", "if", "then",
	"while", "because", "since", "though", "although", "unless", "without", "within", "beyond", "around", "near",
	"just", "very", "really", "quite", "still", "also", "even", "too", "ever", "never", "maybe", "perhaps", "almost",
])

# hedges and intensifiers
FILLER_WORDS = frozenset([
	"literally", "actually", "basically", "seriously", "simply", "kinda", "sorta", "pretty", "totally", "completely",
	"extremely", "highly", "truly", "honestly", "definitely", "probably", "apparently", "maybe", "perhaps", "somewhat",
])

# applied in order; later patterns see the output of earlier ones
PHRASE_REPLACEMENTS = (
	(re.compile(r"\byou are\b", re.IGNORECASE), "you're"),
	(re.compile(r"\byou have\b", re.IGNORECASE), "you've"),
	(re.compile(r"\bkind of\b", re.IGNORECASE), "kinda"),
	(re.compile(r"\bsort of\b", re.IGNORECASE), "sorta"),
	(re.compile(r"\bgoing to\b", re.IGNORECASE), "gonna"),
	(re.compile(r"\bgot to\b", re.IGNORECASE), "gotta"),
	(re.compile(r"\btrying to\b", re.IGNORECASE), "tryna"),
)


#============================================
def is_stopword(normalized: str) -> bool:
	"""
	Return True when a normalized word is a stopword.
	"""
	return normalized in STOPWORDS


#============================================
def is_filler_word(normalized: str) -> bool:
	"""
	Return True when a normalized word is a filler word.
	"""
	return normalized in FILLER_WORDS
