#!/usr/bin/env python3
import argparse
import dataclasses
import os
import sys
from datetime import datetime

try:
	import rich.console
except ModuleNotFoundError as error:
	raise RuntimeError(
		"Missing dependency: rich. Install with: pip install -e ."
	) from error

from wordlimit import limit_hooks
from wordlimit import word_limit_settings
from wordlimit import word_text_utils


DEFAULT_SETTINGS_PATH = "settings.yaml"


#============================================
def log_step(console: rich.console.Console, message: str, style: str = "cyan") -> None:
	"""
	Print one timestamped progress line with color.
	"""
	now_text = datetime.now().strftime("%H:%M:%S")
	console.print(f"[trim_words {now_text}] {message}", style=style, markup=False, soft_wrap=True)


#============================================
def parse_args(argv: list[str] = None) -> argparse.Namespace:
	"""
	Parse command-line arguments.
	"""
	parser = argparse.ArgumentParser(
		description="Trim freeform text to a word limit with priority-ordered word removal."
	)
	parser.add_argument(
		"text",
		nargs="*",
		help="Text to trim. Reads --input or stdin when omitted.",
	)
	parser.add_argument(
		"--input",
		default=None,
		help="Path to a UTF-8 text file to trim.",
	)
	parser.add_argument(
		"--settings",
		default=DEFAULT_SETTINGS_PATH,
		help="YAML settings path for word limit defaults.",
	)
	parser.add_argument(
		"--character",
		default=None,
		help="Character name whose word limit settings apply.",
	)
	parser.add_argument(
		"--max-words",
		type=int,
		default=None,
		help="Maximum word count (defaults from settings.yaml).",
	)
	parser.add_argument(
		"--min-words",
		type=int,
		default=None,
		help="Minimum word count (defaults from settings.yaml).",
	)
	strict_group = parser.add_mutually_exclusive_group()
	strict_group.add_argument(
		"--strict",
		dest="strict_mode",
		action="store_true",
		help="Report responses outside the limits.",
	)
	strict_group.add_argument(
		"--no-strict",
		dest="strict_mode",
		action="store_false",
		help="Do not report responses outside the limits.",
	)
	trim_group = parser.add_mutually_exclusive_group()
	trim_group.add_argument(
		"--auto-trim",
		dest="auto_trim",
		action="store_true",
		help="Trim responses over the maximum (default).",
	)
	trim_group.add_argument(
		"--no-auto-trim",
		dest="auto_trim",
		action="store_false",
		help="Leave responses over the maximum untouched.",
	)
	parser.add_argument(
		"--contract",
		action="store_true",
		help="Contract common phrases (e.g. 'going to' -> 'gonna') before trimming.",
	)
	parser.set_defaults(strict_mode=None, auto_trim=None)
	args = parser.parse_args(argv)
	return args


#============================================
def read_input_text(args: argparse.Namespace) -> str:
	"""
	Resolve input text from positional words, a file, or stdin.
	"""
	if args.text:
		return " ".join(args.text)
	if args.input:
		if not os.path.isfile(args.input):
			raise FileNotFoundError(f"Missing text input: {args.input}")
		with open(args.input, "r", encoding="utf-8") as handle:
			return handle.read()
	return sys.stdin.read()


#============================================
def resolve_policy(args: argparse.Namespace, settings: dict):
	"""
	Merge settings-based policy with command-line overrides.

	Returns None when a --character is named but has no enabled settings.
	"""
	if args.character:
		policy = word_limit_settings.get_character_policy(settings, args.character)
		if policy is None:
			return None
	else:
		policy = word_limit_settings.get_default_policy(settings)
	overrides = {}
	if args.max_words is not None:
		overrides["max_words"] = args.max_words
		# keep the inherited minimum from exceeding a lower command-line maximum
		overrides["min_words"] = min(policy.min_words, args.max_words)
	if args.min_words is not None:
		overrides["min_words"] = args.min_words
	if args.strict_mode is not None:
		overrides["strict_mode"] = args.strict_mode
	if args.auto_trim is not None:
		overrides["auto_trim"] = args.auto_trim
	return dataclasses.replace(policy, **overrides)


#============================================
def format_report(original_count: int, final_count: int, text: str) -> str:
	"""
	Render the two-line command result.
	"""
	return f"{original_count} -> {final_count} words\nResult: {text}"


#============================================
def main(argv: list[str] = None) -> None:
	"""
	Trim text according to settings and command-line overrides.
	"""
	args = parse_args(argv)
	console = rich.console.Console(stderr=True)
	if args.max_words is not None and args.max_words < 1:
		raise RuntimeError("max-words must be >= 1")
	if args.min_words is not None and args.min_words < 0:
		raise RuntimeError("min-words must be >= 0")

	settings, settings_path = word_limit_settings.load_settings(args.settings)
	log_step(console, f"Using settings file: {settings_path}")
	policy = resolve_policy(args, settings)
	if policy is None:
		log_step(console, f"No enabled word limit for character '{args.character}'.", style="yellow")
	else:
		log_step(
			console,
			"Using word limit: "
			+ f"min={policy.min_words}, max={policy.max_words}, "
			+ f"strict={policy.strict_mode}, auto_trim={policy.auto_trim}",
		)

	raw_text = read_input_text(args)
	original_count = word_text_utils.count_words(raw_text)
	text = raw_text.strip()
	if args.contract:
		text = word_text_utils.apply_phrase_replacements(text)

	chain = limit_hooks.WordLimitHookChain()
	chain.register(limit_hooks.character_limit_handler(
		lambda: policy,
		logger=lambda message: log_step(console, message, style="yellow"),
	))
	result = chain.process(text)
	log_step(console, f"Word limit path: {result.method}")

	# hard safety net for trimmed output
	if result.applied:
		word_text_utils.assert_word_limit(result.text, policy.max_words)
	final_count = word_text_utils.count_words(result.text)
	print(format_report(original_count, final_count, result.text))


if __name__ == "__main__":
	main()
