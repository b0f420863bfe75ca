"""Delimiter-based splitting, joining and trimming of text."""

from __future__ import annotations
from typing import Iterable, List


# Stripped by trim(): space, tab, newline, carriage return, form-feed, vertical-tab
WHITESPACE = " \t\n\r\f\v"


def trim(text: str) -> str:
	"""Strip WHITESPACE from both ends. All-whitespace input becomes ''."""
	return text.strip(WHITESPACE)


def split(text: str, separator: str, trim: bool = False) -> List[str]:
	"""Split text on every occurrence of separator.

	Rules:
	- Empty text gives an empty list
	- Empty separator gives [text], untouched (no search, no trimming)
	- The segment after the last separator is always kept, even if empty
	- With trim, each segment has WHITESPACE stripped from both ends
	"""
	if not text:
		return []
	if not separator:
		return [text]

	result = []
	step = len(separator)
	start = 0
	while True:
		found = text.find(separator, start)
		if found == -1:
			segment = text[start:]
			result.append(segment.strip(WHITESPACE) if trim else segment)
			break
		segment = text[start:found]
		result.append(segment.strip(WHITESPACE) if trim else segment)
		start = found + step
	return result


def concat(items: Iterable[str], separator: str) -> str:
	"""Join items with separator between them (no trailing separator)."""
	return separator.join(items)
