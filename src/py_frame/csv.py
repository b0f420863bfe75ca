"""
Delimited-text loading and export for PyFrame.

read_csv slurps the whole file, parse_csv turns the text into a frame:
  1. split on the line terminator and drop trailing empty lines
  2. first line -> header (or synthesize "0".."N-1" from the first record)
  3. every remaining line -> one row; a field-count mismatch raises PyFrameSchemaError
No quoting: a separator inside a field always splits it.

to_csv writes the header (optional) and rows joined by "\\n" with no trailing newline.
The whole text is encoded before the file is opened, so an encoding failure leaves
the destination untouched.

This is the only module that logs: one DEBUG record per completed load or write
on the "py_frame.csv" logger. Duplicate column names raise a UserWarning that
points at the line calling the public entry point.
"""

from __future__ import annotations
import logging
import os
import warnings
from typing import List, Mapping, Optional

from . import config
from .config import ReadOption, ReadOptions, WriteOptions
from .errors import PyFrameDestinationError, PyFrameSchemaError, PyFrameSourceError
from .frame import PyFrame
from .scalar import PyScalar
from .text import concat, split

logger = logging.getLogger(__name__)


def _warn_duplicates(columns, stacklevel):
	seen = set()
	duplicates = []
	for name in columns:
		if name in seen and name not in duplicates:
			duplicates.append(name)
		seen.add(name)
	if duplicates:
		warnings.warn(
			f"Duplicate column names {duplicates}; lookups by name return the first match.",
			stacklevel=stacklevel,
		)


def _parse(text: str, options: ReadOptions, stacklevel: int) -> PyFrame:
	# stacklevel: the warnings.warn level that reaches the public caller from here
	lines = split(text, options.line_terminator)
	while lines and not lines[-1]:
		lines.pop()

	if not lines:
		return PyFrame._wrap([], [])

	if options.header:
		columns = split(lines[0], options.separator, options.auto_trim)
		records = lines[1:]
		_warn_duplicates(columns, stacklevel + 1)
	else:
		width = len(split(lines[0], options.separator, options.auto_trim))
		columns = [str(i) for i in range(width)]
		records = lines

	offset = 1 if options.header else 0
	rows: List[List[str]] = []
	for index, line in enumerate(records):
		row = split(line, options.separator, options.auto_trim)
		if len(row) != len(columns):
			raise PyFrameSchemaError(index + offset, len(columns), len(row))
		rows.append(row)

	return PyFrame._wrap(columns, rows)


def _load(file_path, options: ReadOptions, stacklevel: int) -> PyFrame:
	try:
		with open(file_path, 'rb') as f:
			raw = f.read()
	except OSError as e:
		raise PyFrameSourceError(f"file '{os.fspath(file_path)}' doesn't exist or cannot be read") from e

	try:
		text = raw.decode(options.encoding)
	except UnicodeDecodeError as e:
		raise PyFrameSourceError(f"file '{os.fspath(file_path)}' is not valid {options.encoding}") from e

	frame = _parse(text, options, stacklevel + 1)
	logger.debug("Loaded %d rows x %d columns from %s", frame.shape[0], frame.shape[1], file_path)
	return frame


def parse_csv(text: str, header: bool = True, separator: str = ",",
		line_terminator: Optional[str] = None, auto_trim: bool = True) -> PyFrame:
	"""
	Parse delimited text into a PyFrame.

	Parameters
	----------
	text : str
		Whole input
	header : bool
		First line holds the column names
	separator : str
		Field delimiter
	line_terminator : str or None
		Record delimiter; None uses config.default_line_terminator()
	auto_trim : bool
		Strip whitespace around every field

	Raises
	------
	PyFrameSchemaError
		If a record has a different field count than the header. record_index is
		the 0-based record position, counting the header line when there is one.

	Examples
	--------
	>>> parse_csv("a,b\\n1,2\\n3,4\\n", line_terminator="\\n").data()
	[['1', '2'], ['3', '4']]
	"""
	options = ReadOptions(header=header, separator=separator,
		line_terminator=line_terminator, auto_trim=auto_trim)
	return _parse(text, options, stacklevel=3)


def read_csv(file_path, header: bool = True, separator: str = ",",
		line_terminator: Optional[str] = None, auto_trim: bool = True,
		encoding: str = config.DEFAULT_ENCODING) -> PyFrame:
	"""
	Load a CSV file into a PyFrame.

	The file is read in one go as bytes and decoded with encoding, then parsed
	as in parse_csv. Line terminators are matched exactly (no newline translation),
	so a "\\r\\n" file read with "\\n" leaves a "\\r" that auto_trim removes.

	Raises
	------
	PyFrameSourceError
		If the file cannot be opened, read or decoded
	PyFrameValueError
		If encoding is not a known codec
	PyFrameSchemaError
		See parse_csv
	"""
	options = ReadOptions(header=header, separator=separator,
		line_terminator=line_terminator, auto_trim=auto_trim, encoding=encoding)
	return _load(file_path, options, stacklevel=3)


def read_csv_with(file_path, arguments: Optional[Mapping[ReadOption, PyScalar]] = None) -> PyFrame:
	"""
	Load a CSV file with options given as a ReadOption -> PyScalar mapping.

	>>> read_csv_with("data.csv", {ReadOption.HEADER: PyScalar(False),
	...                            ReadOption.SEPARATOR: PyScalar(";")})  # doctest: +SKIP
	"""
	options = ReadOptions.from_arguments(arguments, stacklevel=3)
	return _load(file_path, options, stacklevel=3)


def format_csv(frame: PyFrame, header: bool = True, separator: str = ",") -> str:
	"""Serialize a frame: optional header line, then one line per row, no trailing newline."""
	lines = []
	if header:
		lines.append(concat(frame._header, separator))
	lines.extend(concat(row, separator) for row in frame._rows)
	return config.WRITE_LINE_TERMINATOR.join(lines)


def to_csv(frame: PyFrame, file_path, append: bool = False, header: bool = True,
		separator: str = ",", encoding: str = config.DEFAULT_ENCODING) -> None:
	"""
	Write a frame to file_path, truncating it (or appending when append=True).

	Records are always joined with "\\n" and the last one has no terminator, so
	an appended frame starts on the same line the previous write ended on.

	Raises
	------
	PyFrameDestinationError
		If the text cannot be encoded, or file_path cannot be opened or written.
		The file is not touched when encoding fails.
	PyFrameValueError
		If encoding is not a known codec
	"""
	options = WriteOptions(append=append, header=header, separator=separator, encoding=encoding)
	content = format_csv(frame, header=options.header, separator=options.separator)
	try:
		data = content.encode(options.encoding)
	except UnicodeEncodeError as e:
		raise PyFrameDestinationError(
			f"frame cannot be written to '{os.fspath(file_path)}' as {options.encoding}"
		) from e

	mode = 'ab' if options.append else 'wb'
	try:
		with open(file_path, mode) as f:
			f.write(data)
	except OSError as e:
		raise PyFrameDestinationError(f"file path '{os.fspath(file_path)}' cannot be opened for writing") from e
	logger.debug("Wrote %d rows x %d columns to %s", frame.shape[0], frame.shape[1], file_path)


__all__ = [
	"parse_csv",
	"read_csv",
	"read_csv_with",
	"format_csv",
	"to_csv",
]
