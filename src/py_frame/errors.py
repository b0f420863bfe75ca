class PyFrameError(Exception):
	"""Base exception for py-frame library."""
	pass


class PyFrameKeyError(PyFrameError, KeyError):
	"""Raised when a column label is missing."""
	pass


class PyFrameTypeError(PyFrameError, TypeError):
	"""Raised for invalid types in API calls."""
	pass


class PyFrameValueError(PyFrameError, ValueError):
	"""Raised for invalid values or mismatched lengths."""
	pass


class PyFrameIndexError(PyFrameError, IndexError):
	"""Raised when a row index or slice bound is out of range."""
	pass


class PyFrameShapeError(PyFrameValueError):
	"""Raised when a conversion is called on a frame of the wrong shape."""
	pass


class PyFrameArityError(PyFrameValueError):
	"""Raised when a new header does not match the column count."""
	pass


class PyFrameConversionError(PyFrameValueError):
	"""Raised when a cell cannot be parsed as the requested type."""
	pass


class PyFrameSchemaError(PyFrameValueError):
	"""Raised when a record's field count disagrees with the header."""

	def __init__(self, record_index, expected, actual):
		self.record_index = record_index
		self.expected = expected
		self.actual = actual
		super().__init__(
			f"line[{record_index}] element size between header and row is different. "
			f"header's element size: {expected}, row's element size: {actual}"
		)


class PyFrameSourceError(PyFrameError, OSError):
	"""Raised when a CSV source cannot be opened or read."""
	pass


class PyFrameDestinationError(PyFrameError, OSError):
	"""Raised when a CSV destination cannot be opened for writing."""
	pass
