"""Display and repr logic for PyFrame."""

from __future__ import annotations
from typing import List


# How many rows/columns to show before inserting "..."
MAX_HEAD_ROWS = 5
MAX_HEAD_COLS = 5


def _needs_quoting(name: str) -> bool:
	"""A name needs quoting if it is empty, contains the column gap,
	OR has leading/trailing whitespace."""
	if not name:
		return True
	if name != name.strip():
		return True
	return "  " in name


def _preview_indices(count: int, head: int) -> List[int]:
	"""Indices to show, with -1 marking the "..." gap."""
	if count > head * 2:
		return list(range(head)) + [-1] + list(range(count - head, count))
	return list(range(count))


def _format_column(header, rows, col_idx, row_indices) -> List[str]:
	"""Header cell followed by the previewed body cells of one column, left-aligned."""
	if col_idx == -1:
		out = ["..."] + ["..." for _ in row_indices]
	else:
		name = header[col_idx]
		out = [repr(name) if _needs_quoting(name) else name]
		for r in row_indices:
			out.append("..." if r == -1 else rows[r][col_idx])

	width = max(len(s) for s in out)
	return [s.ljust(width) for s in out]


def _footer(frame) -> str:
	rows, cols = frame.shape
	return f"# {rows}×{cols} frame"


def _repr_frame(frame) -> str:
	"""Pretty repr for a PyFrame."""
	header = frame._header
	rows = frame._rows

	if not header:
		return _footer(frame)

	row_indices = _preview_indices(len(rows), MAX_HEAD_ROWS)
	col_indices = _preview_indices(len(header), MAX_HEAD_COLS)
	columns = [_format_column(header, rows, c, row_indices) for c in col_indices]

	lines = []
	for line_no in range(len(row_indices) + 1):
		lines.append("  ".join(col[line_no] for col in columns).rstrip())

	lines.append("")
	lines.append(_footer(frame))
	return "\n".join(lines)


def _printr(frame) -> str:
	"""Entry point used by PyFrame.__repr__."""
	return _repr_frame(frame)
