"""
Light-weight bookkeeping for where words came from, so that error messages can point.
"""
from pathlib import Path
from typing import NamedTuple, Optional

class Span(NamedTuple):
	""" Some characters within a single line of input """
	line: str
	slice: slice

	def width(self) -> int: return self.slice.stop - self.slice.start

class Word(NamedTuple):
	text: str
	spot: Span

class Origin(NamedTuple):
	""" Aimed at whatever prints error messages """
	path: Optional[Path]  # None means the line came from the console or the command line.
	row: int
	text: str

	def describe(self) -> str:
		if self.path is None: return "line %d" % self.row
		return "%s, line %d" % (self.path, self.row)
