import sys, random
from typing import Sequence
from boozetools.support.failureprone import illustration

from .faults import Fault
from .location import Origin, Span
from .ontology import Value
from .rendering import render, render_stack

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]

	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Crud', 'Curses', "Crikey",
		'Drat', 'Fiddlesticks', 'Good Grief', "Great Scott",
		'Jeepers', 'Heavens', 'Nuts', 'Rats', 'Woe is me',
	]

	resignations = [
		'I cannot continue.',
		'That line is a lost cause.',
		'The stack has betrayed me.',
		'I need to ask for help.',
	]

	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	""" Collects the faults from a run, and tells the console about them. """
	_issues : list["Pic"]

	def __init__(self, *, verbose:int, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._told = 0
		self._max_issues = max_issues

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)
	def count(self): return len(self._issues)

	def issue(self, it:"Pic"):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def reset(self):
		self._issues.clear()
		self._told = 0

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def trace(self, value:Value, stack):
		""" Suitable as a machine's tracer: shows each step about to happen. """
		if self._verbose > 1:
			print("   ", render_stack(stack), "<-", render(value), file=sys.stderr)

	def fault(self, origin:Origin, fault:Fault):
		""" File a fault that aborted the line given by origin """
		problem = [] if fault.spot is None else [Annotation(origin, fault.spot, "here")]
		footer = [] if fault.depth is None else ["Stack depth at failure: %d" % fault.depth]
		self.issue(Pic(fault.describe(), problem, footer, where=origin))

	def no_such_file(self, path):
		self.issue(Pic("I see no file called %s" % path, []))

	def broken_file(self, path, cause:Exception):
		self.issue(Pic("Something went pear-shaped while trying to read %s" % path, [], [str(cause)]))

	def broken_line(self, origin:Origin, cause:UnicodeDecodeError):
		intro = "Skipped %s, which is not readable as UTF-8." % origin.describe()
		self.issue(Pic(intro, [], [str(cause)]))

	def complain_to_console(self):
		""" Emit any issues not yet mentioned to the console. """
		_bemoan(self._issues[self._told:])
		self._told = len(self._issues)

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)

class Annotation:
	origin: Origin
	span: Span
	caption: str
	def __init__(self, origin:Origin, span:Span, caption:str=""):
		self.origin = origin
		self.span = span
		self.caption = caption
	def illustrate(self):
		# A value defined on some earlier line still remembers that line.
		if self.span.line == self.origin.text: prefix = "% 6d |" % self.origin.row
		else: prefix = " (def) |"
		return illustration(self.span.line, self.span.slice.start, self.span.width(), prefix=prefix, caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer:Sequence[str]=(), where:Origin=None):
		self._intro, self._anns, self._footer, self._where = intro, anns, footer, where
	def as_text(self):
		lines = [self._intro, ""]
		if self._where is not None:
			lines.append(self._where.describe())
		lines.extend(ann.illustrate() for ann in self._anns)
		lines.extend(self._footer)
		return '\n'.join(lines)

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
