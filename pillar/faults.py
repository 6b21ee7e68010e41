"""
Everything that can go wrong while reading or running a line.

None of these is ever caught inside the interpreter proper.
They unwind to whoever asked for the line to be run,
which in practice means the command-line driver.
"""
from .ontology import Value
from .rendering import render

class Fault(Exception):
	""" Abandon the current line. Carries the word or value at fault and the stack depth at the time. """
	def __init__(self, culprit, depth:int, *details):
		super().__init__(culprit, depth, *details)
		self.culprit = culprit
		self.depth = depth

	@property
	def spot(self): return self.culprit.spot

	def describe(self) -> str: raise NotImplementedError(type(self))

	def __str__(self): return self.describe()

class StackUnderflow(Fault):
	def describe(self):
		return "%s ran out of things to pop." % _name(self.culprit)

class TypeMismatch(Fault):
	def __init__(self, culprit, depth:int, need:str, got):
		super().__init__(culprit, depth, need, got)
		self.need, self.got = need, got

	def describe(self):
		return "%s needs a %s, but found %s." % (_name(self.culprit), self.need, _name(self.got))

class UndefinedOperation(Fault):
	def describe(self):
		return "%s is not a defined operation." % _name(self.culprit)

class ArithmeticFault(Fault, ZeroDivisionError):
	def describe(self):
		return "%s tried to divide by zero." % _name(self.culprit)

class NestingTooDeep(Fault):
	def describe(self):
		return "Blocks run inside blocks went too deep to follow, at %s." % _name(self.culprit)

class UnterminatedBlock(Fault):
	def describe(self):
		return "This block never finds its closing brace."

def _name(culprit) -> str:
	if isinstance(culprit, Value): return repr(render(culprit))
	return repr(culprit.text)
