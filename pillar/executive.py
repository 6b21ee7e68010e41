"""
A machine is one stack and one environment: the unit of execution and isolation.

The usual arrangement is a fresh machine for every line, which is what
`interpret` does. Keeping one machine and calling `run_line` repeatedly
lets definitions (and leftovers on the stack) carry from line to line.
"""
from typing import Callable, Iterable, Optional
from .ontology import Value
from .stacking import Stack
from .environment import Environment
from .front_end import read_line
from .evaluator import evaluate
from .faults import NestingTooDeep

TRACER = Callable[[Value, Stack], None]

class Machine:
	pc: Optional[Value]

	def __init__(self, tracer:TRACER=None):
		self.stack = Stack()
		self.environment = Environment()
		self.pc = None
		self._tracer = tracer

	def observe(self, value:Value):
		""" Called just before each value takes effect. """
		self.pc = value
		if self._tracer is not None: self._tracer(value, self.stack)

	def run(self, values:Iterable[Value]):
		for value in values: evaluate(value, self)

	def restore(self, snapshot:Iterable[Value]):
		""" Put the stack back the way it was, as after a fault. Definitions stay. """
		self.stack = Stack(snapshot)

	def run_line(self, text:str) -> list[Value]:
		""" Returns the stack afterward, bottom to top. Faults propagate. """
		try: self.run(read_line(text))
		except RecursionError: raise NestingTooDeep(self.pc, len(self.stack)) from None
		return self.stack.snapshot()

def interpret(text:str) -> list[Value]:
	return Machine().run_line(text)
