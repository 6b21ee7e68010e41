"""
The data stack. Pops are typed: each names the shape it needs,
and the culprit (the operator doing the popping) goes into any fault.
"""
from typing import Iterable
from .ontology import Value, Number, Symbol, Block
from .faults import StackUnderflow, TypeMismatch

class Stack:
	_items: list[Value]

	def __init__(self, items:Iterable[Value]=()):
		self._items = list(items)
	def __len__(self): return len(self._items)
	def __iter__(self): return iter(self._items)
	def __repr__(self): return "<Stack %r>" % self._items

	def push(self, value:Value):
		assert isinstance(value, Value), value
		self._items.append(value)

	def pop(self, culprit:Value) -> Value:
		if not self._items: raise StackUnderflow(culprit, 0)
		return self._items.pop()

	def _pop_a(self, kind:type, need:str, culprit:Value):
		value = self.pop(culprit)
		if isinstance(value, kind): return value
		raise TypeMismatch(culprit, len(self._items), need, value)

	def pop_number(self, culprit:Value) -> int:
		return self._pop_a(Number, "number", culprit).value

	def pop_block(self, culprit:Value) -> Block:
		return self._pop_a(Block, "block", culprit)

	def pop_symbol(self, culprit:Value) -> Symbol:
		return self._pop_a(Symbol, "symbol", culprit)

	def snapshot(self) -> list[Value]:
		""" Bottom to top """
		return list(self._items)
