"""
The four kinds of thing a line of Pillar can put on the stack.

This is a closed family: every consumer keeps a table keyed on exactly
these four classes, and asserts as much at import time. Values compare
structurally. The `spot` (a location.Span in the source line) rides
along for the benefit of error messages but never takes part in equality.
"""
from typing import Iterable, Optional
from .location import Span

SYMBOL_PREFIX = "/"

class Value:
	spot: Optional[Span]

	def payload(self): raise NotImplementedError(type(self))
	def __eq__(self, other): return type(self) is type(other) and self.payload() == other.payload()
	def __hash__(self): return hash((type(self), self.payload()))
	def __repr__(self): return "%s(%r)" % (type(self).__name__, self.payload())

class Number(Value):
	def __init__(self, value:int, spot:Span=None):
		assert isinstance(value, int) and not isinstance(value, bool), type(value)
		self.value, self.spot = value, spot
	def payload(self): return self.value

class Operator(Value):
	""" A bare word: either a built-in action or the name of something defined. """
	def __init__(self, text:str, spot:Span=None):
		assert isinstance(text, str), type(text)
		self.text, self.spot = text, spot
	def payload(self): return self.text

class Symbol(Value):
	""" A name used as data, as in `/x 5 def`. The text excludes the prefix. """
	def __init__(self, text:str, spot:Span=None):
		assert isinstance(text, str), type(text)
		self.text, self.spot = text, spot
	def payload(self): return self.text

class Block(Value):
	""" Parsed but not yet evaluated. """
	items: tuple[Value, ...]

	def __init__(self, items:Iterable[Value], spot:Span=None):
		self.items, self.spot = tuple(items), spot
		for v in self.items: assert isinstance(v, Value), v
	def payload(self): return self.items
	def __iter__(self): return iter(self.items)
	def __len__(self): return len(self.items)
	def __repr__(self):
		parts, pending = ["Block(["], [(iter(self.items), True)]
		while pending:
			items, first = pending.pop()
			for item in items:
				if not first: parts.append(", ")
				first = False
				if isinstance(item, Block):
					pending.append((items, False))
					pending.append((iter(item.items), True))
					parts.append("Block([")
					break
				parts.append(repr(item))
			else:
				parts.append("])")
		return "".join(parts)

VALUE_TYPES = frozenset([Number, Operator, Symbol, Block])
