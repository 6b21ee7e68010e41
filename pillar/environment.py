"""
Simplest possible environment concept: one flat layer of names.
Only `def` ever adds to it, and nothing ever takes away.
"""
from typing import Iterable
from .ontology import Value

class Environment:
	_bindings: dict[str, Value]

	def __init__(self):
		self._bindings = {}
	def holds(self, name:str) -> bool: return name in self._bindings
	def define(self, name:str, value:Value) -> Value:
		assert isinstance(value, Value), value
		self._bindings[name] = value
		return value
	def fetch(self, name:str) -> Value: return self._bindings[name]
	def names(self) -> Iterable[str]: return self._bindings.keys()
