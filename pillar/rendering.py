"""
Turn values back into text.

The source form reads like something you could type back in, give or take
symbols inside blocks. The debug form is just the `repr` of each value.
"""
from typing import Iterable
from boozetools.support.foundation import Visitor
from .ontology import Value, Number, Operator, Symbol, Block, VALUE_TYPES, SYMBOL_PREFIX

class SourceForm(Visitor):
	def visit_Number(self, value:Number): return str(value.value)
	def visit_Operator(self, value:Operator): return value.text
	def visit_Symbol(self, value:Symbol): return SYMBOL_PREFIX + value.text
	def visit_Block(self, value:Block):
		# Walks nested blocks with its own stack, so deep nesting cannot exhaust Python's.
		words, pending = ["{"], [iter(value)]
		while pending:
			for item in pending[-1]:
				if isinstance(item, Block):
					words.append("{")
					pending.append(iter(item))
					break
				words.append(self.visit(item))
			else:
				pending.pop()
				words.append("}")
		return " ".join(words)

assert all(hasattr(SourceForm, "visit_"+t.__name__) for t in VALUE_TYPES)

_source_form = SourceForm()

def render(value:Value) -> str:
	return _source_form.visit(value)

def render_stack(values:Iterable[Value], debug=False) -> str:
	each = map(repr if debug else render, values)
	return "stack: [%s]" % ", ".join(each)
