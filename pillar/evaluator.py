"""
The stack machine proper: what each kind of value does when its turn comes.

Numbers, symbols, and blocks simply go on the stack.
Operators act at once: either as a built-in or by fetching whatever
has been bound to their name with `def`.
"""
from .ontology import Value, Number, Operator, Symbol, Block, VALUE_TYPES
from .faults import TypeMismatch, UndefinedOperation, ArithmeticFault
from .primitive import ARITHMETIC

def evaluate(value:Value, machine:"Machine"):
	machine.observe(value)
	try: fn = EVALUATE[type(value)]
	except KeyError: raise NotImplementedError(type(value), value)
	fn(value, machine)

def run_block(block:Block, machine:"Machine"):
	for value in block: evaluate(value, machine)

def _eval_number(value:Number, machine:"Machine"): machine.stack.push(value)

def _eval_symbol(value:Symbol, machine:"Machine"): machine.stack.push(value)

def _eval_block(value:Block, machine:"Machine"): machine.stack.push(value)

def _eval_operator(value:Operator, machine:"Machine"):
	try: action = BUILT_IN[value.text]
	except KeyError: _look_up(value, machine)
	else: action(value, machine)

def _look_up(op:Operator, machine:"Machine"):
	try: found = machine.environment.fetch(op.text)
	except KeyError: raise UndefinedOperation(op, len(machine.stack)) from None
	machine.stack.push(found)

def _arithmetic(fn:callable):
	def action(op:Operator, machine:"Machine"):
		stack = machine.stack
		rhs = stack.pop_number(op)
		lhs = stack.pop_number(op)
		try: result = fn(lhs, rhs)
		except ZeroDivisionError as ex: raise ArithmeticFault(op, len(stack)) from ex
		stack.push(Number(result))
	return action

def _if(op:Operator, machine:"Machine"):
	stack = machine.stack
	false_branch = stack.pop_block(op)
	true_branch = stack.pop_block(op)
	condition = stack.pop_block(op)
	# The condition runs against the live stack. Whatever else it leaves behind stays put.
	run_block(condition, machine)
	run_block(true_branch if stack.pop_number(op) else false_branch, machine)

def _define(op:Operator, machine:"Machine"):
	stack = machine.stack
	value = stack.pop(op)
	try: name = stack.pop_symbol(op)
	except TypeMismatch as mismatch:
		# Written the other way round, as in `5 /x def`.
		if not isinstance(value, Symbol): raise
		name, value = value, mismatch.got
	machine.environment.define(name.text, value)

BUILT_IN = {glyph: _arithmetic(fn) for glyph, fn in ARITHMETIC.items()}
BUILT_IN["if"] = _if
BUILT_IN["def"] = _define

EVALUATE = {}
for _k, _v in list(globals().items()):
	if _k.startswith("_eval_"):
		_t = _v.__annotations__["value"]
		assert isinstance(_t, type), (_k, _t)
		EVALUATE[_t] = _v
assert set(EVALUATE) == VALUE_TYPES, EVALUATE
