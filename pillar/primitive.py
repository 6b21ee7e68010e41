"""
The arithmetic operators. These work on plain Python integers;
the evaluator takes care of getting them on and off the stack.
"""
import operator

def truncating_division(lhs:int, rhs:int) -> int:
	""" Rounds toward zero, unlike Python's floor division. Zero divisors raise ZeroDivisionError. """
	quotient = abs(lhs) // abs(rhs)
	return -quotient if (lhs < 0) != (rhs < 0) else quotient

ARITHMETIC = {
	"+" : operator.add,
	"-" : operator.sub,
	"*" : operator.mul,
	"/" : truncating_division,
}
