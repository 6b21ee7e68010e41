"""
This is an interpreter for the Pillar programming language.

Pillar is postfix: numbers, symbols, and {braced blocks} go on a stack,
and operators take from it. Each line runs in a fresh machine unless
you ask for --persist, and the stack left behind gets printed.

For example:

    pillar -e "1 2 + { 3 4 }"

prints

    stack: [3, { 3 4 }]

and

    pillar program.pil

does the same for each line of program.pil. With no program and no -e,
lines come from standard input.
"""
import sys, argparse
from pathlib import Path
from typing import Iterator

from .location import Origin

parser = argparse.ArgumentParser(
	prog="pillar",
	description="Interpreter for the Pillar stack language.",
	epilog="Try examples/conditionals.pil for example.",
)
parser.add_argument("program", nargs="?", help="file to read lines from; standard input if absent.")
parser.add_argument('-e', "--eval", action="append", metavar="TEXT", help="Run TEXT as a line. May be repeated. Overrides the program.")
parser.add_argument('-p', "--persist", action="store_true", help="Keep one machine across lines, so definitions carry forward.")
parser.add_argument('-d', "--debug", action="store_true", help="Print each stack in debug form.")
parser.add_argument('-q', "--quiet", action="store_true", help="Do not print the stacks.")
parser.add_argument('-v', "--verbose", action="count", default=0, help="Say what's happening. Twice to trace every step.")
parser.add_argument("--max-faults", type=int, default=10, metavar="N", help="Give up after N faulty lines.")

def _chomp(line:str) -> str:
	if line.endswith("\n"): line = line[:-1]
	if line.endswith("\r"): line = line[:-1]
	return line

def _each_line(args, report) -> Iterator[Origin]:
	if args.eval:
		for row, text in enumerate(args.eval, 1):
			yield Origin(None, row, text)
	elif args.program:
		path = Path.cwd() / args.program
		with open(path, "rb") as fh:
			for row, raw in enumerate(fh, 1):
				# A line that will not decode is reported and skipped; the rest still run.
				try: line = raw.decode("utf-8")
				except UnicodeDecodeError as ex:
					report.broken_line(Origin(path, row, ""), ex)
					report.complain_to_console()
				else:
					yield Origin(path, row, _chomp(line))
	else:
		for row, line in enumerate(sys.stdin, 1):
			yield Origin(None, row, _chomp(line))

def run(args):
	from .diagnostics import Report, TooManyIssues
	from .executive import Machine
	from .faults import Fault
	from .rendering import render_stack
	report = Report(verbose=args.verbose, max_issues=args.max_faults)
	tracer = report.trace if args.verbose > 1 else None
	machine = None
	try:
		for origin in _each_line(args, report):
			if machine is None or not args.persist:
				machine = Machine(tracer)
			report.info("Running", origin.describe())
			before = machine.stack.snapshot()
			try:
				stack = machine.run_line(origin.text)
			except Fault as ex:
				machine.restore(before)
				report.fault(origin, ex)
				report.complain_to_console()
			else:
				if not args.quiet: print(render_stack(stack, debug=args.debug))
	except FileNotFoundError as ex:
		report.no_such_file(ex.filename)
		report.complain_to_console()
		return 1
	except (OSError, UnicodeDecodeError) as ex:
		report.broken_file(args.program or "standard input", ex)
		report.complain_to_console()
		return 1
	except TooManyIssues:
		report.complain_to_console()
		print(" *"*35, file=sys.stderr)
		print("Giving up after a few issues. One crisis at a time, eh?", file=sys.stderr)
		return 1
	if machine is not None and args.persist:
		report.info("Defined:", " ".join(sorted(machine.environment.names())) or "nothing")
	return 1 if report.sick() else 0

def main():
	sys.exit(run(parser.parse_args()))
