from pathlib import Path
import io
import tempfile
import unittest
from unittest import mock

from pillar import cmdline

base_folder = Path(__file__).parent.parent
examples = base_folder/"examples"

def _run(*argv, stdin=""):
	""" Returns the exit status, what went to stdout, and what went to stderr. """
	args = cmdline.parser.parse_args(argv)
	with mock.patch("sys.stdout", new_callable=io.StringIO) as out, \
		mock.patch("sys.stderr", new_callable=io.StringIO) as err, \
		mock.patch("sys.stdin", io.StringIO(stdin)):
		status = cmdline.run(args)
	return status, out.getvalue().splitlines(), err.getvalue()

class ExampleSmokeTests(unittest.TestCase):
	""" Run all the examples; Test for no smoke. """

	def test_arithmetic(self):
		status, lines, _ = _run(str(examples/"arithmetic.pil"))
		self.assertEqual(0, status)
		self.assertEqual([
			"stack: [3]",
			"stack: [7]",
			"stack: [42]",
			"stack: [3]",
			"stack: [-3]",
			"stack: [12]",
		], lines)

	def test_conditionals(self):
		status, lines, _ = _run(str(examples/"conditionals.pil"))
		self.assertEqual(0, status)
		self.assertEqual([
			"stack: [100]",
			"stack: [-100]",
			"stack: [2]",
			"stack: [3, { 3 4 }]",
		], lines)

	def test_definitions_persist(self):
		status, lines, _ = _run("--persist", str(examples/"definitions.pil"))
		self.assertEqual(0, status)
		self.assertEqual([
			"stack: []",
			"stack: [25]",
			"stack: [25, 7]",
			"stack: [25, 7]",
		], lines)

	def test_definitions_forgotten_without_persist(self):
		status, lines, err = _run(str(examples/"definitions.pil"))
		self.assertEqual(1, status)
		self.assertEqual(["stack: []", "stack: [7]", "stack: []"], lines)
		self.assertIn("'x' is not a defined operation", err)

class ZooOfFail(unittest.TestCase):
	""" Faulty lines are reported, and the rest still run. """

	def test_faulty_example(self):
		status, lines, err = _run(str(examples/"faulty.pil"))
		self.assertEqual(1, status)
		self.assertEqual(["stack: [7]"], lines)
		for fragment in [
			"divide by zero",
			"ran out of things to pop",
			"'nonsense' is not a defined operation",
			"never finds its closing brace",
		]:
			with self.subTest(fragment):
				self.assertIn(fragment, err)

	def test_giving_up(self):
		status, lines, err = _run("--max-faults", "2", "-e", "x", "-e", "y", "-e", "1")
		self.assertEqual(1, status)
		self.assertEqual([], lines)
		self.assertIn("Giving up", err)

	def test_missing_file(self):
		status, lines, err = _run(str(examples/"no_such_thing.pil"))
		self.assertEqual(1, status)
		self.assertIn("I see no file called", err)

	def test_deep_nesting_spoils_only_its_own_line(self):
		deep_data = " ".join(["{"] * 1200 + ["}"] * 1200)
		deep_ifs = "7"
		for _ in range(1000): deep_ifs = "{ 1 } { %s } { } if" % deep_ifs
		status, lines, err = _run("-e", deep_data, "-e", deep_ifs, "-e", "1 2 +")
		self.assertEqual(1, status)
		self.assertEqual(2, len(lines))
		self.assertTrue(lines[0].startswith("stack: [{ { {"))
		self.assertEqual("stack: [3]", lines[1])
		self.assertIn("too deep", err)

	def test_undecodable_line_is_skipped(self):
		with tempfile.TemporaryDirectory() as folder:
			path = Path(folder)/"mangled.pil"
			path.write_bytes(b"1 2 +\n\xff\xfe\n3 4 +\n")
			status, lines, err = _run(str(path))
		self.assertEqual(1, status)
		self.assertEqual(["stack: [3]", "stack: [7]"], lines)
		self.assertIn("line 2, which is not readable as UTF-8", err)

	def test_unreadable_program(self):
		with tempfile.TemporaryDirectory() as folder:
			status, lines, err = _run(folder)
		self.assertEqual(1, status)
		self.assertEqual([], lines)
		self.assertIn("pear-shaped", err)

	def test_faults_are_reported_before_the_next_line_runs(self):
		status, lines, err = _run("-v", "-e", "1 0 /", "-e", "1")
		self.assertEqual(1, status)
		self.assertEqual(["stack: [1]"], lines)
		self.assertLess(err.index("divide by zero"), err.index("Running line 2"))

	def test_persistent_stack_rolls_back_after_a_fault(self):
		status, lines, _ = _run("-p", "-e", "1 2", "-e", "3 0 /", "-e", "+")
		self.assertEqual(1, status)
		self.assertEqual(["stack: [1, 2]", "stack: [3]"], lines)

class OptionTests(unittest.TestCase):

	def test_eval(self):
		status, lines, _ = _run("-e", "1 2 + { 3 4 }", "-e", "10 3 /")
		self.assertEqual(0, status)
		self.assertEqual(["stack: [3, { 3 4 }]", "stack: [3]"], lines)

	def test_debug_form(self):
		_, lines, _ = _run("-d", "-e", "1 2 + { 3 4 }")
		self.assertEqual(["stack: [Number(3), Block([Number(3), Number(4)])]"], lines)

	def test_quiet(self):
		status, lines, _ = _run("-q", "-e", "1 2 +")
		self.assertEqual(0, status)
		self.assertEqual([], lines)

	def test_standard_input(self):
		status, lines, _ = _run(stdin="1 2 +\r\n/x 3 def\n\n{ 1 } { 5 } { 6 } if")
		self.assertEqual(0, status)
		self.assertEqual(["stack: [3]", "stack: []", "stack: []", "stack: [5]"], lines)

	def test_verbose_traces(self):
		_, _, err = _run("-vv", "-e", "6 7 *")
		self.assertIn("Running line 1", err)
		self.assertIn("stack: [6, 7] <- *", err)

if __name__ == '__main__':
	unittest.main()
