"""
This is a type-inference workbench for a small lambda calculus with let-polymorphism.

{0}

For example:

    hmlevels let_id_in_id_id

will infer the type of that specimen from the zoo, or else try to explain why not.

    hmlevels -l

will list all the specimens, and

    hmlevels -h

will explain all the arguments.
"""
import sys, argparse

ALL = "all"

def _at_least_one(text):
	value = int(text)
	if value < 1:
		raise argparse.ArgumentTypeError("must be at least 1, not %d" % value)
	return value

parser = argparse.ArgumentParser(
	prog="hmlevels",
	description="Type-inference workbench for the Hindley-Milner specimen zoo.",
)
parser.add_argument("specimen", nargs="*", help="names from the zoo, or '%s' for every one of them." % ALL)
parser.add_argument('-c', "--check", action="count", help="Trace each let-generalization while inferring. Repeat for emphasis.")
parser.add_argument('-l', "--list", action="store_true", help="List the names of the specimens in the zoo.")
parser.add_argument('-m', "--max-issues", type=_at_least_one, default=3, help="Give up after this many issues. (Default 3)")

def run(args):
	from .diagnostics import Report, TooManyIssues
	from .type_inference import Context, infer_type
	from . import zoo
	specimens = zoo.everything()
	if args.list:
		for name in specimens:
			print(name)
		return
	names = list(specimens) if ALL in args.specimen else args.specimen
	report = Report(verbose=args.check, max_issues=args.max_issues)
	try:
		for name in names:
			if name not in specimens:
				report.no_such_specimen(name, list(specimens))
				continue
			expr = specimens[name]()
			report.info("Checking", name)
			typ = infer_type(expr, report, Context(report))
			if typ is not None:
				print(expr, "|-", typ, "", sep="\n")
	except TooManyIssues:
		report.complain_to_console()
		print(" *"*35, file=sys.stderr)
		print("Giving up after a few issues. One crisis at a time, eh?", file=sys.stderr)
		return 1
	if report.sick():
		report.complain_to_console()
		return 1

def main():
	if len(sys.argv) > 1:
		sys.exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
