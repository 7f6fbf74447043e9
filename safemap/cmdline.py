"""
Demonstrates a checked type-map.

For example:

    safemap

imports the example vocabulary, which builds and checks its map,
then reads one key and writes another, echoing each key.

    safemap --check

checks the example vocabulary without calling any accessor.

    safemap --vocabulary some.module --check

checks every type-map that some.module declares at module level.
"""
import sys, argparse
from importlib import import_module

DEFAULT_VOCABULARY = "safemap.demo"

parser = argparse.ArgumentParser(
	prog="safemap",
	description="Demonstration of a statically checked heterogeneous type-map.",
)
parser.add_argument('-c', "--check", action="count", help="Check the maps verbosely but do not call any accessor.")
parser.add_argument('-q', "--quiet", action="store_true", help="Do not echo keys as accessors are called.")
parser.add_argument("--vocabulary", default=DEFAULT_VOCABULARY, help="Module that declares the maps. Default: %(default)s")

def run(args):
	from .diagnostics import Report
	from .errors import SafeMapError
	from .typemap import TypeMap
	from .uniqueness import is_unique
	try:
		module = import_module(args.vocabulary)
	except SafeMapError as ex:
		(ex.report or Report()).complain_to_console()
		return 1
	except ModuleNotFoundError as ex:
		if ex.name != args.vocabulary: raise
		report = Report()
		report.missing_vocabulary(args.vocabulary)
		report.complain_to_console()
		return 1
	maps = [it for it in vars(module).values() if isinstance(it, TypeMap)]
	for typemap in maps:
		typemap.report.tune(verbose=args.check, echo=not args.quiet)
	if module.__name__ == DEFAULT_VOCABULARY:
		assert not is_unique(module.ALIASED_KEYS)
		assert not is_unique(module.REDECLARED_KEY)
	if args.check:
		for typemap in maps:
			typemap.report.info("Map", typemap.name)
			for line in typemap.describe():
				typemap.report.info("  "+line)
		print("Looks plausible to me.", file=sys.stderr)
		return 0
	demonstrate = getattr(module, "demonstrate", None)
	if demonstrate is not None:
		demonstrate()
	return 0

def main(argv=None):
	return run(parser.parse_args(argv))
