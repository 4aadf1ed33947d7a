"""
Shows the layouts of the records and classes that a Python module declares.

{0}

For example:

    recobj shapes.py

will import shapes.py and print every record-shape and class it binds
at top level, with fields, effective slots, and own methods.

    recobj -h

will explain all the arguments.
"""
import sys, argparse
from importlib import import_module
from importlib.util import spec_from_file_location, module_from_spec
from itertools import count
from pathlib import Path
from traceback import TracebackException

parser = argparse.ArgumentParser(
	prog="recobj",
	description="Show the layouts of the records and classes a Python module declares.",
)
parser.add_argument("module", help="a dotted module name, or the path to a .py file")
parser.add_argument('-c', "--check", action="store_true", help="Only check that the module imports and declares something.")
parser.add_argument('-v', "--verbose", action="count", help="Say what is going on, on stderr.")

_file_counter = count()

def _load_file(path:Path, report):
	""" Execute the file as a module of its own, under a name nothing else can be using. """
	name = "_recobj_file_%d_%s" % (next(_file_counter), path.stem)
	spec = spec_from_file_location(name, path)
	py_module = module_from_spec(spec)
	sys.modules[name] = py_module
	try: spec.loader.exec_module(py_module)
	except Exception as ex:
		del sys.modules[name]
		report.broken_module(str(path), TracebackException.from_exception(ex))
	else:
		return py_module

def load_module(spec:str, report):
	""" Import by dotted name or by file path. Problems go in the report, and you get None. """
	path = Path(spec)
	if path.suffix == ".py":
		report.info("Loading", path)
		if path.is_file(): return _load_file(path, report)
		report.missing_module(spec)
		return
	report.info("Importing", spec)
	try: return import_module(spec)
	except ModuleNotFoundError as ex:
		if ex.name == spec: report.missing_module(spec)
		else: report.broken_module(spec, TracebackException.from_exception(ex))
	except Exception as ex:
		report.broken_module(spec, TracebackException.from_exception(ex))

def run(args):
	from .diagnostics import Report, TooManyIssues
	from .describe import collect_declarations, describe
	report = Report(verbose=args.verbose)
	try:
		py_module = load_module(args.module, report)
		if not report.sick():
			declarations = collect_declarations(py_module)
			report.info("Found %d declaration(s) in %s" % (len(declarations), args.module))
			if not declarations: report.nothing_declared(args.module)
	except TooManyIssues:
		pass
	if report.sick():
		report.complain_to_console()
		return 1
	if args.check:
		print("Looks plausible to me.", file=sys.stderr)
	else:
		print("\n\n".join(map(describe, declarations)))
	return 0

def main():
	if len(sys.argv) > 1:
		sys.exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
