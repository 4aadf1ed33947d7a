"""
How recobj talks to the person at the console: everything goes to stderr.
The run-time proper never prints; it raises. This is for the tooling.
"""
import sys, random
from traceback import TracebackException
from typing import Any

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]
	minced_oaths = [
		'Ack', 'Blargh', 'Confound it', 'Crud', 'Curses', 'Drat',
		'Fiddlesticks', 'Good Grief', 'Great Scott', 'Heavens', 'Nuts', 'Rats',
	]
	resignations = [
		'I am undone.',
		'I cannot continue.',
		'I need to ask for help.',
	]
	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	_issues : list[str]

	def __init__(self, *, verbose:int=0, max_issues=10):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	def sick(self): return bool(self._issues)

	def issue(self, it:Any):
		self._issues.append(str(it))
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	# Methods the command-line tool calls:

	def missing_module(self, name:str):
		self.issue("I see no module called %s" % name)

	def broken_module(self, name:str, tbx:TracebackException):
		text = ''.join(tbx.format())
		self.issue("Attempting to import %s threw an exception.\n%s" % (name, text))

	def nothing_declared(self, name:str):
		self.issue("Module %s declares no records and no classes." % name)

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i, file=sys.stderr)
	sys.stderr.flush()
