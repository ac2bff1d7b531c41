import sys, random
from typing import Any, Sequence
from boozetools.support.failureprone import illustration

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]

	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Blasted Thing',
		'Confound it', 'Crud', 'Curses', "Crikey",
		'Dag Nabbit', 'Drat',
		'Fiddlesticks', 'Flaming Flamingos',
		'Gack', 'Good Grief', 'Great Googly Moogly', "Great Scott",
		"Infernal Tarnation", 'Jeepers', 'Heavens',
		"Mercy", 'Nuts', 'Rats',
		'Wretch it all', 'Woe is me',
	]

	resignations = [
		'I am undone.',
		'I cannot continue.',
		'I have no idea what the right answer is.',
		'I need to ask for help.',
	]

	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	""" Collects issues for somebody else to complain about. """
	_issues : list["Pic"]

	def __init__(self, *, verbose:int = 0, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	@property
	def issues(self) -> Sequence["Pic"]: return tuple(self._issues)

	def issue(self, it:Any):
		self._issues.append(it)
		if len(self._issues) >= self._max_issues:
			raise TooManyIssues(self)

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)

	# Methods the command line calls:
	def no_such_specimen(self, name:str, choices:Sequence[str]):
		intro = "There's no specimen called %r in the zoo." % name
		footer = ["Possibilities are: " + ", ".join(choices)]
		self.issue(Pic(intro, [], footer))

	# Methods specific to report type-checking issues:
	def type_error(self, expr, ex):
		""" ex is an InferenceError; expr is whatever was being checked when it happened. """
		intro = "Type-checking found a problem: " + ex.describe()
		problem = [Annotation(expr, "while checking this")]
		if ex.at is not None and ex.at is not expr:
			problem.append(Annotation(ex.at, "at this part"))
		self.issue(Pic(intro, problem))

	def too_complex(self):
		# No annotation: showing the expression would need just as much stack.
		intro = "This expression nests too deeply for me to work out its type."
		self.issue(Pic(intro, [], ["Maybe break it up with some lets?"]))

class Annotation:
	caption: str
	def __init__(self, node, caption:str=""):
		self.text = str(node)
		self.caption = caption
	def illustrate(self):
		return illustration(self.text, 0, len(self.text), prefix='     |', caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=()):
		self._intro, self._anns, self._footer = intro, anns, footer
	@property
	def intro(self) -> str: return self._intro
	def as_text(self):
		lines = [self._intro, ""]
		lines.extend(ann.illustrate() for ann in self._anns)
		lines.extend(self._footer)
		return '\n'.join(lines)

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
