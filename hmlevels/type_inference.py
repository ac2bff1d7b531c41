"""
Hindley-Milner type inference with let-polymorphism.

Generalization here is level-based. Every hole remembers the level at which it was born.
The value of a let-binding gets inferred one level deeper than the let itself,
so afterward, any hole still empty and born deeper than the let's own level
cannot be mentioned from anywhere outside that value. Those are exactly the
holes it is safe to quantify over. This saves scanning the whole environment
for free variables every time a let comes along.

Lambda parameters are never generalized. That is the difference between

	let id = λx. x in (id id)

which works, and

	(λid. (id id)) (λx. x)

which does not.
"""
from contextlib import contextmanager
from typing import Optional
from boozetools.support.foundation import Visitor
from . import syntax, primitive
from .algebra import MonoType, Hole, Arrow, Scheme, instantiate, generalize, force
from .environment import Environment, Absent, environment_from
from .diagnostics import Report
from .unification import unify, InferenceError

class UnboundVariable(InferenceError):
	gripe = "I don't see what %s refers to."
	def __init__(self, name:str):
		super().__init__(name)
		self.name = name
	def describe(self) -> str: return self.gripe % self.name

class Context(Visitor):
	"""
	The fresh-name supply and the level counter live here, for the duration of one run.
	Separate contexts never interfere with each other.

	The environment does not live here. It goes down the recursion as a parameter,
	and each scope gets its own.
	"""
	current_id: int
	current_level: int
	root: Environment

	def __init__(self, report:Optional[Report] = None, bindings:Optional[dict[str, Scheme]] = None):
		self._report = report
		self.current_id = 0
		self.current_level = 0
		self.root = environment_from(bindings or {})

	def new_name(self) -> str:
		name = "t_%d" % self.current_id
		self.current_id += 1
		return name

	def new_hole(self) -> Hole:
		return Hole(self.new_name(), self.current_level)

	@contextmanager
	def deeper(self):
		self.current_level += 1
		try: yield
		finally: self.current_level -= 1

	def instantiate(self, scheme:Scheme) -> MonoType:
		fresh = [self.new_hole() for _ in scheme.binds]
		return instantiate(scheme, fresh)

	def generalize(self, typ:MonoType, level:Optional[int] = None) -> Scheme:
		if level is None:
			level = self.current_level
		count = generalize(typ, level)
		return Scheme(tuple(self.new_name() for _ in range(count)), typ)

	def infer(self, expr:syntax.Expression, env:Optional[Environment] = None) -> MonoType:
		# Recursive: each level of nesting costs a few Python frames, so a few hundred
		# nested lambdas or lets can exhaust the stack. infer_type reports RecursionError.
		return self.visit(expr, self.root if env is None else env)

	def _info(self, *args):
		if self._report is not None:
			self._report.info(*args)

	@staticmethod
	def _unify(left:MonoType, right:MonoType, at:syntax.Expression):
		try: unify(left, right)
		except InferenceError as ex:
			ex.at = at
			raise

	def visit_Literal(self, expr:syntax.Literal, env:Environment):
		return primitive.literal_type(expr.value)

	def visit_Lookup(self, expr:syntax.Lookup, env:Environment):
		try: scheme = env.resolve(expr.name)
		except Absent:
			ex = UnboundVariable(expr.name)
			ex.at = expr
			raise ex from None
		return self.instantiate(scheme)

	def visit_Lambda(self, expr:syntax.Lambda, env:Environment):
		hole = self.new_hole()
		inner = env.extend(expr.param, Scheme((), hole))
		return Arrow(hole, self.infer(expr.body, inner))

	def visit_TypedLambda(self, expr:syntax.TypedLambda, env:Environment):
		inner = env.extend(expr.param, self.generalize(expr.annotation))
		return Arrow(expr.annotation, self.infer(expr.body, inner))

	def visit_Apply(self, expr:syntax.Apply, env:Environment):
		fn_type = self.infer(expr.function, env)
		arg_type = self.infer(expr.argument, env)
		result = self.new_hole()
		self._unify(fn_type, Arrow(arg_type, result), expr)
		return result

	def visit_Let(self, expr:syntax.Let, env:Environment):
		with self.deeper():
			value_type = self.infer(expr.value, env)
		scheme = self.generalize(value_type)
		self._info("let", expr.name, ":", scheme)
		return self.infer(expr.body, env.extend(expr.name, scheme))

	def visit_TypedLet(self, expr:syntax.TypedLet, env:Environment):
		value_type = self.infer(expr.value, env)
		self._unify(value_type, expr.annotation, expr)
		# The annotation is what gets bound, not the value's own type.
		scheme = self.generalize(expr.annotation)
		self._info("let", expr.name, ":", scheme)
		return self.infer(expr.body, env.extend(expr.name, scheme))


def infer_type(expr:syntax.Expression, report:Report, context:Optional[Context] = None) -> Optional[MonoType]:
	"""
	Infer and force the type of expr, or else file the problem with the report and return None.
	"""
	if context is None:
		context = Context(report)
	try:
		return force(context.infer(expr))
	except InferenceError as ex:
		report.type_error(expr, ex)
	except RecursionError:
		report.too_complex()
	return None
