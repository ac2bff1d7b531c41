"""
The set of expression-nodes in simple form.
There is no parser: callers build these trees directly, perhaps with `lam` and `app` below.
Nodes are immutable by convention. Type inference reads them and never writes.
"""
from boozetools.support.foundation import Visitor
from .algebra import MonoType

class Expression:
	def __str__(self) -> str: return Unparse().visit(self)

class Lookup(Expression):
	def __init__(self, name:str):
		assert isinstance(name, str), name
		self.name = name
	def __repr__(self): return "<ref:%s>" % self.name

class Literal(Expression):
	def __init__(self, value):
		assert isinstance(value, (bool, int, str)), type(value)
		self.value = value
	def __repr__(self): return "<lit:%r>" % (self.value,)

class Lambda(Expression):
	def __init__(self, param:str, body:Expression):
		self.param, self.body = param, body
	def __repr__(self): return "<λ%s>" % self.param

class TypedLambda(Expression):
	def __init__(self, param:str, annotation:MonoType, body:Expression):
		assert isinstance(annotation, MonoType), annotation
		self.param, self.annotation, self.body = param, annotation, body
	def __repr__(self): return "<λ%s:%s>" % (self.param, self.annotation)

class Apply(Expression):
	def __init__(self, function:Expression, argument:Expression):
		self.function, self.argument = function, argument
	def __repr__(self): return "<apply %r>" % (self.function,)

class Let(Expression):
	def __init__(self, name:str, value:Expression, body:Expression):
		self.name, self.value, self.body = name, value, body
	def __repr__(self): return "<let %s>" % self.name

class TypedLet(Expression):
	def __init__(self, name:str, annotation:MonoType, value:Expression, body:Expression):
		assert isinstance(annotation, MonoType), annotation
		self.name, self.annotation, self.value, self.body = name, annotation, value, body
	def __repr__(self): return "<let %s:%s>" % (self.name, self.annotation)

def lam(*params_and_body) -> Expression:
	""" lam("a", "b", body) means λa. λb. body """
	*params, body = params_and_body
	for p in reversed(params):
		body = Lambda(p, body)
	return body

def app(fn:Expression, *args:Expression) -> Expression:
	""" Application associates to the left: app(f, a, b) means ((f a) b) """
	for a in args:
		fn = Apply(fn, a)
	return fn

class Unparse(Visitor):
	""" Back to something a person might have typed. """
	def visit_Lookup(self, expr:Lookup): return expr.name
	def visit_Literal(self, expr:Literal):
		if isinstance(expr.value, bool):
			return "true" if expr.value else "false"
		if isinstance(expr.value, str):
			escaped = expr.value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
			return '"%s"' % escaped
		return str(expr.value)
	def visit_Lambda(self, expr:Lambda):
		return "λ%s. %s" % (expr.param, self.visit(expr.body))
	def visit_TypedLambda(self, expr:TypedLambda):
		return "λ(%s: %s). %s" % (expr.param, expr.annotation, self.visit(expr.body))
	def visit_Apply(self, expr:Apply):
		return "(%s %s)" % (self.visit(expr.function), self.visit(expr.argument))
	def visit_Let(self, expr:Let):
		return "let %s = %s in %s" % (expr.name, self.visit(expr.value), self.visit(expr.body))
	def visit_TypedLet(self, expr:TypedLet):
		return "let (%s: %s) = %s in %s" % (expr.name, expr.annotation, self.visit(expr.value), self.visit(expr.body))
