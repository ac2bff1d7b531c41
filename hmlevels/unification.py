"""
The unification approach to type-inference.

Unification either makes two monotypes equal by filling holes,
or raises one of the exceptions below. There is no partial credit:
the first failure ends the attempt, and whatever holes got filled
on the way there stay filled.
"""
from .algebra import MonoType, Opaque, Hole, Generalized, Arrow, resolve, promote

class InferenceError(Exception):
	gripe: str
	at = None  # The expression to blame, if the inference engine knows it.
	def describe(self) -> str: raise NotImplementedError(type(self))

class UnificationFailed(InferenceError):
	def __init__(self, prior, term):
		super().__init__(prior, term)
		self.prior, self.term = prior, term
	def describe(self) -> str:
		return self.gripe % (self.prior, self.term)

class UnificationMismatch(UnificationFailed):
	gripe = "This tries to be both %s and also %s, which cannot happen."

class OccursCheckFailure(UnificationFailed):
	gripe = "This tries to equate %s with %s which contains it, but a type cannot be part of itself."


def unify(left:MonoType, right:MonoType):
	if type(left) is Hole:
		if left is not right:
			unify_hole(left, right, False)
	elif type(right) is Hole:
		unify_hole(right, left, True)
	elif type(left) is Opaque and type(right) is Opaque:
		if left.name != right.name:
			raise UnificationMismatch(left, right)
	elif type(left) is Generalized and type(right) is Generalized:
		# Should only happen if something escaped a scheme.
		if left.index != right.index:
			raise UnificationMismatch(left, right)
	elif type(left) is Arrow and type(right) is Arrow:
		unify(left.domain, right.domain)
		unify(left.codomain, right.codomain)
	else:
		raise UnificationMismatch(left, right)

def unify_hole(hole:Hole, other:MonoType, swapped:bool):
	if hole.is_empty():
		if resolve(other) is hole:
			return
		if other.mentions(hole):
			raise OccursCheckFailure(hole, other)
		promote(other, hole.state.birth_level)
		hole.fill(other)
	elif swapped:
		unify(other, hole.content)
	else:
		unify(hole.content, other)
