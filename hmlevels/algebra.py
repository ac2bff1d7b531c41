"""
All the bits for the monotypes to work, and the schemes made out of them.

1. Opaque types, such as "Int" and "Bool", but also rigid variables out of annotations.
2. Holes, which are the unification variables.
3. Generalized slots, which only make sense inside the body of a scheme.
4. Arrows.

A. Holes have identity. Two holes are the same hole only if they are the same object.
B. Everything else is structural.

A hole starts out empty, with a name and a birth-level, and gets filled at most once.
Filling a hole is visible through every reference to it, which is the whole point.

Generalization and instantiation are the two directions across the boundary between
monotypes and schemes. Both walk types the same way: depth-first, domain before codomain.
That order decides which Generalized index goes with which hole, so do not change it.
"""
from typing import NamedTuple, Sequence, Union

class MonoType:
	def visit(self, visitor:"TypeVisitor"): raise NotImplementedError(type(self))
	def mentions(self, hole:"Hole") -> bool: raise NotImplementedError(type(self))
	def poll(self, seen:dict): raise NotImplementedError(type(self))
	def __str__(self) -> str: return self.visit(Render())

class Opaque(MonoType):
	""" A named primitive, or a rigid type-variable from an annotation. """
	def __init__(self, name:str):
		assert isinstance(name, str)
		self.name = name
	def __repr__(self): return "<Opaque %s>" % self.name
	def __eq__(self, other): return type(other) is Opaque and other.name == self.name
	def __hash__(self): return hash(self.name)
	def visit(self, visitor:"TypeVisitor"): return visitor.on_opaque(self)
	def mentions(self, hole:"Hole"): return False
	def poll(self, seen:dict): pass

class Empty(NamedTuple):
	debug_name: str
	birth_level: int

class Filled(NamedTuple):
	content: MonoType

class Hole(MonoType):
	"""Did I say structural? Not for holes! These have identity."""
	state: Union[Empty, Filled]

	def __init__(self, debug_name:str, birth_level:int):
		self.state = Empty(debug_name, birth_level)

	def __repr__(self):
		if self.is_empty():
			return "<Hole %s@%d>" % self.state
		return "<Hole := %r>" % (self.state.content,)

	def is_empty(self) -> bool: return type(self.state) is Empty

	@property
	def content(self) -> MonoType:
		assert not self.is_empty(), self
		return self.state.content

	def fill(self, typ:MonoType):
		# Only the unifier and the generalizer get to do this, and only once per hole.
		assert self.is_empty(), "Tried to re-fill %r" % self
		assert isinstance(typ, MonoType), typ
		self.state = Filled(typ)

	def visit(self, visitor:"TypeVisitor"): return visitor.on_hole(self)
	def mentions(self, hole:"Hole"):
		if self is hole: return True
		return not self.is_empty() and self.state.content.mentions(hole)
	def poll(self, seen:dict):
		if self.is_empty(): seen[self] = None
		else: self.state.content.poll(seen)

class Generalized(MonoType):
	def __init__(self, index:int): self.index = index
	def __repr__(self): return "<Generalized %d>" % self.index
	def visit(self, visitor:"TypeVisitor"): return visitor.on_generalized(self)
	def mentions(self, hole:"Hole"): return False
	def poll(self, seen:dict): pass

class Arrow(MonoType):
	def __init__(self, domain:MonoType, codomain:MonoType):
		self.domain, self.codomain = domain, codomain
	def __repr__(self): return "<Arrow %r %r>" % (self.domain, self.codomain)
	def visit(self, visitor:"TypeVisitor"): return visitor.on_arrow(self)
	def mentions(self, hole:"Hole"):
		return self.domain.mentions(hole) or self.codomain.mentions(hole)
	def poll(self, seen:dict):
		self.domain.poll(seen)
		self.codomain.poll(seen)

class Scheme(NamedTuple):
	"""
	A polymorphic type, as in the identity function:

		id : forall a. a -> a

	The length of binds is the number of quantified positions.
	"""
	binds: tuple[str, ...]
	body: MonoType

	def __str__(self):
		if self.binds:
			return "forall %s. %s" % (" ".join(self.binds), self.body)
		return str(self.body)

def resolve(typ:MonoType) -> MonoType:
	""" Follow filled holes at the top of a type, but no deeper. """
	while type(typ) is Hole and not typ.is_empty():
		typ = typ.content
	return typ

def free_holes(typ:MonoType) -> list[Hole]:
	""" The empty holes in a type, each once, in walking order. """
	seen = {}
	typ.poll(seen)
	return list(seen)

#########################

class TypeVisitor:
	def on_opaque(self, o:Opaque): pass
	def on_hole(self, h:Hole): pass
	def on_generalized(self, g:Generalized): pass
	def on_arrow(self, a:Arrow): pass

#########################

class Render(TypeVisitor):
	""" Return a string representation of the term. """
	def on_opaque(self, o:Opaque): return o.name
	def on_hole(self, h:Hole):
		if h.is_empty(): return h.state.debug_name
		return h.content.visit(self)
	def on_generalized(self, g:Generalized): return "gen_%d" % g.index
	def on_arrow(self, a:Arrow):
		domain = a.domain.visit(self)
		if type(resolve(a.domain)) is Arrow:
			domain = "(%s)" % domain
		return "%s -> %s" % (domain, a.codomain.visit(self))

class Force(TypeVisitor):
	""" Rebuild a type with every filled hole replaced by what fills it. """
	def on_opaque(self, o:Opaque): return o
	def on_hole(self, h:Hole):
		return h if h.is_empty() else h.content.visit(self)
	def on_generalized(self, g:Generalized): return g
	def on_arrow(self, a:Arrow):
		return Arrow(a.domain.visit(self), a.codomain.visit(self))

class Instantiate(Force):
	def __init__(self, fresh:Sequence[Hole]):
		self.fresh = fresh
	def on_generalized(self, g:Generalized):
		return self.fresh[g.index]

class Generalize(TypeVisitor):
	"""
	Any hole still empty and born deeper than the given level
	gets frozen into the next quantified position.
	"""
	def __init__(self, level:int):
		self.level = level
		self.count = 0
	def on_hole(self, h:Hole):
		if not h.is_empty():
			h.content.visit(self)
		elif h.state.birth_level > self.level:
			h.fill(Generalized(self.count))
			self.count += 1
	def on_arrow(self, a:Arrow):
		a.domain.visit(self)
		a.codomain.visit(self)

class Promote(TypeVisitor):
	"""
	Any hole still empty and born deeper than the given level gets filled
	with a fresh hole born at that level, which keeps the same name.
	A type stored into a shallower hole must not carry deeper holes along,
	or the next generalization would quantify what outer scopes can still see.
	"""
	def __init__(self, level:int):
		self.level = level
	def on_hole(self, h:Hole):
		if not h.is_empty():
			h.content.visit(self)
		elif h.state.birth_level > self.level:
			h.fill(Hole(h.state.debug_name, self.level))
	def on_arrow(self, a:Arrow):
		a.domain.visit(self)
		a.codomain.visit(self)

def force(typ:MonoType) -> MonoType:
	return typ.visit(Force())

def instantiate(scheme:Scheme, fresh:Sequence[Hole]) -> MonoType:
	assert len(fresh) == len(scheme.binds), (scheme, fresh)
	return scheme.body.visit(Instantiate(fresh))

def generalize(typ:MonoType, level:int) -> int:
	""" Mutates holes in typ. Returns the number of positions quantified. """
	gen = Generalize(level)
	typ.visit(gen)
	return gen.count

def promote(typ:MonoType, level:int):
	""" Mutates holes in typ so that none still empty was born deeper than level. """
	typ.visit(Promote(level))
