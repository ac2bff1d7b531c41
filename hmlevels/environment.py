"""
Simplest possible environment concept.

This is the canonical list-structured search.
Each scope holds one binding and a static link to the scope it extends.
Nothing ever changes a scope once made, so sibling scopes cannot see each other's bindings.
"""
import abc
from .algebra import Scheme

class Absent(KeyError): pass

class Environment(abc.ABC):
	@abc.abstractmethod
	def resolve(self, name:str) -> Scheme:
		pass

	def extend(self, name:str, scheme:Scheme) -> "InnerEnv":
		assert isinstance(scheme, Scheme), scheme
		return InnerEnv(name, scheme, self)

class NullEnv(Environment):
	""" Effectively the built-in scope, but with nothing built in. """
	def resolve(self, name:str) -> Scheme:
		raise Absent(name)
null_env = NullEnv()

class InnerEnv(Environment):
	def __init__(self, name:str, scheme:Scheme, static_link:Environment):
		self._name = name
		self._scheme = scheme
		self._static_link = static_link

	def resolve(self, name:str) -> Scheme:
		# Iterative, because deeply nested lets make for long chains.
		env = self
		while isinstance(env, InnerEnv):
			if env._name == name:
				return env._scheme
			env = env._static_link
		return env.resolve(name)

def environment_from(bindings:dict[str, Scheme], base:Environment = null_env) -> Environment:
	env = base
	for name, scheme in bindings.items():
		env = env.extend(name, scheme)
	return env
