"""
The primitive types, and which literals have them.
"""

from .algebra import Opaque

literal_number = Opaque("Int")
literal_flag = Opaque("Bool")
literal_string = Opaque("String")

def literal_type(value) -> Opaque:
	# bool first: Python thinks True is an int.
	if isinstance(value, bool):
		return literal_flag
	if isinstance(value, int):
		return literal_number
	if isinstance(value, str):
		return literal_string
	raise TypeError(value)
