"""
A type binding pairs one key with one declared type.
"""
from typing import NamedTuple
from .keys import Key
from .domain import DataType, ZERO
from .location import Site, call_site
from .primitive import as_data_type

class TypeBinding(NamedTuple):
	key: Key
	data_type: DataType
	site: Site
	spelling: str  # As declared: "double" and "float" are one type, but say what was written.
	def __repr__(self): return "%s:%s"%(self.key.text, self.spelling)

class Entry(NamedTuple):
	""" A binding at its position within some particular map """
	position: int
	binding: TypeBinding

def bind(key:Key, declared) -> TypeBinding:
	"""
	The declared type must have a zero value, because that's what get returns.
	Better to find out now than at the first get.
	"""
	assert isinstance(key, Key), key
	data_type = as_data_type(declared)
	try: ZERO.visit(data_type)
	except TypeError as ex:
		raise TypeError("Key %r cannot be declared %s: it has no zero value."%(key.text, data_type)) from ex
	spelling = declared if isinstance(declared, str) else repr(data_type)
	return TypeBinding(key, data_type, call_site(), spelling)

class Resolved(NamedTuple):
	""" Where a key sits in a validated map, and what type it was declared. Never stored in the map. """
	position: int
	data_type: DataType
