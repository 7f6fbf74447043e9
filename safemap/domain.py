"""
The Algebra of Declared Types
=============================

A declared type is a descriptor: it says what values may pass, but there is
no value in it. Descriptors get numbered into equivalence classes as they come
into being, so that asking whether two of them are the same type is a
comparison of small integers.

Two kinds suffice for now:

* Nominal: values whose exact class is some Python class.
* Constant: a type with exactly one inhabitant, which is a flag you can
  pass around as a type. The inhabitant is a Singleton.
"""

from threading import Lock
from boozetools.support.foundation import Visitor

_TYPE_NUMBERING = {}
_NUMBERING_MUTEX = Lock()

class DataType:
	equivalence_class: int
	
	def __init__(self, domain_key):
		type_key = (type(self), domain_key)
		with _NUMBERING_MUTEX:
			try:
				self.equivalence_class = _TYPE_NUMBERING[type_key]
			except KeyError:
				self.equivalence_class = _TYPE_NUMBERING[type_key] = len(_TYPE_NUMBERING)
	
	def __repr__(self) -> str:
		return RENDER.visit(self)
	

def is_equivalent(s:DataType, t:DataType) -> bool:
	return s.equivalence_class == t.equivalence_class


class Nominal(DataType):
	""" Values of exactly one Python class. Subclasses do not count. """
	def __init__(self, cls:type):
		assert isinstance(cls, type), cls
		self.cls = cls
		super().__init__(cls)


class Constant(DataType):
	def __init__(self, nom:str, value):
		self.nom, self.value = nom, value
		super().__init__((nom, value))
		self.singleton = Singleton(self)


class Singleton:
	""" The one and only value of a Constant type. Truthiness follows the constant. """
	__slots__ = ("data_type",)
	def __init__(self, data_type:Constant): self.data_type = data_type
	def __bool__(self): return bool(self.data_type.value)
	def __repr__(self): return self.data_type.nom
	def __eq__(self, other):
		return isinstance(other, Singleton) and is_equivalent(self.data_type, other.data_type)
	def __hash__(self): return hash(self.data_type.equivalence_class)


class ZeroValue(Visitor):
	""" The default-initialized value of a declared type. """
	def visit_Nominal(self, it:Nominal):
		return it.cls()
	
	def visit_Constant(self, it:Constant):
		return it.singleton

class Render(Visitor):
	def visit_Nominal(self, it:Nominal) -> str:
		return it.cls.__name__
	
	def visit_Constant(self, it:Constant) -> str:
		return it.nom

ZERO = ZeroValue()
RENDER = Render()
