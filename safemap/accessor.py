"""
Accessors are the only way values go in or out under some key.
The permitted type comes from the map's declaration. The caller does not get a vote.

An accessor is bound to one key of one validated map, and resolution happens
when it's bound. So a key the map lacks fails at the point of binding,
which is typically module import, before anything can call get or set.
"""
from typing import Generic, TypeVar

from .keys import Key
from .binding import Resolved
from .domain import DataType, is_equivalent, ZERO
from .errors import TypeMismatchError
from .location import call_site
from .primitive import as_data_type, typeof

T = TypeVar("T")

class Accessor(Generic[T]):
	key: Key
	position: int
	data_type: DataType
	
	def __init__(self, typemap:"TypeMap", key:Key, resolved:Resolved):
		self._typemap = typemap
		self.key = key
		self.position, self.data_type = resolved
	
	def __repr__(self):
		return "<Accessor %s[%r]:%s>"%(self._typemap.name, self.key.text, self.data_type)
	
	def get(self) -> T:
		""" Always a value of exactly the declared type: its zero value, since nothing is stored. """
		self._typemap.report.echo(self.key.text)
		return ZERO.visit(self.data_type)
	
	def set(self, value:T) -> None:
		"""
		Accept exactly the declared type. There is no coercion, so True is no
		double and 5 is no float. A refused value leaves no trace in the map.
		"""
		got = typeof(value)
		if not is_equivalent(got, self.data_type):
			self._typemap.report.type_mismatch(self.key, self.data_type, got, call_site())
			raise TypeMismatchError(self.key, self.data_type, got)
		self._typemap.report.echo(self.key.text)
	
	def expect(self, declared:type[T]) -> "Accessor[T]":
		""" Confirm, at binding time, the type the caller means to work with. """
		need = as_data_type(declared)
		if not is_equivalent(need, self.data_type):
			self._typemap.report.type_mismatch(self.key, self.data_type, need, call_site())
			raise TypeMismatchError(self.key, self.data_type, need)
		return self
