"""
A type-map is one namespace of type bindings, fixed at construction.

It starts out unvalidated. The uniqueness check moves it to validated,
and that's a one-way trip. Nothing resolves against an unvalidated map.
A map that fails its check stays failed: asking again gets the same answer
without running the check again.
"""
from threading import Lock
from typing import Iterable, Iterator, Optional
from boozetools.support.symtab import NameSpace, NoSuchSymbol
from .keys import Key
from .binding import TypeBinding, Resolved
from .accessor import Accessor
from .diagnostics import Report
from .errors import SafeMapError, KeyNotFoundError, UnvalidatedMapError
from .uniqueness import check_uniqueness

class TypeMap:
	name: str
	bindings: tuple[TypeBinding, ...]
	report: Report
	_index: Optional[NameSpace[int]]
	_failure: Optional[SafeMapError]
	_accessors: dict[str, Accessor]
	
	def __init__(self, name:str, bindings:Iterable[TypeBinding], report:Optional[Report]=None):
		self.name = name
		self.bindings = tuple(bindings)
		self.report = Report() if report is None else report
		self._mutex = Lock()
		self._index = None
		self._failure = None
		self._accessors = {}
	
	def __repr__(self):
		state = "validated" if self.is_validated else "unvalidated"
		return "<TypeMap %s (%s): %s>"%(self.name, state, ', '.join(map(repr, self.bindings)))
	
	def __len__(self): return len(self.bindings)
	def __iter__(self) -> Iterator[TypeBinding]: return iter(self.bindings)
	def __contains__(self, key:Key) -> bool:
		return any(b.key == key for b in self.bindings)
	def keys(self) -> tuple[Key, ...]: return tuple(b.key for b in self.bindings)

	def describe(self) -> list[str]:
		""" One line per binding, in map order, with each type as it was declared. """
		return ["%s : %s"%(b.key.text, b.spelling) for b in self.bindings]
	
	@property
	def is_validated(self) -> bool: return self._index is not None
	
	def validate(self) -> "TypeMap":
		"""
		Run the uniqueness check, once, no matter how many threads
		show up at the same time wanting it done.
		"""
		if self._index is None:
			with self._mutex:
				if self._index is None and self._failure is None:
					self.report.info("Checking map", self.name)
					try: self._index = check_uniqueness(self.bindings, self.report, self.name)
					except SafeMapError as ex: self._failure = ex
			if self._failure is not None:
				raise self._failure
		return self
	
	def resolve(self, key:Key) -> Resolved:
		assert isinstance(key, Key), key
		if self._index is None:
			self.report.unvalidated(self.name)
			raise UnvalidatedMapError(self.name)
		try: position = self._index[key.text]
		except NoSuchSymbol:
			self.report.key_not_found(key, self.name)
			raise KeyNotFoundError(key, self.name) from None
		assert not any(b.key == key for b in self.bindings[position+1:]), key
		return Resolved(position, self.bindings[position].data_type)
	
	def accessor(self, key:Key) -> Accessor:
		""" One typed handle per key, made the first time somebody asks. """
		try: return self._accessors[key.text]
		except KeyError: pass
		handle = Accessor(self, key, self.resolve(key))
		with self._mutex:
			return self._accessors.setdefault(key.text, handle)
	
	def get(self, key:Key):
		return self.accessor(key).get()
	
	def set(self, key:Key, value) -> None:
		self.accessor(key).set(value)

def define_map(name:str, *bindings:TypeBinding, report:Optional[Report]=None) -> TypeMap:
	""" Build a map and check it on the spot. A bad map never escapes this function. """
	return TypeMap(name, bindings, report).validate()
