"""
The vocabulary of a type-map is a set of keys.

A key is a bit of text. Two keys are the same key exactly when their text is the same,
no matter what name they were defined under or where. That matters: it's entirely
possible to define "world" and "anotherWorld" which both spell out the text "world",
and the uniqueness check must see through that.

Each key also carries a hash of its text. The hash never substitutes for comparing
text, but a map may not contain two different texts with the same hash.
"""
import sys
from typing import Iterator, Optional
from boozetools.support.symtab import NameSpace, SymbolAlreadyExists
from .location import Site, call_site
from .errors import KeyRedefinedError
from .diagnostics import Report

SEED = 5381
FACTOR = 33
MASK = (1 << 64) - 1

def key_hash(text:str) -> int:
	"""
	hash("") = 5381; hash(c + rest) = ord(c) + 33 * hash(rest), in 64-bit arithmetic.
	Folding from the right computes the same thing without the recursion.
	"""
	h = SEED
	for c in reversed(text):
		h = (ord(c) + FACTOR * h) & MASK
	return h

class Key:
	""" Immutable, interned text with a name for diagnostics and a hash for cross-checking. """
	__slots__ = ("text", "name", "hash", "site")
	text: str
	name: str
	hash: int
	site: Site
	
	def __init__(self, text:str, name:Optional[str]=None, site:Optional[Site]=None):
		if not isinstance(text, str): raise TypeError("Key text must be a str, not %s"%type(text).__name__)
		object.__setattr__(self, "text", sys.intern(text))
		object.__setattr__(self, "name", name or self.text)
		object.__setattr__(self, "hash", key_hash(text))
		object.__setattr__(self, "site", site or call_site())
	
	def __setattr__(self, name, value): raise AttributeError("Key is immutable")
	def __delattr__(self, name): raise AttributeError("Key is immutable")
	
	def __eq__(self, other):
		if isinstance(other, Key): return self.text == other.text
		return NotImplemented
	def __hash__(self): return hash(self.text)
	
	def __repr__(self):
		if self.name == self.text: return "<Key %r>"%self.text
		return "<Key %s=%r>"%(self.name, self.text)

class Registry:
	"""
	Where keys get defined. Names must be unique within a registry,
	but nothing stops two names spelling out the same text.
	"""
	def __init__(self, place:str, report:Optional[Report]=None):
		self.place = place
		self._report = report
		self._names : NameSpace[Key] = NameSpace(place=place)
	
	def define(self, name:str, text:Optional[str]=None) -> Key:
		key = Key(name if text is None else text, name, call_site())
		try: self._names[name] = key
		except SymbolAlreadyExists:
			if self._report is not None:
				self._report.key_redefined(name, self.place, self._names[name].site, key.site)
			raise KeyRedefinedError(name, self.place) from None
		return key
	
	def __getitem__(self, name:str) -> Key: return self._names[name]
	def __contains__(self, name:str) -> bool: return name in self._names
	def __iter__(self) -> Iterator[Key]: return iter(self._names.local.values())
	def __len__(self): return len(self._names.local)
	def __repr__(self): return "<Registry %s: %d keys>"%(self.place, len(self))
