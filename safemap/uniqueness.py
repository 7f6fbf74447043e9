"""
The uniqueness check: prove that a candidate map has no two bindings
with the same key text, and no two with the same hash but different text.

The declared types play no part. A key bound twice is a duplicate even when
it is bound to the same type both times, and also when it is not.

Every offending binding gets noticed, each against the earliest binding
it clashes with. Reporting one problem and hiding the next would only
make the person fixing the map go around again.
"""
from typing import Sequence
from boozetools.support.symtab import NameSpace, SymbolAlreadyExists
from .binding import TypeBinding, Entry
from .diagnostics import Report
from .errors import DuplicateKeyError, HashCollisionError

class UniquenessChecker:
	"""
	Installs each key text in a name-space and each hash in a table.
	Takes note of duplicates and collisions along the way.
	What's left is an index from key text to position, good for resolution.
	"""
	duplicates: list[tuple[Entry, Entry]]
	collisions: list[tuple[Entry, Entry]]
	index: NameSpace[int]
	
	def __init__(self, bindings:Sequence[TypeBinding], place=None):
		self.duplicates, self.collisions = [], []
		self.index = NameSpace(place=place)
		by_hash : dict[int, Entry] = {}
		for position, binding in enumerate(bindings):
			assert isinstance(binding, TypeBinding), binding
			entry = Entry(position, binding)
			key = binding.key
			try: self.index[key.text] = position
			except SymbolAlreadyExists:
				earliest = self.index[key.text]
				self.duplicates.append((Entry(earliest, bindings[earliest]), entry))
				continue
			prior = by_hash.setdefault(key.hash, entry)
			if prior is not entry:
				self.collisions.append((prior, entry))
	
	def ok(self) -> bool:
		return not (self.duplicates or self.collisions)

def is_unique(bindings:Sequence[TypeBinding]) -> bool:
	return UniquenessChecker(bindings).ok()

def check_uniqueness(bindings:Sequence[TypeBinding], report:Report, map_name:str="") -> NameSpace[int]:
	"""
	File every violation with the report, then fail on the first of them.
	Duplicates take precedence over collisions. Returns the text-to-position index.
	"""
	checker = UniquenessChecker(bindings, map_name)
	for first, guilty in checker.duplicates:
		report.duplicate_key(map_name, first, guilty)
	for first, guilty in checker.collisions:
		report.hash_collision(map_name, first, guilty)
	if checker.duplicates:
		error = DuplicateKeyError(map_name, *checker.duplicates[0])
	elif checker.collisions:
		error = HashCollisionError(map_name, *checker.collisions[0])
	else:
		return checker.index
	error.report = report
	raise error
