"""
Everything that can go wrong with a type-map is a contract violation by
whoever declared or used it. None of these is transient, so nobody retries.
Each carries enough of the evidence to point at the guilty parties.
"""

class SafeMapError(Exception):
	# Where the evidence was filed, when a checking pass did the filing.
	report = None

class DuplicateKeyError(SafeMapError):
	""" Two bindings in one map share the same key text. """
	def __init__(self, map_name:str, first, guilty):
		self.map_name, self.first, self.guilty = map_name, first, guilty
		super().__init__("Key %r appears more than once in map %r (positions %d and %d)"%(
			first.binding.key.text, map_name, first.position, guilty.position,
		))

class HashCollisionError(SafeMapError):
	""" Two bindings in one map have the same key hash but different key text. """
	def __init__(self, map_name:str, first, guilty):
		self.map_name, self.first, self.guilty = map_name, first, guilty
		super().__init__("Keys %r and %r collide on hash %d in map %r"%(
			first.binding.key.text, guilty.binding.key.text, guilty.binding.key.hash, map_name,
		))

class KeyNotFoundError(SafeMapError, KeyError):
	""" The key may be perfectly good elsewhere, but this map does not have it. """
	def __init__(self, key, map_name:str):
		self.key, self.map_name = key, map_name
		super().__init__("Key %r is not in map %r"%(key.text, map_name))
	def __str__(self): return self.args[0]

class TypeMismatchError(SafeMapError, TypeError):
	def __init__(self, key, need, got):
		self.key, self.need, self.got = key, need, got
		super().__init__("Key %r is declared %s but was offered %s"%(key.text, need, got))

class UnvalidatedMapError(SafeMapError):
	""" Somebody tried to use a map before it passed the uniqueness check. """
	def __init__(self, map_name:str):
		self.map_name = map_name
		super().__init__("Map %r has not passed validation"%map_name)

class KeyRedefinedError(SafeMapError, KeyError):
	""" The same name was defined twice in one registry. """
	def __init__(self, name:str, place):
		self.name, self.place = name, place
		super().__init__("Name %r is already defined in registry %r"%(name, place))
	def __str__(self): return self.args[0]
