"""
Where was that defined?

There is no source text to point into, only the Python modules that declare
the vocabulary. So a "site" is a file and line number, fished off the call stack
at the moment a key or binding comes into existence. That's plenty for
pointing a finger at the guilty line in an error message.
"""
import sys
from typing import NamedTuple, Optional

class Site(NamedTuple):
	""" Aimed at whatever prints error messages """
	path: Optional[str]
	lineno: int
	def __str__(self): return "%s:%d"%(self.path, self.lineno)

NOWHERE = Site(None, 0)

def call_site(depth:int=1) -> Site:
	"""
	The site of the caller's caller, at depth=1. Each extra level of
	indirection between the user and this function wants one more depth.
	"""
	try: frame = sys._getframe(depth+1)
	except ValueError: return NOWHERE
	return Site(frame.f_code.co_filename, frame.f_lineno)
