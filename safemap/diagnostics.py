import sys, random, linecache
from typing import Any, Optional
from boozetools.support.failureprone import illustration

from .location import Site

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]
	
	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Confound it', 'Crud', 'Curses', "Crikey",
		'Drat', 'Fiddlesticks', 'Good Grief', "Great Scott",
		'Jeepers', 'Heavens', 'Nuts', 'Rats', 'Woe is me',
	]
	
	resignations = [
		'I am undone.',
		'I cannot continue.',
		'These keys will not do.',
		'I need to ask for help.',
	]
	
	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	"""
	Collects the issues found while declaring and checking type-maps,
	and knows how to say something sensible about each one.
	Also the console sink for accessors that want to announce themselves.
	"""
	_issues : list["Pic"]
	
	def __init__(self, *, verbose:int=0, echo:bool=False):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._echo = echo
		self._issues = []
		self._duplicated = {}
	
	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)
	
	@property
	def issues(self) -> tuple["Pic", ...]: return tuple(self._issues)
	
	def issue(self, it:Any):
		self._issues.append(it)
	
	def tune(self, *, verbose:int, echo:bool):
		""" The command line gets the last word on how chatty a report is. """
		self._verbose = verbose or 0
		self._echo = echo
	
	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)
	
	def echo(self, text:str):
		if self._echo:
			print(text)
	
	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)
	
	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)
	
	# Methods the uniqueness checker calls:
	
	def duplicate_key(self, map_name:str, first, guilty):
		key = map_name, first.position
		if key not in self._duplicated:
			intro = "Key %r is bound more than once in map %r."%(first.binding.key.text, map_name)
			pic = Pic(intro, [_binding_annotation(first, "Earliest binding")])
			pic.footer = ["A key means one thing per map, whatever type each binding declares."]
			self.issue(pic)
			self._duplicated[key] = pic
		self._duplicated[key].also(guilty.binding.site, guilty.binding.key.text, _binding_caption(guilty))
	
	def hash_collision(self, map_name:str, first, guilty):
		intro = "Different keys in map %r have the same hash, %d."%(map_name, guilty.binding.key.hash)
		problem = [_binding_annotation(first, "this one"), _binding_annotation(guilty, "and this one")]
		footer = ["The key hash is not good enough for this vocabulary. Please rename one of them."]
		self.issue(Pic(intro, problem, footer))
	
	# Methods the resolver and accessors call:
	
	def unvalidated(self, map_name:str):
		self.issue(Pic("Map %r was used before it passed its uniqueness check."%map_name, []))
	
	def key_not_found(self, key, map_name:str):
		intro = "Map %r has no binding for key %r."%(map_name, key.text)
		problem = [Annotation(key.site, key.text, "defined here, but never bound in that map")]
		self.issue(Pic(intro, problem))
	
	def type_mismatch(self, key, need, got, site:Optional[Site]=None):
		intro = "Key %r is declared %s, but was offered %s."%(key.text, need, got)
		problem = [Annotation(site, key.text, "this offer")] if site else []
		self.issue(Pic(intro, problem, ["Nothing converts implicitly. Please supply a(n) %s."%need]))
	
	# Methods the key registry calls:
	
	def missing_vocabulary(self, module_name:str):
		self.issue(Pic("There is no vocabulary module called %r."%module_name, []))
	
	def key_redefined(self, name:str, place:str, first:Site, guilty:Site):
		intro = "The name %r is defined more than once in registry %r."%(name, place)
		problem = [Annotation(first, name, "Earliest definition"), Annotation(guilty, name)]
		self.issue(Pic(intro, problem))

def _binding_caption(entry) -> str:
	return "position %d, declared %s"%(entry.position, entry.binding.spelling)

def _binding_annotation(entry, caption:str) -> "Annotation":
	return Annotation(entry.binding.site, entry.binding.key.text, caption+": "+_binding_caption(entry))

class Annotation:
	site: Site
	word: str
	caption: str
	def __init__(self, site:Site, word:str="", caption:str=""):
		self.site, self.word, self.caption = site, word, caption
	def illustrate(self):
		single_line = linecache.getline(self.site.path, self.site.lineno).rstrip() if self.site.path else ""
		if not single_line:
			return '% 6d | (source unavailable) %s'%(self.site.lineno, self.caption)
		col = single_line.find(self.word) if self.word else -1
		if col < 0:
			col = len(single_line) - len(single_line.lstrip())
			width = 0
		else:
			width = len(self.word)
		return illustration(single_line, col, width, prefix='% 6d |' % self.site.lineno, caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=()):
		self.intro, self._anns, self.footer = intro, anns, footer
	def also(self, site:Site, word:str="", caption:str=""): self._anns.append(Annotation(site, word, caption))
	def as_text(self):
		lines = [self.intro, ""]
		path = None
		for ann in self._anns:
			if ann.site.path != path:
				path = ann.site.path
				lines.append(str(path))
			lines.append(ann.illustrate())
		lines.extend(self.footer)
		return '\n'.join(lines)

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
