"""
"world" and "anotherWorld" spell the same text, so importing this must fail.
"""
from safemap.keys import Registry
from safemap.binding import bind
from safemap.diagnostics import Report
from safemap.primitive import TRUE_TYPE
from safemap.typemap import define_map

report = Report()
words = Registry("aliased", report)
world = words.define("world")
anotherWorld = words.define("anotherWorld", "world")

ALIASED_MAP = define_map("aliased", bind(world, float), bind(anotherWorld, TRUE_TYPE), report=report)
