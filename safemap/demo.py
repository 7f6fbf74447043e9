"""
The example vocabulary, its one good map, and two maps that must not pass.

Everything here happens at import. The greeting map is built and checked once,
right here, and a problem with it stops the import cold, so nothing downstream
ever sees a half-checked map.
"""
from .keys import Registry
from .binding import bind
from .primitive import TRUE_TYPE, true_type
from .diagnostics import Report
from .typemap import define_map

report = Report()
vocabulary = Registry("demo", report)

hello = vocabulary.define("hello")
world = vocabulary.define("world")
anotherWorld = vocabulary.define("anotherWorld", "world")
is_ = vocabulary.define("is")
empty = vocabulary.define("empty")
nowhere = vocabulary.define("nowhere")  # Defined, but bound in no map.

GREETING = (
	bind(hello, "float"),
	bind(world, TRUE_TYPE),
	bind(is_, "double"),
	bind(empty, bool),
)

GREETING_MAP = define_map("greeting", *GREETING, report=report)

# Accessors are bound here too, so a key the map lacks fails at import as well.
WORLD = GREETING_MAP.accessor(world)
IS = GREETING_MAP.accessor(is_).expect(float)
# GREETING_MAP.accessor(nowhere) would raise KeyNotFoundError: that key is not in this map.

# Neither of these may ever pass the uniqueness check:
# "world" and "anotherWorld" are both the text "world" ...
ALIASED_KEYS = (bind(world, float), bind(anotherWorld, TRUE_TYPE))
# ... and one key cannot be declared twice, whatever the types.
REDECLARED_KEY = (bind(world, float), bind(world, TRUE_TYPE))

def demonstrate():
	""" One read and one write, each echoing its key. """
	assert WORLD.get() is true_type
	IS.set(5.0)
	# IS.set(True) would raise TypeMismatchError: "is" is declared double.
