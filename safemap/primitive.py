"""
Build the primitive type namespace.
Also, the coercions from whatever people write in a declaration
(or pass as a value) into a proper DataType.
"""
from typing import Annotated, ClassVar, Final, get_args, get_origin
from boozetools.support.symtab import NameSpace, NoSuchSymbol
from .domain import DataType, Nominal, Constant, Singleton

root_types : NameSpace[DataType] = NameSpace(place="primitive")
_by_class : dict[type, DataType] = {}

def _built_in_type(cls:type, *names:str) -> DataType:
	data_type = _by_class[cls] = Nominal(cls)
	for name in names:
		root_types[name] = data_type
	return data_type

def _built_in_constant(name:str, value) -> Constant:
	root_types[name] = data_type = Constant(name, value)
	return data_type

# Python's float is binary64 and there is no other. Both spellings mean the same type.
FLOAT = _built_in_type(float, "float", "double")
BOOL = _built_in_type(bool, "bool")
INT = _built_in_type(int, "int")
STRING = _built_in_type(str, "string", "str")

TRUE_TYPE = _built_in_constant("true_type", True)
FALSE_TYPE = _built_in_constant("false_type", False)
true_type = TRUE_TYPE.singleton
false_type = FALSE_TYPE.singleton

_QUALIFIERS = (Final, ClassVar)

def as_data_type(declared) -> DataType:
	""" Interpret a declaration, discarding incidental qualifiers. """
	if isinstance(declared, DataType):
		return declared
	if isinstance(declared, str):
		try: return root_types[declared]
		except NoSuchSymbol: raise TypeError("There is no type called %r."%declared) from None
	origin = get_origin(declared)
	if origin is Annotated:
		return as_data_type(get_args(declared)[0])
	if origin in _QUALIFIERS or declared in _QUALIFIERS:
		args = get_args(declared)
		if len(args) != 1: raise TypeError("%r does not say what type it qualifies."%(declared,))
		return as_data_type(args[0])
	if isinstance(declared, type):
		return _by_class.get(declared) or Nominal(declared)
	raise TypeError("Cannot make a declared type out of %r."%(declared,))

def typeof(value) -> DataType:
	if isinstance(value, Singleton):
		return value.data_type
	return as_data_type(type(value))
