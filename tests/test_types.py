from typing import Annotated, ClassVar, Final
import unittest

from safemap.domain import Nominal, Constant, is_equivalent, ZERO
from safemap.primitive import (
	as_data_type, typeof, FLOAT, BOOL, INT, STRING, TRUE_TYPE, FALSE_TYPE, true_type, false_type,
)

class Widget:
	pass

class DeclarationTests(unittest.TestCase):
	def test_names_and_classes_agree(self):
		for declared, expected in [
			("float", FLOAT), ("double", FLOAT), (float, FLOAT),
			("bool", BOOL), (bool, BOOL),
			("int", INT), (int, INT),
			("string", STRING), (str, STRING),
			("true_type", TRUE_TYPE), ("false_type", FALSE_TYPE), (TRUE_TYPE, TRUE_TYPE),
		]:
			with self.subTest(declared=declared):
				self.assertIs(expected, as_data_type(declared))
	
	def test_qualifiers_are_incidental(self):
		self.assertIs(FLOAT, as_data_type(Annotated[float, "metres"]))
		self.assertIs(BOOL, as_data_type(Final[bool]))
		self.assertIs(INT, as_data_type(ClassVar[int]))
		self.assertIs(FLOAT, as_data_type(Final[Annotated[float, "metres"]]))
	
	def test_user_classes_are_nominal(self):
		data_type = as_data_type(Widget)
		self.assertIsInstance(data_type, Nominal)
		self.assertTrue(is_equivalent(data_type, Nominal(Widget)))
		self.assertFalse(is_equivalent(data_type, FLOAT))
	
	def test_nonsense(self):
		for bogon in ["quaternion", 42, None, Final]:
			with self.subTest(bogon=bogon):
				with self.assertRaises(TypeError):
					as_data_type(bogon)

class TypeOfTests(unittest.TestCase):
	def test_exact_class(self):
		self.assertIs(BOOL, typeof(True))
		self.assertIs(INT, typeof(5))
		self.assertIs(FLOAT, typeof(5.0))
		self.assertIs(STRING, typeof("five"))
		self.assertFalse(is_equivalent(typeof(True), INT))
		self.assertFalse(is_equivalent(typeof(True), FLOAT))
	
	def test_singletons(self):
		self.assertIs(TRUE_TYPE, typeof(true_type))
		self.assertIs(FALSE_TYPE, typeof(false_type))
		self.assertTrue(true_type)
		self.assertFalse(false_type)
		self.assertEqual("true_type", repr(true_type))

class DomainTests(unittest.TestCase):
	def test_equivalence_by_domain_key(self):
		self.assertTrue(is_equivalent(Constant("flag", 1), Constant("flag", 1)))
		self.assertFalse(is_equivalent(Constant("flag", 1), Constant("flag", 2)))
		self.assertFalse(is_equivalent(Constant("flag", True), Nominal(bool)))
		self.assertEqual(Constant("flag", 1).singleton, Constant("flag", 1).singleton)
	
	def test_zero_values(self):
		self.assertEqual(0.0, ZERO.visit(FLOAT))
		self.assertIs(False, ZERO.visit(BOOL))
		self.assertEqual("", ZERO.visit(STRING))
		self.assertIs(true_type, ZERO.visit(TRUE_TYPE))
		self.assertIsInstance(ZERO.visit(Nominal(Widget)), Widget)
	
	def test_render(self):
		self.assertEqual("float", repr(FLOAT))
		self.assertEqual("true_type", repr(TRUE_TYPE))
		self.assertEqual("Widget", repr(Nominal(Widget)))


if __name__ == '__main__':
	unittest.main()
