"""
The example vocabulary, put through its paces.
"""
from pathlib import Path
from importlib import import_module
import sys
import unittest
from unittest import mock

from safemap import demo
from safemap.errors import DuplicateKeyError, HashCollisionError, KeyNotFoundError, TypeMismatchError
from safemap.primitive import typeof, true_type, FLOAT, BOOL, TRUE_TYPE
from safemap.typemap import TypeMap
from safemap.uniqueness import is_unique

zoo_fail = Path(__file__).parent/"zoo/fail"

class GreetingScenarios(unittest.TestCase):
	def setUp(self) -> None:
		self.greeting = demo.GREETING_MAP
	
	def test_the_map_is_built_once_at_import(self):
		self.assertTrue(is_unique(demo.GREETING))
		self.assertTrue(self.greeting.is_validated)
		self.assertEqual(demo.GREETING, self.greeting.bindings)
		self.assertIs(demo.WORLD, self.greeting.accessor(demo.world))
		self.assertIs(demo.IS, self.greeting.accessor(demo.is_))
	
	def test_declared_types(self):
		for key, data_type in [
			(demo.hello, FLOAT), (demo.world, TRUE_TYPE), (demo.is_, FLOAT), (demo.empty, BOOL),
		]:
			with self.subTest(key=key):
				self.assertIs(data_type, self.greeting.resolve(key).data_type)
		self.assertEqual(
			["hello : float", "world : true_type", "is : double", "empty : bool"],
			self.greeting.describe(),
		)
	
	def test_A_get_world(self):
		ret = self.greeting.get(demo.world)
		self.assertIs(true_type, ret)
		self.assertIs(TRUE_TYPE, typeof(ret))
	
	def test_B_set_is_a_double(self):
		self.greeting.set(demo.is_, 5.0)
	
	def test_C_set_is_a_bool(self):
		with self.assertRaises(TypeMismatchError) as cm:
			self.greeting.set(demo.is_, True)
		self.assertIs(FLOAT, cm.exception.need)
		self.assertIs(BOOL, cm.exception.got)
	
	def test_D_nowhere(self):
		self.assertIn("nowhere", demo.vocabulary)
		with self.assertRaises(KeyNotFoundError):
			self.greeting.resolve(demo.nowhere)
		with self.assertRaises(KeyNotFoundError):
			self.greeting.accessor(demo.nowhere)
	
	def test_E_aliased_keys(self):
		self.assertEqual(demo.world, demo.anotherWorld)
		self.assertFalse(is_unique(demo.ALIASED_KEYS))
		with self.assertRaises(DuplicateKeyError):
			TypeMap("aliased", demo.ALIASED_KEYS).validate()
	
	def test_F_redeclared_key(self):
		self.assertFalse(is_unique(demo.REDECLARED_KEY))
		with self.assertRaises(DuplicateKeyError):
			TypeMap("redeclared", demo.REDECLARED_KEY).validate()

class ZooOfFail(unittest.TestCase):
	""" A bad vocabulary breaks the import that declares it. """
	
	def expect(self, module_name, error):
		with mock.patch.object(sys, "path", [str(zoo_fail)] + sys.path):
			with self.assertRaises(error) as cm:
				import_module(module_name)
		self.assertNotIn(module_name, sys.modules)
		self.assertTrue(cm.exception.report.sick())
	
	def test_aliased_vocabulary(self):
		self.expect("aliased_vocabulary", DuplicateKeyError)
	
	def test_colliding_vocabulary(self):
		self.expect("colliding_vocabulary", HashCollisionError)


if __name__ == '__main__':
	unittest.main()
