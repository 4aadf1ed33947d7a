import gc
import unittest
import weakref

from recobj.ontology import UNDEFINED, UnknownSlotError, MethodNotFoundError
from recobj.listing import position_of, remove_duplicates, merge_slots
from recobj.records import define_record
from recobj.classes import (
	ROOT, RootClass, ClassDescriptor, define_class, define_method, remove_method,
	make_instance, make_instance_from, class_of, slot_value, set_slot_value,
	is_instance, is_subclass,
)

class ListingTests(unittest.TestCase):

	def test_position_of(self):
		self.assertEqual(1, position_of("b", ["a", "b", "b"]))
		self.assertIsNone(position_of("z", ["a", "b"]))
		self.assertIsNone(position_of("z", []))

	def test_remove_duplicates_keeps_last(self):
		self.assertEqual(["z", "x", "y"], remove_duplicates(["y", "z", "x", "y"]))
		self.assertEqual(["b", "a"], remove_duplicates(["a", "b", "a"]))
		self.assertEqual([], remove_duplicates([]))

	def test_merge(self):
		self.assertEqual(("z", "x", "y"), merge_slots(("y", "z"), ("x", "y")))
		self.assertEqual(("a", "b"), merge_slots(("a", "b"), ()))

class RootTests(unittest.TestCase):

	def test_root_is_its_own_superclass(self):
		self.assertIs(ROOT, ROOT.superclass)
		self.assertIsInstance(ROOT, RootClass)
		self.assertEqual((), ROOT.slots)

	def test_root_chain_is_just_root(self):
		self.assertEqual([ROOT], list(ROOT.chain()))

	def test_everything_belongs_to_root(self):
		point = define_record("point", "x")
		for x in [None, 0, "text", UNDEFINED, [], [1, 2], {"": 1}, point.construct(x=1), ROOT, [ROOT]]:
			with self.subTest(x=x):
				self.assertIs(ROOT, class_of(x))
				self.assertTrue(is_instance(x, ROOT))

class SlotMergeTests(unittest.TestCase):

	def setUp(self) -> None:
		self.a = define_class("A", ROOT, ["x", "y"])
		self.b = define_class("B", self.a, ["y", "z"])

	def test_root_derived_slots_unchanged(self):
		self.assertEqual(("x", "y"), self.a.slots)

	def test_redeclared_slot_keeps_superclass_position(self):
		self.assertEqual(("z", "x", "y"), self.b.slots)
		self.assertEqual(("y", "z"), self.b.own_slots)
		self.assertEqual(3, self.b.layout.position("y"))

	def test_each_name_once(self):
		self.assertEqual(sorted(set(self.b.slots)), sorted(self.b.slots))
		self.assertEqual({"x", "y", "z"}, set(self.b.slots))

	def test_duplicates_within_own_slots_tolerated(self):
		c = define_class("C", ROOT, ["p", "q", "p"])
		self.assertEqual(("q", "p"), c.slots)
		d = define_class("D", self.a, ["w", "w"])
		self.assertEqual(("w", "x", "y"), d.slots)

	def test_three_levels(self):
		c = define_class("C", self.b, ["x", "k"])
		self.assertEqual(("k", "z", "x", "y"), c.slots)

	def test_superclass_must_be_a_class(self):
		for bogon in [None, "A", define_record("A", "x")]:
			with self.subTest(bogon=bogon):
				with self.assertRaises(TypeError):
					define_class("Bad", bogon, ["x"])

	def test_classes_are_numbered_in_order(self):
		self.assertLess(self.a.number, self.b.number)
		self.assertLess(ROOT.number, self.a.number)

	def test_dropped_class_can_be_collected(self):
		temp = define_class("temp", self.a, ["w"])
		ref = weakref.ref(temp)
		del temp
		gc.collect()
		self.assertIsNone(ref())

class InstanceTests(unittest.TestCase):

	def setUp(self) -> None:
		self.a = define_class("A", ROOT, ["x", "y"])
		self.b = define_class("B", self.a, ["y", "z"])

	def test_make_instance(self):
		it = make_instance(self.b, x=1, z=3)
		self.assertIs(self.b, it[0])
		self.assertEqual(4, len(it))
		self.assertEqual(1, slot_value(it, "x"))
		self.assertIs(UNDEFINED, slot_value(it, "y"))
		self.assertEqual(3, slot_value(it, "z"))
		self.assertEqual([self.b, 3, 1, UNDEFINED], it)

	def test_make_instance_from_pairs(self):
		it = make_instance_from(self.a, [("y", 2)])
		self.assertEqual([self.a, UNDEFINED, 2], it)

	def test_unknown_slot_at_construction(self):
		with self.assertRaises(UnknownSlotError) as cm:
			make_instance(self.a, z=3)
		self.assertIs(self.a, cm.exception.cls)
		self.assertEqual("z", cm.exception.name)

	def test_set_then_get(self):
		it = make_instance(self.b)
		set_slot_value(it, "y", "why")
		self.assertEqual("why", slot_value(it, "y"))
		self.assertIs(UNDEFINED, slot_value(it, "x"))
		self.assertIs(UNDEFINED, slot_value(it, "z"))

	def test_unknown_slot_access(self):
		it = make_instance(self.a, x=1)
		with self.assertRaises(UnknownSlotError):
			slot_value(it, "z")
		with self.assertRaises(UnknownSlotError):
			set_slot_value(it, "z", 0)
		self.assertEqual([self.a, 1, UNDEFINED], it)

	def test_slot_access_on_non_instances(self):
		for bogon in [7, "text", [], UNDEFINED]:
			with self.subTest(bogon=bogon):
				with self.assertRaises(UnknownSlotError):
					slot_value(bogon, "x")

	def test_class_of(self):
		self.assertIs(self.b, class_of(make_instance(self.b)))

	def test_fragments_belong_to_root(self):
		for fragment in [[self.b], [self.b, 1], [self.b, 1, 2, 3, 4]]:
			with self.subTest(fragment=fragment):
				self.assertIs(ROOT, class_of(fragment))
				self.assertFalse(is_instance(fragment, self.b))
				with self.assertRaises(UnknownSlotError):
					slot_value(fragment, "x")
				with self.assertRaises(UnknownSlotError):
					set_slot_value(fragment, "x", 0)

	def test_is_instance_and_subclass(self):
		it = make_instance(self.b)
		self.assertTrue(is_instance(it, self.b))
		self.assertTrue(is_instance(it, self.a))
		self.assertTrue(is_instance(it, ROOT))
		self.assertFalse(is_instance(make_instance(self.a), self.b))
		self.assertTrue(is_subclass(self.b, self.a))
		self.assertFalse(is_subclass(self.a, self.b))
		self.assertEqual([self.b, self.a, ROOT], list(self.b.chain()))

class MethodTableTests(unittest.TestCase):

	def test_methods_kept_as_given(self):
		a = define_class("A", ROOT, [], [("m", lambda self: "A.m"), ("n", lambda self: "A.n")])
		b = define_class("B", a, [], {"m": lambda self: "B.m"})
		self.assertEqual(("m", "n"), a.method_names())
		self.assertEqual(("m",), b.method_names())
		self.assertIsNone(b.own_method("n"))

	def test_methods_must_be_callable(self):
		with self.assertRaises(TypeError):
			define_class("A", ROOT, [], {"m": 42})
		a = define_class("A", ROOT)
		with self.assertRaises(TypeError):
			define_method(a, "m", "nope")

	def test_define_and_remove(self):
		a = define_class("A", ROOT)
		define_method(a, "m", len)
		self.assertIs(len, a.own_method("m"))
		remove_method(a, "m")
		self.assertIsNone(a.own_method("m"))
		with self.assertRaises(MethodNotFoundError):
			remove_method(a, "m")

if __name__ == '__main__':
	unittest.main()
