"""
The class-and-instance layer.

A class has its own slot names, exactly one superclass, and its own method table.
Its effective slots merge its own with those of the superclass (see listing.merge_slots).
Instances are lists like records are, except that position zero holds the class.

The root class is the superclass of nothing in particular. Any value at all
which is not an instance of some defined class counts as belonging to the root.
The root reports itself as its own superclass, but walks along the chain
stop because it is the root, not because of that loop.
"""
from typing import Any, Callable, Iterable, Iterator, Mapping, Optional, Union
from itertools import count
from .ontology import UNDEFINED, Layout, UnknownSlotError, MethodNotFoundError
from .listing import merge_slots

METHOD = Callable[..., Any]
METHODS = Union[Mapping[str, METHOD], Iterable[tuple[str, METHOD]]]

# Numbered in order of definition. No references are kept here.
_class_numbers = count()

class ClassReference:
	"""
	There are exactly two kinds: the RootClass (just the one) and ClassDescriptor.
	"""
	name: str
	number: int
	own_slots: tuple[str, ...]
	slots: tuple[str, ...]
	layout: Layout
	methods: dict[str, METHOD]

	def __init__(self, name:str, own_slots, slots, methods:METHODS):
		self.name = name
		self.own_slots = tuple(own_slots)
		self.slots = tuple(slots)
		self.layout = Layout(self.slots)
		self.methods = dict(methods)
		for method_name, fn in self.methods.items():
			if not callable(fn): raise TypeError("Method %r of class %s is not callable." % (method_name, name))
		self.number = next(_class_numbers)

	@property
	def superclass(self) -> "ClassReference": raise NotImplementedError(type(self))
	def chain(self) -> Iterator["ClassReference"]: raise NotImplementedError(type(self))
	def is_root(self) -> bool: raise NotImplementedError(type(self))

	def own_method(self, method_name:str) -> Optional[METHOD]:
		""" Only this class's own table. No inheritance here. """
		return self.methods.get(method_name)

	def method_names(self) -> tuple[str, ...]:
		return tuple(self.methods)


class RootClass(ClassReference):
	def __init__(self):
		super().__init__("root", (), (), ())

	def __repr__(self): return "<root class>"

	@property
	def superclass(self) -> "RootClass": return self
	def chain(self) -> Iterator[ClassReference]: yield self
	def is_root(self) -> bool: return True

ROOT = RootClass()


class ClassDescriptor(ClassReference):
	def __init__(self, name:str, superclass:ClassReference, own_slots:Iterable[str], own_methods:METHODS):
		if not isinstance(superclass, ClassReference):
			raise TypeError("The superclass of %s must be ROOT or a defined class, not %r." % (name, superclass))
		self._superclass = superclass
		own_slots = tuple(own_slots)
		super().__init__(name, own_slots, merge_slots(own_slots, superclass.slots), own_methods)

	def __repr__(self): return "<class %s #%d>" % (self.name, self.number)

	@property
	def superclass(self) -> ClassReference: return self._superclass

	def chain(self) -> Iterator[ClassReference]:
		""" This class, its superclass, and so on. The root comes last, exactly once. """
		cls = self
		while not cls.is_root():
			yield cls
			cls = cls.superclass
		yield cls

	def is_root(self) -> bool: return False


def define_class(name:str, superclass:ClassReference, own_slots:Iterable[str]=(), own_methods:METHODS=()) -> ClassDescriptor:
	"""
	Declare a class. The method table is kept exactly as given;
	nothing is copied down from the superclass. Dispatch finds inherited
	methods by walking the chain at call time.
	"""
	return ClassDescriptor(name, superclass, own_slots, own_methods)

def define_method(cls:ClassReference, method_name:str, fn:METHOD) -> None:
	""" Add or replace one entry in the class's own table. The root class may have methods too. """
	if not callable(fn): raise TypeError("Method %r of class %s is not callable." % (method_name, cls.name))
	cls.methods[method_name] = fn

def remove_method(cls:ClassReference, method_name:str) -> None:
	try: del cls.methods[method_name]
	except KeyError: raise MethodNotFoundError(method_name, (cls.name,)) from None

###############################################################################

def make_instance(cls:ClassReference, /, **pairs) -> list:
	return make_instance_from(cls, pairs.items())

def make_instance_from(cls:ClassReference, pairs:Iterable[tuple[str, Any]]) -> list:
	""" Slots not mentioned stay UNDEFINED. There are no slot defaults at this layer. """
	instance = cls.layout.blank(cls, UNDEFINED)
	for name, value in pairs:
		instance[_slot_position(cls, name)] = value
	return instance

def class_of(x) -> ClassReference:
	""" Never fails. Anything that is not an instance of a defined class belongs to the root. """
	if isinstance(x, list) and x and isinstance(x[0], ClassDescriptor) and len(x) == len(x[0].layout) + 1: return x[0]
	return ROOT

def _slot_position(cls:ClassReference, name) -> int:
	index = cls.layout.position(name)
	if index is None: raise UnknownSlotError(cls, name)
	return index

def slot_value(instance, name:str) -> Any:
	return instance[_slot_position(class_of(instance), name)]

def set_slot_value(instance, name:str, value) -> None:
	instance[_slot_position(class_of(instance), name)] = value

def is_instance(x, cls:ClassReference) -> bool:
	return any(each is cls for each in class_of(x).chain())

def is_subclass(cls:ClassReference, other:ClassReference) -> bool:
	return any(each is other for each in cls.chain())
