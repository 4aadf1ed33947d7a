"""
The most-fundamental bits, shared by the record layer and the class layer.
They live apart from the rest to keep those two from importing each other.

Both layers store their data the same way: a plain list whose element zero
is a tag (a record-shape or a class) and whose remaining elements are values
in positions fixed at declaration time. A Layout is the precomputed map from
a field (or slot) name to its position in such a list.
"""
from typing import Iterable, Optional
from boozetools.support.foundation import EquivalenceClassifier

class _Undefined:
	""" Occupies every declared field or slot that was never given a value. """
	_it = None
	def __new__(cls):
		if cls._it is None: cls._it = super().__new__(cls)
		return cls._it
	def __repr__(self): return "#<undefined>"
	def __reduce__(self): return _Undefined, ()

UNDEFINED = _Undefined()

###############################################################################

class UnknownFieldError(KeyError):
	""" A record-shape was asked about a field it does not declare. """
	def __init__(self, shape, name):
		super().__init__(shape, name)
		self.shape, self.name = shape, name
	def __str__(self):
		return "Record %s has no field called %r." % (getattr(self.shape, "name", self.shape), self.name)

class UnknownSlotError(KeyError):
	""" A class was asked about a slot that is not in its effective slot list. """
	def __init__(self, cls, name):
		super().__init__(cls, name)
		self.cls, self.name = cls, name
	def __str__(self):
		return "Class %s has no slot called %r." % (getattr(self.cls, "name", self.cls), self.name)

class MethodNotFoundError(LookupError):
	""" Nothing along the superclass chain defines the method. """
	def __init__(self, method_name, chain:tuple[str, ...]=()):
		super().__init__(method_name)
		self.method_name = method_name
		self.chain = tuple(chain)
	def __str__(self):
		if self.chain:
			return "No method %r along %s." % (self.method_name, " -> ".join(self.chain))
		return "No method %r." % self.method_name

class DuplicateFieldError(ValueError):
	pass

class NotARecordError(TypeError):
	pass

###############################################################################

class Layout:
	"""
	Names in storage order, numbered from position one.
	Position zero always belongs to the tag.

	Numbering names is just equivalence classification,
	so I reuse the classifier from booze-tools.
	Repeated names keep their first number; callers that care
	about duplicates must sort that out before building a layout.
	"""
	def __init__(self, names:Iterable[str]):
		self._numbering = EquivalenceClassifier()
		for name in names: self._numbering.classify(name)

	def __len__(self): return len(self._numbering.exemplars)
	def __contains__(self, name): return name in self._numbering.catalog
	def __iter__(self): return iter(self._numbering.exemplars)
	def __repr__(self): return "<Layout %s>" % " ".join(map(str, self))

	def names(self) -> tuple[str, ...]:
		return tuple(self._numbering.exemplars)

	def position(self, name) -> Optional[int]:
		""" Storage position of the name, or None if there is no such name. """
		try: index = self._numbering.catalog[name]
		except (KeyError, TypeError): return None
		return index + 1

	def blank(self, tag, filler=UNDEFINED) -> list:
		""" A fresh container of the right size, tagged, every value the filler. """
		return [tag] + [filler] * len(self)
