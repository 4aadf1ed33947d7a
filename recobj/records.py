"""
The tagged-record layer.

A record-shape is a name and an ordered list of fields, some with defaults.
The shape builds its own instances: a list with the shape itself at position
zero and the field values after that, in declaration order.
The shape also hands out per-field accessors and mutators with the
position already worked out, and a predicate to recognize its instances.

A default is a zero-argument callable, called afresh for each construction
that leaves its field unsupplied. Fields with neither a value nor a default
hold UNDEFINED, which is not an error: optional fields are a thing.
"""
from typing import Any, Callable, Iterable, NamedTuple, Optional, Sequence, Union
from .ontology import UNDEFINED, Layout, UnknownFieldError, DuplicateFieldError, NotARecordError

class Field(NamedTuple):
	name: str
	default: Optional[Callable[[], Any]] = None

	def has_default(self) -> bool: return self.default is not None

FIELD_SPEC = Union[str, Field, tuple]

_ABSENT = object()

class RecordShape:
	fields: tuple[Field, ...]
	layout: Layout

	def __init__(self, name:str, fields:Sequence[Field]):
		self.name = name
		self.fields = tuple(fields)
		self.layout = Layout(f.name for f in self.fields)
		if len(self.layout) != len(self.fields):
			seen = set()
			dupes = [f.name for f in self.fields if f.name in seen or seen.add(f.name)]
			raise DuplicateFieldError("Record %s declares %s more than once." % (name, ", ".join(map(repr, dupes))))

	def __repr__(self): return "<record %s>" % self.name

	def field_names(self) -> tuple[str, ...]: return self.layout.names()

	def _position(self, name) -> int:
		index = self.layout.position(name)
		if index is None: raise UnknownFieldError(self, name)
		return index

	# Construction

	def construct(self, /, **pairs) -> list:
		return self.construct_from(pairs.items())

	def construct_from(self, pairs:Iterable[tuple[str, Any]]) -> list:
		"""
		Build an instance from (name, value) pairs: any subset of the fields, in any order.
		Every name is checked before any default gets evaluated.
		"""
		structure = self.layout.blank(self, _ABSENT)
		for name, value in pairs:
			structure[self._position(name)] = value
		for index, field in enumerate(self.fields, 1):
			if structure[index] is _ABSENT:
				structure[index] = field.default() if field.has_default() else UNDEFINED
		return structure

	def construct_flat(self, flat:Sequence) -> list:
		""" Same thing, but from alternating names and values: [name, value, name, value, ...] """
		if len(flat) % 2:
			raise ValueError("Record %s needs names and values in pairs; got %d items." % (self.name, len(flat)))
		return self.construct_from(zip(flat[0::2], flat[1::2]))

	# Generated procedures

	def accessor(self, name:str) -> Callable[[list], Any]:
		index = self._position(name)
		def get(structure): return structure[index]
		get.__name__ = get.__qualname__ = "%s_%s" % (self.name, name)
		return get

	def mutator(self, name:str) -> Callable[[list, Any], None]:
		index = self._position(name)
		def put(structure, value): structure[index] = value
		put.__name__ = put.__qualname__ = "set_%s_%s" % (self.name, name)
		return put

	def accessors(self) -> dict[str, Callable]:
		return {name: self.accessor(name) for name in self.layout}

	def mutators(self) -> dict[str, Callable]:
		return {name: self.mutator(name) for name in self.layout}

	def predicate(self) -> Callable[[Any], bool]:
		def test(x): return is_instance_of(x, self)
		test.__name__ = test.__qualname__ = "is_%s" % self.name
		return test


def _as_field(spec:FIELD_SPEC) -> Field:
	if isinstance(spec, Field): return spec
	if isinstance(spec, str): return Field(spec)
	name, default = spec
	if not callable(default):
		raise TypeError("The default for field %r must be a callable taking no arguments." % name)
	return Field(name, default)

def define_record(name:str, *fields:FIELD_SPEC) -> RecordShape:
	"""
	Declare a record-shape. Each field is either a bare name,
	or a (name, default) pair where the default is a callable.

	For example: define_record("point", "x", ("y", lambda: 0))
	"""
	return RecordShape(name, [_as_field(f) for f in fields])

def construct(shape:RecordShape, /, **pairs) -> list:
	return shape.construct_from(pairs.items())

###############################################################################

def is_instance_of(x, shape:RecordShape) -> bool:
	""" Never raises, whatever x may be. The size must match too, or the accessors would not work. """
	return isinstance(x, list) and len(x) == len(shape.layout) + 1 and x[0] is shape

def shape_of(x) -> Optional[RecordShape]:
	if isinstance(x, list) and x and isinstance(x[0], RecordShape) and len(x) == len(x[0].layout) + 1: return x[0]
	return None

def _shape_or_complain(structure) -> RecordShape:
	shape = shape_of(structure)
	if shape is None: raise NotARecordError("Not a record instance: %r" % (structure,))
	return shape

def record_ref(structure:list, name:str) -> Any:
	""" Read a field by name. """
	shape = _shape_or_complain(structure)
	return structure[shape._position(name)]

def record_set(structure:list, name:str, value) -> None:
	""" Write a field by name. Raises UnknownFieldError, leaving the record untouched, if the name is wrong. """
	shape = _shape_or_complain(structure)
	structure[shape._position(name)] = value

def as_dict(structure:list) -> dict[str, Any]:
	shape = _shape_or_complain(structure)
	return dict(zip(shape.layout, structure[1:]))
