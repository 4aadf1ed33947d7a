"""
Plain-text renditions of record-shapes and classes, for people to read.
Also the bit that rounds up every declaration in a Python module.
"""
from types import ModuleType
from boozetools.support.foundation import Visitor
from .records import RecordShape
from .classes import ClassReference, ClassDescriptor, RootClass

DECLARATION = (RecordShape, ClassDescriptor)

class Describer(Visitor):
	""" Each visit returns a list of lines. """

	def __init__(self, indent="    "):
		self._indent = indent

	def visit_RecordShape(self, shape:RecordShape) -> list[str]:
		lines = ["record %s" % shape.name]
		for index, field in enumerate(shape.fields, 1):
			text = "%d: %s" % (index, field.name)
			if field.has_default(): text += " (has default)"
			lines.append(self._indent + text)
		if not shape.fields: lines.append(self._indent + "(no fields)")
		return lines

	def visit_ClassDescriptor(self, cls:ClassDescriptor) -> list[str]:
		lines = ["class %s" % cls.name]
		lines.append(self._indent + "chain: " + " -> ".join(each.name for each in cls.chain()))
		lines.extend(self._slots_and_methods(cls))
		return lines

	def visit_RootClass(self, root:RootClass) -> list[str]:
		return ["root class"] + self._slots_and_methods(root)

	def _slots_and_methods(self, cls:ClassReference) -> list[str]:
		lines = []
		if cls.slots:
			own = set(cls.own_slots)
			slots = ("%d:%s%s" % (i, s, "*" if s in own else "") for i, s in enumerate(cls.slots, 1))
			lines.append(self._indent + "slots: " + " ".join(slots))
		else:
			lines.append(self._indent + "slots: (none)")
		lines.append(self._indent + "own methods: " + (", ".join(cls.method_names()) or "(none)"))
		return lines

def describe(thing) -> str:
	return "\n".join(Describer().visit(thing))

def collect_declarations(py_module:ModuleType) -> list:
	""" Record-shapes and classes bound at the top of the module, first binding first, each once. """
	found, seen = [], set()
	for value in vars(py_module).values():
		if isinstance(value, DECLARATION) and id(value) not in seen:
			seen.add(id(value))
			found.append(value)
	return found
