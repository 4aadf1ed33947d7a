"""
Dynamic method dispatch.

The search starts at the class of the receiver and looks only at that class's
own method table. Failing that, it moves to the superclass and tries again,
and so on until the root. Nearest definition wins; there is no call-through
to whatever it overrides.

Method tables are never flattened. Adding or removing a method on some class
takes effect at the very next send, for every instance of every subclass.
"""
from typing import Any
from .ontology import MethodNotFoundError
from .classes import ClassReference, METHOD, class_of

def find_method(cls:ClassReference, method_name:str) -> tuple[ClassReference, METHOD]:
	""" Which class along the chain defines the method, and what is it? """
	for each in cls.chain():
		method = each.own_method(method_name)
		if method is not None: return each, method
	raise MethodNotFoundError(method_name, tuple(each.name for each in cls.chain()))

def send(method_name:str, instance, *args) -> Any:
	"""
	Invoke the nearest definition of the method with (instance, *args).
	Fails with MethodNotFoundError, having done nothing, if there is no such method.
	"""
	_, method = find_method(class_of(instance), method_name)
	return method(instance, *args)

def responds_to(x, method_name:str) -> bool:
	try: find_method(class_of(x), method_name)
	except MethodNotFoundError: return False
	return True
