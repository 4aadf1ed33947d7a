"""
The little list utilities the record and class layers lean on.
"""
from typing import Hashable, Iterable, Optional, Sequence

def position_of(item, seq:Iterable) -> Optional[int]:
	""" Zero-based index of the first occurrence of item in seq, or None. """
	for index, each in enumerate(seq):
		if each == item: return index
	return None

def remove_duplicates(seq:Iterable[Hashable]) -> list:
	"""
	Keep only the last occurrence of each item.
	Survivors stay in their original relative order.
	"""
	seen = set()
	backwards = []
	for item in reversed(list(seq)):
		if item not in seen:
			seen.add(item)
			backwards.append(item)
	backwards.reverse()
	return backwards

def merge_slots(own:Sequence[str], inherited:Sequence[str]) -> tuple[str, ...]:
	"""
	The effective slot list of a class, given its own slots and its superclass's effective slots.

	A name in both keeps the superclass's position, because the later occurrence wins.
	"""
	return tuple(remove_duplicates([*own, *inherited]))
