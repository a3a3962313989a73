import math
from enum import IntEnum





###======= ORIENTATION =======###
class Orientation(IntEnum):
	"""Clockwise order, so `+1` is a quarter turn to the right"""
	NORTH    = 0
	EAST     = 1
	SOUTH    = 2
	WEST     = 3

	@classmethod
	def _missing_(cls, value: int):
		if isinstance(value, int): return cls(value % 4)
		return super()._missing_(value)

	def angle(self) -> float:
		"""Clockwise, in radians"""
		return self.value * math.pi/2

	def degrees(self) -> float:
		return self.value * 90.0

	def isVertical(self) -> bool:
		return self.value%2 == 0

	@staticmethod
	def fromKey(text: str) -> 'Orientation | None':
		return {
			"w": Orientation.NORTH,
			"a": Orientation.WEST,
			"s": Orientation.SOUTH,
			"d": Orientation.EAST,
		}.get(text)



###======= INTERACTION STATE =======###
class InteractionState(IntEnum):
	IDLE     = 0
	SELECTED = 1
	DRAGGING = 2
