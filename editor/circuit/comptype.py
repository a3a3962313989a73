from __future__ import annotations
from dataclasses import dataclass
from core.QtCore import *
from core.Enums import Orientation
import core.grid as GRID





@dataclass(frozen=True, eq=False)
class ComponentType:
	"""Geometric template shared by every placed gate of one kind.

	`size` and `anchor` describe the footprint at `Orientation.NORTH`.
	The anchor is the point whose position a component's grid coords record,
	measured from the footprint's top-left corner. Pins are grid offsets from
	that anchor, also at north.
	"""
	tag: str
	name: str
	size: QSizeF
	anchor: QPointF
	icon: QSvgRenderer
	inputPins: tuple[QPoint, ...]
	outputPins: tuple[QPoint, ...]


	### Dimension
	def anchorOffset(self, orientation: Orientation) -> QPointF:
		"""The anchor as seen from the top-left of the rotated (and re-normalized) footprint"""
		a = self.anchor
		w, h = self.size.width(), self.size.height()
		match orientation:
			case Orientation.NORTH: return QPointF(a)
			case Orientation.EAST:  return QPointF(h - a.y(), a.x()    )
			case Orientation.SOUTH: return QPointF(w - a.x(), h - a.y())
			case _:                 return QPointF(a.y()    , w - a.x())

	def orientedSize(self, orientation: Orientation) -> QSizeF:
		if orientation.isVertical(): return QSizeF(self.size)
		else:                        return self.size.transposed()

	def boundingRect(self, coords: QPoint, orientation: Orientation) -> QRectF:
		topLeft = GRID.toCanvasSpace(coords) - self.anchorOffset(orientation)
		return QRectF(topLeft, self.orientedSize(orientation))

	def allPins(self) -> tuple[QPoint, ...]:
		return self.inputPins + self.outputPins
