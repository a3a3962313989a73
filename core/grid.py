from PySide6.QtCore import QPoint, QPointF

# Canvas units per grid cell
SIZE = 16

def toCanvasSpace(coords: QPoint) -> QPointF:
	return QPointF(coords.x()*SIZE, coords.y()*SIZE)

def fromCanvasSpace(point: QPointF) -> QPoint:
	"""Snaps to the nearest grid cell"""
	return QPoint(
		round(point.x()/SIZE),
		round(point.y()/SIZE)
	)

def toWidgetSpace(offset: QPoint) -> QPointF:
	"""Same scale as `toCanvasSpace()`, but for offsets relative to an anchor"""
	return QPointF(offset.x()*SIZE, offset.y()*SIZE)
