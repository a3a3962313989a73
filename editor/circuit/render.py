from __future__ import annotations
from dataclasses import dataclass

from core.QtCore import *





PIN_MARKER = QSizeF(2.0, 2.0)
SELECTION_MARGIN = 4.0
SELECTION_RADIUS = 4.0
SELECTION_WIDTH  = 1.0



###======= DRAW COMMANDS =======###
@dataclass(frozen=True, eq=False)
class DrawIcon:
	renderer: QSvgRenderer
	bounds: QRectF
	transform: QTransform

@dataclass(frozen=True, eq=False)
class FillRect:
	rect: QRectF
	color: QColor
	transform: QTransform

@dataclass(frozen=True, eq=False)
class StrokeRoundedRect:
	rect: QRectF
	radius: float
	color: QColor
	width: float
	transform: QTransform

DrawCommand = DrawIcon | FillRect | StrokeRoundedRect



def markerRect(center: QPointF) -> QRectF:
	w, h = PIN_MARKER.width(), PIN_MARKER.height()
	return QRectF(center.x() - w/2, center.y() - h/2, w, h)


def paint(painter: QPainter, commands: list[DrawCommand]):
	"""Replays `commands` on top of whatever transform `painter` already has"""
	base = painter.transform()
	for cmd in commands:
		painter.save()
		painter.setTransform(cmd.transform * base)

		match cmd:
			case DrawIcon():
				cmd.renderer.render(painter, cmd.bounds)
			case FillRect():
				painter.fillRect(cmd.rect, cmd.color)
			case StrokeRoundedRect():
				painter.setPen(QPen(cmd.color, cmd.width))
				painter.setBrush(Qt.BrushStyle.NoBrush)
				painter.drawRoundedRect(cmd.rect, cmd.radius, cmd.radius)

		painter.restore()
