from __future__ import annotations
import itertools
from dataclasses import dataclass, field

from core.QtCore import *
from core.Enums import Orientation, InteractionState
import core.grid as GRID

from editor.styles import Color
from .comptype import ComponentType
from .events import (
	EventCtx, InputEvent, Broadcast,
	PointerDown, PointerMove, PointerUp, KeyDown,
	DeselectAll, BeginDrag,
)
from .render import (
	DrawCommand, DrawIcon, FillRect, StrokeRoundedRect, markerRect,
	SELECTION_MARGIN, SELECTION_RADIUS, SELECTION_WIDTH,
)

_ids = itertools.count(1)





###======= COMPONENT INSTANCE =======###
@dataclass
class ComponentInstance:
	coords: QPoint
	type: ComponentType
	orientation: Orientation = Orientation.NORTH

	def moveTo(self, coords: QPoint):
		self.coords = QPoint(coords)


	### Dimension
	def boundingRect(self) -> QRectF:
		return self.type.boundingRect(self.coords, self.orientation)

	def anchorOffset(self) -> QPointF:
		"""Anchor offset at north, whatever the current orientation is"""
		return self.type.anchorOffset(Orientation.NORTH)

	def orientedAnchorOffset(self) -> QPointF:
		return self.type.anchorOffset(self.orientation)


	### Rendering Frames
	def renderTransform(self) -> QTransform:
		"""Rotates the north footprint, then shifts it back so its bounding box starts at (0, 0)"""
		w, h = self.type.size.width(), self.type.size.height()
		match self.orientation:
			case Orientation.NORTH: dx, dy = 0, 0
			case Orientation.EAST:  dx, dy = h, 0
			case Orientation.SOUTH: dx, dy = w, h
			case _:                 dx, dy = 0, w

		rotate = QTransform()
		rotate.rotate(self.orientation.degrees())
		return rotate * QTransform.fromTranslate(dx, dy)

	def pinMarkerTransform(self) -> QTransform:
		# Pins live in the icon's frame, so they turn along with it
		a = self.anchorOffset()
		return QTransform.fromTranslate(a.x(), a.y()) * self.renderTransform()

	def _pinPositions(self, pins: tuple[QPoint, ...]) -> list[QPointF]:
		origin = self.boundingRect().topLeft()
		frame = self.pinMarkerTransform()
		return [frame.map(GRID.toWidgetSpace(p)) + origin for p in pins]

	def inputPinPositions(self) -> list[QPointF]:
		return self._pinPositions(self.type.inputPins)

	def outputPinPositions(self) -> list[QPointF]:
		return self._pinPositions(self.type.outputPins)


	### Paint
	def render(self, transform: QTransform) -> list[DrawCommand]:
		iconFrame = self.renderTransform() * transform
		pinFrame = self.pinMarkerTransform() * transform

		commands: list[DrawCommand] = [
			DrawIcon(self.type.icon, QRectF(QPointF(0, 0), self.type.size), iconFrame)
		]
		for pin in self.type.allPins():
			commands.append(FillRect(markerRect(GRID.toWidgetSpace(pin)), Color.pin, pinFrame))
		return commands





###======= COMPONENT STATE =======###
@dataclass
class ComponentState:
	instance: ComponentInstance
	selected: bool = False
	dragOffset: QPointF | None = None
	id: int = field(default_factory=lambda: next(_ids))

	@classmethod
	def new(cls, coords: QPoint, ctype: ComponentType, orientation: Orientation = Orientation.NORTH):
		return cls(ComponentInstance(QPoint(coords), ctype, orientation))

	@property
	def state(self) -> InteractionState:
		if not self.selected:           return InteractionState.IDLE
		if self.dragOffset is None:     return InteractionState.SELECTED
		return InteractionState.DRAGGING


	### Layout & Paint
	def measure(self) -> QSizeF:
		return QSizeF(self.instance.type.size)

	def render(self, transform: QTransform) -> list[DrawCommand]:
		"""`transform` places the bounding rect's top-left corner"""
		commands = self.instance.render(transform)
		if self.selected:
			# Already drawing relative to the bounding rect, so move it back to the origin
			rect = self.instance.boundingRect()
			rect.moveTopLeft(QPointF(0, 0))
			m = SELECTION_MARGIN
			commands.append(StrokeRoundedRect(
				rect.adjusted(-m, -m, m, m),
				SELECTION_RADIUS,
				Color.selection,
				SELECTION_WIDTH,
				transform
			))
		return commands


	### Events
	def handleEvent(self, event: InputEvent, ctx: EventCtx):
		match event:
			case PointerDown(pos=pos, ctrl=ctrl):
				if not self.selected:
					self.selected = True
					ctx.requestPaint()
					if not ctrl:
						ctx.submit(DeselectAll(self.id))

				ctx.submit(BeginDrag(QPointF(pos)))
				ctx.requestFocus()
				ctx.setHandled()

			case PointerUp():
				self.dragOffset = None
				ctx.setActive(False)

			case PointerMove(pos=pos):
				if self.dragOffset is not None:
					coords = GRID.fromCanvasSpace(pos - self.dragOffset)
					if coords != self.instance.coords:
						self.instance.moveTo(coords)
						ctx.requestPaint()

			case KeyDown(text=text):
				orientation = Orientation.fromKey(text)
				if orientation is not None and orientation != self.instance.orientation:
					self.instance.orientation = orientation
					ctx.requestPaint()

	def handleBroadcast(self, message: Broadcast, ctx: EventCtx):
		match message:
			case DeselectAll(originId=originId):
				if originId != self.id:
					self.selected = False
					self.dragOffset = None
					ctx.setActive(False)
					ctx.resignFocus()
					ctx.requestPaint()

			case BeginDrag(pos=pos):
				if self.selected:
					self.dragOffset = (
						pos
						- self.instance.anchorOffset()
						- self.instance.boundingRect().topLeft()
					)
					ctx.setActive(True)
