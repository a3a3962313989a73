from __future__ import annotations
import logging
from collections import deque

from core.QtCore import *
from core.Enums import Orientation

from .comptype import ComponentType
from .compitem import ComponentState
from .events import (
	EventCtx, InputEvent, Broadcast,
	PointerDown, PointerMove, PointerUp, KeyDown,
	DeselectAll, BeginDrag,
)

logger = logging.getLogger(__name__)





class CircuitScene:
	"""Owns every placed component and routes input to them.

	Broadcasts a component submits are queued and only delivered once its
	handler has returned, in submission order, to every component. The
	`BeginDrag` a component submits only goes back to that component.
	"""
	def __init__(self):
		self.comps: list[ComponentState] = []
		self.focusId: int | None = None
		self.activeId: int | None = None
		self.dirty = False


	# Components Management
	def addComp(self, coords: QPoint, ctype: ComponentType, orientation: Orientation = Orientation.NORTH) -> ComponentState:
		comp = ComponentState.new(coords, ctype, orientation)
		self.comps.append(comp)
		self.dirty = True
		logger.debug("Placed %s #%d at (%d, %d)", ctype.tag, comp.id, coords.x(), coords.y())
		return comp

	def removeComp(self, comp: ComponentState):
		if comp not in self.comps: return

		self.comps.remove(comp)
		if self.focusId == comp.id:  self.focusId = None
		if self.activeId == comp.id: self.activeId = None
		self.dirty = True
		logger.debug("Removed %s #%d", comp.instance.type.tag, comp.id)

	def byId(self, compId: int | None) -> ComponentState | None:
		for comp in self.comps:
			if comp.id == compId:
				return comp
		return None

	def itemAt(self, pos: QPointF) -> ComponentState | None:
		for comp in reversed(self.comps):
			if comp.instance.boundingRect().contains(pos):
				return comp
		return None

	def selectedComps(self) -> list[ComponentState]:
		return [c for c in self.comps if c.selected]


	# Dispatching
	def _apply(self, comp: ComponentState, ctx: EventCtx):
		if ctx.paint: self.dirty = True

		if ctx.focus is True:
			self.focusId = comp.id
		elif ctx.focus is False and self.focusId == comp.id:
			self.focusId = None

		if ctx.active is True:
			self.activeId = comp.id
		elif ctx.active is False and self.activeId == comp.id:
			self.activeId = None

	def _recipients(self, message: Broadcast, origin: ComponentState | None) -> list[ComponentState]:
		# Only the component being interacted with may start a drag
		if isinstance(message, BeginDrag) and origin is not None:
			return [origin] if origin in self.comps else []
		return list(self.comps)

	def _flush(self, queue: deque[Broadcast], origin: ComponentState | None = None):
		while queue:
			message = queue.popleft()
			for comp in self._recipients(message, origin):
				ctx = EventCtx()
				comp.handleBroadcast(message, ctx)
				self._apply(comp, ctx)
				queue.extend(ctx.broadcasts)

	def dispatch(self, comp: ComponentState, event: InputEvent) -> EventCtx:
		ctx = EventCtx()
		comp.handleEvent(event, ctx)
		self._apply(comp, ctx)
		self._flush(deque(ctx.broadcasts), comp)
		return ctx

	def broadcast(self, message: Broadcast):
		self._flush(deque([message]))


	###======= MOUSE/KEY EVENTS =======###
	def pointerDown(self, pos: QPointF, ctrl: bool = False):
		comp = self.itemAt(pos)
		if comp is None:
			# Clicking empty canvas clears the selection
			self.broadcast(DeselectAll(None))
			return
		self.dispatch(comp, PointerDown(pos, ctrl))

	def _pointerTarget(self, pos: QPointF) -> ComponentState | None:
		return self.byId(self.activeId) or self.itemAt(pos)

	def pointerMove(self, pos: QPointF):
		comp = self._pointerTarget(pos)
		if comp: self.dispatch(comp, PointerMove(pos))

	def pointerUp(self, pos: QPointF):
		comp = self._pointerTarget(pos)
		if comp: self.dispatch(comp, PointerUp(pos))

	def keyDown(self, text: str):
		comp = self.byId(self.focusId)
		if comp: self.dispatch(comp, KeyDown(text))
