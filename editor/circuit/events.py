from __future__ import annotations
from dataclasses import dataclass, field

from core.QtCore import QPointF





###======= INPUT EVENTS =======###
@dataclass(frozen=True)
class PointerDown:
	pos: QPointF
	ctrl: bool = False

@dataclass(frozen=True)
class PointerMove:
	pos: QPointF

@dataclass(frozen=True)
class PointerUp:
	pos: QPointF

@dataclass(frozen=True)
class KeyDown:
	text: str

InputEvent = PointerDown | PointerMove | PointerUp | KeyDown



###======= BROADCASTS =======###
@dataclass(frozen=True)
class DeselectAll:
	originId: int | None

@dataclass(frozen=True)
class BeginDrag:
	pos: QPointF

Broadcast = DeselectAll | BeginDrag



###======= EVENT CONTEXT =======###
@dataclass
class EventCtx:
	"""What a single component asked of its host while handling one event.

	`active` and `focus` stay None unless the handler touched them.
	"""
	paint: bool = False
	handled: bool = False
	focus: bool | None = None
	active: bool | None = None
	broadcasts: list[Broadcast] = field(default_factory=list)

	def requestPaint(self): self.paint = True
	def setHandled(self):   self.handled = True
	def requestFocus(self): self.focus = True
	def resignFocus(self):  self.focus = False

	def setActive(self, active: bool):
		self.active = active

	def submit(self, message: Broadcast):
		self.broadcasts.append(message)
