from __future__ import annotations

from core.QtCore import *
import core.grid as GRID

from editor.styles import Color
from .canvas import CircuitScene
from .render import paint





class CircuitView(QWidget):
	def __init__(self, parent: QWidget | None = None):
		super().__init__(parent)
		self._scene = CircuitScene()

		self.setMouseTracking(True)
		self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
		self.setAutoFillBackground(True)
		self.setMinimumSize(400, 300)

		# Panning
		self.origin = QPointF(0, 0)
		self._pan_last_pos = QPointF(0, 0)
		self._centered = False


	@property
	def cscene(self) -> CircuitScene:
		return self._scene

	def mapToCanvas(self, pos: QPointF) -> QPointF:
		return pos - self.origin

	def _sync(self):
		if self._scene.dirty:
			self._scene.dirty = False
			self.update()

	def showEvent(self, event):
		# Grid (0, 0) starts in the middle of the view
		if not self._centered:
			self.origin = QPointF(self.width()/2, self.height()/2)
			self._centered = True
		return super().showEvent(event)


	###======= MOUSE CONTROLS =======###
	def mousePressEvent(self, event: QMouseEvent):
		mousepos = event.position()

		# Canvas Panning Last Position Tracking
		if event.buttons() & (MouseBtn.RightButton | MouseBtn.MiddleButton):
			self._pan_last_pos = mousepos
			event.accept(); return

		if event.button() == MouseBtn.LeftButton:
			ctrl = bool(event.modifiers() & KeyMod.ControlModifier)
			self._scene.pointerDown(self.mapToCanvas(mousepos), ctrl)
			self._sync()
		event.accept()

	def mouseMoveEvent(self, event: QMouseEvent):
		mousepos = event.position()

		# Canvas Panning
		if event.buttons() & (MouseBtn.RightButton | MouseBtn.MiddleButton):
			self.origin += mousepos - self._pan_last_pos
			self._pan_last_pos = mousepos
			self.update()
			return

		self._scene.pointerMove(self.mapToCanvas(mousepos))
		self._sync()

	def mouseReleaseEvent(self, event: QMouseEvent):
		if event.button() == MouseBtn.LeftButton:
			self._scene.pointerUp(self.mapToCanvas(event.position()))
			self._sync()
		event.accept()

	def keyPressEvent(self, event: QKeyEvent):
		text = event.text()
		if text and self._scene.focusId is not None:
			self._scene.keyDown(text)
			self._sync()
			event.accept(); return

		return super().keyPressEvent(event)


	###======= PAINT =======###
	def paintEvent(self, event: QPaintEvent):
		painter = QPainter(self)
		painter.setRenderHints(QPainter.RenderHint.Antialiasing)
		painter.fillRect(self.rect(), Color.primary_bg)
		painter.translate(self.origin)

		self.drawGrid(painter)
		for comp in self._scene.comps:
			topLeft = comp.instance.boundingRect().topLeft()
			commands = comp.render(QTransform.fromTranslate(topLeft.x(), topLeft.y()))
			paint(painter, commands)

		painter.end()

	def drawGrid(self, painter: QPainter):
		s = GRID.SIZE
		visible = QRectF(-self.origin, QSizeF(self.size()))
		top = GRID.fromCanvasSpace(visible.topLeft())
		bottom = GRID.fromCanvasSpace(visible.bottomRight())

		painter.setPen(QPen(Color.grid_dot, 2))
		for gx in range(top.x(), bottom.x() + 1):
			for gy in range(top.y(), bottom.y() + 1):
				painter.drawPoint(QPointF(gx*s, gy*s))

