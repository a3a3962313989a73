# Using this file to import everything I need from PySide6 so that I don't need to
# constantly manage packages and ruin how the other project files look

from PySide6.QtWidgets import (
	QApplication, QMainWindow, QWidget,
	QPushButton,
	QVBoxLayout, QHBoxLayout,
)
from PySide6.QtCore import (
	Qt, QByteArray,
	QPoint, QPointF, QSizeF, QRectF,
)
from PySide6.QtGui import (
	QPalette, QColor, QPainter, QPen, QTransform,
	QMouseEvent, QKeyEvent, QPaintEvent,
)
from PySide6.QtSvg import QSvgRenderer

# Just some Quality of Life
Key = Qt.Key
KeyMod = Qt.KeyboardModifier
MouseBtn = Qt.MouseButton
