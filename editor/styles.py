from PySide6.QtGui import QColor

class Color:
	text           = QColor("#ffffff")
	hl_text_bg     = QColor("#2f65ca")
	primary_bg     = QColor("#1e1e1e")
	secondary_bg   = QColor("#2b2b2b")
	tooltip_text   = QColor("#ff0000")
	tooltip_bg     = QColor("#ffffff")
	button         = QColor("#3c3f41")
	grid_dot       = QColor("#3c3f41")

	pin            = QColor("#00ff00")
	selection      = QColor("#00ffff")
