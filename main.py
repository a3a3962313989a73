import os
import sys
import logging
from functools import partial

from core.QtCore import *
from core.Enums import Orientation

from editor.styles import Color
from editor.circuit.catalog import ComponentCatalog, ResourceLoadError
from editor.circuit.comptype import ComponentType
from editor.circuit.viewport import CircuitView

logger = logging.getLogger(__name__)




class AppWindow(QMainWindow):
	def __init__(self, catalog: tuple[ComponentType, ...]):
		super().__init__()
		self.setWindowTitle("Gate Placement Editor")

		central = QWidget()
		self.setCentralWidget(central)
		layout_main = QHBoxLayout(central)


		###======= CIRCUIT =======###
		self.view = CircuitView()
		self.cscene = self.view.cscene


		###======= SIDEBAR PALETTE =======###
		self.dragbar = QVBoxLayout()
		self.dragbar.setSpacing(10)

		for ctype in catalog:
			btn = QPushButton(ctype.name)
			btn.setMinimumHeight(50)
			btn.clicked.connect(partial(self.placeComp, ctype))
			self.dragbar.addWidget(btn)
		self.dragbar.addStretch()

		layout_main.addLayout(self.dragbar)
		layout_main.addWidget(self.view)

	def placeComp(self, ctype: ComponentType):
		self.cscene.addComp(QPoint(0, 0), ctype, Orientation.NORTH)
		self.view.update()
		self.view.setFocus()



if __name__ == "__main__":
	logging.basicConfig(
		level=os.environ.get("LOGLEVEL", "INFO").upper(),
		format="%(asctime)s %(levelname)s %(name)s: %(message)s"
	)
	app = QApplication(sys.argv)

	try:
		catalog = ComponentCatalog.enumerate()
	except ResourceLoadError as e:
		logger.critical("Cannot start, %s gate is unusable: %s", e.tag, e)
		sys.exit(1)

	###======= APP COLOR PALETTE =======###
	app.setStyle("Fusion")
	dark_palette = QPalette()
	Role = QPalette.ColorRole

	palette_colors = {
		Role.Window         : Color.secondary_bg,
		Role.WindowText     : Color.text,
		Role.Base           : Color.primary_bg,
		Role.AlternateBase  : Color.secondary_bg,
		Role.ToolTipBase    : Color.tooltip_bg,
		Role.ToolTipText    : Color.tooltip_text,
		Role.Text           : Color.text,
		Role.Button         : Color.button,
		Role.ButtonText     : Color.text,
		Role.Highlight      : Color.hl_text_bg,
		Role.HighlightedText: Color.text,
	}
	for role, color in palette_colors.items():
		dark_palette.setColor(QPalette.ColorGroup.All, role, color)
	app.setPalette(dark_palette)


	###======= APP WINDOW =======###
	window = AppWindow(catalog)
	window.resize(1000, 600)
	window.show()

	window.cscene.addComp(QPoint(-4, 0), ComponentCatalog.byTag("AND"))
	window.cscene.addComp(QPoint(4, 0), ComponentCatalog.byTag("NOT"))

	sys.exit(app.exec())
