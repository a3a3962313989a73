from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path

from core.QtCore import *
from .comptype import ComponentType

logger = logging.getLogger(__name__)

RES_DIR = Path(__file__).resolve().parent.parent / "res"





class ResourceLoadError(Exception):
	"""An icon could not be read or parsed. Raised while building the catalog only"""
	def __init__(self, tag: str, path: Path, reason: str):
		super().__init__(f"Failed to load icon for {tag} gate from '{path}': {reason}")
		self.tag = tag
		self.path = path
		self.reason = reason



@dataclass
class CompDetail:
	tag: str
	name: str
	size: tuple[float, float]
	anchor: tuple[float, float]
	inputs: tuple[tuple[int, int], ...]
	outputs: tuple[tuple[int, int], ...]
	icon: str


###======= LOOKUP TABLE FOR ALL COMPONENTS =======###
LOOKUP: list[CompDetail] = [
	CompDetail("NOT" , "NOT Gate" , (24, 48), (12, 32), ((0, 1),),          ((0, -2),), "not_gate.svg"),
	CompDetail("AND" , "AND Gate" , (48, 48), (24, 32), ((-1, 1), (1, 1)),  ((0, -2),), "and_gate.svg"),
	CompDetail("OR"  , "OR Gate"  , (48, 48), (24, 32), ((-1, 1), (1, 1)),  ((0, -2),), "or_gate.svg"),
	CompDetail("NAND", "NAND Gate", (48, 48), (24, 32), ((-1, 1), (1, 1)),  ((0, -2),), "nand_gate.svg"),
]



def loadIcon(tag: str, path: Path) -> QSvgRenderer:
	try:
		data = path.read_bytes()
	except OSError as e:
		logger.error("Icon for %s is unreadable: %s", tag, path)
		raise ResourceLoadError(tag, path, e.strerror or str(e)) from e

	renderer = QSvgRenderer(QByteArray(data))
	if not renderer.isValid():
		logger.error("Icon for %s is not valid SVG: %s", tag, path)
		raise ResourceLoadError(tag, path, "not a valid SVG document")

	logger.debug("Loaded icon for %s from %s", tag, path)
	return renderer


def loadCatalog(resDir: Path = RES_DIR) -> tuple[ComponentType, ...]:
	"""Either every entry of `LOOKUP` is built or `ResourceLoadError` is raised"""
	types: list[ComponentType] = []
	for detail in LOOKUP:
		types.append(ComponentType(
			tag        = detail.tag,
			name       = detail.name,
			size       = QSizeF(*detail.size),
			anchor     = QPointF(*detail.anchor),
			icon       = loadIcon(detail.tag, resDir / detail.icon),
			inputPins  = tuple(QPoint(*p) for p in detail.inputs),
			outputPins = tuple(QPoint(*p) for p in detail.outputs),
		))
	return tuple(types)



class ComponentCatalog:
	_types: tuple[ComponentType, ...] | None = None

	@classmethod
	def enumerate(cls) -> tuple[ComponentType, ...]:
		"""Builds the templates on first call; every later call hands out the same objects"""
		if cls._types is None:
			cls._types = loadCatalog(RES_DIR)
			logger.info("Component catalog ready: %s", ", ".join(t.tag for t in cls._types))
		return cls._types

	@classmethod
	def byTag(cls, tag: str) -> ComponentType:
		for ctype in cls.enumerate():
			if ctype.tag == tag:
				return ctype
		raise KeyError(tag)
