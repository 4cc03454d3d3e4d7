"""Image dimension probing for hover previews."""

from __future__ import annotations

from pathlib import Path
import logging
import re
import xml.etree.ElementTree as ET

from PIL import Image, UnidentifiedImageError

from mystcomplete.core.exceptions import ImageProbeError
from mystcomplete.services.protocols import ImageDimensions

logger = logging.getLogger(__name__)

_LENGTH_RE = re.compile(r"^\s*([0-9]*\.?[0-9]+)\s*(px)?\s*$")
_VIEWBOX_SEPARATOR_RE = re.compile(r"[\s,]+")


def _svg_length(value: str | None) -> float | None:
    if value is None:
        return None
    match = _LENGTH_RE.match(value)
    if match is None:
        # Percentages and physical units have no pixel size on their own.
        return None
    return float(match.group(1))


def _svg_viewbox(value: str | None) -> tuple[float, float] | None:
    if value is None:
        return None
    parts = _VIEWBOX_SEPARATOR_RE.split(value.strip())
    if len(parts) != 4:
        return None
    try:
        width, height = float(parts[2]), float(parts[3])
    except ValueError:
        return None
    return width, height


def probe_svg(path: Path) -> ImageDimensions:
    try:
        root = ET.parse(path).getroot()
    except (ET.ParseError, OSError) as e:
        raise ImageProbeError(path, f"unreadable SVG: {e}") from e

    width = _svg_length(root.get("width"))
    height = _svg_length(root.get("height"))
    viewbox = _svg_viewbox(root.get("viewBox"))

    if width is not None and height is not None:
        return ImageDimensions(width=width, height=height)
    if viewbox is not None:
        vb_width, vb_height = viewbox
        # One explicit side scales the other by the viewBox aspect ratio.
        if width is not None and vb_width:
            return ImageDimensions(width=width, height=width * vb_height / vb_width)
        if height is not None and vb_height:
            return ImageDimensions(width=height * vb_width / vb_height, height=height)
        return ImageDimensions(width=vb_width, height=vb_height)
    raise ImageProbeError(path, "SVG has neither width/height nor viewBox")


class PillowImageProber:
    """Reads image sizes from file headers; pixel data is never decoded."""

    def probe(self, path: Path) -> ImageDimensions:
        path = Path(path)
        if path.suffix.lower() == ".svg":
            return probe_svg(path)
        try:
            with Image.open(path) as image:
                width, height = image.size
        except (UnidentifiedImageError, OSError) as e:
            raise ImageProbeError(path, str(e)) from e
        logger.debug("Probed %s: %dx%d", path, width, height)
        return ImageDimensions(width=float(width), height=float(height))
