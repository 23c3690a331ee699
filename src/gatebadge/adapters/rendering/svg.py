"""SVG badge renderer implementing BadgeRendererPort.

A badge is two blocks painted left to right. Each block is a rounded
rectangle whose inner corners are squared off by an overlapping plain
rectangle, followed by a shadow text layer and a foreground text layer.
"""

from __future__ import annotations

import io
import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING, BinaryIO

from gatebadge.config import BadgeConfig
from gatebadge.core.catalog import text_block_width


if TYPE_CHECKING:
    from gatebadge.adapters.rendering.fonts import BadgeFont
    from gatebadge.core.models import Color


SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def _number(value: float) -> str:
    """Format a coordinate without a trailing ``.0``."""
    return f"{value:g}"


def _fill(color: Color) -> dict[str, str]:
    """Fill attributes for a color, adding opacity only when translucent."""
    attributes = {"fill": color.hex}
    if not color.is_opaque:
        attributes["fill-opacity"] = f"{color.opacity:.3f}"
    return attributes


class SvgDocument:
    """A rendered SVG badge. Implements VectorDocument.

    The element tree is owned by the document and never handed out, so a
    document cannot change once rendered.
    """

    def __init__(self, root: ET.Element) -> None:
        self._root = root

    @property
    def width(self) -> int:
        return int(self._root.attrib["width"])

    @property
    def height(self) -> int:
        return int(self._root.attrib["height"])

    def write(self, stream: BinaryIO) -> None:
        """Write the document as UTF-8 XML, declaration included."""
        ET.ElementTree(self._root).write(
            stream, encoding="UTF-8", xml_declaration=True
        )

    def to_bytes(self) -> bytes:
        buffer = io.BytesIO()
        self.write(buffer)
        return buffer.getvalue()


class SvgBadgeRenderer:
    """Draws quality gate badges as SVG documents.

    Attributes:
        font: Font used for the document and for sizing the status block.
        config: Layout constants of the badge.
    """

    def __init__(self, font: BadgeFont, config: BadgeConfig | None = None) -> None:
        self.font = font
        self.config = config if config is not None else BadgeConfig()

    def render(
        self,
        label_text: str,
        label_color: Color,
        status_text: str,
        status_color: Color,
        status_width: int | None = None,
    ) -> SvgDocument:
        """Draw the label block and the status block into a new document.

        Args:
            label_text: Text of the left block.
            label_color: Background of the left block.
            status_text: Text of the right block.
            status_color: Background of the right block.
            status_width: Width of the status block, usually the catalog's
                display width. Measured from ``font`` when None.

        Returns:
            The rendered document, ``label_width + status_width`` pixels wide.
        """
        config = self.config
        if status_width is None:
            status_width = text_block_width(self.font, status_text, config.x_margin)
        width = config.label_width + status_width
        height = config.canvas_height
        margin = config.x_margin
        shadow, foreground = config.shadow_color, config.text_color

        svg = ET.Element(
            "svg",
            {
                "xmlns": SVG_NAMESPACE,
                "width": str(width),
                "height": str(height),
                "viewBox": f"0 0 {width} {height}",
                "font-family": self.font.css_family,
                "font-size": str(self.font.size),
            },
        )
        svg.append(ET.Comment(f" {config.generator_comment} "))

        # Label block: rounded on the left, square where it meets the status
        self._block(
            svg,
            x=0,
            width=config.label_width,
            color=label_color,
            square_x=config.label_width - config.corner_arc_diameter,
        )
        self._text(svg, label_text, margin, config.label_shadow_baseline, shadow)
        self._text(svg, label_text, margin, config.text_baseline, foreground)

        # Status block: mirrored, square on the left
        self._block(
            svg,
            x=config.label_width,
            width=status_width,
            color=status_color,
            square_x=config.label_width,
        )
        status_x = config.label_width + margin
        self._text(svg, status_text, status_x, config.status_shadow_baseline, shadow)
        self._text(svg, status_text, status_x, config.text_baseline, foreground)

        return SvgDocument(svg)

    def _block(
        self,
        svg: ET.Element,
        x: int,
        width: int,
        color: Color,
        square_x: int,
    ) -> None:
        """Paint a rounded rectangle, then square off one side of it."""
        config = self.config
        radius = _number(config.corner_arc_diameter / 2)
        ET.SubElement(
            svg,
            "rect",
            {
                "x": str(x),
                "y": "0",
                "width": str(width),
                "height": str(config.canvas_height),
                "rx": radius,
                "ry": radius,
                **_fill(color),
            },
        )
        ET.SubElement(
            svg,
            "rect",
            {
                "x": str(square_x),
                "y": "0",
                "width": str(config.corner_arc_diameter),
                "height": str(config.canvas_height),
                **_fill(color),
            },
        )

    @staticmethod
    def _text(svg: ET.Element, text: str, x: int, baseline: int, color: Color) -> None:
        element = ET.SubElement(
            svg, "text", {"x": str(x), "y": str(baseline), **_fill(color)}
        )
        element.text = text
