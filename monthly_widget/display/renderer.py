"""Drawing utilities for the monthly widget image."""
from PIL import Image, ImageDraw, ImageFont

from monthly_widget.core.month_config import Color

FONT_DIRS = [
    "/usr/share/fonts/truetype/dejavu",
    "/Library/Fonts",
    "/System/Library/Fonts/Supplemental",
]


class Renderer:
    """Helper class for drawing content on the widget canvas."""

    def __init__(self, width=170, height=170):
        self.width = width
        self.height = height
        self.image = None
        self.draw = None

    def create_canvas(self, background: Color = Color(255, 255, 255)):
        """Create a new canvas filled with the background color."""
        self.image = Image.new('RGB', (self.width, self.height), tuple(background))
        self.draw = ImageDraw.Draw(self.image)
        return self.image

    def get_font(self, size=12, bold=False, font_name=None):
        """
        Get a font for drawing text.

        A named font is looked up in the usual font directories; falls back
        to DejaVu, then to Pillow's default font.
        """
        candidates = []
        if font_name:
            candidates += [f"{font_name}.ttf", f"{font_name}.ttc"]
        candidates.append("DejaVuSans-Bold.ttf" if bold else "DejaVuSans.ttf")

        for candidate in candidates:
            for font_dir in FONT_DIRS:
                try:
                    return ImageFont.truetype(f"{font_dir}/{candidate}", size)
                except OSError:
                    continue
        return ImageFont.load_default()

    def draw_text(self, text, x, y, font_size=12, bold=False, anchor="lt",
                  color: Color = Color(0, 0, 0), font_name=None):
        """
        Draw text on the canvas.

        Args:
            text: Text to draw
            x, y: Position
            font_size: Font size in points
            bold: Use bold font
            anchor: Text anchor point (lt=left-top, mm=middle-middle, etc.)
            color: Fill color
            font_name: Optional typeface to try before the default
        """
        font = self.get_font(font_size, bold, font_name)
        self.draw.text((x, y), text, font=font, fill=tuple(color), anchor=anchor)

    def draw_rectangle(self, x, y, width, height, fill=None, outline=None):
        """Draw a rectangle."""
        self.draw.rectangle(
            [(x, y), (x + width, y + height)],
            fill=tuple(fill) if fill is not None else None,
            outline=tuple(outline) if outline is not None else None
        )

    def get_image(self):
        """Get the current image."""
        return self.image

    def save(self, path):
        """Write the current image to disk."""
        path.parent.mkdir(parents=True, exist_ok=True)
        self.image.save(path)
        return path
