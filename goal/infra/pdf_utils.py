"""PDF export of the rendered calendar view.

Every region (header first, then months in order) is rasterized, encoded as
JPEG and placed on its own A4 portrait page, scaled to the page width.
"""
import io
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from fastapi.concurrency import run_in_threadpool
from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from goal.infra.regions import Region
from goal.utilities.config import EXPORT_SCALE, JPEG_QUALITY, DEFAULT_GOAL_FILENAME
from goal.utilities.constants import PDF_FILENAME_SUFFIX

logger = logging.getLogger(__name__)

PAGE_WIDTH, PAGE_HEIGHT = A4


@dataclass(frozen=True)
class ExportedDocument:
    filename: str
    content: bytes
    page_count: int


def pdf_filename(goal_name: str) -> str:
    """'<goal>-tracker.pdf', falling back to the default name for an empty goal."""
    base = (goal_name or "").strip() or DEFAULT_GOAL_FILENAME
    return f"{base}{PDF_FILENAME_SUFFIX}"


def _render_page_image(region: Region, scale: float, quality: int):
    """Rasterize and JPEG-encode one region; returns (reader, width_pt, height_pt).

    The image is scaled to the page width; anything taller than the page is
    cropped off the bottom.
    """
    image = region.rasterize(scale)
    fit_height = PAGE_WIDTH * image.height / image.width
    if fit_height > PAGE_HEIGHT:
        visible_px = int(image.width * PAGE_HEIGHT / PAGE_WIDTH)
        image = image.crop((0, 0, image.width, visible_px))
        fit_height = PAGE_HEIGHT
    buf = io.BytesIO()
    image.convert("RGB").save(buf, format="JPEG", quality=quality, optimize=True)
    buf.seek(0)
    return ImageReader(buf), PAGE_WIDTH, fit_height


def _place(pdf: canvas.Canvas, reader: ImageReader, width: float, height: float) -> None:
    # reportlab's origin is bottom-left; pin the image to the top of the page
    pdf.drawImage(reader, 0, PAGE_HEIGHT - height, width=width, height=height)


async def export_report(header_region: Optional[Region], month_regions: Sequence[Region],
                        goal_name: str = "", *, scale: float = EXPORT_SCALE,
                        quality: int = JPEG_QUALITY) -> ExportedDocument:
    """Build the PDF: optional header page, then one page per month region.

    Regions are rasterized one at a time off the event loop and strictly in
    order. Any failure aborts the export; nothing partial is returned.
    """
    buf = io.BytesIO()
    pdf = canvas.Canvas(buf, pagesize=A4, pageCompression=1)
    pdf.setTitle(goal_name or DEFAULT_GOAL_FILENAME)
    page_count = 0

    if header_region is not None:
        reader, w, h = await run_in_threadpool(_render_page_image, header_region, scale, quality)
        _place(pdf, reader, w, h)
        page_count += 1
    else:
        logger.debug("No header region; export starts with the first month")

    for region in month_regions:
        if page_count:
            pdf.showPage()
        reader, w, h = await run_in_threadpool(_render_page_image, region, scale, quality)
        _place(pdf, reader, w, h)
        page_count += 1

    if not page_count:
        # a PDF needs at least one page
        pdf.showPage()
        page_count = 1
    pdf.save()

    filename = pdf_filename(goal_name)
    content = buf.getvalue()
    logger.info("Exported %s (%d pages, %d bytes)", filename, page_count, len(content))
    return ExportedDocument(filename=filename, content=content, page_count=page_count)


__all__ = ['ExportedDocument', 'export_report', 'pdf_filename', 'PAGE_WIDTH', 'PAGE_HEIGHT']
