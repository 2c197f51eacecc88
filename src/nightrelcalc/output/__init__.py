"""Output generation for calculation results (text, PDF)."""

from nightrelcalc.output.pdf_generator import PDFGenerator
from nightrelcalc.output.text_generator import TextGenerator, build_share_description

__all__ = [
    "PDFGenerator",
    "TextGenerator",
    "build_share_description",
]
