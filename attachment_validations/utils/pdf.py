# attachment_validations/utils/pdf.py
import fitz  # PyMuPDF

from .files import read_all


def pdf_dimensions(django_file):
    """Size of the first page in points."""
    data = read_all(django_file)
    doc = fitz.open(stream=data, filetype="pdf")
    try:
        page = doc.load_page(0)
        rect = page.rect
        return int(round(rect.width)), int(round(rect.height))
    finally:
        doc.close()
