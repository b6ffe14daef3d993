import fitz  # PyMuPDF
import pytest
from docx import Document

from data_loader import load_resume


def test_load_txt_strips_surrounding_whitespace(tmp_path):
    path = tmp_path / "curriculo.txt"
    path.write_text("\n  João Silva\nEngenheiro  \n\n", encoding="utf-8")
    assert load_resume(path) == "João Silva\nEngenheiro"


def test_load_docx_joins_paragraphs(tmp_path):
    path = tmp_path / "curriculo.docx"
    doc = Document()
    doc.add_paragraph("Maria Souza")
    doc.add_paragraph("Analista de Dados")
    doc.save(str(path))

    assert load_resume(path) == "Maria Souza\nAnalista de Dados"


def test_load_pdf_reads_every_page(tmp_path):
    path = tmp_path / "curriculo.pdf"
    pdf = fitz.open()
    pdf.new_page().insert_text((72, 72), "Maria Souza")
    pdf.new_page().insert_text((72, 72), "Habilidades")
    pdf.save(str(path))
    pdf.close()

    text = load_resume(path)
    assert "Maria Souza" in text
    assert "Habilidades" in text
    assert text.index("Maria Souza") < text.index("Habilidades")


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_resume(tmp_path / "nope.pdf")


def test_unsupported_extension_raises(tmp_path):
    path = tmp_path / "curriculo.rtf"
    path.write_text("{\\rtf1}", encoding="utf-8")
    with pytest.raises(ValueError):
        load_resume(path)
