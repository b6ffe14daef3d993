# data_loader.py

import logging
import re
from pathlib import Path
from typing import Callable, Dict, Union

from docx import Document
import fitz  # PyMuPDF

logger = logging.getLogger(__name__)

# glyph placeholders some PDF producers leave in extracted text
_CID_RE = re.compile(r"\(cid:\d+\)")


def _read_pdf(path: Union[str, Path]) -> str:
    pages = []
    with fitz.open(str(path)) as pdf:
        for page in pdf:
            pages.append(page.get_text("text"))
    logger.info("read %d PDF page(s) from %s", len(pages), path)
    # blank line between pages keeps page tails from running into the next heading
    return _CID_RE.sub("", "\n\n".join(pages))


def _read_docx(path: Union[str, Path]) -> str:
    doc = Document(str(path))
    return "\n".join(p.text for p in doc.paragraphs)


def _read_txt(path: Union[str, Path]) -> str:
    return Path(path).read_text(encoding="utf-8", errors="ignore")


_READERS: Dict[str, Callable[[Union[str, Path]], str]] = {
    ".pdf": _read_pdf,
    ".docx": _read_docx,
    ".txt": _read_txt,
}


def load_resume(file_path: Union[str, Path]) -> str:
    """
    Load and return raw text from a resume file (.pdf, .docx, .txt),
    ready to hand to ``parse_resume_locally``.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"No such file: {path}")

    reader = _READERS.get(path.suffix.lower())
    if reader is None:
        supported = ", ".join(ext.lstrip(".").upper() for ext in _READERS)
        raise ValueError(f"Unsupported file type {path.suffix!r}. Use {supported}.")

    text = reader(path)
    logger.info("loaded %d characters from %s", len(text), path.name)
    return text.strip()
