from pathlib import Path

import pytest
from pypdf import PdfWriter
from pypdf.generic import (
    ArrayObject,
    DictionaryObject,
    NameObject,
    NumberObject,
    TextStringObject,
)


def _write(writer: PdfWriter, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as f:
        writer.write(f)
    return path


def make_pdf(path: Path, pages: int = 1) -> Path:
    writer = PdfWriter()
    for _ in range(pages):
        writer.add_blank_page(width=612, height=792)
    return _write(writer, path)


def make_form_pdf(path: Path, field_name: str) -> Path:
    """One page with a text field, field and widget in a single dictionary."""
    writer = PdfWriter()
    page = writer.add_blank_page(width=612, height=792)

    text_field = DictionaryObject(
        {
            NameObject("/Type"): NameObject("/Annot"),
            NameObject("/Subtype"): NameObject("/Widget"),
            NameObject("/FT"): NameObject("/Tx"),
            NameObject("/T"): TextStringObject(field_name),
            NameObject("/Rect"): ArrayObject(
                [NumberObject(10), NumberObject(10), NumberObject(100), NumberObject(30)]
            ),
            NameObject("/F"): NumberObject(4),
        }
    )
    field_ref = writer._add_object(text_field)
    page[NameObject("/Annots")] = ArrayObject([field_ref])

    acro_form = DictionaryObject({NameObject("/Fields"): ArrayObject([field_ref])})
    writer._root_object.update(
        {NameObject("/AcroForm"): writer._add_object(acro_form)}
    )
    return _write(writer, path)


@pytest.fixture
def input_pdf(tmp_path) -> Path:
    return make_pdf(tmp_path / "in.pdf")


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    # keep a config.ini in the developer's working directory out of the tests
    monkeypatch.chdir(tmp_path)
