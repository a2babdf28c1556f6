"""
Add a signature field to a PDF file.

The field is empty: no signature value is computed, it only reserves a
visible area on the first page that a signing application can fill later.
"""
import io
import logging
import math
from pathlib import Path
from typing import Iterable, Tuple, Union

from pyhanko.pdf_utils import generic
from pyhanko.pdf_utils.generic import pdf_name
from pyhanko.pdf_utils.incremental_writer import IncrementalPdfFileWriter
from pyhanko.pdf_utils.misc import FormFillingError, PdfError
from pyhanko.sign import fields
from pyhanko.sign.fields import SigFieldSpec, VisibleSigSettings
from pyhanko.sign.general import SigningError

from sigfield.config import Settings
from sigfield.errors import (
    InputFileNotFoundError,
    InvalidArgumentsError,
    OutputFileCreationError,
    SignatureFieldError,
)

logger = logging.getLogger(__name__)

Box = Tuple[float, float, float, float]

FIRST_PAGE = 0
# annotation flags: Print
WIDGET_FLAGS = 0b100
HIGHLIGHT_INVERT = "/I"
APPEARANCE_STATE = "/Normal"


def parse_box(values: Iterable[str]) -> Box:
    """
    Parse ``x1 y1 x2 y2`` into a ``(ll_x, ll_y, ur_x, ur_y)`` box.

    The two corners may be given in any order.
    """
    values = list(values)
    if len(values) != 4:
        raise InvalidArgumentsError("Invalid rectangle coordinates.")
    try:
        x1, y1, x2, y2 = (float(v) for v in values)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentsError("Invalid rectangle coordinates.") from e

    if not all(math.isfinite(c) for c in (x1, y1, x2, y2)):
        raise InvalidArgumentsError("Invalid rectangle coordinates.")
    if x1 == x2 or y1 == y2:
        raise InvalidArgumentsError(
            "Invalid rectangle coordinates: the rectangle has no area."
        )

    return min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2)


class SigFieldAdder:
    def __init__(self, settings: Settings = Settings()):
        self.settings = settings

    def check_input(self, input_pdf_path: Union[str, Path]) -> Path:
        input_pdf_path = Path(input_pdf_path)
        if not input_pdf_path.is_file():
            raise InputFileNotFoundError(f"Input file not found: {input_pdf_path}")
        return input_pdf_path

    def add_one(
        self,
        input_pdf_path: Union[str, Path],
        output_pdf_path: Union[str, Path],
        field_name: str,
        box: Box,
    ):
        if not field_name or not field_name.strip():
            raise InvalidArgumentsError("Field name must be a nonempty string")

        input_pdf_path = self.check_input(input_pdf_path)
        output_pdf_path = Path(output_pdf_path)

        logger.info(
            f"Adding field {field_name} at {box} to {input_pdf_path} -> {output_pdf_path}"
        )

        try:
            with open(input_pdf_path, "rb") as f:
                w = IncrementalPdfFileWriter(f, strict=self.settings.strict)
                self._append_field(w, field_name, box)
                buffer = io.BytesIO()
                w.write(buffer)
        except OSError as e:
            raise OutputFileCreationError(f"{input_pdf_path}: {e}") from e
        except (PdfError, FormFillingError, SigningError) as e:
            raise SignatureFieldError(str(e)) from e

        try:
            if self.settings.make_parents:
                output_pdf_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_pdf_path, "wb") as final_output:
                final_output.write(buffer.getbuffer())
        except OSError as e:
            raise OutputFileCreationError(f"{output_pdf_path}: {e}") from e

        logger.info(f"Wrote {output_pdf_path}")

    def _append_field(self, w: IncrementalPdfFileWriter, field_name: str, box: Box):
        fields.append_signature_field(
            w,
            sig_field_spec=SigFieldSpec(
                sig_field_name=field_name,
                on_page=FIRST_PAGE,
                box=box,
                readable_field_name=self.settings.tooltip,
                visible_sig_settings=VisibleSigSettings(print_signature=True),
            ),
        )

        sig_field = find_sig_field(w, field_name)
        # field and widget share one dictionary
        sig_field[pdf_name("/F")] = generic.NumberObject(WIDGET_FLAGS)
        sig_field[pdf_name("/H")] = pdf_name(HIGHLIGHT_INVERT)
        sig_field[pdf_name("/AS")] = pdf_name(APPEARANCE_STATE)


def find_sig_field(handler, field_name: str) -> generic.DictionaryObject:
    found = next(fields.enumerate_sig_fields(handler, with_name=field_name), None)
    if found is not None:
        _name, _value, field_ref = found
        return field_ref.get_object()
    raise SignatureFieldError(f"Signature field {field_name} not found")
