import pytest
from behavioral.template_method.doc_processing import DocumentProcessor, ExcelProcessor, PDFProcessor, WordProcessor


@pytest.mark.unit
@pytest.mark.parametrize("processor, kind", [
    (PDFProcessor(), "PDF"),
    (WordProcessor(), "Word"),
    (ExcelProcessor(), "Excel"),
])
def test_steps_run_in_fixed_order(processor, kind):
    assert processor.process_document() == [
        f"Reading {kind} document...",
        "Validating document...",
        f"Transforming {kind} content...",
        "Saving document...",
    ]


@pytest.mark.unit
def test_default_step_can_be_overridden():
    class StrictPDF(PDFProcessor):
        def validate(self):
            return "Validating PDF signature..."

    assert StrictPDF().process_document()[1] == "Validating PDF signature..."


@pytest.mark.unit
def test_abstract_steps_are_required():
    with pytest.raises(TypeError):
        DocumentProcessor()
