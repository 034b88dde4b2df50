import pdfplumber
import pytest


class FakePage:
    def __init__(self, text, error=None):
        self.text = text
        self.error = error

    def extract_text(self):
        if self.error:
            raise self.error
        return self.text


class FakePDF:
    def __init__(self, pages):
        self.pages = pages

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


@pytest.fixture
def fake_pdf(monkeypatch):
    """
    Replace pdfplumber.open so PDFs are read from a list of page texts.

    Call the fixture with page texts; an exception instance stands for a
    page that fails to decode. It returns a list that records every source
    pdfplumber.open was called with; the keyword arguments of each call
    are kept on ``fake_pdf.open_kwargs``.
    """
    opened = []
    open_kwargs = []

    def install(*pages):
        fake_pages = [
            FakePage(None, error=p) if isinstance(p, Exception) else FakePage(p)
            for p in pages
        ]

        def fake_open(path, **kwargs):
            opened.append(path)
            open_kwargs.append(kwargs)
            return FakePDF(fake_pages)

        monkeypatch.setattr(pdfplumber, "open", fake_open)
        return opened

    install.open_kwargs = open_kwargs
    return install
