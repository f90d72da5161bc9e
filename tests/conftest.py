import sys
from pathlib import Path

import pytest

# Ensure 'src' and 'tests' are on sys.path for imports
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
TESTS = ROOT / "tests"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))
if str(TESTS) not in sys.path:
    sys.path.insert(0, str(TESTS))

HEADER = (
    "Preistag;Umsatzart;Fondsname;Investmentfonds;Zusatzinformation;"
    "Anteile;Preis;Betrag;Währung"
)


@pytest.fixture
def export_file(tmp_path):
    """Write DWS export lines (header prepended) as Latin-1 and return the path."""

    def _write(*lines: str, name: str = "umsaetze.csv") -> Path:
        path = tmp_path / name
        text = "\n".join((HEADER,) + lines) + "\n"
        path.write_bytes(text.encode("iso-8859-1"))
        return path

    return _write
