from pathlib import Path
import pytest
from shakesearch.errors import LoadError
from shakesearch.loader import load_corpus_text, load_quote_records, load_source
from shakesearch.models import QuoteRecord

CSV = (
    '1,Hamlet,3.1.64,HAMLET,"To be, or not to be: that is the question"\n'
    "\n"
    '2,Macbeth,1.1.12,ALL,"Fair is foul, and foul is fair"\n'
)

def _write(tmp: Path, name: str, body: str) -> str:
    p = tmp / name
    p.write_text(body, encoding="utf-8")
    return str(p)

@pytest.mark.e2e
def test_csv_rows_map_onto_records(tmp_path: Path):
    records = load_quote_records(_write(tmp_path, "quotes.csv", CSV))
    assert records == [
        QuoteRecord("Hamlet", "HAMLET", "3.1.64", "To be, or not to be: that is the question"),
        QuoteRecord("Macbeth", "ALL", "1.1.12", "Fair is foul, and foul is fair"),
    ]

@pytest.mark.e2e
def test_short_csv_row_is_a_load_error(tmp_path: Path):
    path = _write(tmp_path, "bad.csv", CSV + "3,Lear,1.1.1\n")
    with pytest.raises(LoadError) as ei:
        load_quote_records(path)
    assert ei.value.path == path
    assert ei.value.row == 3

@pytest.mark.e2e
def test_malformed_csv_is_a_load_error(tmp_path: Path):
    path = _write(tmp_path, "broken.csv", '1,Hamlet,3.1.64,HAMLET,"To be, or not\n')
    with pytest.raises(LoadError):
        load_quote_records(path)

@pytest.mark.e2e
def test_missing_files_are_load_errors(tmp_path: Path):
    with pytest.raises(LoadError):
        load_quote_records(str(tmp_path / "nope.csv"))
    with pytest.raises(LoadError):
        load_corpus_text(str(tmp_path / "nope.txt"))

@pytest.mark.e2e
def test_undecodable_text_is_a_load_error(tmp_path: Path):
    p = tmp_path / "latin1.txt"
    p.write_bytes("café".encode("latin-1"))
    with pytest.raises(LoadError):
        load_corpus_text(str(p))

@pytest.mark.e2e
def test_load_source_dispatches_on_extension(tmp_path: Path):
    text = "THE SONNETS\n\nFrom fairest creatures we desire increase,\n"
    assert load_source(_write(tmp_path, "works.txt", text)) == text
    assert len(load_source(_write(tmp_path, "quotes.csv", CSV))) == 2
    with pytest.raises(LoadError) as ei:
        load_source(_write(tmp_path, "works.json", "{}"))
    assert "unsupported file extension" in str(ei.value)

@pytest.mark.e2e
def test_empty_sources_load_cleanly(tmp_path: Path):
    assert load_corpus_text(_write(tmp_path, "empty.txt", "")) == ""
    assert load_quote_records(_write(tmp_path, "empty.csv", "")) == []
