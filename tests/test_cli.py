from pypdf import PdfReader

import split_spreads
from test_documents import make_pdf


def test_folder_is_processed(tmp_path, capsys):
    src = tmp_path / "in"
    src.mkdir()
    make_pdf(src / "a.pdf", [(800, 600)])
    make_pdf(src / "b.PDF", [(600, 800), (600, 800)])
    (src / "notes.txt").write_text("ignored")

    assert split_spreads.main(["-i", str(src), "-o", str(tmp_path / "out")]) == 0

    assert len(PdfReader(str(tmp_path / "out" / "a_split.pdf")).pages) == 2
    assert len(PdfReader(str(tmp_path / "out" / "b_split.pdf")).pages) == 4
    output = capsys.readouterr().out
    assert "Processing 2 file(s)..." in output
    assert "[2/2] done" in output


def test_no_inputs(tmp_path, capsys):
    assert split_spreads.main(["-i", str(tmp_path), "-o", str(tmp_path / "out")]) == 1
    assert "No PDF files found" in capsys.readouterr().err


def test_existing_output_needs_overwrite(tmp_path):
    src = make_pdf(tmp_path / "a.pdf", [(800, 600)])
    out = tmp_path / "out"
    out.mkdir()
    (out / "a_split.pdf").write_text("old")

    assert split_spreads.main(["-i", str(src), "-o", str(out)]) == 1
    assert (out / "a_split.pdf").read_text() == "old"

    assert split_spreads.main(["-i", str(src), "-o", str(out), "--overwrite"]) == 0
    assert len(PdfReader(str(out / "a_split.pdf")).pages) == 2
