"""
Tests for the base1024 command-line tool.
"""
import pytest

from Base1024 import Base1024
from Base1024.cli import WrappingWriter, main, strip_line_breaks


@pytest.fixture
def payload(tmp_path):
    path = tmp_path / "payload.bin"
    path.write_bytes(bytes(range(256)) * 3 + b"tail")
    return path


def test_encode_decode_files(tmp_path, payload):
    encoded = tmp_path / "payload.txt"
    decoded = tmp_path / "out" / "payload.bin"

    assert main([str(payload), "-o", str(encoded)]) == 0
    text = encoded.read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert text[:-1] == Base1024().encode(payload.read_bytes())

    assert main(["-d", str(encoded), "-o", str(decoded)]) == 0
    assert decoded.read_bytes() == payload.read_bytes()


def test_wrapped_output_decodes(tmp_path, payload):
    encoded = tmp_path / "payload.txt"
    decoded = tmp_path / "payload.out"

    assert main(["-w", "76", str(payload), "-o", str(encoded)]) == 0
    lines = encoded.read_text(encoding="utf-8").splitlines()
    assert all(len(line) == 76 for line in lines[:-1])
    assert 0 < len(lines[-1]) <= 76

    assert main(["-d", str(encoded), "-o", str(decoded)]) == 0
    assert decoded.read_bytes() == payload.read_bytes()


def test_decode_ignores_crlf(tmp_path):
    text = Base1024().encode(b"windows line endings")
    encoded = tmp_path / "crlf.txt"
    encoded.write_bytes((text[:8] + "\r\n" + text[8:] + "\r\n").encode("utf-8"))
    decoded = tmp_path / "crlf.bin"

    assert main(["-d", str(encoded), "-o", str(decoded)]) == 0
    assert decoded.read_bytes() == b"windows line endings"


def test_empty_input(tmp_path):
    """Test empty input encodes to an empty file, without a final newline."""
    empty = tmp_path / "empty.bin"
    empty.write_bytes(b"")
    encoded = tmp_path / "empty.txt"

    assert main([str(empty), "-o", str(encoded)]) == 0
    assert encoded.read_bytes() == b""


def test_invalid_input_fails(tmp_path, capsys):
    bad = tmp_path / "bad.txt"
    bad.write_text("not encoded\n", encoding="utf-8")

    assert main(["-d", str(bad), "-o", str(tmp_path / "bad.bin")]) == 1
    assert "base1024:" in capsys.readouterr().err


def test_truncated_input_fails(tmp_path, capsys):
    truncated = tmp_path / "truncated.txt"
    truncated.write_text(Base1024().encode(b"hello")[:3], encoding="utf-8")

    assert main(["-d", str(truncated), "-o", str(tmp_path / "t.bin")]) == 1
    assert "not a multiple of 4" in capsys.readouterr().err


def test_missing_input_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.bin"), "-o", str(tmp_path / "x.txt")]) == 1
    assert "base1024:" in capsys.readouterr().err


def test_check_default_alphabet(capsys):
    assert main(["--check-alphabet"]) == 0
    out = capsys.readouterr().out
    assert "order preserving:   yes" in out


def test_custom_alphabet_listing(tmp_path, payload):
    listing = tmp_path / "emojis.txt"
    listing.write_text("\n".join(f"{c:X}" for c in range(0x1F300, 0x1F300 + 1027)), encoding="ascii")
    encoded = tmp_path / "payload.txt"
    decoded = tmp_path / "payload.out"

    assert main(["--alphabet", str(listing), str(payload), "-o", str(encoded)]) == 0
    assert ord(encoded.read_text(encoding="utf-8")[0]) >= 0x1F300

    assert main(["--alphabet", str(listing), "-d", str(encoded), "-o", str(decoded)]) == 0
    assert decoded.read_bytes() == payload.read_bytes()


def test_bad_listing_fails(tmp_path, capsys):
    listing = tmp_path / "short.txt"
    listing.write_text("1F300\n1F301\n", encoding="ascii")

    assert main(["--alphabet", str(listing), "--check-alphabet"]) == 1
    assert "1027" in capsys.readouterr().err


def test_negative_wrap_fails(tmp_path, payload, capsys):
    assert main(["-w", "-1", str(payload), "-o", str(tmp_path / "x.txt")]) == 1
    assert "wrap" in capsys.readouterr().err


def test_wrapping_writer():
    import io

    stream = io.StringIO()
    writer = WrappingWriter(stream, 3)
    writer.write("abcd")
    writer.write("efg")
    writer.finish()
    assert stream.getvalue() == "abc\ndef\ng\n"


def test_strip_line_breaks():
    assert list(strip_line_breaks(["ab\n", "\r\n", "c\rd"])) == ["ab", "cd"]
