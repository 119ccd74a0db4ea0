from unittest import mock

import pytest

from konan.cli import build_parser, main


class _FakeSocket:
    def __init__(self):
        self.sent = bytearray()
        self.closed = False

    def sendall(self, data):
        self.sent.extend(data)

    def close(self):
        self.closed = True


def _run(argv):
    fake = _FakeSocket()
    with mock.patch("socket.create_connection", return_value=fake) as connect:
        code = main(argv)
    return code, fake, connect


def test_parser_defaults():
    args = build_parser().parse_args(["hello"])
    assert args.content == ["hello"]
    assert args.min_lines == 0
    assert args.template == "raw"
    assert args.link is False and args.file is False


def test_prints_content(capsys):
    code, fake, connect = _run(["hello", "world"])
    assert code == 0
    assert connect.call_args.args[0] == ("192.168.1.87", 9100)
    assert fake.sent.index(b"hello\n") < fake.sent.index(b"world\n")
    assert fake.closed
    assert "Succesfully printed" in capsys.readouterr().out


def test_heading_template(capsys):
    code, fake, _ = _run(["-t", "heading", "Title"])
    assert code == 0
    assert b"\x1bE\x01" in fake.sent
    assert "Succesfully printed" in capsys.readouterr().out


def test_file_content(tmp_path, capsys):
    target = tmp_path / "doc.txt"
    target.write_text("from file")
    code, fake, _ = _run(["--file", str(target)])
    assert code == 0
    assert b"from file\n" in fake.sent


def test_missing_file(tmp_path, capsys):
    code, fake, _ = _run(["-f", str(tmp_path / "absent.txt")])
    assert code == 1
    assert fake.sent == bytearray()
    assert "Failed to open file" in capsys.readouterr().err


def test_non_ascii_reports_error(capsys):
    code, fake, _ = _run(["caf\u00e9"])
    assert code == 0
    assert fake.sent == bytearray()
    assert "Non-ASCII input" in capsys.readouterr().err


def test_connection_failure(capsys):
    with mock.patch("socket.create_connection", side_effect=ConnectionRefusedError("refused")):
        code = main(["hello"])
    assert code == 0
    assert "Failed to open 192.168.1.87:9100" in capsys.readouterr().out


@pytest.mark.parametrize(
    "argv",
    [
        [],
        [""],
        ["-t", "fancy", "x"],
        ["-m", "256", "x"],
        ["-m", "abc", "x"],
        ["--link", "x"],
    ],
)
def test_invalid_arguments_exit(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2