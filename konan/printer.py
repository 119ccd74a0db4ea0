"""ESC/POS printing on a networked Rongta receipt printer."""

from __future__ import annotations

import logging
import socket
import sys
from dataclasses import dataclass, field
from enum import Enum, IntEnum

CPL = 48  # characters per line
IP = "192.168.1.87"
PORT = 9100
PC437 = 0

_ESC = b"\x1b"
_GS = b"\x1d"

logger = logging.getLogger(__name__)


class TemplateVariation(str, Enum):
    """Styles that a template can apply to the printed content."""

    RAW = "raw"
    HEADING = "heading"

    def __str__(self) -> str:
        return self.value


@dataclass
class Template:
    """Content to print together with its styling."""

    content: list[str] = field(default_factory=list)
    min_lines: int = 0
    variation: TemplateVariation = TemplateVariation.RAW


class JustifyMode(IntEnum):
    LEFT = 0
    CENTER = 1
    RIGHT = 2


class UnderlineMode(IntEnum):
    NONE = 0
    SINGLE = 1
    DOUBLE = 2


class PrinterConnectionError(ConnectionError):
    """Raised when the printer cannot be reached."""


class _NetworkDriver:
    """Byte sink that sends everything over a connected socket."""

    def __init__(self, sock: socket.socket) -> None:
        self._sock = sock

    def write(self, data: bytes) -> None:
        self._sock.sendall(data)

    def flush(self) -> None:
        pass

    def close(self) -> None:
        self._sock.close()


class Printer:
    """Buffers ESC/POS commands and sends them to a driver on print."""

    def __init__(self, driver, *, page_code: int | None = PC437,
                 debug: bool = True, chars_per_line: int = CPL) -> None:
        self.driver = driver
        self.page_code = page_code
        self.debug = debug
        self.chars_per_line = chars_per_line
        self._buffer = bytearray()

    def __enter__(self) -> "Printer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _command(self, label: str, data: bytes) -> "Printer":
        if self.debug:
            logger.debug("%s: %s", label, data.hex(" "))
        self._buffer += data
        return self

    def init(self) -> "Printer":
        """Reset the printer and select the configured code page."""
        self._command("initialization", _ESC + b"@")
        if self.page_code is not None:
            self._command("page code", _ESC + b"t" + bytes([self.page_code]))
        return self

    def justify(self, mode: JustifyMode) -> "Printer":
        return self._command("justify", _ESC + b"a" + bytes([JustifyMode(mode)]))

    def underline(self, mode: UnderlineMode) -> "Printer":
        return self._command("underline", _ESC + b"-" + bytes([UnderlineMode(mode)]))

    def bold(self, enabled: bool) -> "Printer":
        return self._command("bold", _ESC + b"E" + bytes([1 if enabled else 0]))

    def writeln(self, text: str) -> "Printer":
        return self._command("text", (text + "\n").encode("cp437"))

    def print_cut(self) -> "Printer":
        """Cut the paper and send every buffered command to the driver."""
        self._command("cut", _GS + b"VA\x00")
        data = bytes(self._buffer)
        self._buffer.clear()
        self.driver.write(data)
        flush = getattr(self.driver, "flush", None)
        if flush is not None:
            flush()
        return self

    def close(self) -> None:
        close = getattr(self.driver, "close", None)
        if close is not None:
            close()


def ascii_only(text: str) -> str:
    """Return text unchanged if it is ASCII, raise ValueError otherwise."""
    encoded = text.encode("utf-8")
    for index, byte in enumerate(encoded):
        if byte >= 0x80:
            raise ValueError(
                f"Non-ASCII input: the byte at index {index} is not ASCII"
            )
    return text


def establish_rongta_printer(host: str = IP, port: int = PORT,
                             timeout: float | None = None) -> Printer:
    """Open a network connection to the printer."""
    try:
        sock = socket.create_connection((host, port), timeout=timeout)
    except OSError as error:
        print(error, file=sys.stderr)
        raise PrinterConnectionError(f"Failed to open {host}:{port}") from error
    return Printer(_NetworkDriver(sock), page_code=PC437, debug=True,
                   chars_per_line=CPL)


def print_template(template: Template, printer: Printer) -> None:
    """Print the template's content in its style and cut the paper."""
    if not template.content:
        raise ValueError("You must provide some content to print")

    printer.init()
    if template.variation is TemplateVariation.HEADING:
        printer.justify(JustifyMode.CENTER).underline(UnderlineMode.SINGLE).bold(True)
    else:
        printer.justify(JustifyMode.LEFT)

    for item in template.content:
        printer.writeln(ascii_only(item))
    printer.print_cut()