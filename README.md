# konan

konan sends short pieces of text to a receipt printer on your local network. The
printer must accept ESC/POS commands over raw TCP. Rongta printers and most other
thermal printers do this on port 9100. konan prints each piece of text on its own
line and then cuts the paper.

## Installation

```
pip install .
```

## Usage

To print one or more lines:

```
konan "Buy milk" "Call the plumber"
```

To print the contents of a file:

```
konan --file notes.txt
```

To print the lines as a heading, centred, bold and underlined:

```
konan --template heading "Shopping list"
```

You can also run the command as `python -m konan.cli`.

### Options

- `content` (one or more, required): the text to print. An empty string is rejected.
- `-t`, `--template {raw,heading}`: sets the style. The default is `raw`, which prints plain text aligned to the left. `heading` centres the text and makes it bold and underlined.
- `-f`, `--file`: treats the first `content` argument as a file path, relative or absolute, and prints that file's contents. konan ignores any further arguments. If the file cannot be read, konan reports the error and exits with status 1.
- `-m`, `--min_lines N`: accepts a number from 0 to 255 and stores it on the template. It does not change what is printed yet.
- `-l`, `--link`: is reserved. Using it makes konan stop with the error "printing links is not supported".
- `-V`, `--version`: shows the version.

If the printing succeeds, konan prints "Succesfully printed". If the printer cannot be reached, it prints "Failed to open 192.168.1.87:9100".

The text must be plain ASCII. If any line contains another character, konan reports a "Non-ASCII input" error and sends nothing to the printer.

## Library use

```python
from konan.printer import Template, TemplateVariation, establish_rongta_printer, print_template

with establish_rongta_printer() as printer:
    print_template(Template(content=["Hello"], variation=TemplateVariation.HEADING), printer)
```

- `establish_rongta_printer(host="192.168.1.87", port=9100, timeout=None)` opens a TCP connection and returns a `Printer`. If the connection fails, it raises `PrinterConnectionError`.
- `print_template(template, printer)` raises `ValueError` in two cases: when the template has no content, and when a line is not ASCII (see `ascii_only`).
- `Printer` stores ESC/POS commands in a buffer. Its methods `init`, `justify`, `underline`, `bold` and `writeln` add commands and can be chained. `print_cut` adds a paper cut, then sends the whole buffer to the driver. `close` closes the driver. A `Printer` can be used as a context manager.
- A `Printer` can wrap any object that has a `write(bytes)` method, which is useful for capturing output. It calls the driver's `flush` and `close` methods only if they exist.
- When debugging is on, which is the default, each command is logged in hex at DEBUG level on the `konan.printer` logger.

## Limitations

- The command line always connects to `192.168.1.87:9100`. To use another printer, call `establish_rongta_printer` with a different host and port from Python.
- konan cannot print links, and it does not use the minimum line count.
- Only ASCII text can be printed.

## Development

```
pip install -e ".[test]"
pytest
```