# minitools

This package holds four small command-line tools. It uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Tools

### calculator

The calculator does one arithmetic operation on two numbers. The operator is one of `+`, `-`, `*` or `/`.

```
calculator 10 + 20
calculator 5.5 '*' 2
calculator 100 / 2.5
```

On success it prints a line such as `Result: 10 + 20 = 30`, with numbers in `%g` style.

Numbers are parsed strictly. Leading whitespace is allowed. Decimal, exponent and
hexadecimal forms are accepted, and so are `inf`, `infinity` and `nan`. The tool stops
with an error in these cases:

- the operator is not a single character, or is not a supported operator;
- a number is invalid or has trailing characters;
- a number overflows or underflows the range of a double;
- the division is by zero.

In each case it prints `Error: ...` to standard error and exits with status 1. Giving the
wrong number of arguments prints usage and also exits with status 1.

### contact-book

The contact book keeps contacts (name, phone, email) in `contacts.csv` in the current
directory.

```
contact-book add "Jane Doe" "extension 12" "jane@example.com"
contact-book list
contact-book find jane
contact-book delete "Jane Doe"
```

- `add` appends a contact and saves the file.
- `list` shows every contact, numbered.
- `find <term>` shows the contacts whose name or email contains the term. The match
  ignores ASCII case.
- `delete <name>` removes every contact whose name matches exactly, with case counted.
  It then saves the file.

If the file is missing, the tool starts with an empty book and prints a note on standard error.

The file format is plain `name,phone,email` lines, with no quoting. Fields that contain a
comma therefore do not survive a save and reload. When the file is read:

- empty fields are skipped;
- fields beyond the third are ignored;
- surrounding whitespace is trimmed;
- lines with fewer than three fields are dropped.

Running with no command prints usage and exits with status 1. Other errors, such as an
unknown command or wrong arguments, are reported on standard error, but the exit status
is 0.

### file-analyzer

The file analyzer counts characters, words and lines in a file. It then says whether the
word count is prime. It only says this when the count is greater than 1.

```
file-analyzer notes.txt
```

- The file is read as bytes, so "characters" are bytes.
- A word is any run of bytes other than whitespace and the punctuation
  `.,;:!?"'()[]{}<>&/`.
- Lines are read in pieces of at most 2047 bytes, so a longer line counts as more than one line.
- Anything after a NUL byte within such a piece is not counted.

If the file cannot be opened or read, the tool prints an error and exits with status 1.

### tiny-server

The tiny server is a multi-threaded HTTP server on port 8080, on all interfaces.

```
tiny-server
```

- `GET /` returns a small welcome page.
- A GET of any other path returns `404 Not Found`.
- Any other method returns `405 Method Not Allowed`.
- A request without a method and a path returns `400 Bad Request`.

Each connection reads a single request of up to 4095 bytes. It then gets one response
with `Connection: close`, and the server logs the connection to standard output. Press
Ctrl+C, or send SIGTERM, to shut the server down.

The server serves no files and supports no keep-alive, and the port is fixed for the
command.

## Library use

Each tool's logic can also be imported.

- `minitools.calculator`:
  - `parse_number(text)`, `calculate(num1, op, num2)` and `format_number(value)`.
  - Errors raise `CalculatorError`, a subclass of `ValueError`.
- `minitools.contactbook`:
  - `Contact` and `ContactBook`, with `add`, `find` and `delete`.
  - `parse_command`, `parse_csv_line`, `load_contacts`, `save_contacts` and `contains_ignore_case`.
  - `format_contact_list` and `format_search_results`.
- `minitools.fileanalyzer`:
  - `FileStats`, `count_words`, `analyze_stream` and `analyze_file`.
  - `is_prime` and `format_analysis`.
- `minitools.tinyserver`:
  - `build_response`, `parse_request_line` and `handle_request`, which turn raw request
    data into response bytes.
  - `TinyServer(port, host, backlog=..., log=...)`, a context manager with
    `serve_forever()` and `shutdown()`. Pass port 0 for a free port, then read
    `server_address`.

```python
from minitools.tinyserver import handle_request

print(handle_request(b"GET / HTTP/1.1\r\n\r\n").split(b"\r\n", 1)[0])
# b'HTTP/1.1 200 OK'
```

Each module's `main(argv=None)` runs the matching command and returns its exit status.