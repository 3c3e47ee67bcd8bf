import pytest

from minitools.contactbook import (
    CSV_FILENAME,
    Command,
    Contact,
    ContactBook,
    contains_ignore_case,
    format_contact_list,
    format_search_results,
    load_contacts,
    main,
    parse_command,
    parse_csv_line,
    save_contacts,
)


@pytest.fixture
def sample_contacts():
    return [
        Contact("John Doe", "x100", "john@example.com"),
        Contact("Jane Roe", "x200", "jane@example.com"),
        Contact("Bob", "x300", "bob@example.com"),
    ]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("add", Command.ADD),
        ("list", Command.LIST),
        ("find", Command.FIND),
        ("delete", Command.DELETE),
        ("ADD", Command.UNKNOWN),
        ("remove", Command.UNKNOWN),
        ("", Command.UNKNOWN),
    ],
)
def test_parse_command(text, expected):
    assert parse_command(text) is expected


def test_parse_csv_line_trims_fields():
    contact = parse_csv_line("  John Doe , x100 ,john@example.com \r\n")
    assert contact == Contact("John Doe", "x100", "john@example.com")


def test_parse_csv_line_skips_empty_fields():
    contact = parse_csv_line(",,Ann,,x1,,ann@example.com,\n")
    assert contact == Contact("Ann", "x1", "ann@example.com")


def test_parse_csv_line_ignores_extra_fields():
    contact = parse_csv_line("Ann,x1,ann@example.com,extra,more")
    assert contact == Contact("Ann", "x1", "ann@example.com")


@pytest.mark.parametrize("line", ["", "\n", "Ann,x1", "Ann,,x1,,", ",,,\n"])
def test_parse_csv_line_too_few_fields(line):
    assert parse_csv_line(line) is None


@pytest.mark.parametrize(
    "haystack, needle, expected",
    [
        ("John Doe", "john", True),
        ("John Doe", "DOE", True),
        ("John Doe", "", True),
        ("", "", True),
        ("", "a", False),
        ("John Doe", "jane", False),
    ],
)
def test_contains_ignore_case(haystack, needle, expected):
    assert contains_ignore_case(haystack, needle) is expected


def test_contact_matches_name_or_email():
    contact = Contact("John Doe", "x100", "jd@example.com")
    assert contact.matches("doe")
    assert contact.matches("EXAMPLE")
    assert not contact.matches("x100")


def test_book_add_appends_in_order():
    book = ContactBook()
    first = book.add("A", "x1", "a@example.com")
    book.add("B", "x2", "b@example.com")
    assert len(book) == 2
    assert list(book)[0] is first
    assert [c.name for c in book] == ["A", "B"]


def test_book_find(sample_contacts):
    book = ContactBook(list(sample_contacts))
    assert book.find("j") == sample_contacts[:2]
    assert book.find("BOB@") == [sample_contacts[2]]
    assert book.find("nobody") == []


def test_book_delete_removes_all_exact_matches(sample_contacts):
    book = ContactBook(list(sample_contacts))
    book.add("Bob", "x400", "bob2@example.com")
    assert book.delete("Bob") == 2
    assert [c.name for c in book] == ["John Doe", "Jane Roe"]


def test_book_delete_is_case_sensitive(sample_contacts):
    book = ContactBook(list(sample_contacts))
    assert book.delete("bob") == 0
    assert len(book) == 3


def test_save_and_load_round_trip(tmp_path, sample_contacts):
    path = str(tmp_path / "book.csv")
    save_contacts(sample_contacts, path)
    assert load_contacts(path) == sample_contacts


def test_save_writes_plain_lines(tmp_path):
    path = tmp_path / "book.csv"
    save_contacts([Contact("Ann", "x1", "ann@example.com")], str(path))
    assert path.read_text(encoding="utf-8") == "Ann,x1,ann@example.com\n"


def test_load_skips_malformed_lines(tmp_path):
    path = tmp_path / "book.csv"
    path.write_text("bad line\nAnn,x1,ann@example.com\n\n", encoding="utf-8")
    assert load_contacts(str(path)) == [Contact("Ann", "x1", "ann@example.com")]


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_contacts(str(tmp_path / "absent.csv"))


def test_format_contact_list_empty():
    assert format_contact_list([]) == "The contact book is empty.\n"


def test_format_contact_list_structure(sample_contacts):
    text = format_contact_list(sample_contacts)
    lines = text.splitlines()
    assert lines[0] == "--- Contact List (3 contacts) ---"
    assert lines[1] == " 1. Name:  John Doe"
    assert lines.count("     ---") == len(sample_contacts) - 1
    assert lines[-1] == "------------------------------------"


def test_format_search_results_none():
    text = format_search_results("zzz", [])
    assert "No contacts found matching that term." in text.splitlines()
    assert text.startswith("--- Search Results for 'zzz' ---\n")


def test_format_search_results_separators(sample_contacts):
    text = format_search_results("x", sample_contacts)
    lines = text.splitlines()
    assert lines.count("     ---") == len(sample_contacts) - 1
    assert "No contacts found matching that term." not in lines
    for contact in sample_contacts:
        assert f"  Name:  {contact.name}" in lines


def test_main_without_arguments_fails(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 1
    assert "Usage:" in capsys.readouterr().err


def test_main_add_list_find_delete(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["add", "Ann", "x1", "ann@example.com"]) == 0
    out = capsys.readouterr().out
    assert out == "Contact 'Ann' added successfully.\n"
    assert load_contacts(str(tmp_path / CSV_FILENAME)) == [
        Contact("Ann", "x1", "ann@example.com")
    ]

    assert main(["list"]) == 0
    assert capsys.readouterr().out == format_contact_list(
        [Contact("Ann", "x1", "ann@example.com")]
    )

    assert main(["find", "ANN"]) == 0
    assert "  Name:  Ann" in capsys.readouterr().out.splitlines()

    assert main(["delete", "Ann"]) == 0
    assert "Successfully deleted 1 contact(s) named 'Ann'." in capsys.readouterr().out
    assert load_contacts(str(tmp_path / CSV_FILENAME)) == []


def test_main_delete_missing_name(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["delete", "Nobody"]) == 0
    out = capsys.readouterr().out
    assert out == "No contact found with the exact name 'Nobody'.\n"


def test_main_unknown_command(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["frobnicate"]) == 0
    err = capsys.readouterr().err
    assert "Error: Unknown command 'frobnicate'." in err
    assert not (tmp_path / CSV_FILENAME).exists()


def test_main_add_wrong_arguments(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["add", "Ann"]) == 0
    err = capsys.readouterr().err
    assert "Error: Incorrect arguments for 'add' command." in err
    assert load_contacts(str(tmp_path / CSV_FILENAME)) == []


def test_main_reports_missing_file_info(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["list"]) == 0
    captured = capsys.readouterr()
    assert "Info: Could not load contacts" in captured.err
    assert captured.out == "The contact book is empty.\n"