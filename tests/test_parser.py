from seqshell.parser import is_blank, parse_line, split_lines, split_statements, split_words


def test_whitespace_only_line_has_no_statements():
    assert parse_line("  ") == []
    assert parse_line("\t\r\n\a") == []
    assert parse_line("") == []


def test_empty_statement_between_separators_is_dropped():
    assert parse_line("echo a ;; echo b") == [["echo", "a"], ["echo", "b"]]
    assert parse_line("a ; ; b") == [["a"], ["b"]]


def test_single_statement():
    assert parse_line("cd /tmp") == [["cd", "/tmp"]]


def test_leading_and_trailing_separators_are_ignored():
    assert parse_line(";  ls -l ;") == [["ls", "-l"]]
    assert parse_line(";;; ; ") == []


def test_statements_keep_their_order():
    assert parse_line("help;cd /;help") == [["help"], ["cd", "/"], ["help"]]


def test_all_delimiters_split_words():
    assert split_words("ls\t-l\a-a\r\n  /") == ["ls", "-l", "-a", "/"]


def test_quotes_backslashes_and_hashes_are_plain_characters():
    assert split_words('echo "a b"') == ["echo", '"a', 'b"']
    assert split_words("echo a\\ b") == ["echo", "a\\", "b"]
    assert split_words("echo #not-a-comment") == ["echo", "#not-a-comment"]


def test_split_statements_checks_blankness_before_word_split():
    assert split_statements(" x ;\t; y") == [" x ", " y"]


def test_is_blank():
    assert is_blank(" \t\a")
    assert not is_blank(" x ")


def test_split_lines():
    assert split_lines("help\ncd /\n") == ["help", "cd /"]
    assert split_lines("") == []
