import shlex

STATEMENT_SEPARATOR = ";"
WORD_DELIMITERS = " \t\r\n\a"


def is_blank(text):
    """True if text holds nothing but delimiter whitespace"""
    return not text.strip(WORD_DELIMITERS)


def split_statements(line):
    """
    Split a line on the statement separator.
    Blank pieces (e.g. between ';;') are dropped.
    Returns: list of statement texts, left to right
    """
    return [part for part in line.split(STATEMENT_SEPARATOR) if not is_blank(part)]


def split_words(text):
    """Split one statement into words. No quoting or escaping."""
    lex = shlex.shlex(text, posix=True)
    lex.whitespace = WORD_DELIMITERS
    lex.whitespace_split = True
    lex.commenters = ""
    lex.quotes = ""
    lex.escape = ""
    return list(lex)


def parse_line(line):
    """
    Parse one input line into statements.
    Returns: list of word lists, never containing an empty one
    """
    statements = []
    for text in split_statements(line):
        words = split_words(text)
        if words:
            statements.append(words)
    return statements


def split_lines(buffer):
    """Split a script buffer into the lines run one by one in batch mode"""
    return buffer.splitlines()
