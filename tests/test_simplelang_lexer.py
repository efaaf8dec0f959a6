import pytest

from ygtools.simplelang.lexer import LexingError, Token, TokenKind, lex


def kinds(text):
    return [tok.kind for tok in lex(text)]


def test_function_header():
    tokens = lex("func main() {}")
    assert [t.kind for t in tokens] == [
        TokenKind.FUNC,
        TokenKind.IDENT,
        TokenKind.LPARAM,
        TokenKind.RPARAM,
        TokenKind.LCURLY,
        TokenKind.RCURLY,
    ]
    assert tokens[1] == Token(TokenKind.IDENT, "main")


def test_keywords_and_identifiers():
    assert kinds("extern import var return funcs") == [
        TokenKind.EXTERN,
        TokenKind.IMPORT,
        TokenKind.VAR,
        TokenKind.RETURN,
        TokenKind.IDENT,
    ]


def test_numbers():
    assert lex("42 0x1F 0b101") == [
        Token(TokenKind.NUMBER, 42),
        Token(TokenKind.NUMBER, 31),
        Token(TokenKind.NUMBER, 5),
    ]


def test_digit_led_word_is_identifier():
    assert lex("123abc") == [Token(TokenKind.IDENT, "123abc")]


def test_negative_number_is_sub_then_number():
    assert lex("-7") == [Token(TokenKind.SUB), Token(TokenKind.NUMBER, 7)]


def test_longest_symbol_wins():
    assert kinds("+= -= *= /= -> ... + - * / = : ; ,") == [
        TokenKind.ADD_EQUAL,
        TokenKind.SUB_EQUAL,
        TokenKind.MUL_EQUAL,
        TokenKind.DIV_EQUAL,
        TokenKind.RIGHT_ARROW,
        TokenKind.TRIPLE_DOT,
        TokenKind.ADD,
        TokenKind.SUB,
        TokenKind.MUL,
        TokenKind.DIV,
        TokenKind.ASSIGN,
        TokenKind.DOUBLE_DOT,
        TokenKind.SEMICOLON,
        TokenKind.COMMA,
    ]


def test_comments_are_skipped():
    assert kinds("a // line comment\n/* block\n comment */ b") == [
        TokenKind.IDENT,
        TokenKind.IDENT,
    ]


def test_string_is_unescaped():
    assert lex('"a\\tb\\n"') == [Token(TokenKind.STRING, "a\tb\n")]


def test_invalid_escape_raises():
    with pytest.raises(LexingError):
        lex('"bad \\q"')


def test_unexpected_character():
    with pytest.raises(LexingError) as info:
        lex("a @ b")
    assert info.value.char == "@"
    assert info.value.position == 2
    assert str(info.value) == "unexpected character '@'"


def test_non_ascii_character():
    with pytest.raises(LexingError) as info:
        lex("é")
    assert info.value.char == "é"
    assert "unexpected" not in str(info.value)


def test_number_overflow():
    with pytest.raises(LexingError, match="number too large to fit in target type"):
        lex("99999999999999999999")