import pytest

from fbdl.tokens import Kind, Token, join, loc, text


def test_operator_precedence_values():
    assert Kind.OR.precedence() == 1
    assert Kind.AND.precedence() == 2
    assert Kind.EQ.precedence() == 3
    assert Kind.ADD.precedence() == 4
    assert Kind.BIT_OR.precedence() == 4
    assert Kind.MUL.precedence() == 5
    assert Kind.BIT_AND.precedence() == 5
    assert Kind.EXP.precedence() == 6
    assert Kind.COLON.precedence() == 0


def test_non_operators_have_no_precedence():
    assert Kind.IDENT.precedence() is None
    assert Kind.ASS.precedence() is None
    assert Kind.NEG.precedence() is None


def test_labels():
    assert Kind.ADD.label() == "'+'"
    assert Kind.EXP.label() == "'**'"
    assert Kind.IDENT.label() == "identifier"
    assert Kind.ADD_ENABLE.label() == "'add-enable'"
    assert Kind.NONE.label() == ""


def test_categories():
    assert Kind.BLOCK.is_functionality()
    assert Kind.STREAM.is_functionality()
    assert not Kind.CONST.is_functionality()
    assert Kind.WIDTH.is_property()
    assert Kind.INIT_VALUE.is_property()
    assert not Kind.BUS.is_property()
    assert Kind.INT.is_number()
    assert Kind.FLOAT.is_number()
    assert not Kind.BIT_STRING.is_number()


def test_token_name_matches_kind_label():
    tok = Token(Kind.EOF, start=3, end=3, line=1, column=4)
    assert tok.name() == "end of file"


def test_loc_and_text():
    src = b"const A = true"
    tok = Token(Kind.BOOL, start=10, end=13, line=1, column=11, src=src)
    assert loc(tok) == "1:11"
    assert text(tok, src) == "true"
    assert text(tok, "const A = true") == "true"


def test_join_spans_both_tokens():
    src = b"a + b"
    t1 = Token(Kind.IDENT, start=0, end=0, line=1, column=1, src=src, path="f")
    t2 = Token(Kind.IDENT, start=4, end=4, line=1, column=5, src=src, path="f")
    joined = join(t1, t2)
    assert joined.kind is Kind.NONE
    assert (joined.start, joined.end) == (t1.start, t2.end)
    assert (joined.line, joined.column) == (t1.line, t1.column)
    assert joined.src == src
    assert joined.path == "f"
    assert text(joined, src) == "a + b"


def test_join_different_lines_raises():
    t1 = Token(Kind.IDENT, start=0, end=0, line=1, column=1)
    t2 = Token(Kind.IDENT, start=4, end=4, line=2, column=1)
    with pytest.raises(ValueError, match="different lines"):
        join(t1, t2)


def test_join_reversed_raises():
    t1 = Token(Kind.IDENT, start=4, end=4, line=1, column=5)
    t2 = Token(Kind.IDENT, start=0, end=0, line=1, column=1)
    with pytest.raises(ValueError, match="tok1 starts after tok2"):
        join(t1, t2)


def test_join_different_files_raises():
    t1 = Token(Kind.IDENT, start=0, end=0, line=1, column=1, path="a")
    t2 = Token(Kind.IDENT, start=2, end=2, line=1, column=3, path="b")
    with pytest.raises(ValueError, match="different files"):
        join(t1, t2)