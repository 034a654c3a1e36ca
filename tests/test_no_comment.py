import pytest

from sievetools.errors import FatalError
from sievetools.no_comment import UnterminatedError, main, strip_comments


def test_text_without_comments_is_unchanged():
    source = "int main(void) { return a / b; }\n"
    assert strip_comments(source) == source


def test_block_comment_becomes_space():
    assert strip_comments("a/* note */b\n") == "a b\n"


def test_block_comment_with_extra_stars():
    assert strip_comments("x/*abc**  **/y") == "x y"


def test_line_comment_keeps_newline():
    assert strip_comments("x = 1; // set x\ny = 2;\n") == "x = 1; \ny = 2;\n"


def test_line_comment_continued_by_backslash():
    assert strip_comments("a // one \\\ntwo\nb\n") == "a \nb\n"


def test_comment_markers_inside_strings_are_kept():
    source = 'puts("/* not */ // a comment"); c = \'/\';\n'
    assert strip_comments(source) == source


def test_escaped_quote_does_not_end_string():
    source = 'x = "say \\"/*hi*/\\"";\n'
    assert strip_comments(source) == source


def test_unterminated_block_comment():
    with pytest.raises(UnterminatedError) as info:
        strip_comments("keep /* never closed")
    assert info.value.state == 5
    assert info.value.output == "keep "


def test_unterminated_string():
    with pytest.raises(UnterminatedError) as info:
        strip_comments('"open')
    assert info.value.state == 7
    assert info.value.output == '"open'


def test_unterminated_error_is_fatal():
    with pytest.raises(FatalError, match="state 1"):
        strip_comments("a /")


def test_main_passes_non_ascii_bytes_through(tmp_path, capsysbinary):
    path = tmp_path / "input.c"
    path.write_bytes("char *s = \"Žluťoučký\"; /* kůň */\n".encode("utf-8"))
    assert main([str(path)]) == 0
    assert capsysbinary.readouterr().out == "char *s = \"Žluťoučký\";  \n".encode("utf-8")


def test_main_reports_unterminated_comment(tmp_path, capsysbinary):
    path = tmp_path / "input.c"
    path.write_bytes(b"a /* b")
    assert main([str(path)]) == 1
    captured = capsysbinary.readouterr()
    assert captured.out == b"a "
    assert captured.err.startswith(b"Error: state machine ended in state 5")


def test_main_missing_file(tmp_path, capsysbinary):
    missing = tmp_path / "missing.c"
    assert main([str(missing)]) == 1
    assert b"is not accessible" in capsysbinary.readouterr().err


def test_main_too_many_arguments(tmp_path, capsysbinary):
    assert main(["one.c", "two.c"]) == 1
    assert capsysbinary.readouterr().err == b"Error: too many arguments\n"