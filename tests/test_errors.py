from minishell.errors import print_error


def test_print_error_joins_pieces(capsys):
    print_error("-bash: ", "file", ": Is a directory\n")
    captured = capsys.readouterr()
    assert captured.err == "-bash: file: Is a directory\n"
    assert captured.out == ""


def test_print_error_skips_none(capsys):
    print_error("-bash: cd: HOME not set\n", None, None)
    assert capsys.readouterr().err == "-bash: cd: HOME not set\n"


def test_print_error_none_in_middle(capsys):
    print_error("a", None, "c")
    assert capsys.readouterr().err == "ac"


def test_print_error_nothing(capsys):
    print_error()
    assert capsys.readouterr().err == ""