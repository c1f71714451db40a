'''
Command line interface tests
'''

from rpncalc.cli import CLI


def run(*args):
    cli = CLI()
    cli.run(args=list(args))
    return cli


def test_expressions(capsys):
    run('-e', '5 4 +', '3 *')
    assert capsys.readouterr().out == '1: 27\n'


def test_error_is_reported_and_session_continues(capsys):
    cli = run('-e', '1 0 /', '2')
    captured = capsys.readouterr()
    assert 'error: /: Division by zero' in captured.err
    assert captured.out == '3: 1\n2: 0\n1: 2\n'
    assert cli.dispatcher.engine.snapshot() == (1, 0, 2)


def test_unknown_word(capsys):
    run('-e', '5 foo +')
    captured = capsys.readouterr()
    assert 'foo: Unknown command' in captured.err
    assert captured.out == '1: 5\n'


def test_help(capsys):
    run('-e', 'help')
    out = capsys.readouterr().out
    assert out.startswith('arithmetic:\n')
    assert out.endswith('(empty)\n')


def test_quit(capsys):
    run('-e', '1', 'quit', '2')
    assert capsys.readouterr().out == '1: 1\n'


def test_precision(capsys):
    run('-k', '3', '-e', '2 sqrt')
    assert capsys.readouterr().out == '1: 1.414\n'


def test_degrees(capsys):
    run('--degrees', '-e', '90 sin')
    assert capsys.readouterr().out == '1: 1\n'


def test_log_size():
    cli = run('--log-size', '1', '-e', '1 2 + 3 +')
    assert cli.dispatcher.engine.log == ('3 + 3 = 6',)


def test_dump(capsys):
    run('-D', '-e', '5 sqrt undo')
    lines = capsys.readouterr().out.splitlines()
    assert lines[1:] == ["number\t'5'\tNone",
                         "operator\t'sqrt'\t1",
                         "command\t'undo'\tNone"]


def test_raw_grammar(capsys):
    run('-G', '-e')
    assert '(?<number>' in capsys.readouterr().out


def test_history(capsys):
    run('-e', '3 4 +', '16 sqrt', 'history')
    out = capsys.readouterr().out
    assert out == '3 + 4 = 7\nsqrt(16) = 4\n2: 7\n1: 4\n'


def test_non_ascii_digit_does_not_end_session(capsys):
    run('-e', '5 \U00010d40 +', '2')
    captured = capsys.readouterr()
    assert 'Unknown command' in captured.err
    assert captured.out == '2: 5\n1: 2\n'
