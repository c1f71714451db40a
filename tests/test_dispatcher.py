'''
Command dispatcher tests
'''

from rpncalc.util import (StackUnderflow, DivisionByZero, UnknownToken,
                          NothingToUndo)

from pytest import mark, raises


def test_lines_build_on_each_other(dispatcher, engine):
    assert dispatcher.dispatch_line('5 4 +') == '+'
    assert dispatcher.dispatch_line('3 *') == '*'
    assert engine.snapshot() == (27,)


def test_failed_operator_keeps_operands(dispatcher, engine):
    with raises(DivisionByZero) as info:
        dispatcher.dispatch_line('1 0 /')
    assert info.value.token == '/'
    assert engine.snapshot() == (1, 0)


def test_unknown_word_abandons_rest(dispatcher, engine):
    with raises(UnknownToken) as info:
        dispatcher.dispatch_line('5 foo +')
    assert info.value.token == 'foo'
    assert str(info.value).startswith('foo: ')
    assert engine.snapshot() == (5,)


def test_error_abandons_rest(dispatcher, engine):
    with raises(StackUnderflow) as info:
        dispatcher.dispatch_line('2 + 3 4')
    assert info.value.token == '+'
    assert engine.snapshot() == (2,)


@mark.parametrize('line', ['', '   ', '\n'])
def test_blank_line(dispatcher, engine, line):
    assert dispatcher.dispatch_line(line) is None
    assert engine.snapshot() == ()
    assert engine.history == ()


def test_minus_and_negative_numbers(dispatcher, engine):
    dispatcher.dispatch_line('3 -2 -')
    assert engine.snapshot() == (5,)


def test_aliases(dispatcher, engine):
    assert dispatcher.dispatch_line('2 3 pow') == '^'
    assert dispatcher.dispatch_line('5 mod') == '%'
    assert dispatcher.dispatch_line('fact') == '!'
    assert engine.snapshot() == (6,)
    assert dispatcher.dispatch_line('clr') == 'clear'
    assert engine.snapshot() == ()


def test_stack_words(dispatcher, engine):
    dispatcher.dispatch_line('1 2 swap drop')
    assert engine.snapshot() == (2,)


def test_mnemonics_are_case_sensitive(dispatcher, engine):
    with raises(UnknownToken):
        dispatcher.dispatch_line('4 SQRT')
    assert engine.snapshot() == (4,)


def test_undo(dispatcher, engine):
    assert dispatcher.dispatch_line('1 2 undo') == 'undo push 2'
    assert engine.snapshot() == (1,)


def test_undo_word_by_word(dispatcher, engine):
    dispatcher.dispatch_line('5 4 +')
    dispatcher.dispatch_line('undo')
    assert engine.snapshot() == (5, 4)
    dispatcher.dispatch_line('undo undo')
    assert engine.snapshot() == ()


def test_nothing_to_undo(dispatcher, engine):
    with raises(NothingToUndo) as info:
        dispatcher.dispatch_line('undo 1')
    assert info.value.token == 'undo'
    assert engine.snapshot() == ()


def test_partial_line_is_undoable(dispatcher, engine):
    with raises(UnknownToken):
        dispatcher.dispatch_line('7 8 bogus')
    dispatcher.dispatch_line('undo')
    assert engine.snapshot() == (7,)


def test_owns_an_engine_by_default():
    from rpncalc.dispatcher import Dispatcher
    first, second = Dispatcher(), Dispatcher()
    first.dispatch_line('1')
    assert first.engine.snapshot() == (1,)
    assert second.engine.snapshot() == ()
