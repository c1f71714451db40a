'''
Operator table tests
'''

from rpncalc.operators import (OperatorKind, ARITY, MNEMONICS, OPERATIONS,
                               STACK_OPERATIONS, describe, lookup)

from pytest import mark


BASE_VOCABULARY = ('+ - * / ^ % sqrt inv ! sin cos tan asin acos atan '
                   'swap drop clear').split()


def test_base_vocabulary():
    for word in BASE_VOCABULARY:
        assert lookup(word) is not None, word


def test_every_operator_has_arity():
    assert set(ARITY) == set(OperatorKind)


@mark.parametrize('kind,arity', [
    (OperatorKind.ADD, 2),
    (OperatorKind.ROOT, 2),
    (OperatorKind.SWAP, 2),
    (OperatorKind.SQRT, 1),
    (OperatorKind.SIN, 1),
    (OperatorKind.EXP10, 1),
    (OperatorKind.DROP, 1),
    (OperatorKind.CLEAR, 0),
])
def test_arity(kind, arity):
    assert kind.arity == arity


def test_tables_are_disjoint():
    assert not set(OPERATIONS) & set(STACK_OPERATIONS)
    assert OperatorKind.CLEAR not in OPERATIONS
    assert OperatorKind.CLEAR not in STACK_OPERATIONS


def test_lookup_unknown():
    assert lookup('foo') is None
    assert lookup('undo') is None


def test_canonical_mnemonics():
    for kind in OperatorKind:
        assert MNEMONICS[kind.mnemonic] is kind
        assert str(kind) == kind.mnemonic


@mark.parametrize('kind,operands,result,text', [
    (OperatorKind.SUBTRACT, (10.0, 3.0), 7.0, '10 - 3 = 7'),
    (OperatorKind.COS, (0.0,), 1.0, 'cos(0) = 1'),
    (OperatorKind.ROOT, (8.0, 3.0), 2.0, '3 root 8 = 2'),
    (OperatorKind.INVERSE, (8.0,), 0.125, '1/8 = 0.125'),
])
def test_describe(kind, operands, result, text):
    assert describe(kind, operands, result) == text
