import pytest

from schemelet.builtin.env_builtin import begin, car, cdr, cons
from schemelet.errors import (
    ArityMismatch,
    ExpectedPair,
    InvalidArgumentCount,
    NotAList,
    NotCallable,
    UndefinedSymbol,
)
from schemelet.types.nil import Nil
from schemelet.types.pair import Pair
from schemelet.types.symbol import Symbol


# -----------------------------
# cons / car / cdr
# -----------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(car (cons 1 2))", 1),
        ("(cdr (cons 1 2))", 2),
        ("(car (cons (list 1) true))", [1]),
        ("(cdr (cons (list 1) true))", True),
        ("(car (list 1 2))", 1),
        ("(car (list (list 1 2) 3))", [1, 2]),
        ("(cdr (list 1 2))", [2]),
        ("(cdr (list 1 (list 1 2)))", [[1, 2]]),
        ("(cdr (list 1))", []),
        ("(cons 1 (list 2 3))", Pair(1, [2, 3])),
    ]
)
def test_pairs(eval_source, source, expected):
    assert eval_source(source) == expected


@pytest.mark.parametrize(
    "source,error",
    [
        ("(car 1)", ExpectedPair),
        ("(cdr 1)", ExpectedPair),
        ("(car (list))", ExpectedPair),
        ("(cdr (list))", ExpectedPair),
        ("(car true)", ExpectedPair),
        ("(car)", InvalidArgumentCount),
        ("(cdr (list 1) (list 2))", InvalidArgumentCount),
        ("(cons 1)", InvalidArgumentCount),
    ]
)
def test_pair_errors(eval_source, source, error):
    with pytest.raises(error):
        eval_source(source)


def test_cdr_returns_a_new_list(env):
    xs = [1, 2, 3]
    tail = cdr(env, [xs])
    tail.append(4)
    assert xs == [1, 2, 3]
    assert car(env, [cons(env, [xs, Nil])]) is xs


# -----------------------------
# list / append / list?
# -----------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(list)", []),
        ("(list 1 (+ 1 1) (list 3))", [1, 2, [3]]),
        ("(append (list 1 2 3) (list 4 5 6))", [1, 2, 3, 4, 5, 6]),
        ("(append (list) (list))", []),
        ("(append (list 1 2 3) (list))", [1, 2, 3]),
        ("(append (list) (list 1 2 3))", [1, 2, 3]),
        ("(append (list 1 2 3) (list 4 5 6) (list 7) (list 8 9))", [1, 2, 3, 4, 5, 6, 7, 8, 9]),
        ("(append)", []),
        ("(append (list (list 1)) (list 2))", [[1], 2]),
        ("'(1 2 3)", [1, 2, 3]),
        ("'((+ 1 2) 4)", [3, 4]),
        ("(append (list 1 2 3) '(4 5 6))", [1, 2, 3, 4, 5, 6]),
        ("(list? (list 1 2))", True),
        ("(list? '(1 2 3))", True),
        ("(list? (list))", True),
        ("(list? (+ 1 2))", False),
        ("(list? 1)", False),
        ("(list? (cons 1 2))", False),
    ]
)
def test_lists(eval_source, source, expected):
    assert eval_source(source) == expected


def test_append_rejects_non_lists(eval_source):
    with pytest.raises(NotAList):
        eval_source("(append (list 1) 2)")
    with pytest.raises(NotAList):
        eval_source("(append (cons 1 2))")


def test_list_predicate_arity(eval_source):
    with pytest.raises(InvalidArgumentCount):
        eval_source("(list? 1 2)")


# -----------------------------
# eq? / equal?
# -----------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(eq? 1 1)", True),
        ("(eq? 1 2)", False),
        ("(eq? true true)", True),
        ("(eq? 1 true)", False),
        ("(eq? (list 1 2) (list 1 2))", False),
        ("(eq? (list 1 2) (list 1 1))", False),
        ("(eq? car car)", True),
        ("(begin (define xs (list 1)) (eq? xs xs))", True),
        ("(equal? 1 1)", True),
        ("(equal? 1 2)", False),
        ("(equal? 1 true)", False),
        ("(equal? (list 1 2) (list 1 2))", True),
        ("(equal? (list 1 2) (list 1 1))", False),
        ("(equal? (list 1 (list 2)) (list 1 (list 2)))", True),
        ("(equal? (cons 1 (list 2)) (cons 1 (list 2)))", True),
        ("(equal? (cons 1 2) (list 1 2))", False),
        ("(equal? car car)", True),
        ("(equal? car cdr)", False),
        ("(begin (define (f x) x) (equal? f f))", True),
    ]
)
def test_equality(eval_source, source, expected):
    assert eval_source(source) is expected


def test_equality_arity(eval_source):
    with pytest.raises(InvalidArgumentCount):
        eval_source("(eq? 1)")
    with pytest.raises(InvalidArgumentCount):
        eval_source("(equal? 1 2 3)")


# -----------------------------
# apply / begin
# -----------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(apply + (list 1 2 3))", 6),
        ("(apply + 1 2 (list 3 4))", 10),
        ("(apply * 5 5 (list 4 5 6))", 3000),
        ("(apply list 1 (list))", [1]),
        ("(apply apply + (list (list 1 2)))", 3),
        ("(begin (define (add2 a b) (+ a b)) (apply add2 (list 10 20)))", 30),
        ("(begin 1 2 3)", 3),
        ("(begin 1 2 (begin 1 2 (+ 1 2)))", 3),
        ("(begin (list 1 2))", [1, 2]),
        ("(begin (define x 5) (+ x 6))", 11),
        ("(begin (define (add2 y) (+ y 2)) (add2 3))", 5),
    ]
)
def test_control(eval_source, source, expected):
    assert eval_source(source) == expected


@pytest.mark.parametrize(
    "source,error",
    [
        ("(apply +)", InvalidArgumentCount),
        ("(apply)", InvalidArgumentCount),
        ("(apply 1 (list 2))", NotCallable),
        ("(apply + 1 2)", NotAList),
        ("(begin (define (f a) a) (apply f (list 1 2)))", ArityMismatch),
        ("(begin)", InvalidArgumentCount),
    ]
)
def test_control_errors(eval_source, source, error):
    with pytest.raises(error):
        eval_source(source)


def test_apply_runs_lambdas_in_callers_scope(eval_source):
    eval_source("(define (get-y) y)")
    eval_source("(define (wrap y) (apply get-y (list)))")
    assert eval_source("(wrap 3)") == 3


def test_begin_evaluates_its_operands_once(env, eval_source):
    calls = []
    env.define(Symbol("tick"), lambda _, args: calls.append(1) or len(calls))
    assert eval_source("(begin (tick) (tick))") == 2
    assert calls == [1, 1]


def test_begin_evaluates_in_the_given_env(env):
    child = env.spawn_child()
    begin(child, [[Symbol("define"), Symbol("local"), 1]])
    assert child.lookup(Symbol("local")) == 1
    with pytest.raises(UndefinedSymbol):
        env.lookup(Symbol("local"))
