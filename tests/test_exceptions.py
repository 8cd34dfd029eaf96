import pickle

from quantalogic_scopechain import IndexOutOfRange, KeyNotFound, NotInCurrentScope, ScopeOverflow, ScopeUnderflow


def test_key_not_found_survives_pickle():
    error = pickle.loads(pickle.dumps(KeyNotFound("x", "Cannot assign to undeclared name 'x'")))
    assert isinstance(error, KeyNotFound)
    assert error.key == "x"
    assert str(error) == "Cannot assign to undeclared name 'x'"


def test_not_in_current_scope_survives_pickle():
    error = pickle.loads(pickle.dumps(NotInCurrentScope("x", 3)))
    assert error.key == "x"
    assert error.depth == 3
    assert str(error) == NotInCurrentScope("x", 3).message


def test_index_out_of_range_survives_pickle():
    error = pickle.loads(pickle.dumps(IndexOutOfRange(7, 2)))
    assert error.index == 7
    assert error.depth == 2
    assert isinstance(error, IndexError)


def test_scope_overflow_survives_pickle():
    error = pickle.loads(pickle.dumps(ScopeOverflow(4)))
    assert error.max_depth == 4
    assert isinstance(error, RecursionError)


def test_scope_underflow_survives_pickle():
    error = pickle.loads(pickle.dumps(ScopeUnderflow()))
    assert str(error) == "Cannot pop the root scope"
