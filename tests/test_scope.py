import pytest
from quantalogic_scopechain import Scope, ScopeChainMap, ScopeChainSet


def test_scope_pushes_and_pops():
    chain = ScopeChainMap()
    with Scope(chain):
        assert chain.depth() == 2
        chain.declare("local", 1)
    assert chain.depth() == 1
    assert not chain.has("local")


def test_scope_pops_when_body_raises():
    # The error propagates and the scope is still closed
    chain = ScopeChainMap()
    with pytest.raises(ValueError):
        with Scope(chain):
            chain.declare("local", 1)
            raise ValueError("boom")
    assert chain.depth() == 1
    assert not chain.has("local")


def test_nested_scopes():
    chain = ScopeChainSet()
    with Scope(chain):
        with Scope(chain, {"deep"}):
            assert chain.depth() == 3
            assert chain.has("deep")
        assert chain.depth() == 2
    assert chain.depth() == 1


def test_interpreter_style_environment():
    # Function call frames over a global environment
    env = ScopeChainMap({"y": 2})
    env.declare("x", 0)
    with env.scope({"n": 5}):
        env.declare("x", 10)
        env.set("y", env.get("y") + env.get("n"))
        assert env.get("x") == 10
    assert env.get("x") == 0
    assert env.get("y") == 7


def test_scope_keeps_body_error_after_reset():
    # A body that already unwound to the root must not turn its error into an underflow
    chain = ScopeChainMap({"x": 0})
    with pytest.raises(ValueError, match="body"):
        with chain.scope():
            chain.reset()
            raise ValueError("body")
    assert chain.depth() == 1


def test_scope_tolerates_body_popping_its_own_scope():
    chain = ScopeChainSet()
    chain.push_scope()
    with Scope(chain):
        chain.pop_scope()
        assert chain.depth() == 2
    # The outer scope pushed before the block is left alone
    assert chain.depth() == 2


def test_scope_unwinds_scopes_left_open_by_body():
    chain = ScopeChainMap()
    with Scope(chain):
        chain.push_scope()
        chain.push_scope()
    assert chain.depth() == 1
