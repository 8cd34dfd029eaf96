# quantalogic_scopechain/__init__.py
from .exceptions import (
    IndexOutOfRange,
    KeyNotFound,
    NotInCurrentScope,
    ScopeChainError,
    ScopeOverflow,
    ScopeUnderflow,
)
from .scope_stack import ScopeStack, visible_keys
from .chain_map import ScopeChainMap
from .chain_set import ScopeChainSet
from .scope import Scope

__all__ = [
    'ScopeChainMap',
    'ScopeChainSet',
    'ScopeStack',
    'Scope',
    'visible_keys',
    'ScopeChainError',
    'ScopeUnderflow',
    'ScopeOverflow',
    'KeyNotFound',
    'NotInCurrentScope',
    'IndexOutOfRange',
]
