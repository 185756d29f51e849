import pytest

from calcium import SymbolTable


@pytest.fixture
def env():
    "A fresh symbol table with a fixed random seed."
    return SymbolTable(seed=0)
