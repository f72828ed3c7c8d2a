#!/usr/bin/env python3

class State(object):
    """ a named node of an automaton. identity is the name and nothing else """

    def __init__(self, name : str):
        assert isinstance(name, str) and name != "", "state name must be a non-empty string"
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def __eq__(self, other) -> bool:
        if not isinstance(other, State) : return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return "State(%r)" % self._name

    def __str__(self) -> str:
        return self._name
