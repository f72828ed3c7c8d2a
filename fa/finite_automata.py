#!/usr/bin/env python3

from pydot import Dot, Edge, Node
from collections import deque
from typing import Dict, List, Optional, Set, Tuple
import heapq
import re

from fa.state import State

"""
PARENT CLASS FOR DFA

follows from the classical definition of a finite automata
which is a 5-tuple, (Q, Sigma, T, q0, F)
where T : Q x Sigma -> Q is a partial function.

the automata starts out empty and is built up one call at a time. mutators
never raise on a bad name or symbol, they return False and leave the
automata untouched.
"""
class Finite_Automata(object):
    def __init__(self):
        self.alphabet : List[str] = []
        self.states : Dict[str, State] = {} # insertion ordered, keyed by state name
        self.initial_state : Optional[str] = None
        self.acceptance_states : List[str] = []

        # T : State -> (Alphabet -> State), stored by name so copies never alias
        self.transition_function_hashmap : Dict[str, Dict[str, str]] = {}

    def add_symbol(self, char : str) -> None:
        """ adds a character to the alphabet, duplicates and anything but a single character are ignored """
        if not isinstance(char, str) or len(char) != 1 : return
        if char not in self.alphabet : self.alphabet.append(char)

    def add_state(self, name : str) -> bool:
        if not isinstance(name, str) or name == "" : return False
        if name in self.states : return False

        self.states[name] = State(name)
        self.transition_function_hashmap[name] = {}
        return True

    def set_start(self, name : str) -> bool:
        if name not in self.states : return False
        self.initial_state = name
        return True

    def set_final(self, name : str) -> bool:
        if name not in self.states : return False
        if name not in self.acceptance_states : self.acceptance_states.append(name)
        return True

    def add_transition(self, from_state : str, to_state : str, char : str) -> bool:
        """ records T(from_state, char) = to_state, overwriting any previous destination """
        if char not in self.alphabet : return False
        if from_state not in self.states or to_state not in self.states : return False

        self.transition_function_hashmap[from_state][char] = to_state
        return True

    def get_transition(self, state : str, char : str) -> Optional[str]:
        if state not in self.transition_function_hashmap : return None
        return self.transition_function_hashmap[state].get(char)

    @property
    def transitions(self) -> List[Tuple[str, str, str]]:
        """ the transition function as a list of (sA, i, sB) triples """
        return [(sA, i, sB)
                for sA, row in self.transition_function_hashmap.items()
                for i, sB in row.items()]

    def get_sigma(self) -> List[str]:
        return list(self.alphabet)

    def get_state(self, name : str) -> Optional[State]:
        return self.states.get(name)

    def get_states(self) -> List[State]:
        return list(self.states.values())

    def get_start(self) -> Optional[State]:
        if self.initial_state is None : return None
        return self.states[self.initial_state]

    def get_final_states(self) -> List[State]:
        return [self.states[name] for name in self.acceptance_states]

    def is_start(self, name : str) -> bool:
        return self.initial_state is not None and self.initial_state == name

    def is_final(self, name : str) -> bool:
        return name in self.acceptance_states

    def reachable_from(self, state : str) -> Set[str]:
        """ returns a set of all reachable states from the selected state """
        if state not in self.states : return set()
        queue = deque([state])
        visited = {state}
        while queue:
            current_state = queue.popleft()
            for next_state in self.transition_function_hashmap[current_state].values():
                if next_state not in visited:
                    visited.add(next_state)
                    queue.append(next_state)

        return visited

    def reachable_to(self, state : str) -> Set[str]:
        """ returns a set of all states that eventually reach the selected state """
        if state not in self.states : return set()
        reverse = {name: set() for name in self.states}
        for (sA, i, sB) in self.transitions : reverse[sB].add(sA)

        queue = deque([state])
        visited = {state}
        while queue:
            current_state = queue.popleft()
            for prev_state in reverse[current_state]:
                if prev_state not in visited:
                    visited.add(prev_state)
                    queue.append(prev_state)

        return visited

    def get_wellconnected_states(self) -> Set[str]:
        """
        returns the states reachable from the initial state intersected with
        the states that lead to an accepting state.

        in other words, returns the states that are relevant to the language of the automata
        """
        if self.initial_state is None : return set()
        coreachable = set()
        for state in self.acceptance_states : coreachable |= self.reachable_to(state)
        return self.reachable_from(self.initial_state) & coreachable

    def shortest_distance(self, init_state : str, final_state : str) -> Tuple[float, str]:
        """
        djikstra search, returning the shortest distance from the first state to the second state,
        along with the associated word. unreachable pairs give (inf, "")
        """
        if init_state not in self.states or final_state not in self.states : return float('inf'), ""

        distance = {state: float('inf') for state in self.states}
        word = {state: "" for state in self.states}

        queue = []
        heapq.heappush(queue, (0, init_state))
        distance[init_state] = 0

        while queue:
            current_distance, current_state = heapq.heappop(queue)

            if current_distance > distance[current_state]:
                continue

            for char, state in self.transition_function_hashmap[current_state].items():
                new_distance = distance[current_state] + 1

                if new_distance < distance[state]:
                    distance[state] = new_distance
                    word[state] = word[current_state] + char
                    heapq.heappush(queue, (new_distance, state))

        return distance[final_state], word[final_state]

    def shortest_accepted_word(self) -> Optional[str]:
        """ shortest word taking the initial state into an accepting state, None if there is none """
        if self.initial_state is None : return None

        best = None
        for state in self.acceptance_states:
            dist, word = self.shortest_distance(self.initial_state, state)
            if dist == float('inf') : continue
            if best is None or dist < best[0] : best = (dist, word)

        return None if best is None else best[1]

    def to_dot(self) -> str:
        return self._build_graph().to_string()

    def show_diagram(self, path : str = "automata.png") -> None:
        """ creates a diagram of this finite automata, requires graphviz to be installed """
        self._build_graph().write_png(path)

    def _build_graph(self) -> Dot:
        graph = Dot(graph_type='digraph', rankdir='LR')

        for state in self.states:
            shape = 'doublecircle' if state in self.acceptance_states else 'circle'
            if state == self.initial_state:
                graph.add_node(Node(_dot_id(state), shape=shape, color='green'))
            else:
                graph.add_node(Node(_dot_id(state), shape=shape))

        for (sA, i, sB) in self.transitions:
            graph.add_edge(Edge(_dot_id(sA), _dot_id(sB), label=_dot_id(i)))

        return graph

    def __str__(self) -> str:
        states = {name: _show(name) for name in self.states}
        alphabet = [_show(char) for char in self.alphabet]
        width = max([len(shown) for shown in states.values()] + [len(shown) for shown in alphabet] + [1])
        lines = []

        lines.append("Q = { " + "".join(shown + " " for shown in states.values()) + "}")
        lines.append("Sigma = { " + "".join(shown + " " for shown in alphabet) + "}")
        lines.append("delta =")

        header = " " * width + "".join(" " + shown.ljust(width) for shown in alphabet)
        lines.append(header.rstrip())
        for name, row in self.transition_function_hashmap.items():
            cells = "".join(" " + states.get(row.get(char), "").ljust(width) for char in self.alphabet)
            lines.append((states[name].ljust(width) + cells).rstrip())

        lines.append("q0 = " + ("" if self.initial_state is None else states[self.initial_state]))
        lines.append("F = { " + "".join(states[name] + " " for name in self.acceptance_states) + "}")

        return "\n".join(lines)

def _dot_id(name : str) -> str:
    """ quotes a name so graphviz never reads it as a keyword or a node:port """
    return '"%s"' % name.replace('\\', '\\\\').replace('"', '\\"')

_PLAIN = re.compile(r'[^\s"{}]+')

def _show(name : str) -> str:
    """ names with whitespace, quotes or braces are printed double quoted and escaped """
    if _PLAIN.fullmatch(name) : return name
    return _dot_id(name)
