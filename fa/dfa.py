#!/usr/bin/env python3
from __future__ import annotations

from fa.finite_automata import Finite_Automata
from typing import Dict
from z3 import Int, Optimize, Sum, sat

# the literal token standing in for the empty word on the accepts() input
EMPTY_STRING = "e"

class DFA(Finite_Automata):
    """
    a deterministic finite automata. every (state, char) pair has at most one
    destination, and a missing pair means the run dies there.
    """

    def accepts(self, word : str) -> bool:
        """
        runs the automata over word from the initial state.

        the sentinel "e" and the real empty string both mean the empty word and
        are decided by whether the initial state accepts, even when "e" is itself
        a symbol of the alphabet.
        """
        if self.initial_state is None : return False
        if word == EMPTY_STRING or word == "" : return self.initial_state in self.acceptance_states

        current_state = self.initial_state
        for char in word:
            if char not in self.alphabet : return False
            next_state = self.transition_function_hashmap[current_state].get(char)
            if next_state is None : return False
            current_state = next_state

        return current_state in self.acceptance_states

    def swap(self, symb1 : str, symb2 : str) -> DFA:
        """
        returns an independent copy of this DFA where every transition on symb1
        is relabeled symb2 and vice versa. nothing is shared with self.
        """
        dfa = DFA()

        for char in self.alphabet : dfa.add_symbol(char)
        for name in self.states : dfa.add_state(name)
        if self.initial_state is not None : dfa.set_start(self.initial_state)
        for name in self.acceptance_states : dfa.set_final(name)

        for (sA, i, sB) in self.transitions:
            if i == symb1 : i = symb2
            elif i == symb2 : i = symb1
            # a relabel onto a symbol outside the alphabet is dropped by add_transition
            dfa.add_transition(sA, sB, i)

        return dfa

    def minimal_parikh_image(self) -> Dict[str, int]:
        """
        a parikh image is simply a vector representing the number of characters in any given accepted string.
        the minimal one counts the characters of a shortest accepted word, found here as the
        cheapest integer flow from the initial state to a single accepting state with z3.

        returns {} when nothing is accepted
        """
        usable_states = self.get_wellconnected_states()
        if self.initial_state not in usable_states : return {}

        # if init state is an accepting state, our parikh image is empty
        if self.initial_state in self.acceptance_states : return {char: 0 for char in self.alphabet}

        z3_transitions = [t for t in self.transitions if t[0] in usable_states and t[2] in usable_states]

        incoming_transitions = {state: [] for state in usable_states}
        outgoing_transitions = {state: [] for state in usable_states}
        tosolve = {}
        for count, (sA, i, sB) in enumerate(z3_transitions):
            tosolve[count] = Int("t" + str(count))
            outgoing_transitions[sA].append(tosolve[count])
            incoming_transitions[sB].append(tosolve[count])

        # exactly one accepting state absorbs the single unit of flow
        sinks = {state: Int("sink_" + state) for state in usable_states if state in self.acceptance_states}

        solver = Optimize()
        for t in tosolve.values() : solver.add(t >= 0) # transitions must not have a negative value
        for s in sinks.values() : solver.add(s >= 0, s <= 1)
        solver.add(Sum(list(sinks.values())) == 1)

        for state in usable_states:
            source = 1 if state == self.initial_state else 0
            sink = sinks.get(state, 0)
            # incoming + source = outgoing + sink
            solver.add(Sum(incoming_transitions[state] + [source]) == Sum(outgoing_transitions[state] + [sink]))

        solver.minimize(Sum(list(tosolve.values())))

        if solver.check() != sat : return {}

        m = solver.model()
        char_total = {char: 0 for char in self.alphabet}
        for count, (sA, i, sB) in enumerate(z3_transitions):
            char_total[i] += m.eval(tosolve[count], model_completion=True).as_long()

        return char_total
