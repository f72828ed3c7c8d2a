#!/usr/bin/env python3

from fa.dfa import DFA
from typing import Iterable, List, Set, Tuple
import random

def build_dfa(
    states : Iterable[str],
    initial_state : str,
    acceptance_states : Iterable[str],
    alphabet : Iterable[str],
    transitions : List[Tuple[str, str, str]] = []) -> DFA:
    """ builds a DFA from (Q, Sigma, T, q0, F), with T given as (sA, i, sB) triples """
    dfa = DFA()
    for char in alphabet : dfa.add_symbol(char)
    for state in states : assert dfa.add_state(state), "build_dfa: duplicate or invalid state " + repr(state)
    if initial_state is not None : assert dfa.set_start(initial_state), "build_dfa: initial state not in states"
    for state in acceptance_states : assert dfa.set_final(state), "build_dfa: acceptance state not in states"
    for (sA, i, sB) in transitions:
        assert dfa.add_transition(sA, sB, i), "build_dfa: bad transition " + repr((sA, i, sB))

    return dfa

def generate_random_dfa(
    num_states : int = 10, # Number of states
    num_acceptance_states : int = 1, # Number of acceptance states
    custom_alphabet : Set[str] = {"a","b","c"},
    max_transitions : int = None, # Max number of transitions generated
    rng : random.Random = None) -> DFA:
    """ Generates a random DFA, later transitions on the same (state, char) overwrite earlier ones """
    assert 0 < num_acceptance_states < num_states, "Number of acceptance states must be between 1 and the number of states minus 1"
    if rng is None : rng = random.Random()

    states = ['q' + str(i) for i in range(num_states)]
    alphabet = sorted(custom_alphabet)
    initial_state = rng.choice(states)

    # Select a random subset of Q as the acceptance states F, ensuring initial_state is not included
    remaining_states = [state for state in states if state != initial_state]
    acceptance_states = rng.sample(remaining_states, num_acceptance_states)

    if max_transitions is None:
        max_transitions = len(states) * len(alphabet)

    transitions = []
    for _ in range(max_transitions):
        transitions.append((rng.choice(states), rng.choice(alphabet), rng.choice(states)))

    return build_dfa(states, initial_state, acceptance_states, alphabet, transitions)
