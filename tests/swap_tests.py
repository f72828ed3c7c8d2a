import random

from fa.dfa import DFA
from fa.utils import build_dfa, generate_random_dfa

def at_least_one_1() -> DFA:
    return build_dfa(
        ["q0", "q1"], "q0", ["q1"], ['0', '1'],
        [("q0", '0', "q0"), ("q0", '1', "q1"), ("q1", '0', "q1"), ("q1", '1', "q1")])

def same_structure(dfa1 : DFA, dfa2 : DFA) -> bool:
    return (dfa1.get_sigma() == dfa2.get_sigma()
            and list(dfa1.states) == list(dfa2.states)
            and dfa1.initial_state == dfa2.initial_state
            and dfa1.acceptance_states == dfa2.acceptance_states
            and set(dfa1.transitions) == set(dfa2.transitions))

def test_swap_relabels_transitions():
    dfa = at_least_one_1()
    swapped = dfa.swap('0', '1')
    assert set(swapped.transitions) == {("q0", '1', "q0"), ("q0", '0', "q1"), ("q1", '1', "q1"), ("q1", '0', "q1")}
    assert swapped.get_sigma() == ['0', '1']
    assert swapped.is_start("q0")
    assert swapped.is_final("q1")

def test_swapped_dfa_accepts_mirrored_language():
    # the copy accepts strings containing at least one 0
    swapped = at_least_one_1().swap('0', '1')
    assert swapped.accepts("0110")
    assert swapped.accepts("1001")
    assert swapped.accepts("0")
    assert not swapped.accepts("111")
    assert not swapped.accepts("e")

def test_swap_leaves_other_symbols_alone():
    dfa = build_dfa(
        ["s1", "s2", "s3"], "s1", ["s3"], ['a', 'b', 'c'],
        [("s1", 'a', "s2"), ("s2", 'b', "s3"), ("s3", 'c', "s1"), ("s1", 'c', "s3")])
    swapped = dfa.swap('a', 'b')
    for (sA, i, sB) in dfa.transitions:
        if i == 'a' : assert swapped.get_transition(sA, 'b') == sB
        elif i == 'b' : assert swapped.get_transition(sA, 'a') == sB
        else : assert swapped.get_transition(sA, i) == sB
    assert len(swapped.transitions) == len(dfa.transitions)
    assert dfa.accepts("ab")
    assert swapped.accepts("ba")
    assert not swapped.accepts("ab")
    assert swapped.accepts("c")

def test_swap_is_a_deep_copy():
    dfa = at_least_one_1()
    before = str(dfa)
    swapped = dfa.swap('0', '1')

    assert swapped is not dfa
    assert swapped.get_state("q0") == dfa.get_state("q0")
    assert swapped.get_state("q0") is not dfa.get_state("q0")
    assert swapped.transition_function_hashmap["q0"] is not dfa.transition_function_hashmap["q0"]

    assert swapped.add_state("new")
    swapped.add_symbol('2')
    swapped.add_transition("q0", "new", '0')
    swapped.set_final("q0")
    swapped.set_start("new")
    assert str(dfa) == before
    assert dfa.get_state("new") is None

    dfa.add_transition("q1", "q0", '1')
    assert swapped.get_transition("q1", '1') == "q1"

def test_swap_same_symbol_is_plain_copy():
    dfa = at_least_one_1()
    copy = dfa.swap('1', '1')
    assert same_structure(dfa, copy)
    assert str(copy) == str(dfa)

def test_swap_with_absent_symbols():
    dfa = at_least_one_1()
    assert same_structure(dfa, dfa.swap('x', 'y'))

    # a relabel onto a symbol outside the alphabet cannot be added to the copy
    partial = dfa.swap('0', 'x')
    assert partial.get_sigma() == ['0', '1']
    assert partial.get_transition("q0", '0') is None
    assert partial.get_transition("q0", 'x') is None
    assert partial.get_transition("q0", '1') == "q1"

def test_swap_without_start():
    dfa = build_dfa(["q0"], None, [], ['a', 'b'], [("q0", 'a', "q0")])
    swapped = dfa.swap('a', 'b')
    assert swapped.get_start() is None
    assert swapped.get_transition("q0", 'b') == "q0"
    assert not swapped.accepts("b")

def test_swap_empty_dfa():
    swapped = DFA().swap('a', 'b')
    assert swapped.get_states() == []
    assert swapped.get_sigma() == []

def test_swap_is_an_involution():
    rng = random.Random(182)
    for _ in range(25):
        dfa = generate_random_dfa(6, 2, {"a", "b", "c"}, rng=rng)
        twice = dfa.swap('a', 'c').swap('a', 'c')
        assert same_structure(dfa, twice)
        for word in ["", "a", "abc", "cab", "ccba", "bbbb"]:
            assert dfa.accepts(word) == twice.accepts(word)
            mirrored = word.translate(str.maketrans("ac", "ca"))
            assert dfa.accepts(word) == dfa.swap('a', 'c').accepts(mirrored)
