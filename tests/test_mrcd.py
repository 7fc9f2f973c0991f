import pytest

from otlearn.candidate import Candidate
from otlearn.compare import CompareConsistency, ComparePool
from otlearn.erc import WinLosePair
from otlearn.grammar import Grammar
from otlearn.loser_selector import LoserSelector, LoserSelectorFromGen
from otlearn.mrcd import Mrcd, MrcdSingle
from otlearn.system import System


@pytest.fixture
def selector(toy_system):
	return LoserSelectorFromGen(toy_system, LoserSelector(CompareConsistency()))


@pytest.fixture
def grammar(toy_system):
	return Grammar(toy_system)


def candidates(system):
	faithful_a, unfaithful_a = system.gen('a')
	faithful_c, unfaithful_c = system.gen('c')
	return faithful_a, unfaithful_a, faithful_c, unfaithful_c


class RecordingSelector(object):
	# Wraps a selector, and records the winner and how many ERCs the ranking information had at each call

	def __init__(self, selector):
		self.selector = selector
		self.sizes = []
		self.winners = []

	def select_loser(self, winner, ranking_info):
		self.sizes.append(len(ranking_info))
		self.winners.append(winner)
		return self.selector.select_loser(winner, ranking_info)


def test_single_winner_adds_one_pair(toy_system, grammar, selector):
	faithful_a, unfaithful_a, faithful_c, unfaithful_c = candidates(toy_system)
	single = MrcdSingle(unfaithful_a, grammar, selector)
	assert len(single.added_pairs) == 1
	assert single.added_pairs[0].winner is unfaithful_a
	assert single.added_pairs[0].loser is faithful_a
	assert single.added_pairs[0].prefs() == ['W', 'L']
	assert single.consistent()
	# The caller's grammar is untouched
	assert len(grammar.erc_list) == 0
	assert len(single.grammar.erc_list) == 1


def test_single_stops_at_inconsistency(toy_system, grammar, selector):
	faithful_a, unfaithful_a, faithful_c, unfaithful_c = candidates(toy_system)
	grammar.add_erc(WinLosePair(unfaithful_a, faithful_a))
	single = MrcdSingle(faithful_c, grammar, selector)
	assert len(single.added_pairs) == 1
	assert not single.consistent()
	assert not single.result().consistent
	assert grammar.consistent()


def test_empty_word_list_changes_nothing(grammar, selector):
	mrcd = Mrcd([], grammar, selector)
	assert not mrcd.any_change()
	assert mrcd.added_pairs == []
	assert mrcd.consistent()
	assert mrcd.passes == 1


def test_inconsistent_winners_stop_the_run(toy_system, grammar, selector):
	faithful_a, unfaithful_a, faithful_c, unfaithful_c = candidates(toy_system)
	mrcd = Mrcd([unfaithful_a, faithful_c], grammar, selector)
	assert not mrcd.consistent()
	assert len(mrcd.added_pairs) == 2
	assert mrcd.passes == 1
	assert mrcd.any_change()
	assert len(grammar.erc_list) == 0


def test_consistent_run_ends_with_a_quiet_pass(toy_system, grammar, selector):
	faithful_a, unfaithful_a, faithful_c, unfaithful_c = candidates(toy_system)
	mrcd = Mrcd([unfaithful_a, unfaithful_c], grammar, selector)
	assert mrcd.consistent()
	assert len(mrcd.added_pairs) == 1
	assert mrcd.passes == 2
	result = mrcd.result()
	assert result.consistent
	assert result.any_change
	assert result.added_pairs == tuple(mrcd.added_pairs)


def test_every_winner_is_optimal_afterwards(toy_system, grammar, selector):
	faithful_a, unfaithful_a, faithful_c, unfaithful_c = candidates(toy_system)
	mrcd = Mrcd([unfaithful_a, unfaithful_c], grammar, selector)
	for winner in [unfaithful_a, unfaithful_c]:
		assert selector.select_loser(winner, mrcd.grammar.erc_list) is None


def test_ranking_information_only_grows(toy_system, grammar, selector):
	faithful_a, unfaithful_a, faithful_c, unfaithful_c = candidates(toy_system)
	recorder = RecordingSelector(selector)
	Mrcd([unfaithful_a, unfaithful_c], grammar, recorder)
	assert len(recorder.sizes) > 0
	assert recorder.sizes == sorted(recorder.sizes)


def test_runs_are_deterministic(toy_system, grammar, selector):
	faithful_a, unfaithful_a, faithful_c, unfaithful_c = candidates(toy_system)
	first = Mrcd([unfaithful_a, faithful_c], grammar, selector)
	second = Mrcd([unfaithful_a, faithful_c], grammar, selector)
	assert [ (p.winner, p.loser) for p in first.added_pairs ] == [ (p.winner, p.loser) for p in second.added_pairs ]
	assert first.consistent() == second.consistent()


def test_word_list_is_copied(toy_system, grammar, selector):
	faithful_a, unfaithful_a, faithful_c, unfaithful_c = candidates(toy_system)
	words = [unfaithful_a]
	mrcd = Mrcd(words, grammar, selector)
	words.append(faithful_c)
	assert mrcd.word_list == [unfaithful_a]


def test_apply_to_adds_the_pairs(toy_system, grammar, selector):
	faithful_a, unfaithful_a, faithful_c, unfaithful_c = candidates(toy_system)
	mrcd = Mrcd.run([unfaithful_a, unfaithful_c], grammar, selector)
	assert mrcd.apply_to(grammar) is grammar
	assert len(grammar.erc_list) == len(mrcd.added_pairs)
	assert selector.select_loser(unfaithful_c, grammar.erc_list) is None


def test_pool_selector_learns_the_same_language(toy_system, grammar):
	faithful_a, unfaithful_a, faithful_c, unfaithful_c = candidates(toy_system)
	selector = LoserSelectorFromGen(toy_system, LoserSelector(ComparePool()))
	mrcd = Mrcd([faithful_a, faithful_c], grammar, selector)
	assert mrcd.consistent()
	assert [ pair.prefs() for pair in mrcd.added_pairs ] == [ ['L', 'W'] ]


def test_pair_class_is_used(toy_system, grammar, selector):
	faithful_a, unfaithful_a, faithful_c, unfaithful_c = candidates(toy_system)
	made = []

	def pair_class(winner, loser):
		pair = WinLosePair(winner, loser, label='mine')
		made.append(pair)
		return pair

	single = MrcdSingle(unfaithful_a, grammar, selector, pair_class=pair_class)
	assert single.added_pairs == made
	assert single.added_pairs[0].label == 'mine'


def test_grammar_needs_a_system():
	with pytest.raises(ValueError):
		Grammar(None)


def test_grammar_dup_shares_system(grammar, toy_system):
	faithful_a, unfaithful_a, faithful_c, unfaithful_c = candidates(toy_system)
	copy = grammar.dup()
	copy.add_erc(WinLosePair(unfaithful_a, faithful_a))
	assert copy.system is grammar.system
	assert len(grammar.erc_list) == 0
	assert len(copy.erc_list) == 1


def test_run_stops_in_the_middle_of_a_pass(toy_system, toy_constraints):
	# A third input, after the winner that makes the grammar inconsistent.  On its own, its unfaithful winner needs a pair.
	competitions = dict(toy_system.competitions)
	competitions['e'] = [ Candidate('e', 'e', [1, 0], toy_constraints, label='3.1'), Candidate('e', 'f', [0, 1], toy_constraints, label='3.2') ]
	system = System.from_competitions(toy_constraints, competitions)
	faithful_a, unfaithful_a, faithful_c, unfaithful_c = candidates(system)
	faithful_e, unfaithful_e = system.gen('e')
	grammar = Grammar(system)
	selector = LoserSelectorFromGen(system, LoserSelector(CompareConsistency()))
	assert len(MrcdSingle(unfaithful_e, grammar, selector).added_pairs) == 1

	recorder = RecordingSelector(selector)
	mrcd = Mrcd([unfaithful_a, faithful_c, unfaithful_e], grammar, recorder)
	assert not mrcd.consistent()
	assert mrcd.passes == 1
	assert [ (pair.winner, pair.loser) for pair in mrcd.added_pairs ] == [ (unfaithful_a, faithful_a), (faithful_c, unfaithful_c) ]
	assert unfaithful_e not in recorder.winners
