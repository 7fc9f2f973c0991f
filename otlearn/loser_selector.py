# Loser selection: given a winner and the current ranking information, find a competitor that would make an informative winner-loser pair, or None if there
# isn't one (the winner is already optimal, as far as the ranking information can tell).
#
# The competition is always searched in order, and the first informative loser found is the one returned.  Learning runs are only reproducible if
# that order is kept, so don't sort or shuffle the competition.
import logging

from .compare import SECOND, TIE
from .most_harmonic import MostHarmonic
from .ranker import Ranker

logger = logging.getLogger(__name__)


class LoserSelector(object):
	# Selects a loser from an explicitly given competition, using a comparer (ComparePool, CompareCtie, or CompareConsistency).

	def __init__(self, comparer):
		self.comparer = comparer

	def select_loser(self, winner, competition, ranking_info):
		for candidate in competition:
			# The winner can't be its own loser
			if candidate is winner or candidate == winner:
				continue
			result = self.comparer.more_harmonic(winner, candidate, ranking_info)
			# A competitor that is (or could be) more harmonic, or that ties, is informative.
			# A competitor that is less harmonic, or that has identical violations, is not.
			if result == SECOND or result == TIE:
				logger.debug('Selected loser [%s] for winner /%s/ -> [%s] (%s)', candidate.output, winner.input, winner.output, result)
				return candidate
		return None


class LoserSelectorFromGen(object):
	# Adapts a LoserSelector to the case where the competition is whatever Gen produces for the winner's input.
	# This is the kind of selector MrcdSingle and Mrcd use: select_loser(winner, ranking_info).

	def __init__(self, system, selector):
		self.system = system
		self.selector = selector

	def select_loser(self, winner, ranking_info):
		competition = self.system.gen(winner.input)
		return self.selector.select_loser(winner, competition, ranking_info)


class LoserSelectorByRanking(object):
	# Classic error-driven loser selection: build a hierarchy from the ERCs, find the optimal candidates on it, and pick an optimum that the winner doesn't
	# already beat.  The bias of the ranker determines which hierarchy is used.

	def __init__(self, system, ranker=None, optimizer_class=MostHarmonic):
		self.system = system
		self.ranker = ranker if ranker is not None else Ranker()
		self.optimizer_class = optimizer_class

	def select_loser(self, winner, ranking_info):
		competition = self.system.gen(winner.input)
		hierarchy = self.ranker.get_hierarchy(ranking_info, constraints=winner.constraint_list)
		optima = self.optimizer_class(competition, hierarchy)
		for candidate in optima:
			# Don't select a loser with identical violations, or one that is already less harmonic than the winner
			if candidate.ident_viols(winner):
				continue
			if optima.more_harmonic(winner, candidate, hierarchy):
				continue
			logger.debug('Selected optimal loser [%s] for winner /%s/ -> [%s]', candidate.output, winner.input, winner.output)
			return candidate
		return None
