# Comparers decide how a competitor fares against the winner, given the current ranking information (a list of ERCs).
# They all have the method more_harmonic(first, second, ranking_info), with first = the winner and second = the competitor, and return one of:
#   FIRST            - the winner is more harmonic, so the competitor is NOT an informative loser
#   SECOND           - the competitor is (or could be) more harmonic, so it IS an informative loser
#   TIE              - the two tie, despite having different violations, so the competitor IS an informative loser
#   IDENT_VIOLATIONS - the two have identical violation profiles, so the competitor can't be informative
#
# ComparePool and CompareCtie build a hierarchy from the ERCs (using a ranker, which carries the ranking bias) and compare on it.
# CompareConsistency asks whether there is any ranking consistent with the ERCs where the competitor wins.
import numpy

from .erc import WinLosePair
from .erc_list import ErcList
from .errors import OTLearnError
from .most_harmonic import FIRST, SECOND, TIE, CONFLICT, compare_on_stratum
from .ranker import Ranker

IDENT_VIOLATIONS = 'IDENT_VIOLATIONS'


class CompareStratumPool(object):
	# Pool ("pooling the marks") treats all of the constraints of a stratum as one big constraint: sum up the violations of each candidate on the stratum,
	# and whichever has fewer is more harmonic.

	def more_harmonic(self, first, second, stratum):
		first_total = numpy.sum(first.viols_on(stratum))
		second_total = numpy.sum(second.viols_on(stratum))
		if first_total < second_total:
			return FIRST
		elif second_total < first_total:
			return SECOND
		return TIE


class CompareStratumCtie(object):
	# Ctie ("conflicts tie"): if some constraint of the stratum prefers one candidate and another constraint prefers the other, that's a CONFLICT.
	# Otherwise whichever candidate is preferred wins, and if nothing prefers either it's a TIE (go on to the next stratum).

	def more_harmonic(self, first, second, stratum):
		return compare_on_stratum(first, second, stratum)


class ComparePool(object):

	def __init__(self, ranker=None, stratum_comparer=None):
		self.ranker = ranker if ranker is not None else Ranker()
		self.stratum_comparer = stratum_comparer if stratum_comparer is not None else CompareStratumPool()

	def more_harmonic(self, first, second, ranking_info):
		if first.ident_viols(second):
			return IDENT_VIOLATIONS
		hierarchy = self.ranker.get_hierarchy(ranking_info, constraints=first.constraint_list)
		return self.compare_on_hierarchy(first, second, hierarchy)

	def compare_on_hierarchy(self, first, second, hierarchy):
		for stratum in hierarchy:
			result = self.stratum_comparer.more_harmonic(first, second, stratum)
			# If they have the same number of violations on this stratum, go on to the next one
			if result != TIE:
				return result
		# Tying on all of the strata means tying on the hierarchy
		return TIE


class CompareCtie(object):

	def __init__(self, ranker=None, stratum_comparer=None):
		self.ranker = ranker if ranker is not None else Ranker()
		self.stratum_comparer = stratum_comparer if stratum_comparer is not None else CompareStratumCtie()

	def more_harmonic(self, first, second, ranking_info):
		if first.ident_viols(second):
			return IDENT_VIOLATIONS
		hierarchy = self.ranker.get_hierarchy(ranking_info, constraints=first.constraint_list)
		result = self.compare_on_hierarchy(first, second, hierarchy)
		# Conflicts tie
		if result == CONFLICT:
			return TIE
		return result

	def compare_on_hierarchy(self, first, second, hierarchy):
		for stratum in hierarchy:
			result = self.stratum_comparer.more_harmonic(first, second, stratum)
			if result != TIE:
				return result
		# The hierarchy has every constraint in it, so candidates with different violations have to differ on some stratum
		raise OTLearnError('Candidates %s and %s tie on every stratum of %s despite different violations' % (first.output, second.output, hierarchy))


class CompareConsistency(object):
	# NOTE: this is an asymmetric comparison.  It never returns TIE: either the competitor could beat the winner under some ranking (SECOND), or it can't (FIRST).

	def __init__(self, erc_list_class=ErcList, pair_class=WinLosePair):
		self.erc_list_class = erc_list_class
		self.pair_class = pair_class

	def more_harmonic(self, first, second, ranking_info):
		# A candidate with identical violations can't be more harmonic, but the trivial ERC would be consistent with anything
		if first.ident_viols(second):
			return IDENT_VIOLATIONS

		# Copy the ranking information into our own list, and add the ERC with the competitor as the winner
		ercs = self.erc_list_class(constraint_list=first.constraint_list)
		ercs.add_all(ranking_info)
		ercs.add(self.pair_class(second, first))
		if ercs.consistent():
			return SECOND
		return FIRST
