# Ranking biases for RCD.  At each step, RCD hands the bias the list of rankable constraints (and the Rcd object itself, so it can look at what is still unranked
# and unexplained), and the bias returns the constraints to actually put into the next stratum.
#
# RankingBiasAllHigh (plain RCD: rank everything as high as possible) is the default, and lives in rcd.py; it is imported here along with the others.
#
# RankingBiasSomeLow ranks some kind of constraint (e.g., faithfulness) as low as possible, and everything else as high as possible.  This is related to Biased
# Constraint Demotion (BCD, Prince & Tesar), but it does not search for minimal gangs of low constraints.  If no single low constraint frees up any high
# constraints, then all of the active low constraints are ranked together.
#
# Whenever there's a tie, the constraint that comes first in the rankable list wins.  That order comes from the constraint list, and learning results are only
# reproducible if it is kept that way.
import logging

from .rcd import RankingBiasAllHigh, rankable, move_newly_explained_ercs, rank_next_stratum

logger = logging.getLogger(__name__)


class RankingBiasSomeLow(object):

	# low_kind says which constraints to rank low.  It can be a function (constraint -> True/False) or a collection of constraints.
	def __init__(self, low_kind):
		if callable(low_kind):
			self.low_kind = low_kind
		else:
			low_set = frozenset(low_kind)
			self.low_kind = lambda con: con in low_set

	def low_constraint_type(self, con):
		return bool(self.low_kind(con))

	# A constraint is active if it prefers the winner in at least one of the (unexplained) ERCs
	def active(self, con, ercs):
		for erc in ercs:
			if erc.w(con):
				return True
		return False

	def choose_cons_to_rank(self, rankable_cons, rcd):
		low = [ con for con in rankable_cons if self.low_constraint_type(con) ]
		high = [ con for con in rankable_cons if not self.low_constraint_type(con) ]

		# If any of the high kind are rankable, rank all of them (and none of the low kind)
		if len(high) > 0:
			return high

		# If none of the low kind are active, they can't free anything up, so we might as well rank all of them
		low_active = [ con for con in low if self.active(con, rcd.unex_ercs) ]
		if len(low_active) == 0:
			return low

		return self.max_freed_high(low_active, rcd.unranked, rcd.unex_ercs)

	# Returns a list with the active low constraint that frees up the most high constraints.  If none of them frees up anything, returns all of them.
	def max_freed_high(self, low_active, unranked, unex_ercs):
		best_con = None
		best_count = 0
		for con in low_active:
			count = self.count_freed_high(con, unranked, unex_ercs)
			logger.debug('Ranking %s next would free up %s high constraints', con, count)
			# Strictly greater, so that the first one listed wins a tie
			if count > best_count:
				best_con = con
				best_count = count

		if best_con is None:
			return low_active
		return [best_con]

	def count_freed_high(self, target_con, unranked, unex_ercs):
		# Pretend target_con is ranked next, and see how many high constraints become rankable.  Then pretend those are ranked, and see how many more become rankable,
		# and so on until the cascade of high constraints stops.  We use our own lists, so the state of the actual RCD run isn't disturbed.
		stratum = [target_con]
		ranked = []
		ex_ercs = []
		total_freed_high = 0
		while len(stratum) > 0:
			ranked, unranked = rank_next_stratum(stratum, ranked, unranked)
			ex_ercs, unex_ercs = move_newly_explained_ercs(stratum, ex_ercs, unex_ercs)
			stratum = [ con for con in unranked if rankable(con, unex_ercs) and not self.low_constraint_type(con) ]
			total_freed_high += len(stratum)
		return total_freed_high


def faith_low():
	# Markedness high, faithfulness low
	return RankingBiasSomeLow(lambda con: con.faithfulness)


def mark_low():
	# Faithfulness high, markedness low
	return RankingBiasSomeLow(lambda con: con.markedness)
