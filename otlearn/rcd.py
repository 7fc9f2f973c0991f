# Recursive Constraint Demotion (Tesar 1995; Tesar & Smolensky 2000).  It takes a list of ERCs and builds the stratified hierarchy that ranks every constraint as high as
# the ERCs allow (or, with a ranking bias, as high or low as the bias prefers), stratum by stratum.
#
# At each step, we divide the unranked constraints into those that must be demoted (they prefer the loser in some still-unexplained ERC), and those that are rankable
# (they only have W's and e's).  The rankable ones (or some of them, if there's a bias) become the next stratum, and the ERCs they prefer the winner for are now explained.
# Then we do the same thing again with whatever is left.
#
# If we get to a point where there are still unranked constraints but none of them are rankable, then the ERCs are inconsistent: there is no ranking that satisfies all of
# them.  That isn't an error; it's a perfectly good answer, and it's reported in the consistent flag.
import logging

from .hierarchy import Hierarchy
from .errors import ErcError, RankingBiasError

logger = logging.getLogger(__name__)


# A constraint is rankable with respect to a set of ERCs if it doesn't prefer the loser in any of them
def rankable(con, ercs):
	for erc in ercs:
		if erc.l(con):
			return False
	return True


# An ERC is explained by a set of constraints if at least one of them prefers the winner
def explained(erc, constraints):
	for con in constraints:
		if erc.w(con):
			return True
	return False


# Put stratum at the bottom of the ranked hierarchy, and take its constraints out of the unranked list.  Returns new lists; the ones passed in are left alone.
def rank_next_stratum(stratum, ranked, unranked):
	new_ranked = Hierarchy(ranked)
	new_ranked.append(list(stratum))
	new_unranked = [ con for con in unranked if con not in stratum ]
	return new_ranked, new_unranked


# Move the ERCs explained by stratum from the unexplained list to the explained list (as a new "ERC stratum").  Again, new lists are returned.
def move_newly_explained_ercs(stratum, ex_ercs, unex_ercs):
	newly_explained = []
	still_unexplained = []
	for erc in unex_ercs:
		if explained(erc, stratum):
			newly_explained.append(erc)
		else:
			still_unexplained.append(erc)
	return ex_ercs + [newly_explained], still_unexplained


# Plain RCD: rank everything as high as possible.  This is the default bias; the others are in ranking_bias.py.
class RankingBiasAllHigh(object):

	def choose_cons_to_rank(self, rankable_cons, rcd):
		return rankable_cons


class Rcd(object):

	# ercs can be an ErcList or any sequence of ERCs.  The constraint list comes from the ERCs unless it is given; it has to be given for a plain empty list of ERCs.
	# The bias decides which of the rankable constraints go into each stratum; the default ranks all of them (everything as high as possible).
	def __init__(self, ercs, constraints=None, bias=None, label='RCD'):
		# Copy the ERCs, so it doesn't matter if the list passed in changes later
		self.ercs = list(ercs)
		self.label = label
		if bias is None:
			bias = RankingBiasAllHigh()
		self.bias = bias

		if constraints is None:
			constraints = getattr(ercs, 'constraint_list', None)
		if constraints is None or (len(constraints) == 0 and len(self.ercs) > 0):
			if len(self.ercs) == 0:
				raise ErcError('Rcd needs a constraint list when there are no ERCs')
			constraints = self.ercs[0].constraint_list
		self.constraints = list(constraints)

		for erc in self.ercs:
			if len(erc.constraint_list) != len(self.constraints):
				raise ErcError('ERC %s has %s constraints, but the constraint list has %s' % (erc.label, len(erc.constraint_list), len(self.constraints)))

		self.run_rcd()

	@classmethod
	def run(cls, ercs, bias=None, constraints=None):
		return cls(ercs, constraints=constraints, bias=bias)

	# The full hierarchy.  If the ERCs are inconsistent, the constraints RCD couldn't rank go in an extra stratum at the bottom.
	@property
	def hierarchy(self):
		hierarchy = self.ranked.dup()
		if len(self.unranked) > 0:
			hierarchy.append(list(self.unranked))
		return hierarchy

	@property
	def constraint_list(self):
		return self.constraints

	def run_rcd(self):
		# Initially, all of the ERCs are unexplained and all of the constraints are unranked
		self.ranked = Hierarchy()
		self.unranked = list(self.constraints)
		self.ex_ercs = []
		self.unex_ercs = list(self.ercs)

		self.rank()

		# If there's anything left that couldn't be ranked, the ERCs are inconsistent
		self.consistent = len(self.unranked) == 0
		if self.consistent:
			logger.debug('%s: consistent, hierarchy %s', self.label, self.ranked)
		else:
			logger.debug('%s: inconsistent; could not rank %s (%s ERCs unexplained)', self.label, ', '.join([ str(con) for con in self.unranked ]), len(self.unex_ercs))

	def rank(self):
		# Install one stratum at a time, until there's nothing left that can be ranked.  Each pass ranks at least one constraint, so this ends.
		while True:
			# A constraint that prefers the loser in any unexplained ERC isn't rankable yet
			loser_preferring = set()
			for erc in self.unex_ercs:
				loser_preferring.update(erc.l_cons)
			rankable_cons = []
			for con in self.unranked:
				if con not in loser_preferring:
					rankable_cons.append(con)
				else:
					logger.debug('%s: demoting constraint %s', self.label, con)

			# Either everything is ranked, or nothing more can be
			if len(rankable_cons) == 0:
				break

			stratum = self.choose_stratum(rankable_cons)
			self.ranked, self.unranked = rank_next_stratum(stratum, self.ranked, self.unranked)
			self.ex_ercs, self.unex_ercs = move_newly_explained_ercs(stratum, self.ex_ercs, self.unex_ercs)
			logger.debug('%s: stratum %s = [%s] explains %s ERCs', self.label, len(self.ranked), ' '.join([ str(con) for con in stratum ]), len(self.ex_ercs[-1]))

	def choose_stratum(self, rankable_cons):
		stratum = list(self.bias.choose_cons_to_rank(rankable_cons, self))
		if len(stratum) == 0:
			raise RankingBiasError('%s chose an empty stratum from %s' % (type(self.bias).__name__, ', '.join([ str(con) for con in rankable_cons ])))
		for con in stratum:
			if con not in rankable_cons:
				raise RankingBiasError('%s chose %s, which is not rankable' % (type(self.bias).__name__, con))
		# Keep the constraints of a stratum in constraint-list order
		return [ con for con in rankable_cons if con in stratum ]
