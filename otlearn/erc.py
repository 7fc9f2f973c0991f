# Elementary Ranking Conditions (ERCs), in the "comparative tableau" format of Prince (2000, 2002).
# For each constraint, an ERC says whether it prefers the winner (W), prefers the loser (L), or has no preference (e).
# We store the W constraints and the L constraints as sets; everything else is e.
import numpy

from .errors import ErcError

W = 'W'
L = 'L'
E = 'e'


class Erc(object):

	def __init__(self, constraints, w_cons=(), l_cons=(), label='NoLabel'):
		self._constraints = tuple(constraints)
		self._w_cons = frozenset(w_cons)
		self._l_cons = frozenset(l_cons)
		self._label = label

		if len(self._w_cons & self._l_cons) > 0:
			raise ErcError('Constraints cannot prefer both winner and loser: %s' % ', '.join([ str(con) for con in self._w_cons & self._l_cons ]))
		unknown = (self._w_cons | self._l_cons) - frozenset(self._constraints)
		if len(unknown) > 0:
			raise ErcError('ERC refers to constraints that are not in its constraint list: %s' % ', '.join([ str(con) for con in unknown ]))

	@property
	def constraint_list(self):
		return self._constraints

	# Labels are for display only; == ignores them
	@property
	def label(self):
		return self._label

	@property
	def w_cons(self):
		return self._w_cons

	@property
	def l_cons(self):
		return self._l_cons

	def w(self, con):
		return con in self._w_cons

	def l(self, con):
		return con in self._l_cons

	def e(self, con):
		return con not in self._w_cons and con not in self._l_cons

	# No L's: satisfied by any ranking
	@property
	def triv_valid(self):
		return len(self._l_cons) == 0

	# L's but no W's: satisfied by no ranking
	@property
	def triv_invalid(self):
		return len(self._w_cons) == 0 and len(self._l_cons) > 0

	def pref(self, con):
		if self.w(con):
			return W
		elif self.l(con):
			return L
		return E

	def prefs(self):
		return [ self.pref(con) for con in self._constraints ]

	def prefs_to_s(self):
		return ' '.join([ '%s:%s' % (con, self.pref(con)) for con in self._constraints ])

	# Split an ERC with several L's into one ERC per L, each keeping all of the W's
	def conjunctive_expansion(self):
		if len(self._l_cons) < 2:
			return [self]
		expansion = []
		for con in self._constraints:
			if self.l(con):
				expansion.append(Erc(self._constraints, self._w_cons, [con], self.label))
		return expansion

	# Labels are ignored when comparing ERCs: only the preferences matter
	def __eq__(self, other):
		if not isinstance(other, Erc):
			return NotImplemented
		return self._w_cons == other.w_cons and self._l_cons == other.l_cons

	def __ne__(self, other):
		result = self.__eq__(other)
		if result is NotImplemented:
			return result
		return not result

	def __hash__(self):
		return hash((self._w_cons, self._l_cons))

	def __repr__(self):
		return 'Erc(%r, [%s])' % (self.label, ' '.join(self.prefs()))

	def __str__(self):
		return '%s %s' % (self.label, self.prefs_to_s())


def erc_from_labels(constraints, labels, label='NoLabel'):
	# Build an ERC from a vector of W/L/e labels, one per constraint. A string like 'W L e' also works.
	if isinstance(labels, str):
		labels = labels.split()
	labels = list(labels)
	if len(labels) != len(constraints):
		raise ErcError('Got %s preference labels for %s constraints' % (len(labels), len(constraints)))
	w_cons = []
	l_cons = []
	for c in range(0, len(constraints)):
		if labels[c] == W:
			w_cons.append(constraints[c])
		elif labels[c] == L:
			l_cons.append(constraints[c])
		elif labels[c] not in (E, 'E', ''):
			raise ErcError("Unknown preference label '%s' for constraint %s" % (labels[c], constraints[c]))
	return Erc(constraints, w_cons, l_cons, label)


class WinLosePair(Erc):
	# An ERC built by comparing a winner and a loser candidate for the same input.
	# A constraint prefers the winner if the loser has more violations of it, and prefers the loser if the winner has more.

	def __init__(self, winner, loser, label=None):
		if winner.input != loser.input:
			raise ErcError('The winner (%s) and loser (%s) do not have the same input' % (winner.input, loser.input))
		if tuple(winner.constraint_list) != tuple(loser.constraint_list):
			raise ErcError('The winner and loser for input %s are not evaluated on the same constraints' % winner.input)
		self.winner = winner
		self.loser = loser

		constraints = winner.constraint_list
		difference = numpy.sign(loser.violations - winner.violations)
		w_cons = [ constraints[c] for c in range(0, len(constraints)) if difference[c] > 0 ]
		l_cons = [ constraints[c] for c in range(0, len(constraints)) if difference[c] < 0 ]

		if label is None:
			label = '/%s/: [%s] > [%s]' % (winner.input, winner.output, loser.output)
		Erc.__init__(self, constraints, w_cons, l_cons, label)
