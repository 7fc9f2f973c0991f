# Finds the most harmonic candidates of a competition with respect to a stratified hierarchy.
# We go through the hierarchy stratum by stratum, and on each stratum we eliminate any candidate that another candidate beats.
# Two candidates can "conflict" on a stratum (each is preferred by some constraint of the stratum).  If a conflicting candidate survives a stratum, we stop
# there and set the conflict flag, since the hierarchy doesn't decide between them.
FIRST = 'FIRST'
SECOND = 'SECOND'
TIE = 'TIE'
CONFLICT = 'CONFLICT'


def compare_on_stratum(cand1, cand2, stratum):
	prefer_1 = False
	prefer_2 = False
	for con in stratum:
		if cand1.get_viols(con) < cand2.get_viols(con):
			prefer_1 = True
		elif cand1.get_viols(con) > cand2.get_viols(con):
			prefer_2 = True
	if prefer_1 and prefer_2:
		return CONFLICT
	if prefer_1:
		return FIRST
	if prefer_2:
		return SECOND
	return TIE


def compare_on_hierarchy(cand1, cand2, hierarchy):
	for stratum in hierarchy:
		result = compare_on_stratum(cand1, cand2, stratum)
		if result != TIE:
			return result
	return TIE


class MostHarmonic(list):

	def __init__(self, competition, hierarchy):
		list.__init__(self)
		self.competition = list(competition)
		self.hierarchy = hierarchy
		optima, self.conflict = self.most_harmonic_on_hierarchy(self.competition, hierarchy)
		self.extend(optima)

	def unresolved_conflict(self):
		return self.conflict

	def more_harmonic(self, cand1, cand2, hierarchy=None):
		if hierarchy is None:
			hierarchy = self.hierarchy
		return compare_on_hierarchy(cand1, cand2, hierarchy) == FIRST

	def most_harmonic_on_stratum(self, competition, stratum):
		optima = []
		conflict_cands = []
		for cand in competition:
			keep = True
			beaten = []
			for current in optima:
				# Harmonic bounding takes precedence over the stratum: a bounded candidate can never win
				if current.harmonically_bounds(cand):
					result = SECOND
				elif cand.harmonically_bounds(current):
					result = FIRST
				else:
					result = compare_on_stratum(cand, current, stratum)
				if result == SECOND:
					keep = False
				elif result == FIRST:
					beaten.append(current)
				elif result == CONFLICT:
					conflict_cands.extend([cand, current])
			optima = [ current for current in optima if not any([ current is b for b in beaten ]) ]
			if keep:
				optima.append(cand)
		conflict = any([ any([ cand is c for c in conflict_cands ]) for cand in optima ])
		return optima, conflict

	def most_harmonic_on_hierarchy(self, competition, hierarchy):
		optima = list(competition)
		conflict = False
		for stratum in hierarchy:
			optima, conflict = self.most_harmonic_on_stratum(optima, stratum)
			if conflict:
				break
		return optima, conflict
