# A stratified constraint hierarchy: a list of strata, highest first. Each stratum is a list of constraints that are not ranked with respect to each other.


class Hierarchy(list):

	# A copy with its own strata, holding the very same constraint objects
	def dup(self):
		return Hierarchy([ list(stratum) for stratum in self ])

	def constraints(self):
		return [ con for stratum in self for con in stratum ]

	# The position (0 = top) of the stratum containing con, or None if it isn't in the hierarchy
	def stratum_of(self, con):
		for s in range(0, len(self)):
			if con in self[s]:
				return s
		return None

	def __str__(self):
		return ' '.join([ '[%s]' % ' '.join([ str(con) for con in stratum ]) for stratum in self ])
