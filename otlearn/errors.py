# Exceptions raised by the learner.
# Note that a ranking inconsistency is NOT an error: Rcd, ErcList, Grammar and Mrcd all report it as a flag.
# These are for input that was built wrong, which is a bug somewhere upstream.


class OTLearnError(Exception):
	pass


# An ERC whose constraints don't line up with the list it is used with
class ErcError(OTLearnError, ValueError):
	pass


# A candidate with missing or negative violation counts
class CandidateError(OTLearnError, ValueError):
	pass


# A ranking bias that handed back something other than a non-empty subset of the rankable constraints
class RankingBiasError(OTLearnError):
	pass


# Problems reading an OTSoft-style tableau file
class TableauFormatError(OTLearnError, ValueError):
	pass


# More than one option succeeded when the caller needed exactly one
class AmbiguousResultError(OTLearnError):

	def __init__(self, values):
		self.values = list(values)
		OTLearnError.__init__(self, '%s options are independently successful: %s' % (len(self.values), self.values))
