# Consistency checking of whole word lists, and searching among alternatives for the ones that are consistent.
#
# When the learner has several alternatives for fixing a failed form (e.g., different values for an unset underlying feature), it tries each one and
# needs to know whether zero, exactly one, or more than one of them works.  find_rescuing_options() returns that as a SearchResult, and the caller decides
# what to do with it.  Usually more than one is a problem, and SearchResult.single() raises AmbiguousResultError in that case.
import logging

from .compare import CompareConsistency
from .errors import AmbiguousResultError
from .loser_selector import LoserSelector, LoserSelectorFromGen
from .mrcd import Mrcd

logger = logging.getLogger(__name__)

NONE = 'NONE'
ONE = 'ONE'
MANY = 'MANY'


class SearchResult(object):

	def __init__(self, values):
		self.values = tuple(values)
		if len(self.values) == 0:
			self.kind = NONE
		elif len(self.values) == 1:
			self.kind = ONE
		else:
			self.kind = MANY

	def found(self):
		return self.kind != NONE

	# The single successful value, or None if there wasn't one.  More than one is an error.
	def single(self):
		if self.kind == MANY:
			raise AmbiguousResultError(self.values)
		if self.kind == ONE:
			return self.values[0]
		return None

	def __len__(self):
		return len(self.values)

	def __repr__(self):
		return 'SearchResult(%s, %r)' % (self.kind, list(self.values))


def find_rescuing_options(options, test):
	# Try every option (in order), and keep the ones that pass the test
	options = list(options)
	successes = []
	for option in options:
		if test(option):
			successes.append(option)
	result = SearchResult(successes)
	logger.debug('%s of %s options succeeded', len(result), len(options))
	return result


class ConsistencyChecker(object):
	# Checks whether a list of winners can all be optimal together, given a grammar, by running MRCD and seeing if the result is consistent.
	# The default loser selector uses CompareConsistency on the competitions from the grammar's system.

	def __init__(self, loser_selector=None, mrcd_class=Mrcd):
		self.loser_selector = loser_selector
		self.mrcd_class = mrcd_class

	def selector_for(self, grammar):
		if self.loser_selector is not None:
			return self.loser_selector
		return LoserSelectorFromGen(grammar.system, LoserSelector(CompareConsistency()))

	def consistent(self, word_list, grammar):
		mrcd = self.mrcd_class(word_list, grammar, self.selector_for(grammar))
		return mrcd.consistent()

	# options is a dictionary from some value (e.g. a feature value) to the word list that value would produce.  Returns the values whose word lists are consistent.
	def rescuing_options(self, options, grammar):
		return find_rescuing_options(list(options.keys()), lambda value: self.consistent(options[value], grammar))
