# Multi-Recursive Constraint Demotion (Tesar 1997).
#
# MrcdSingle tries to make one winner optimal: it keeps asking the loser selector for an informative loser, and every time it gets one, it adds the new
# winner-loser pair to the grammar.  It stops when there are no more informative losers (the winner is optimal), or when the grammar becomes inconsistent.
#
# Mrcd does that for every winner in a list, and keeps making passes through the list until a whole pass adds nothing (or the grammar becomes inconsistent).
# Since the set of ERCs only grows, and there are only so many candidates, this always ends.
#
# Neither one changes the grammar or the word list passed in: they work on their own duplicates.  If the caller wants the results, it gets them from
# added_pairs (or apply_to()).
from collections import namedtuple
import logging

from .erc import WinLosePair

logger = logging.getLogger(__name__)


class MrcdResult(namedtuple('MrcdResult', ['added_pairs', 'consistent'])):

	__slots__ = ()

	@property
	def any_change(self):
		return len(self.added_pairs) > 0


class MrcdSingle(object):

	# selector has the method select_loser(winner, ranking_info).  pair_class builds the ERC from a winner and a loser.
	def __init__(self, winner, grammar, selector, pair_class=WinLosePair):
		self.winner = winner
		self.grammar = grammar.dup()
		self.selector = selector
		self.pair_class = pair_class
		self.added_pairs = []
		self.run_mrcd_single()

	def consistent(self):
		return self.grammar.consistent()

	def result(self):
		return MrcdResult(tuple(self.added_pairs), self.consistent())

	def run_mrcd_single(self):
		loser = self.selector.select_loser(self.winner, self.grammar.erc_list)
		while loser is not None:
			new_pair = self.pair_class(self.winner, loser)
			self.added_pairs.append(new_pair)
			self.grammar.add_erc(new_pair)
			logger.debug('Added pair %s', new_pair)
			# Stop as soon as the grammar is inconsistent
			if not self.grammar.consistent():
				logger.debug('Grammar inconsistent after %s pairs for winner /%s/ -> [%s]', len(self.added_pairs), self.winner.input, self.winner.output)
				break
			loser = self.selector.select_loser(self.winner, self.grammar.erc_list)


class Mrcd(object):

	def __init__(self, word_list, grammar, selector, single_class=MrcdSingle):
		# Our own copy of the list, so that changes to the caller's list don't affect us (and vice versa)
		self.word_list = list(word_list)
		self.grammar = grammar.dup()
		self.selector = selector
		self.single_class = single_class
		self.added_pairs = []
		self.passes = 0
		self.run_mrcd()

	@classmethod
	def run(cls, word_list, grammar, selector, single_class=MrcdSingle):
		return cls(word_list, grammar, selector, single_class=single_class)

	def any_change(self):
		return len(self.added_pairs) > 0

	def consistent(self):
		return self.grammar.consistent()

	def result(self):
		return MrcdResult(tuple(self.added_pairs), self.consistent())

	# Add the pairs found by MRCD to some other grammar (normally the one that was passed in), for callers that accept the result
	def apply_to(self, grammar):
		for pair in self.added_pairs:
			grammar.add_erc(pair)
		return grammar

	def run_mrcd(self):
		# changed is whether the grammar changed during the current pass through the word list
		changed = True
		while changed:
			changed = False
			self.passes += 1
			for winner in self.word_list:
				single = self.single_class(winner, self.grammar, self.selector)
				if len(single.added_pairs) > 0:
					changed = True
					self.added_pairs.extend(single.added_pairs)
					for pair in single.added_pairs:
						self.grammar.add_erc(pair)
				if not self.grammar.consistent():
					logger.debug('MRCD pass %s: grammar is inconsistent', self.passes)
					return
			logger.debug('MRCD pass %s: %s pairs added so far', self.passes, len(self.added_pairs))
