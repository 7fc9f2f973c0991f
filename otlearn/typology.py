# Harmonic bounding and factorial typology, both computed with RCD.
#
# A candidate can win (under some ranking) iff the ERCs pairing it with every other candidate of its competition are consistent.  If they aren't, the
# candidate is harmonically bounded, either by a single competitor or collectively by several.
#
# The factorial typology is the set of all languages the constraints can produce: every combination of one winner per competition that is consistent.
# We build it up one competition at a time, keeping only the consistent combinations.
import logging

from .erc import WinLosePair
from .erc_list import ErcList

logger = logging.getLogger(__name__)


def winner_ercs(winner, competition, pair_class=WinLosePair):
	# The ERCs of winner against each other candidate in the competition (skipping the winner itself)
	ercs = ErcList(constraint_list=winner.constraint_list)
	for loser in competition:
		if loser is winner or loser == winner:
			continue
		ercs.add(pair_class(winner, loser))
	return ercs


def harmonically_bounded(candidate, competition):
	return not winner_ercs(candidate, competition).consistent()


def remove_collectively_bound(competition):
	# Returns the candidates of the competition that can win under some ranking, in their original order
	return [ candidate for candidate in competition if not harmonically_bounded(candidate, competition) ]


class Language(object):
	# One language of a typology: a winner for each input, plus the ERCs that make them all optimal

	def __init__(self, constraint_list, winners=(), ercs=None, label=''):
		self.winners = list(winners)
		self.ercs = ercs if ercs is not None else ErcList(constraint_list=constraint_list)
		self.label = label

	def extend(self, winner, competition):
		ercs = self.ercs.dup()
		ercs.add_all(winner_ercs(winner, competition))
		return Language(ercs.constraint_list, self.winners + [winner], ercs)

	def consistent(self):
		return self.ercs.consistent()

	def __str__(self):
		return '%s: %s' % (self.label, ', '.join([ '/%s/ -> [%s]' % (winner.input, winner.output) for winner in self.winners ]))


def factorial_typology(competition_list):
	# competition_list is a list of competitions (lists of candidates), all evaluated on the same constraints.  Returns the list of languages, labeled L1, L2, ...
	competition_list = [ list(competition) for competition in competition_list if len(competition) > 0 ]
	if len(competition_list) == 0:
		return []
	constraint_list = competition_list[0][0].constraint_list

	# Harmonically bounded candidates can't win in any language, so don't bother trying them
	contenders = [ remove_collectively_bound(competition) for competition in competition_list ]

	languages = [Language(constraint_list)]
	for c in range(0, len(competition_list)):
		new_languages = []
		for language in languages:
			for winner in contenders[c]:
				new_language = language.extend(winner, competition_list[c])
				if new_language.consistent():
					new_languages.append(new_language)
		languages = new_languages
		logger.debug('Typology after %s competitions: %s languages', c + 1, len(languages))

	for l in range(0, len(languages)):
		languages[l].label = 'L%s' % (l + 1)
	return languages
