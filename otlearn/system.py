# A linguistic system is what the learner needs from the outside world: the list of constraints, and Gen (a function from an input to its full competition).
# System wraps those two things.  read_tableaux() builds one from an OTSoft-style tableau file, where the competitions are listed out by hand.
import os
import re
import logging

from .candidate import Candidate
from .constraint import make_constraints, read_constraint_types
from .errors import TableauFormatError

logger = logging.getLogger(__name__)


class System(object):

	# gen is a function taking an input and returning a list of candidates.  winners is optional: the observed (optimal) forms, if the system knows them.
	def __init__(self, constraints, gen, winners=None):
		self.constraints = tuple(constraints)
		self._gen = gen
		self.winners = list(winners) if winners is not None else []

	def gen(self, input):
		return self._gen(input)

	@classmethod
	def from_competitions(cls, constraints, competitions, winners=None):
		# competitions is a dictionary from input to list of candidates
		def gen(input):
			try:
				return list(competitions[input])
			except KeyError:
				raise KeyError('No competition for input /%s/' % input)
		system = cls(constraints, gen, winners)
		system.competitions = competitions
		return system


def read_tableaux(input_filename, constraints_filename=None):
	# For legacy/compatability reasons, we read the OTSoft tableau format.
	# The first two lines are the constraint names, and the "short" constraint names.  These lines start with three tabs, which we can remove.
	# After that, each line is: input, candidate, frequency, violations...  The input is only given for the first candidate of each tableau.
	# A candidate with frequency > 0 is the winner for its input.
	#
	# If constraints_filename is not given, we look for a .constraints file with the same name as the input file.  Without one, everything is markedness.
	with open(input_filename, 'r') as input_file:
		input_data = input_file.read().splitlines()

	if len(input_data) < 2:
		raise TableauFormatError('%s does not have the two lines of constraint names' % input_filename)

	constraint_names = input_data[0].strip().split('\t')
	short_constraint_names = input_data[1].strip().split('\t')

	# Well-formedness check: same number of full and short constraint names?
	if len(constraint_names) != len(short_constraint_names):
		logger.warning('Unequal number of full and short constraint names in %s (perhaps there is a formatting error in the file?)', input_filename)

	if constraints_filename is None:
		filename_prefix = re.sub(r'\.[^\.]*$', '', input_filename)
		if os.path.isfile(filename_prefix + '.constraints'):
			constraints_filename = filename_prefix + '.constraints'
	if constraints_filename:
		constraint_types = read_constraint_types(constraints_filename, constraint_names)
	else:
		constraint_types = None
	constraints = make_constraints(constraint_names, constraint_types)

	# A list of the inputs, in the order they appear
	inputs = []
	# The candidates for each input
	competitions = {}
	# The winner for each input (if it has one)
	winners = {}

	# It's tab delimited. Just make it into a big list of lists
	all_tableaus = [ line.split('\t') for line in input_data[2:] if line.strip() != '' ]
	logger.debug('Length of tableau data: %s', len(all_tableaus))

	for line in range(0, len(all_tableaus)):
		row = all_tableaus[line]
		if len(row) < 3:
			raise TableauFormatError('Line %s of %s has fewer than three columns' % (line + 3, input_filename))

		# New inputs are listed in the first column
		if row[0] != '':
			current_input = row[0]
			if current_input in competitions:
				raise TableauFormatError('Input /%s/ appears twice in %s' % (current_input, input_filename))
			inputs.append(current_input)
			competitions[current_input] = []
		elif len(inputs) == 0:
			raise TableauFormatError('The first candidate in %s has no input' % input_filename)

		# We want the violations to be integers.  We assume that if it's blank, then it's 0.  Anything else that isn't a number is an error.
		cells = row[3:3 + len(constraints)]
		if len(cells) < len(constraints):
			logger.warning('Candidate [%s] of /%s/ has only %s violation columns; treating the rest as 0', row[1], inputs[-1], len(cells))
			cells = cells + [''] * (len(constraints) - len(cells))
		try:
			violations = [ int(x.strip() or 0) for x in cells ]
			frequency = int(row[2].strip() or 0)
		except ValueError as error:
			raise TableauFormatError('Line %s of %s: %s' % (line + 3, input_filename, error))

		label = '%s.%s' % (len(inputs), len(competitions[inputs[-1]]) + 1)
		candidate = Candidate(inputs[-1], row[1], violations, constraints, label=label)
		competitions[inputs[-1]].append(candidate)

		if frequency > 0:
			# RCD cannot handle free variation, so two winners for one input is a problem
			if inputs[-1] in winners:
				raise TableauFormatError('Multiple winners for input %s (/%s/) in %s' % (len(inputs), inputs[-1], input_filename))
			logger.debug('Winning form for input /%s/: %s', inputs[-1], row[1])
			winners[inputs[-1]] = candidate

	winner_list = [ winners[input] for input in inputs if input in winners ]
	return System.from_competitions(constraints, competitions, winner_list)
