# A candidate is an (input, output) pair plus its constraint violations.
# Violations are stored as a numpy vector, one entry per constraint, in the order of the system's constraint list.
# Candidates are treated as read-only values: the violation vector is locked once the candidate is made.
import numpy

from .errors import CandidateError


class Candidate(object):

	def __init__(self, input, output, violations, constraints, label=None):
		self.input = input
		self.output = output
		self.label = label
		self.constraints = tuple(constraints)

		# Violations can come as a list lined up with the constraints, or as a dictionary from constraint to count
		if hasattr(violations, 'keys'):
			missing = [ con for con in self.constraints if con not in violations ]
			if len(missing) > 0:
				raise CandidateError('Candidate %s -> %s has no violation count for %s' % (input, output, ', '.join([ str(con) for con in missing ])))
			counts = [ violations[con] for con in self.constraints ]
		else:
			counts = list(violations)
			if len(counts) != len(self.constraints):
				raise CandidateError('Candidate %s -> %s has %s violation counts for %s constraints' % (input, output, len(counts), len(self.constraints)))

		try:
			self.violations = numpy.array(counts, dtype=int)
		except (TypeError, ValueError) as error:
			raise CandidateError('Bad violation counts for candidate %s -> %s: %s' % (input, output, error))
		if numpy.any(self.violations < 0):
			raise CandidateError('Candidate %s -> %s has negative violation counts: %s' % (input, output, counts))
		self.violations.flags.writeable = False

		# Store indices of constraints so we can look up a constraint's violations
		self._position = {}
		for c in range(0, len(self.constraints)):
			self._position[self.constraints[c]] = c

	@property
	def constraint_list(self):
		return self.constraints

	def get_viols(self, con):
		try:
			return int(self.violations[self._position[con]])
		except KeyError:
			raise CandidateError('Constraint %s is not evaluated for candidate %s -> %s' % (con, self.input, self.output))

	def viols_on(self, constraints):
		# The violations of just the given constraints (e.g., one stratum), as a vector
		return numpy.array([ self.get_viols(con) for con in constraints ], dtype=int)

	def ident_viols(self, other):
		return numpy.array_equal(self.violations, other.violations)

	# This candidate harmonically bounds other if it does at least as well on every constraint, and better on at least one
	def harmonically_bounds(self, other):
		difference = other.violations - self.violations
		return bool(numpy.all(difference >= 0) and numpy.any(difference > 0))

	def __eq__(self, other):
		if not isinstance(other, Candidate):
			return NotImplemented
		return self.input == other.input and self.output == other.output

	def __ne__(self, other):
		result = self.__eq__(other)
		if result is NotImplemented:
			return result
		return not result

	def __hash__(self):
		return hash((self.input, self.output))

	def __repr__(self):
		return 'Candidate(%r, %r, %s)' % (self.input, self.output, list(self.violations))

	def __str__(self):
		if self.label is not None:
			label_s = '%s: ' % self.label
		else:
			label_s = ''
		viol_s = ' '.join([ '%s:%s' % (self.constraints[c], self.violations[c]) for c in range(0, len(self.constraints)) ])
		return '%s/%s/ -> [%s]  %s' % (label_s, self.input, self.output, viol_s)
