# Constraints are just identities: a name, a position in the system's constraint list, and a type (markedness or faithfulness).
# They get used as set members and dictionary keys all over the place, so they should never change after they're created.
import re
import logging

logger = logging.getLogger(__name__)

# The two constraint types
MARK = 'markedness'
FAITH = 'faithfulness'


class Constraint(object):

	__slots__ = ('_name', '_index', '_kind')

	def __init__(self, name, index, kind):
		if kind not in (MARK, FAITH):
			raise ValueError('Constraint type must be %s or %s, not %r' % (MARK, FAITH, kind))
		object.__setattr__(self, '_name', str(name))
		object.__setattr__(self, '_index', int(index))
		object.__setattr__(self, '_kind', kind)

	def __setattr__(self, attr, value):
		raise AttributeError('Constraint %s cannot be modified' % self._name)

	@property
	def name(self):
		return self._name

	@property
	def index(self):
		return self._index

	@property
	def kind(self):
		return self._kind

	@property
	def markedness(self):
		return self._kind == MARK

	@property
	def faithfulness(self):
		return self._kind == FAITH

	# Two constraints are the same constraint if they have the same name
	def __eq__(self, other):
		if not isinstance(other, Constraint):
			return NotImplemented
		return self._name == other._name

	def __ne__(self, other):
		result = self.__eq__(other)
		if result is NotImplemented:
			return result
		return not result

	def __hash__(self):
		return hash(self._name)

	def __repr__(self):
		return 'Constraint(%r, %s, %s)' % (self._name, self._index, self._kind)

	def __str__(self):
		return self._name


def make_constraints(names, kinds=None):
	# Build a constraint list from a list of names. If no types are given, we assume markedness for everything.
	# Types can be given as MARK/FAITH, or the short 'M'/'F' codes used in .constraints files.
	if kinds is None:
		kinds = [MARK] * len(names)
	if len(kinds) != len(names):
		raise ValueError('Got %s constraint names but %s constraint types' % (len(names), len(kinds)))
	constraints = []
	for c in range(0, len(names)):
		constraints.append(Constraint(names[c], c, parse_constraint_type(kinds[c])))
	return constraints


def parse_constraint_type(type):
	if type in (MARK, FAITH):
		return type
	if re.match('^[Mm]', type):
		return MARK
	elif re.match('^[Ff]', type):
		return FAITH
	raise ValueError("Can't understand constraint type '%s'" % type)


def read_constraint_types(constraints_filename, constraint_names):
	# Constraint types are stored in a .constraints file: one line per constraint, name<TAB>type, where the type starts with M (markedness) or F (faithfulness).
	# Returns a list of types, in the same order as constraint_names. Constraints not mentioned in the file default to markedness.
	constraint_index = {}
	for c in range(0, len(constraint_names)):
		constraint_index[constraint_names[c]] = c

	types = [MARK] * len(constraint_names)
	with open(constraints_filename, 'r') as constraints_file:
		lines = constraints_file.read().splitlines()

	for line in lines:
		if line.strip() == '':
			continue
		name, type, *rest = line.split('\t') + ['']
		name = name.strip()
		try:
			type = parse_constraint_type(type.strip())
		except ValueError:
			logger.warning("Can't understand constraint type '%s' for %s in constraints file %s; assuming markedness", type, name, constraints_filename)
			type = MARK

		if name not in constraint_index:
			logger.warning('Unknown constraint %s in constraints file %s', name, constraints_filename)
			continue
		types[constraint_index[name]] = type

	logger.debug('Constraint types: %s', types)
	return types
