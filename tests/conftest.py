# Shared fixtures.  Everything here is built by hand, so runs are fully deterministic.
import re

import pytest

from otlearn.candidate import Candidate
from otlearn.constraint import Constraint, MARK, FAITH, make_constraints
from otlearn.erc import Erc
from otlearn.system import System


def build_quick_erc(evals, label=''):
	# evals is a list of codes like 'MW', 'FL', 'Me': the constraint type (M or F) and its preference (W, L or e).
	# Constraints are named by type and position (M1, F2, ...), so ERCs built with the same pattern of types share constraints.
	constraints = []
	w_cons = []
	l_cons = []
	for c in range(0, len(evals)):
		match = re.match(r'^(M|F)(W|L|e)$', evals[c])
		if match is None:
			raise ValueError('Failed to match eval %s in quick_erc' % evals[c])
		if match.group(1) == 'F':
			con = Constraint('F%s' % (c + 1), c, FAITH)
		else:
			con = Constraint('M%s' % (c + 1), c, MARK)
		constraints.append(con)
		if match.group(2) == 'W':
			w_cons.append(con)
		elif match.group(2) == 'L':
			l_cons.append(con)
	return Erc(constraints, w_cons, l_cons, label)


@pytest.fixture
def quick_erc():
	return build_quick_erc


@pytest.fixture
def markedness4():
	return make_constraints(['C1', 'C2', 'C3', 'C4'])


@pytest.fixture
def toy_constraints():
	return make_constraints(['NoX', 'Ident'], ['M', 'F'])


@pytest.fixture
def toy_system(toy_constraints):
	# Two inputs, each with a faithful candidate (violates NoX) and an unfaithful one (violates Ident).
	competitions = {
		'a': [ Candidate('a', 'a', [1, 0], toy_constraints, label='1.1'), Candidate('a', 'b', [0, 1], toy_constraints, label='1.2') ],
		'c': [ Candidate('c', 'c', [1, 0], toy_constraints, label='2.1'), Candidate('c', 'd', [0, 1], toy_constraints, label='2.2') ],
	}
	return System.from_competitions(toy_constraints, competitions)
