# A list of ERCs that all use the very same constraint list, along with whether they are consistent.
# ERCs are only ever added, never removed.  The ERCs are kept in a tuple, so a duplicate can share it with the original: adding to either one builds a new tuple,
# and the other one never sees the change.
import logging

from .errors import ErcError
from .rcd import Rcd

logger = logging.getLogger(__name__)


class ErcList(object):

	# If no constraint list is given, the constraints of the first ERC added become the constraint list.
	# rcd_class is whatever computes consistency (normally plain Rcd).
	def __init__(self, constraint_list=None, ercs=(), rcd_class=Rcd, label=''):
		self._constraint_list = None if constraint_list is None else tuple(constraint_list)
		self._ercs = ()
		self.rcd_class = rcd_class
		self.label = label
		# Consistency is unknown until RCD has been run
		self._rcd = None
		self.add_all(ercs)

	@property
	def constraint_list(self):
		if self._constraint_list is not None:
			return self._constraint_list
		if len(self._ercs) == 0:
			return ()
		return tuple(self._ercs[0].constraint_list)

	def add(self, erc):
		# Check that the new ERC uses exactly the same constraints as the list
		constraints = self.constraint_list
		if len(constraints) > 0:
			if len(erc.constraint_list) != len(constraints):
				raise ErcError('Cannot add ERC %s with %s constraints to a list with %s constraints' % (erc.label, len(erc.constraint_list), len(constraints)))
			if set(erc.constraint_list) != set(constraints):
				raise ErcError('Cannot add ERC %s: it uses different constraints than the list' % erc.label)
		self._ercs = self._ercs + (erc,)
		self._rcd = None
		return self

	def add_all(self, ercs):
		for erc in ercs:
			self.add(erc)
		return self

	# An independent copy.  The ERC objects themselves are shared, since they never change.
	def dup(self):
		copy = ErcList(constraint_list=self._constraint_list, rcd_class=self.rcd_class, label=self.label)
		copy._ercs = self._ercs
		copy._rcd = self._rcd
		return copy

	@property
	def rcd(self):
		# Run RCD if it hasn't been run since the last ERC was added
		if self._rcd is None:
			self._rcd = self.rcd_class(self._ercs, constraints=self.constraint_list)
		return self._rcd

	def consistent(self):
		return self.rcd.consistent

	def find_all(self, test):
		return ErcList(constraint_list=self._constraint_list, ercs=[ erc for erc in self._ercs if test(erc) ], rcd_class=self.rcd_class)

	def partition(self, test):
		return self.find_all(test), self.find_all(lambda erc: not test(erc))

	def to_list(self):
		return list(self._ercs)

	def __iter__(self):
		return iter(self._ercs)

	def __len__(self):
		return len(self._ercs)

	def __getitem__(self, index):
		return self._ercs[index]

	def __str__(self):
		return '\n'.join([ str(erc) for erc in self._ercs ])
