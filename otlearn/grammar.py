# A grammar hypothesis: the linguistic system (constraints and Gen) plus the ranking information (ERCs) learned so far.
from .erc_list import ErcList


class Grammar(object):

	def __init__(self, system, erc_list=None, label='Grammar'):
		if system is None:
			raise ValueError('A grammar needs a linguistic system')
		self.system = system
		if erc_list is None:
			erc_list = ErcList(constraint_list=system.constraints)
		self.erc_list = erc_list
		self.label = label

	@property
	def constraints(self):
		return self.system.constraints

	def add_erc(self, erc):
		self.erc_list.add(erc)
		return self

	def consistent(self):
		return self.erc_list.consistent()

	# The duplicate has its own ERC list, so adding ERCs to it doesn't change this grammar (and vice versa).  The system is shared.
	def dup(self):
		return Grammar(self.system, erc_list=self.erc_list.dup(), label=self.label)
