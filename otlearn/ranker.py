# A ranker turns a list of ERCs into a constraint hierarchy consistent with them, using RCD with some ranking bias (all-high by default).
from .rcd import Rcd


class Ranker(object):

	def __init__(self, bias=None, rcd_class=Rcd):
		self.bias = bias
		self.rcd_class = rcd_class

	# constraints only needs to be given if ercs might be a plain empty list (an ErcList knows its own constraints)
	def get_hierarchy(self, ercs, constraints=None):
		return self.rcd_class(ercs, constraints=constraints, bias=self.bias).hierarchy
