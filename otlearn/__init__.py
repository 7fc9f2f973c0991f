# Ranking learning in Optimality Theory: Recursive Constraint Demotion, biased RCD, and Multi-Recursive Constraint Demotion, with the loser selection
# strategies that drive MRCD.
from .constraint import Constraint, MARK, FAITH, make_constraints, read_constraint_types
from .candidate import Candidate
from .erc import Erc, WinLosePair, erc_from_labels, W, L, E
from .erc_list import ErcList
from .grammar import Grammar
from .hierarchy import Hierarchy
from .rcd import Rcd
from .ranking_bias import RankingBiasAllHigh, RankingBiasSomeLow, faith_low, mark_low
from .ranker import Ranker
from .most_harmonic import MostHarmonic
from .compare import ComparePool, CompareCtie, CompareConsistency, CompareStratumPool, CompareStratumCtie, FIRST, SECOND, TIE, IDENT_VIOLATIONS, CONFLICT
from .loser_selector import LoserSelector, LoserSelectorFromGen, LoserSelectorByRanking
from .mrcd import Mrcd, MrcdSingle, MrcdResult
from .consistency import ConsistencyChecker, SearchResult, find_rescuing_options
from .typology import harmonically_bounded, remove_collectively_bound, factorial_typology
from .system import System, read_tableaux
from .errors import OTLearnError, ErcError, CandidateError, RankingBiasError, TableauFormatError, AmbiguousResultError

__version__ = '0.1.0'
