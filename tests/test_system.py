import logging

import pytest

from otlearn.compare import CompareConsistency
from otlearn.constraint import read_constraint_types, MARK, FAITH
from otlearn.errors import TableauFormatError
from otlearn.grammar import Grammar
from otlearn.loser_selector import LoserSelector, LoserSelectorFromGen
from otlearn.mrcd import Mrcd
from otlearn.system import read_tableaux

TABLEAUX = '\t\t\tNoX\tIdent\n' \
	'\t\t\tNoX\tId\n' \
	'a\ta\t\t1\t\n' \
	'\tb\t1\t\t1\n' \
	'c\tc\t1\t1\t\n' \
	'\td\t\t\t1\n'


def write(path, text):
	path.write_text(text)
	return str(path)


def test_read_tableaux(tmp_path):
	filename = write(tmp_path / 'toy.txt', TABLEAUX)
	write(tmp_path / 'toy.constraints', 'NoX\tM\nIdent\tF\n')
	system = read_tableaux(filename)

	assert [ con.name for con in system.constraints ] == ['NoX', 'Ident']
	assert system.constraints[0].markedness
	assert system.constraints[1].faithfulness

	competition = system.gen('a')
	assert [ cand.output for cand in competition ] == ['a', 'b']
	assert [ cand.label for cand in competition ] == ['1.1', '1.2']
	assert list(competition[0].violations) == [1, 0]
	assert list(competition[1].violations) == [0, 1]
	assert [ (winner.input, winner.output) for winner in system.winners ] == [ ('a', 'b'), ('c', 'c') ]


def test_without_constraints_file_everything_is_markedness(tmp_path):
	system = read_tableaux(write(tmp_path / 'toy.txt', TABLEAUX))
	assert all([ con.markedness for con in system.constraints ])


def test_unknown_input(tmp_path):
	system = read_tableaux(write(tmp_path / 'toy.txt', TABLEAUX))
	with pytest.raises(KeyError):
		system.gen('q')


def test_multiple_winners(tmp_path):
	text = TABLEAUX.replace('a\ta\t\t1', 'a\ta\t1\t1')
	with pytest.raises(TableauFormatError):
		read_tableaux(write(tmp_path / 'toy.txt', text))


def test_bad_violation_count(tmp_path):
	text = TABLEAUX.replace('\td\t\t\t1', '\td\t\t\tx')
	with pytest.raises(TableauFormatError):
		read_tableaux(write(tmp_path / 'toy.txt', text))


def test_first_candidate_needs_input(tmp_path):
	text = '\t\t\tNoX\tIdent\n\t\t\tNoX\tId\n\ta\t1\t1\t0\n'
	with pytest.raises(TableauFormatError):
		read_tableaux(write(tmp_path / 'toy.txt', text))


def test_unequal_names_warns(tmp_path, caplog):
	text = TABLEAUX.replace('\t\t\tNoX\tId\n', '\t\t\tNoX\n')
	with caplog.at_level(logging.WARNING, logger='otlearn.system'):
		read_tableaux(write(tmp_path / 'toy.txt', text))
	assert 'Unequal number' in caplog.text


def test_constraint_types_file(tmp_path, caplog):
	filename = write(tmp_path / 'toy.constraints', 'Ident\tFaith\nNoX\tQ\nOther\tM\n')
	with caplog.at_level(logging.WARNING, logger='otlearn.constraint'):
		types = read_constraint_types(filename, ['NoX', 'Ident'])
	assert types == [MARK, FAITH]
	assert "Can't understand constraint type" in caplog.text
	assert 'Unknown constraint Other' in caplog.text


def test_learning_from_a_tableau_file(tmp_path):
	# The winners b (unfaithful) and c (faithful) need opposite rankings
	filename = write(tmp_path / 'toy.txt', TABLEAUX)
	system = read_tableaux(filename)
	selector = LoserSelectorFromGen(system, LoserSelector(CompareConsistency()))
	mrcd = Mrcd(system.winners, Grammar(system), selector)
	assert not mrcd.consistent()
