from Bio.Align import PairwiseAligner
import pytest

from vdjscore.engine.exceptions.scoring import NoSuchSubstitutionMatrixException
from vdjscore.engine.structures.scoring import LinearGapScoring

def test_from_matrix_name_loads_blosum62():
    scoring = LinearGapScoring.from_matrix_name("BLOSUM62", -5.0)
    assert scoring.gap_penalty == -5.0
    assert scoring.score("W", "W") == 11.0
    assert scoring.score("A", "R") == -1.0

def test_lookup_is_symmetric():
    scoring = LinearGapScoring.from_matrix_name("BLOSUM62", -5.0)
    assert scoring.score("C", "S") == scoring.score("S", "C")

def test_unknown_matrix_raises():
    with pytest.raises(NoSuchSubstitutionMatrixException) as raised:
        LinearGapScoring.from_matrix_name("NOT_A_MATRIX", -5.0)
    assert raised.value.matrix_name == "NOT_A_MATRIX"

def test_unknown_matrix_is_a_value_error():
    with pytest.raises(ValueError):
        LinearGapScoring.from_matrix_name("NOT_A_MATRIX", -5.0)

@pytest.mark.parametrize("mode", ["global", "local"])
def test_build_aligner_uses_same_scores(mode):
    scoring = LinearGapScoring.from_matrix_name("BLOSUM62", -4.0)
    aligner = scoring.build_aligner(mode)
    assert isinstance(aligner, PairwiseAligner)
    assert aligner.mode == mode
    assert aligner.open_gap_score == -4.0
    assert aligner.extend_gap_score == -4.0
    assert aligner.score("CASW", "CASW") == pytest.approx(9 + 4 + 4 + 11)

def test_compared_by_identity():
    first = LinearGapScoring.from_matrix_name("BLOSUM62", -5.0)
    second = LinearGapScoring.from_matrix_name("BLOSUM62", -5.0)
    assert first == first
    assert first != second
