from dataclasses import dataclass
from typing import Literal

from Bio.Align import PairwiseAligner, substitution_matrices

from vdjscore.engine.exceptions.scoring import NoSuchSubstitutionMatrixException

@dataclass(frozen=True, eq=False)
class LinearGapScoring:
    """Substitution matrix lookup together with a single linear gap penalty.

    Compared by identity, configurations built from one instance share it.
    """
    matrix: substitution_matrices.Array
    gap_penalty: float

    def score(self, residue_a: str, residue_b: str) -> float:
        return float(self.matrix[residue_a, residue_b])

    def build_aligner(self, mode: Literal["global", "local"] = "global") -> PairwiseAligner:
        aligner = PairwiseAligner()
        aligner.substitution_matrix = self.matrix
        aligner.open_gap_score = self.gap_penalty
        aligner.extend_gap_score = self.gap_penalty
        aligner.mode = mode
        return aligner

    @classmethod
    def from_matrix_name(cls, matrix_name: str, gap_penalty: float) -> "LinearGapScoring":
        if matrix_name not in substitution_matrices.load():
            raise NoSuchSubstitutionMatrixException(matrix_name)
        return cls(substitution_matrices.load(matrix_name), gap_penalty)
