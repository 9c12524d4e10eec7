from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Sequence, Union

import numpy as np

from vdjscore.engine.structures.alignment import Deletion, Insertion, Mutation, PairwiseAlignment
from vdjscore.engine.structures.scoring import LinearGapScoring
from vdjscore.engine.utils.logging import get_logger

logger = get_logger("analysis.scoring")

class AlignmentScoring(ABC):

    @abstractmethod
    def compute_base_score(self, reference: Sequence[str]) -> float:
        pass

    @abstractmethod
    def compute_score(self, mutations: Sequence[Mutation], base_score: float, reference_length: int) -> float:
        pass

    @abstractmethod
    def with_score_threshold(self, score_threshold: float) -> "AlignmentScoring":
        pass

    def compute_alignment_score(self, alignment: PairwiseAlignment) -> float:
        reference = alignment.reference
        return self.compute_score(alignment.mutations, self.compute_base_score(reference), len(reference))

@dataclass(frozen=True)
class PositionalAlignmentScoring(AlignmentScoring):
    """Alignment scoring where every position is weighted by a Gaussian
    centred on the middle of the reference.

    Positions are mapped onto ``[-1, 1)`` relative to the centre before the
    curve is evaluated, so ``positional_sigma`` and ``positional_mu`` are
    expressed in half-lengths of the reference. ``score_threshold`` is carried
    for the ranking layer and is not applied here.
    """
    scoring: LinearGapScoring
    positional_sigma: float
    positional_mu: float
    score_threshold: float

    def _gaussian(self, x):
        return np.exp(-(x - self.positional_mu) ** 2 / 2 / self.positional_sigma ** 2)

    def position_weight(self, position: Union[int, np.ndarray], length: int):
        if length <= 0:
            raise ValueError(f"Positional weights are undefined for a sequence of length {length}.")
        center = length / 2.0
        if length % 2 == 0:
            # average both half-steps so the midpoint of an even sequence is not a sample point
            x1 = (position - 0.5) / center - 1
            x2 = (position + 0.5) / center - 1
            return 0.5 * (self._gaussian(x1) + self._gaussian(x2))
        return self._gaussian(position / center - 1)

    def compute_base_score(self, reference: Sequence[str]) -> float:
        length = len(reference)
        if length == 0:
            logger.debug("Empty reference, base score is 0.")
            return 0.0
        self_scores = np.array([self.scoring.score(residue, residue) for residue in reference], dtype=float)
        weights = self.position_weight(np.arange(length), length)
        return float(np.sum(self_scores * weights))

    def compute_score(self, mutations: Sequence[Mutation], base_score: float, reference_length: int) -> float:
        if reference_length == 0:
            logger.debug("Empty reference, score is 0.")
            return 0.0
        score = base_score
        for index, mutation in enumerate(mutations):
            if isinstance(mutation, Insertion):
                delta_score = self.scoring.gap_penalty
            else:
                from_residue = mutation.from_residue
                if isinstance(mutation, Deletion):
                    delta_score = self.scoring.gap_penalty
                else:
                    delta_score = self.scoring.score(from_residue, mutation.to_residue)
                delta_score -= self.scoring.score(from_residue, from_residue)
            score += delta_score * float(self.position_weight(index, reference_length))
        # base_score is counted twice, once as the seed of the accumulator and once here
        return base_score + score

    def with_score_threshold(self, score_threshold: float) -> "PositionalAlignmentScoring":
        return replace(self, score_threshold=score_threshold)
