from dataclasses import dataclass
from typing import Sequence, Union

@dataclass(frozen=True)
class Substitution:
    position: int
    from_residue: str
    to_residue: str

@dataclass(frozen=True)
class Insertion:
    position: int

@dataclass(frozen=True)
class Deletion:
    position: int
    from_residue: str

Mutation = Union[Substitution, Insertion, Deletion]

@dataclass(frozen=True)
class AlignmentStats:
    percent_identity: float
    mismatches: int
    gaps: int
    score: Union[float, None]

@dataclass(frozen=True)
class PairwiseAlignment:
    reference: Sequence[str]
    query: Sequence[str]
    mutations: tuple[Mutation, ...]
    alignment_stats: Union[AlignmentStats, None] = None

@dataclass(frozen=True)
class ScoredAlignment:
    alignment: PairwiseAlignment
    base_score: float
    score: float
