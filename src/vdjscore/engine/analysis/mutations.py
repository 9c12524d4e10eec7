from Bio.Align import Alignment
import numpy as np

from vdjscore.engine.structures.alignment import AlignmentStats, Deletion, Insertion, Mutation, PairwiseAlignment, Substitution


def _unaligned_reference(reference, start: int, end: int) -> list[Mutation]:
    return [Deletion(position, reference[position]) for position in range(start, end)]


def mutations_from_alignment(alignment: Alignment) -> tuple[Mutation, ...]:
    reference, query = alignment.sequences[0], alignment.sequences[1]
    coordinates = np.asarray(alignment.coordinates)
    reference_first, query_first = (int(coordinate) for coordinate in coordinates[:, 0])
    reference_last, query_last = (int(coordinate) for coordinate in coordinates[:, -1])
    # local alignments leave flanks outside the coordinates, they count as gaps
    mutations: list[Mutation] = _unaligned_reference(reference, 0, reference_first)
    mutations.extend(Insertion(reference_first) for _ in range(query_first))
    for (reference_start, query_start), (reference_end, query_end) in zip(coordinates.T[:-1], coordinates.T[1:]):
        reference_step = reference_end - reference_start
        query_step = query_end - query_start
        if reference_step > 0 and query_step > 0:
            for offset in range(reference_step):
                from_residue = reference[reference_start + offset]
                to_residue = query[query_start + offset]
                if from_residue != to_residue:
                    mutations.append(Substitution(int(reference_start + offset), from_residue, to_residue))
        elif reference_step > 0:
            mutations.extend(_unaligned_reference(reference, int(reference_start), int(reference_end)))
        elif query_step > 0:
            # every inserted residue opens before the same reference position
            mutations.extend(Insertion(int(reference_start)) for _ in range(query_step))
    mutations.extend(_unaligned_reference(reference, reference_last, len(reference)))
    mutations.extend(Insertion(len(reference)) for _ in range(len(query) - query_last))
    return tuple(mutations)


def decode_alignment(alignment: Alignment) -> PairwiseAlignment:
    alignment_counts = alignment.counts()
    return PairwiseAlignment(
        reference=alignment.sequences[0],
        query=alignment.sequences[1],
        mutations=mutations_from_alignment(alignment),
        alignment_stats=AlignmentStats(
            percent_identity=alignment_counts.identities/alignment.length,
            mismatches=alignment_counts.mismatches,
            gaps=alignment_counts.gaps,
            score=getattr(alignment, "score", None)
        ))
