import asyncio
from concurrent.futures import Future, ThreadPoolExecutor
from contextlib import AbstractContextManager
from typing import Any, Union
from Bio.Align import PairwiseAligner
from queue import Queue

from vdjscore.engine.analysis.mutations import decode_alignment
from vdjscore.engine.analysis.scoring import AlignmentScoring
from vdjscore.engine.structures.alignment import ScoredAlignment
from vdjscore.engine.utils.logging import get_logger

logger = get_logger("analysis.aligners")

class AsyncPairwiseAlignmentEngine(AbstractContextManager):
    def __enter__(self):
        self._thread_pool = ThreadPoolExecutor(self._max_threads, thread_name_prefix="async-pairwise-alignment")
        return self

    def __init__(self, aligner: PairwiseAligner, scoring: AlignmentScoring, max_threads: int = 4):
        self._max_threads = max_threads
        self._aligner = aligner
        self._scoring = scoring
        self._work_left = 0
        self._work_complete: Queue[Future] = Queue()

    def align(self, reference: str, query: str, **associated_data):
        logger.debug("Submitting alignment of %s against reference %s", query, reference)
        work = self._thread_pool.submit(
            self.work, reference, query, **associated_data)
        work.add_done_callback(self._on_complete)
        self._work_left += 1

    def _on_complete(self, future: Future):
        self._work_complete.put(future)

    def work(self, reference, query, **associated_data):
        alignments = self._aligner.align(reference, query)
        top_alignment = decode_alignment(alignments[0])
        base_score = self._scoring.compute_base_score(top_alignment.reference)
        score = self._scoring.compute_score(top_alignment.mutations, base_score, len(top_alignment.reference))
        return ScoredAlignment(top_alignment, base_score, score), associated_data

    async def next_completed(self) -> Union[tuple[ScoredAlignment, dict[str, Any]], None]:
        if self._work_left == 0:
            return None
        future_now = await asyncio.to_thread(self._work_complete.get)
        self._work_left -= 1
        return await asyncio.wrap_future(future_now)

    def __exit__(self, exc_type, exc_value, traceback):
        self.shutdown()

    def __aiter__(self):
        return self

    async def __anext__(self):
        result = await self.next_completed()
        if result is None:
            raise StopAsyncIteration
        return result

    def shutdown(self):
        self._thread_pool.shutdown(wait=True, cancel_futures=True)
