import logging
import numba

logger = logging.getLogger(__name__)


def available_workers():
    """Size of numba's thread pool, the upper bound for any team."""
    return numba.config.NUMBA_NUM_THREADS


class Team(object):
    """
    A fixed number of numba worker threads.

    Each call to :meth:`run` is one fork-join phase: the parallel kernel
    splits its ``prange`` loop across the workers and returns only once
    every worker is done. The thread count is set for the duration of the
    call and the previous count is restored afterwards.
    """

    def __init__(self, num_workers):
        if num_workers < 1:
            raise ValueError('num_workers must be at least 1, got %r' %
                             num_workers)
        available = available_workers()
        if num_workers > available:
            logger.warning('Requested %d workers, numba has %d threads',
                           num_workers, available)
            num_workers = available
        self.num_workers = num_workers

    def workers_for(self, workers):
        if workers is None:
            return self.num_workers
        return max(1, min(workers, self.num_workers))

    def run(self, kernel, *args, workers=None):
        """Call the compiled ``kernel(*args)`` on ``workers`` threads."""
        previous = numba.get_num_threads()
        numba.set_num_threads(self.workers_for(workers))
        try:
            return kernel(*args)
        finally:
            numba.set_num_threads(previous)


class SerialTeam(Team):
    """Runs every kernel on a single thread."""

    def __init__(self):
        super().__init__(1)


def create_team(num_workers):
    """Return a :class:`SerialTeam` for one worker, a :class:`Team`
    otherwise."""
    if num_workers == 1:
        return SerialTeam()
    team = Team(num_workers)
    logger.debug('Using a team of %d threads', team.num_workers)
    return team
