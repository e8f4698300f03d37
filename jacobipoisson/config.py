DEFAULT_TOL = 1e-6
DEFAULT_MAXIT = 70000


class SolverConfig(object):
    def __init__(self, **kwargs):
        """Solver settings.

        Args:
            tol (float): Convergence threshold for the residual.
            maxit (int): Iteration cap.
            workers (int): Size of the worker team.
            stencil_workers (int): Workers used by the sweep phase.
            reduction_workers (int): Workers used by the residual reduction.
            copy_workers (int): Workers used by the copy phase.

        The per phase values default to ``workers`` and are clamped to it.
        """
        self.tol = kwargs.pop('tol', DEFAULT_TOL)
        self.maxit = kwargs.pop('maxit', DEFAULT_MAXIT)
        self.workers = kwargs.pop('workers', 1)
        self.stencil_workers = kwargs.pop('stencil_workers', None)
        self.reduction_workers = kwargs.pop('reduction_workers', None)
        self.copy_workers = kwargs.pop('copy_workers', None)
        if kwargs:
            raise TypeError('Unknown solver options: %s' %
                            ', '.join(sorted(kwargs)))
        self.validate()

    def validate(self):
        if not self.tol > 0:
            raise ValueError('tol must be positive, got %r' % self.tol)
        if self.maxit < 0:
            raise ValueError('maxit must be non-negative, got %r' % self.maxit)
        if self.workers < 1:
            raise ValueError('workers must be at least 1, got %r' %
                             self.workers)
        for name in ('stencil_workers', 'reduction_workers', 'copy_workers'):
            value = getattr(self, name)
            if value is not None and value < 1:
                raise ValueError('%s must be at least 1, got %r' %
                                 (name, value))

    def phase_workers(self, phase):
        """Degree of parallelism for ``phase`` ('stencil', 'reduction' or
        'copy')."""
        value = getattr(self, phase + '_workers')
        if value is None:
            return self.workers
        return min(value, self.workers)

    def __repr__(self):
        return ('SolverConfig(tol=%g, maxit=%d, workers=%d)' %
                (self.tol, self.maxit, self.workers))
