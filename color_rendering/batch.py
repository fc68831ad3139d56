from multiprocessing import Pool

from rich.progress import (
    Progress,
    MofNCompleteColumn,
    TextColumn,
    BarColumn,
    SpinnerColumn,
)

from .cri import try_compute_cri
from .tcs import get_tcs


def init_process():
    # build the sample cache once per worker instead of once per task
    get_tcs()


def evaluate(args):
    illuminant, parameters = args
    return try_compute_cri(illuminant, parameters)


def compute_many(illuminants, workers=1, parameters=None, show_progress=True):
    """Evaluate independent light sources, returning one Outcome per source in input order."""
    illuminants = list(illuminants)
    tasks = map(lambda illuminant: (illuminant, parameters), illuminants)
    if workers <= 1:
        return list(map(evaluate, tasks))

    outcomes = []
    with Pool(workers, initializer=init_process) as pool, Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        SpinnerColumn(),
        disable=not show_progress,
    ) as progress:
        for outcome in progress.track(
            pool.imap(evaluate, tasks),
            description="CRI",
            total=len(illuminants),
        ):
            outcomes.append(outcome)

    return outcomes
