from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from color_rendering import tcs
from color_rendering.spectrum import WAVELENGTHS, Colorant


def test_fourteen_colorants():
    samples = tcs.get_tcs()
    assert len(samples) == tcs.N_TCS == len(tcs.NAMES)
    assert all(isinstance(s, Colorant) for s in samples)


def test_sampled_on_working_grid():
    first = tcs.get_tcs()[0]
    # the table is already on the 5 nm grid, so it carries over unchanged
    assert first.values[np.searchsorted(WAVELENGTHS, 385.0)] == pytest.approx(0.239)
    assert first.values == pytest.approx(tcs.TCS5[0])
    assert first.values[-1] == pytest.approx(0.467)


def test_samples_are_read_only():
    with pytest.raises(ValueError):
        tcs.get_tcs()[0].values[0] = 1.0
    with pytest.raises(ValueError):
        tcs.TCS5[0, 0] = 1.0


def test_built_once_under_concurrent_first_use(monkeypatch):
    monkeypatch.setattr(tcs, "_samples", None)
    calls = []
    build = tcs._build

    def counting_build():
        calls.append(1)
        return build()

    monkeypatch.setattr(tcs, "_build", counting_build)
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: tcs.get_tcs(), range(32)))

    assert len(calls) == 1
    assert all(r is results[0] for r in results)
