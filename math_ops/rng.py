"""Entropy sources for the samplers.

Samplers never touch global random state: callers own a
:class:`RandomSource` and pass it in explicitly.  A source is *not*
thread-safe, use one instance per thread.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

import torch
from torch import Tensor


@runtime_checkable
class RandomSource(Protocol):
    """Anything that can hand out independent uniform and normal draws."""

    def uniform(self) -> float:
        """A draw from U[0, 1)."""
        ...

    def standard_normal(self) -> float:
        """A draw from N(0, 1)."""
        ...


class TorchRandomSource:
    """:class:`RandomSource` backed by a private :class:`torch.Generator`.

    Draws are generated in ``float64`` blocks of *block_size* and handed
    out one at a time, which keeps per-draw overhead low for the scalar
    rejection loops.

    Parameters
    ----------
    seed : int | None
        Seed for the generator.  ``None`` seeds non-deterministically.
    block_size : int
        Number of draws fetched from torch at once.
    """

    def __init__(self, seed: Optional[int] = None, block_size: int = 1024):
        if block_size < 1:
            raise ValueError(f"block_size must be >= 1, got {block_size}")
        self.block_size = block_size
        self._generator = torch.Generator()
        if seed is None:
            self._generator.seed()
        else:
            self._generator.manual_seed(seed)

        self._uniform: list[float] = []
        self._normal: list[float] = []

    def _block(self, sampler) -> list[float]:
        block: Tensor = sampler(
            self.block_size, generator=self._generator, dtype=torch.float64
        )
        # Reversed so that pop() yields draws in generation order.
        return block.flip(0).tolist()

    def uniform(self) -> float:
        if not self._uniform:
            self._uniform = self._block(torch.rand)
        return self._uniform.pop()

    def standard_normal(self) -> float:
        if not self._normal:
            self._normal = self._block(torch.randn)
        return self._normal.pop()
