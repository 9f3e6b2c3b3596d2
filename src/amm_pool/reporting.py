"""
Reporting boundary: pool history as a time series and its chart.

One sample is recorded per committed operation. Samples keep Dec values;
floats are produced only when building the DataFrame for plotting. pandas,
seaborn and matplotlib are imported on first use, so the pool core never
loads them.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

from .core import Dec, PoolSnapshot, to_human, dec_to_float
from .pool import Pool

if TYPE_CHECKING:
    import pandas as pd


@dataclass(frozen=True)
class HistorySample:
    """Pool state after one committed operation, in whole units of each asset."""

    label: str
    base: Dec
    quote: Dec
    price: Dec


@dataclass
class PoolHistory:
    """Parallel base/quote/price series keyed by an x-axis label."""

    base_denom: str
    quote_denom: str
    samples: List[HistorySample] = field(default_factory=list)

    @classmethod
    def for_pool(cls, pool: Pool, *, label: Optional[str] = "init") -> "PoolHistory":
        h = cls(pool.base_denom, pool.quote_denom)
        if label is not None:
            h.record(pool, label)
        return h

    def record(self, pool: Pool, label: Optional[str] = None) -> HistorySample:
        snap: PoolSnapshot = pool.snapshot()
        if (snap.base.denom, snap.quote.denom) != (self.base_denom, self.quote_denom):
            raise ValueError(
                f"history is for {self.base_denom}/{self.quote_denom}, got {snap.base.denom}/{snap.quote.denom}")
        sample = HistorySample(
            label=str(len(self.samples)) if label is None else label,
            base=to_human(snap.base.amount, snap.base_scale),
            quote=to_human(snap.quote.amount, snap.quote_scale),
            price=snap.price,
        )
        self.samples.append(sample)
        return sample

    def __len__(self) -> int:
        return len(self.samples)

    # --- series views ---

    def labels(self) -> List[str]:
        return [s.label for s in self.samples]

    def base_series(self) -> List[Dec]:
        return [s.base for s in self.samples]

    def quote_series(self) -> List[Dec]:
        return [s.quote for s in self.samples]

    def to_frame(self) -> "pd.DataFrame":
        """Long-form frame (step, label, asset, amount, price) for seaborn."""
        import pandas as pd

        records = []
        for i, s in enumerate(self.samples):
            price = dec_to_float(s.price)
            records.append({"step": i, "label": s.label, "asset": self.base_denom,
                            "amount": dec_to_float(s.base), "price": price})
            records.append({"step": i, "label": s.label, "asset": self.quote_denom,
                            "amount": dec_to_float(s.quote), "price": price})
        return pd.DataFrame(records, columns=["step", "label", "asset", "amount", "price"])

    def plot(self, path: str, *, title: str = "Pool asset") -> str:
        """Render both reserve series (one panel each) and the price to `path`."""
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        import seaborn as sns

        if not self.samples:
            raise ValueError("nothing to plot: history is empty")
        df = self.to_frame()

        sns.set(style="whitegrid")
        fig, axes = plt.subplots(3, 1, figsize=(9, 9), sharex=True)
        for ax, denom in zip(axes[:2], (self.base_denom, self.quote_denom)):
            sns.lineplot(data=df[df["asset"] == denom], x="step", y="amount", ax=ax)
            ax.set_ylabel(f"{denom} reserve")
        prices = df[df["asset"] == self.base_denom]
        sns.lineplot(data=prices, x="step", y="price", ax=axes[2], color="grey")
        axes[2].set_ylabel(f"price ({self.quote_denom}/{self.base_denom})")
        axes[2].set_xlabel("operation")
        axes[0].set_title(title)

        fig.tight_layout()
        fig.savefig(path)
        plt.close(fig)
        return path


__all__ = [
    "HistorySample",
    "PoolHistory",
]
