from __future__ import annotations

import pandas as pd

from .context import Context
from .transforms import Transformer


def _as_field_text(value: object) -> str:
    if value is None:
        return ""
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return ""
    return str(value)


def transform_series(
    transformer: Transformer,
    values: pd.Series,
    *,
    ctx: Context | None = None,
) -> pd.Series:
    """
    Render every value of a Series of log fields with one transform.

    Each element gets its own context whose `original` is the element's text;
    the display flags are taken from `ctx` (default: `Context.from_env()`).
    Missing values render as "". The index is preserved.
    """
    base = Context.from_env() if ctx is None else ctx
    texts = [_as_field_text(v) for v in values]
    out = [transformer.transform(base.with_original(t), t) for t in texts]
    return pd.Series(out, index=values.index, name=values.name, dtype="object")


__all__ = ["transform_series"]
