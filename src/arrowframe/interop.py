# Conversion between DataFrames and Polars dataframes, going through Arrow
from typing import TYPE_CHECKING

from arrowframe.config import Config, resolve_config
from arrowframe.conversion import arrow_table_to_data_frame, data_frame_to_arrow_table
from arrowframe.frames import ArrowDataFrame, DataFrame
from arrowframe.types import FrameMeta
from arrowframe.utils.lazy_module import LazyModule

if TYPE_CHECKING:
    import polars as pl
else:
    pl = LazyModule("polars")


def data_frame_to_polars(frame: DataFrame, config: Config | None = None) -> "pl.DataFrame":
    """
    Convert a DataFrame to a Polars DataFrame.

    Polars has no place for per-column labels and config or for frame level
    metadata, so those are dropped. String columns are built as large
    strings, the layout Polars uses natively.
    """
    config = resolve_config(config).with_updates(use_large_string=True)
    table = data_frame_to_arrow_table(frame, config)
    df = pl.from_arrow(table)
    assert isinstance(df, pl.DataFrame)
    return df


def data_frame_from_polars(
    df: "pl.DataFrame",
    name: str | None = None,
    ref_id: str | None = None,
    meta: FrameMeta | None = None,
) -> ArrowDataFrame:
    """Convert a Polars DataFrame to a DataFrame carrying the given frame metadata."""
    table = df.to_arrow()
    frame = arrow_table_to_data_frame(table)
    return ArrowDataFrame(
        fields=frame.fields,
        length=frame.length,
        name=name,
        ref_id=ref_id,
        meta=meta,
        table=table,
    )
