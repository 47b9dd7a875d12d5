"""Initial conditions from CSV.

The file needs a header row with the columns ``pos_x, pos_y, pos_z,
vel_x, vel_y, vel_z, mass`` (any order, extra columns ignored). Each data
row becomes one Body, in file order.
"""

from pathlib import Path
from typing import IO, Iterable, List, Union
import pandas as pd
from nbody_sim.physics.body import ROW_FIELDS, Body


class InitialConditionsError(ValueError):
    """Initial conditions could not be read or parsed."""


def read_bodies(source: Union[str, Path, IO[str]]) -> List[Body]:
    """Read bodies from a CSV file path or an open text stream.

    Args:
        source: Path to the CSV file, or a readable text stream

    Returns:
        Bodies in file order (possibly empty)

    Raises:
        InitialConditionsError: If the file cannot be opened, a required
            column is missing, or a field is missing or not a number
    """
    if isinstance(source, (str, Path)):
        name = str(source)
    else:
        name = str(getattr(source, 'name', '<stream>'))
    try:
        # Read as text so every field is validated the same way below
        df = pd.read_csv(source, skipinitialspace=True, dtype=str, keep_default_na=False, index_col=False)
    except pd.errors.EmptyDataError:
        return []
    except OSError as e:
        raise InitialConditionsError(f"Unable to open {name}: {e.strerror or e}") from e
    except pd.errors.ParserError as e:
        raise InitialConditionsError(f"{name}: {e}") from e

    df.columns = [str(c).strip() for c in df.columns]
    missing = [field for field in ROW_FIELDS if field not in df.columns]
    if missing:
        raise InitialConditionsError(f"{name}: missing column(s) {', '.join(missing)}")

    bodies = []
    for i, row in enumerate(df[list(ROW_FIELDS)].itertuples(index=False, name=None)):
        try:
            if any(pd.isna(value) for value in row):
                raise ValueError("missing field")
            bodies.append(Body.from_row(dict(zip(ROW_FIELDS, (float(v) for v in row)))))
        except (TypeError, ValueError) as e:
            # Line 1 is the header
            raise InitialConditionsError(
                f"{name}, line {i + 2}: invalid row {dict(zip(ROW_FIELDS, row))!r}"
            ) from e
    return bodies


def write_bodies(bodies: Iterable[Body], output_path: Union[str, Path]):
    """Write bodies as CSV in the format read_bodies accepts."""
    df = pd.DataFrame([body.to_row() for body in bodies], columns=list(ROW_FIELDS))
    df.to_csv(output_path, index=False)
