"""Sequential record IDs.

Format:  {prefix}-{seq:3}
  farm:   farm-001, farm-002, …
  batch:  batch-001, batch-002, …

The next ID comes from the numeric suffix of the *last* registered record
plus one, zero-padded to at least three digits (``farm-009`` → ``farm-010``,
``farm-999`` → ``farm-1000``).  IDs under another prefix (an explicit
``ranch-005``) are skipped; with none left the sequence starts at ``-001``.
"""

import re

from wooltracer.middleware.exceptions import ConflictError

FARM_PREFIX = "farm"
BATCH_PREFIX = "batch"
SEQ_WIDTH = 3

_SUFFIX_RE = re.compile(r"-(\d+)$")


def format_id(prefix: str, seq_num: int) -> str:
    return f"{prefix}-{seq_num:0{SEQ_WIDTH}d}"


def parse_sequence(record_id: str) -> int | None:
    """Return the numeric suffix of ``record_id``, or None if it has none."""
    match = _SUFFIX_RE.search(record_id)
    return int(match.group(1)) if match else None


def next_sequential_id(prefix: str, existing_ids: list[str]) -> str:
    """Generate the ID following the last ``{prefix}-`` entry of ``existing_ids``.

    Raises:
        ConflictError: if that last ID has no numeric suffix, or the generated
            ID is already taken (IDs were not sequential).
    """
    own_ids = [i for i in existing_ids if i.startswith(f"{prefix}-")]
    if not own_ids:
        new_id = format_id(prefix, 1)
    else:
        last_id = own_ids[-1]
        seq_num = parse_sequence(last_id)
        if seq_num is None:
            raise ConflictError(
                f"Cannot derive the next {prefix} ID from '{last_id}'; supply an explicit ID"
            )
        new_id = format_id(prefix, seq_num + 1)

    if new_id in set(existing_ids):
        raise ConflictError(
            f"Generated {prefix} ID '{new_id}' already exists; supply an explicit ID"
        )
    return new_id
