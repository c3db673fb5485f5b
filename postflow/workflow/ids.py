""" Deterministic node identifiers. """

NODE_ID_PREFIX = "node-"


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return value


def generate_node_id(seed: str) -> str:
    """
    Derive a stable node id from a seed string.

    Rolling hash over the seed's UTF-16 code units (h = h * 31 + c), wrapped to
    a signed 32-bit integer after every step, so ids match the ones n8n users
    already have in exported workflows. Not a UUID: same seed, same id.
    """
    raw = seed.encode("utf-16-le", "surrogatepass")
    h = 0
    for i in range(0, len(raw), 2):
        unit = raw[i] | (raw[i + 1] << 8)
        h = _to_int32(h * 31 + unit)
    return f"{NODE_ID_PREFIX}{abs(h):x}"
