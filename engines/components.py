"""Size flag packing: (components_x, components_y) <-> single integer."""

from models.components import Components


def unpack_components(packed: int) -> Components:
    """Unpack the size flag. Out-of-range input yields invalid Components."""
    return Components(x=packed % 9 + 1, y=packed // 9 + 1)


def pack_components(components: Components) -> int:
    """Pack component counts into the 0-80 size flag."""
    return (components.x - 1) + (components.y - 1) * 9
