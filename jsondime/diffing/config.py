
from ..utils import star_path, split_path
from ..values import values_equal


KEY_ORDERS = ("insertion", "sorted")


class DiffConfig:
    """Set of predicates/orderings/other configs to pass around"""

    def __init__(self, *, key_order="insertion", atomic_paths=None, compare=None):
        if key_order not in KEY_ORDERS:
            raise ValueError("Unknown key_order %r, expected one of %r." % (key_order, KEY_ORDERS))
        if compare is None:
            compare = values_equal

        self.key_order = key_order
        self.compare = compare
        # Normalize to starred paths, so that "/rows/3/meta" and "/rows/*/meta" coincide
        self._atomic_paths = frozenset(star_path(split_path(p)) for p in (atomic_paths or ()))

    def ordered_keys(self, keys):
        "Return keys in the order objects are walked."
        if self.key_order == "sorted":
            return sorted(keys)
        return list(keys)

    def is_atomic(self, path):
        "Return True for paths that diff should treat as a single atomic value."
        if not self._atomic_paths:
            return False
        return star_path(split_path(path)) in self._atomic_paths

    def __copy__(self):
        return DiffConfig(
            key_order=self.key_order,
            atomic_paths=self._atomic_paths,
            compare=self.compare,
        )
