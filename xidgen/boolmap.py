import array


class BoolMap:
    """Fixed-size bit array: bit `k % 8` of byte `k // 8` holds item `k`.

    Positions outside `0..size-1` read back as False.
    """

    def __init__(self, size):
        self._size = size
        self._data = array.array("B", bytes((size + 7) // 8))

    def __getitem__(self, k):
        if not isinstance(k, int):
            raise KeyError(k)
        if k < 0 or k >= self._size:
            return False

        return bool(self._data[k // 8] & 1 << (k % 8))

    def set(self, k):
        if not isinstance(k, int) or k < 0 or k >= self._size:
            raise KeyError(k)
        self._data[k // 8] |= 1 << (k % 8)

    def set_range(self, low, high):
        """Sets every position from `low` to `high` inclusive."""
        for k in range(low, high + 1):
            self.set(k)

    def __len__(self):
        return self._size

    def __iter__(self):
        for k in range(self._size):
            yield self[k]

    def members(self):
        for k, v in enumerate(self):
            if v:
                yield k

    def count(self):
        return sum(bin(v).count("1") for v in self._data)

    def to_bytes(self):
        return self._data.tobytes()
