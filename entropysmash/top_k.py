class TopK:
    """
    Keeps the k highest scored items seen in a single pass.

    Items and scores live in two lists of length k, allocated up front and
    kept sorted from highest to lowest score. A new item goes into the first
    slot that is empty or holds a strictly lower score; later slots shift
    right by one and whatever was in the last slot falls off. Equal scores
    never displace each other, so among ties the item seen first stays
    ahead.
    """

    def __init__(self, k):
        if k <= 0:
            raise ValueError(f"k must be positive, got {k}")
        self.k = k
        self._items = [None] * k
        self._scores = [None] * k
        self._size = 0

    def push(self, item, score):
        for i in range(self.k):
            other = self._scores[i]
            if other is None or other < score:
                self._insert(self._scores, score, i)
                self._insert(self._items, item, i)
                if self._size < self.k:
                    self._size += 1
                return True
        return False

    @staticmethod
    def _insert(slots, value, idx):
        for i in range(idx, len(slots)):
            slots[i], value = value, slots[i]

    def scores(self):
        return self._scores[:self._size]

    def __len__(self):
        return self._size

    def __iter__(self):
        return iter(self._items[:self._size])


def top_k(iterable, k, key):
    "The k items of iterable with the largest key(item), highest first"
    selector = TopK(k)
    for item in iterable:
        selector.push(item, key(item))
    return list(selector)
