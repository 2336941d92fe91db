import itertools
import numpy as np, numba as nb
from bitarray import bitarray
from combinatorics import linearize_subset, subset_count

MAX_MASK_NUMBERS = 63  # int64 masks, bit x-1 for number x

def mask(nums):
    v = 0
    for x in nums:
        if x:  # 0 or None is a free slot
            v |= 1 << (x - 1)
    return v

def ticket_masks(tickets, n):
    if n > MAX_MASK_NUMBERS:
        raise ValueError(f"masks hold at most {MAX_MASK_NUMBERS} numbers, got n={n}")
    return np.array([mask(x for x in t if x and x <= n) for t in tickets], dtype=np.int64)

@nb.njit
def _covers_all(tmasks, n, l):
    # walk every l-subset of bit positions 0..n-1 in lexicographic order
    idx = np.arange(l)
    while True:
        m = 0
        for i in range(l):
            m |= 1 << idx[i]
        hit = False
        for tm in tmasks:
            if (tm & m) == m:
                hit = True
                break
        if not hit:
            return False
        i = l - 1
        while i >= 0 and idx[i] == n - l + i:
            i -= 1
        if i < 0:
            return True
        idx[i] += 1
        for j in range(i + 1, l):
            idx[j] = idx[j - 1] + 1

def covers_all(tickets, n, l):
    """True if every l-subset of 1..n sits inside one of the tickets."""
    if l > n:
        return True
    return _covers_all(ticket_masks(tickets, n), n, l)

def tickets_coverage(tickets, n, l):
    """Count of distinct l-subsets of 1..n held by the tickets."""
    ba = bitarray(subset_count(n, l))
    ba.setall(False)
    for t in tickets:
        numbers = sorted(x for x in t if x and x <= n)
        for c in itertools.combinations(numbers, l):
            ba[linearize_subset(n, l, c)] = True
    return ba.count(True)
