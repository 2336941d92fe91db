"""Combinatorial number system: count, rank and unrank r-subsets of {1..n}.

Subsets are given in ascending order with 1-based values. The rank of a subset
is its position in lexicographic order, e.g. for n=6, r=4:
{1,2,3,4} => 0; {1,2,3,5} => 1; {3,4,5,6} => 14 (subset_count(6,4) - 1)
"""


def factorial(upper, lower=1):
    """Falling factorial upper*(upper-1)*...*lower, 1 if upper<=1 or lower>upper."""
    if upper < 0 or lower < 0:
        raise ValueError(f"factorial of negative bound ({upper}, {lower})")
    if upper <= 1 or lower > upper:
        return 1

    result = upper
    for i in range(upper - 1, max(lower, 1) - 1, -1):
        result *= i
    return result


def subset_count(n, r):
    """C(n, r), 0 when r > n."""
    if n < 0 or r < 0:
        raise ValueError(f"subset_count of negative argument ({n}, {r})")
    if r == 0:
        return 1
    if r > n:
        return 0

    # Cancel the biggest factorial of the divisor against the dividend
    lower = max(r, n - r)
    divisor = min(r, n - r)
    return factorial(n, lower + 1) // factorial(divisor)


def _check_subset(n, r, subset):
    if len(subset) != r:
        raise ValueError(f"subset {tuple(subset)} does not hold {r} numbers")
    prev = 0
    for x in subset:
        if x <= prev or x > n:
            raise ValueError(f"subset {tuple(subset)} is not ascending within 1..{n}")
        prev = x


def linearize_subset(n, r, subset):
    """Rank of an ascending r-subset of {1..n}, in [0, C(n,r))."""
    _check_subset(n, r, subset)

    rank = 0
    prev = 0
    for i, num in enumerate(subset):
        # every smaller value for this slot skips a whole block of subsets
        for v in range(prev + 1, num):
            rank += subset_count(n - v, r - (i + 1))
        prev = num
    return rank


def unlinearize_subset(n, r, rank):
    """Inverse of linearize_subset: the ascending r-subset at the given rank."""
    total = subset_count(n, r)
    if not 0 <= rank < total:
        raise ValueError(f"rank {rank} out of range for C({n},{r}) = {total}")

    subset = []
    reached = 0
    candidate = 0
    for i in range(r):
        candidate += 1
        while True:
            block = subset_count(n - candidate, r - (i + 1))
            if rank < reached + block:
                break
            reached += block
            candidate += 1
        subset.append(candidate)
    return subset
