from combinatorics import linearize_subset, subset_count, unlinearize_subset

# A ticket is a list of k slots, None for a free slot, otherwise an assigned
# number. Assigned numbers are distinct and ascending, free slots trail.


def new_ticket(k):
    return [None] * k


def ticket_numbers(ticket):
    """Report form of a ticket: k ints, 0 for a free slot."""
    return tuple(0 if v is None else v for v in ticket)


def is_fillable(subset, ticket):
    """Return (fillable, already_filled) for placing subset into ticket.

    already_filled: every number of the subset is already in the ticket.
    fillable: the ticket has enough free slots for the missing numbers.
    """
    free = sum(1 for v in ticket if v is None)
    unfilled = sum(1 for x in subset if x not in ticket)
    return free >= unfilled, unfilled == 0


def merge_into(subset, ticket):
    """Sorted merge of the ticket's numbers and the subset, free slots last."""
    assigned = [v for v in ticket if v is not None]
    merged = []
    ki = li = 0
    while ki < len(assigned) or li < len(subset):
        if li == len(subset) or (ki < len(assigned) and assigned[ki] < subset[li]):
            merged.append(assigned[ki])
            ki += 1
        elif ki == len(assigned) or subset[li] < assigned[ki]:
            merged.append(subset[li])
            li += 1
        else:
            merged.append(assigned[ki])
            ki += 1
            li += 1

    if len(merged) > len(ticket):
        raise ValueError(f"{tuple(subset)} does not fit in ticket {ticket_numbers(ticket)}")
    return merged + [None] * (len(ticket) - len(merged))


def ticket_subsets(ticket, n, r):
    """Yield (rank, numbers) for every complete r-subset held by the ticket.

    Position subsets are walked in rank order; one touching a free slot or a
    number outside 1..n is skipped.
    """
    k = len(ticket)
    for ti in range(subset_count(k, r)):
        positions = unlinearize_subset(k, r, ti)
        numbers = tuple(ticket[p - 1] for p in positions)
        if any(v is None or not 1 <= v <= n for v in numbers):
            continue
        yield linearize_subset(n, r, numbers), numbers
